# *-* coding: utf-8 *-*
import base64
import copy
import hashlib
import logging
import os

from lxml import etree

from sepa.commands import Command
from sepa.errors import ConfigurationError

logger = logging.getLogger(__name__)

TEMPLATES_DIR = os.path.join(
    os.path.dirname(__file__), 'xml_templates', 'application_request'
)

# base64 sha1 of every skeleton, the signing logic is written for exactly these files
FINGERPRINTS = {
    'download_file.xml': 'HiMRUVxRqlZe4aYN2Za53kQO0/c=',
    'download_file_list.xml': 'iBjbSkDk4VpWuPRQRaJF8yuvJO0=',
    'get_user_info.xml': 'P0LQAblGfZIvCJGYxVa2eL9USHo=',
    'upload_file.xml': 'Noa0xl1GNtAE326CMohjeQyKqcs=',
}


def fingerprint(fname: str) -> str:
    """Base64 encoded sha1 of the file content."""
    try:
        with open(fname, 'rb') as fh:
            data = fh.read()
    except OSError as e:
        raise ConfigurationError('cannot read %s: %s' % (fname, e)) from e
    return base64.b64encode(hashlib.sha1(data).digest()).decode()


def check_fingerprints(path: str, fingerprints: dict[str, str]) -> None:
    for fname, expected in fingerprints.items():
        actual = fingerprint(os.path.join(path, fname))
        if actual != expected:
            raise ConfigurationError(
                '%s has been modified (sha1 %s, expected %s)' % (fname, actual, expected)
            )


class TemplateStore:
    """
    Parsed application request skeletons, one per command.

    Skeletons are parsed on first use and kept unchanged; get() always
    hands out a deep copy so independent builds never share a tree.
    """

    def __init__(self, path: str = None):
        self.path = path or TEMPLATES_DIR
        self._trees = {}

    def _load(self, command: Command) -> etree._ElementTree:
        fname = os.path.join(self.path, command.template_name)
        parser = etree.XMLParser(remove_blank_text=True, resolve_entities=False)
        try:
            tree = etree.parse(fname, parser)
        except OSError as e:
            raise ConfigurationError('template %s is missing: %s' % (fname, e)) from e
        except etree.XMLSyntaxError as e:
            raise ConfigurationError('template %s is not valid xml: %s' % (fname, e)) from e
        logger.debug('loaded template %s', fname)
        return tree

    def get(self, command: Command) -> etree._ElementTree:
        tree = self._trees.get(command)
        if tree is None:
            tree = self._trees[command] = self._load(command)
        return copy.deepcopy(tree)

    def verify(self) -> None:
        """
        Compare the skeletons on disk with the recorded fingerprints.

        Raises:
            ConfigurationError: a skeleton is missing or differs from the shipped one.
        """
        check_fingerprints(self.path, FINGERPRINTS)


templates = TemplateStore()
