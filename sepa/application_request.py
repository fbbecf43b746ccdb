# *-* coding: utf-8 *-*
import base64
import logging

from lxml import etree

from sepa import injector
from sepa.commands import Command
from sepa.params import RequestParameters
from sepa.templates import templates as default_templates
from sepa.xmldsig import EnvelopedSignature

logger = logging.getLogger(__name__)


class ApplicationRequest:
    """
    Signed ApplicationRequest of the bank file-exchange web service.

    Required parameters are checked when the object is created, the command
    only when the document is first requested. The signed document is
    built once; later calls serialize the same tree again, so the
    Timestamp and the signature never change for one instance.
    """

    def __init__(self, params, templates=None):
        if not isinstance(params, RequestParameters):
            params = RequestParameters.from_dict(params)
        self.params = params
        self.templates = templates or default_templates
        self.timestamp = injector.timestamp()
        self._tree = None

    @property
    def command(self) -> Command:
        return Command.coerce(self.params.command)

    def _build(self) -> etree._ElementTree:
        if self._tree is None:
            command = self.command
            tree = self.templates.get(command)
            injector.inject(tree, command, self.params, self.timestamp)
            EnvelopedSignature(self.params.private_key, self.params.cert).sign(tree)
            logger.debug(
                '%s request for customer %s signed', command.value, self.params.customer_id
            )
            self._tree = tree
        return self._tree

    def to_xml(self) -> bytes:
        """The signed document, UTF-8 with xml declaration."""
        return etree.tostring(self._build(), encoding='UTF-8', xml_declaration=True)

    def build(self) -> str:
        """
        The signed document, base64 encoded.

        Raises:
            InvalidCommand: the command is not supported.
            ParameterError: a parameter the command needs is missing.
            SigningError: the key or certificate is unusable.
        """
        return base64.b64encode(self.to_xml()).decode()

    get_as_base64 = build
