# *-* coding: utf-8 *-*
import base64
import datetime
import logging

from lxml import etree

from sepa import SOFTWARE_ID
from sepa.commands import FIELDS, Command, Presence, field_policy
from sepa.errors import ConfigurationError, ParameterError

logger = logging.getLogger(__name__)

NS = 'http://bxd.fi/xmldata/'

# elements that only exist as the single child of a wrapper
_WRAPPERS = {
    'FileReference': 'FileReferences',
}


def ar(tag):
    return '{%s}%s' % (NS, tag)


def timestamp(now: datetime.datetime = None) -> str:
    """ISO-8601 time with explicit UTC offset and second precision."""
    if now is None:
        now = datetime.datetime.now()
    return now.astimezone().replace(microsecond=0).isoformat()


def format_date(value) -> str:
    """
    Date as YYYY-MM-DD.

    Raises:
        ParameterError: value is neither a date nor an ISO date string.
    """
    if isinstance(value, datetime.datetime):
        value = value.date()
    elif isinstance(value, str):
        try:
            value = datetime.date.fromisoformat(value)
        except ValueError as e:
            raise ParameterError('not an ISO date: {!r}'.format(value)) from e
    elif not isinstance(value, datetime.date):
        raise ParameterError('not a date: {!r}'.format(value))
    return value.isoformat()


def encode_content(value) -> str:
    if isinstance(value, str):
        value = value.encode('utf-8')
    return base64.b64encode(value).decode()


def _remove(root, name):
    node = root.find(ar(_WRAPPERS.get(name, name)))
    if node is not None:
        root.remove(node)


def _set(root, name, value):
    node = root.find('.//' + ar(name))
    if node is None:
        raise ConfigurationError('element {} is missing from the template'.format(name))
    node.text = value


def _value(name, command, params, stamp):
    if name == 'Command':
        return command.value
    if name == 'Timestamp':
        return stamp
    if name == 'SoftwareId':
        return SOFTWARE_ID
    value = getattr(params, FIELDS[name])
    if name in ('StartDate', 'EndDate'):
        return format_date(value)
    if name == 'Content':
        return encode_content(value)
    return str(value)


def _missing(value):
    if isinstance(value, str):
        value = value.strip()
    return value is None or (hasattr(value, '__len__') and len(value) == 0)


def inject(tree: etree._ElementTree, command: Command, params, stamp: str) -> etree._ElementTree:
    """
    Populate a cloned template for one command.

    Elements the command does not use are removed from the tree, not left
    empty. StartDate and EndDate are written only as a pair.

    Parameters:
        tree: Fresh copy of the command's template.
        command: The resolved command.
        params: RequestParameters of the request.
        stamp: Timestamp text, see timestamp().

    Returns:
        The same tree, populated.

    Raises:
        ParameterError: a field the command requires was not supplied.
    """
    root = tree.getroot()
    policy = field_policy(command)

    dates = [name for name, presence in policy.items() if presence is Presence.OPTIONAL_PAIR]
    supplied = [name for name in dates if not _missing(getattr(params, FIELDS[name]))]
    if supplied and len(supplied) != len(dates):
        logger.warning(
            '%s ignored, %s needs both %s', ', '.join(supplied), command.value, ' and '.join(dates)
        )

    for name, presence in policy.items():
        if presence is Presence.ABSENT:
            _remove(root, name)
            continue
        if presence is Presence.OPTIONAL_PAIR and len(supplied) != len(dates):
            _remove(root, name)
            continue
        if presence is Presence.REQUIRED and _missing(getattr(params, FIELDS[name])):
            raise ParameterError(
                'missing parameter {} required by {}'.format(FIELDS[name], command.value)
            )
        _set(root, name, _value(name, command, params, stamp))
    return tree
