# *-* coding: utf-8 *-*
import io
import logging
import os

from lxml import etree

from sepa.errors import ConfigurationError
from sepa.templates import check_fingerprints

logger = logging.getLogger(__name__)

SCHEMAS_DIR = os.path.join(os.path.dirname(__file__), 'xml_schemas')
APPLICATION_REQUEST_XSD = os.path.join(SCHEMAS_DIR, 'application_request.xsd')

FINGERPRINTS = {
    'application_request.xsd': 'x3vlQIx7esLZZPfrRRjqtRc2Bl0=',
    'xmldsig-core-schema.xsd': 'G05+Zx6zivJVxGpek2lsA9kk0jM=',
}

_schema = None


def application_request_schema() -> etree.XMLSchema:
    """The ApplicationRequest schema, xmldsig core schema is pulled in by its import."""
    global _schema
    if _schema is None:
        try:
            _schema = etree.XMLSchema(etree.parse(APPLICATION_REQUEST_XSD))
        except (OSError, etree.XMLSyntaxError, etree.XMLSchemaParseError) as e:
            raise ConfigurationError(
                'schema %s cannot be loaded: %s' % (APPLICATION_REQUEST_XSD, e)
            ) from e
    return _schema


def _document(document):
    if isinstance(document, (bytes, str)):
        if isinstance(document, str):
            document = document.encode('utf-8')
        return etree.parse(io.BytesIO(document))
    return document


def validate(document) -> bool:
    """
    Validate a signed application request against the schema.

    Parameters:
        document: xml as bytes/str, an lxml element or element tree.

    Returns:
        True when the document is schema valid.
    """
    schema = application_request_schema()
    ok = schema.validate(_document(document))
    if not ok:
        for error in schema.error_log:
            logger.debug('schema error line %d: %s', error.line, error.message)
    return ok


def assert_valid(document) -> None:
    application_request_schema().assertValid(_document(document))


def verify() -> None:
    """Compare the schemas on disk with the recorded fingerprints."""
    check_fingerprints(SCHEMAS_DIR, FINGERPRINTS)
