# *-* coding: utf-8 *-*
import base64
import binascii
import io
import logging

from cryptography import exceptions
from cryptography import x509 as cx509
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding
from lxml import etree

from sepa.xmldsig import c14n, detached, sha1
from sepa.xmldsig.enveloped import NSMAP, ds

logger = logging.getLogger(__name__)


def _parse(data):
    if isinstance(data, str):
        data = data.encode('ascii')
    if not data.lstrip().startswith(b'<'):
        data = base64.b64decode(data)
    return etree.parse(io.BytesIO(data))


def verify(data) -> tuple[bool, bool]:
    """
    Verifies a signed application request.

    Parameters:
        data: Signed document as xml bytes or its base64 form.

    Returns:
        digestok, signatureok

        digestok : bool
            True if DigestValue matches the document without its signature.
        signatureok : bool
            True if SignatureValue verifies with the embedded certificate.
    """
    tree = _parse(data)
    root = tree.getroot()
    signature, _ = detached(root)

    stored = signature.findtext('ds:SignedInfo/ds:Reference/ds:DigestValue', namespaces=NSMAP)
    digestok = sha1(c14n(root)) == (stored or '').strip()

    try:
        certificate = cx509.load_der_x509_certificate(
            base64.b64decode(
                signature.findtext('ds:KeyInfo/ds:X509Data/ds:X509Certificate', namespaces=NSMAP)
            )
        )
        signaturevalue = base64.b64decode(signature.findtext(ds('SignatureValue')))
    except (TypeError, ValueError, binascii.Error) as e:
        logger.debug('signature data cannot be decoded: %s', e)
        return digestok, False

    try:
        certificate.public_key().verify(
            signaturevalue,
            c14n(signature.find(ds('SignedInfo'))),
            padding.PKCS1v15(),
            hashes.SHA1(),
        )
        signatureok = True
    except exceptions.InvalidSignature:
        signatureok = False
    return digestok, signatureok
