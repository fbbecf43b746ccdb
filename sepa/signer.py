# *-* coding: utf-8 *-*
import base64

from asn1crypto import pem, x509
from cryptography import exceptions
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from sepa.errors import SigningError


def cert2asn(cert):
    """
    Load a certificate given as cryptography/asn1crypto object, PEM or DER bytes.

    Raises:
        SigningError: the value is not a certificate.
    """
    if isinstance(cert, x509.Certificate):
        return cert
    if hasattr(cert, 'public_bytes'):
        cert_bytes = cert.public_bytes(serialization.Encoding.PEM)
    elif isinstance(cert, str):
        cert_bytes = cert.encode('ascii')
    else:
        cert_bytes = cert
    try:
        if pem.detect(cert_bytes):
            _, _, cert_bytes = pem.unarmor(cert_bytes)
        cert = x509.Certificate.load(cert_bytes)
        # asn1crypto parses lazily, touch the contents to reject garbage now
        cert.native
    except (TypeError, ValueError) as e:
        raise SigningError('certificate cannot be loaded: %s' % e) from e
    return cert


def cert_body(cert) -> str:
    """The certificate as PEM body only: no armor, no whitespace."""
    return base64.b64encode(cert2asn(cert).dump()).decode()


def sign(datau: bytes, key, hashalgo='sha1') -> bytes:
    """
    RSA PKCS#1 v1.5 signature of data.

    Parameters:
        datau: Data to sign (bytes).
        key: RSA private key (cryptography RSAPrivateKey).
        hashalgo: Hash algorithm name (str, default 'sha1').

    Returns:
        Raw signature bytes.

    Raises:
        SigningError: the key is not an RSA private key or cannot sign.
    """
    if not isinstance(key, rsa.RSAPrivateKey):
        raise SigningError('unsupported private key type: %s' % type(key).__name__)
    try:
        return key.sign(datau, padding.PKCS1v15(), getattr(hashes, hashalgo.upper())())
    except (ValueError, TypeError, exceptions.UnsupportedAlgorithm) as e:
        raise SigningError('signing failed: %s' % e) from e
