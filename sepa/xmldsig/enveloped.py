# *-* coding: utf-8 *-*
import base64
import hashlib
import io
import logging

from lxml import etree

from sepa import signer
from sepa.errors import ConfigurationError

logger = logging.getLogger(__name__)

DS_NS = 'http://www.w3.org/2000/09/xmldsig#'
NSMAP = {'ds': DS_NS}


def ds(tag):
    return '{%s}%s' % (DS_NS, tag)


def c14n(node) -> bytes:
    """Exclusive canonical form of an element and its subtree, comments dropped."""
    data = etree.tostring(node, encoding='UTF-8', xml_declaration=True, with_tail=False)
    tree = etree.parse(io.BytesIO(data))
    data = io.BytesIO()
    tree.write_c14n(data, exclusive=True, with_comments=False)
    return data.getvalue()


def sha1(data: bytes) -> str:
    return base64.b64encode(hashlib.sha1(data).digest()).decode()


def detached(root):
    """
    Remove the ds:Signature child of root.

    Returns:
        (signature, index) so the caller can put it back with root.insert().
    """
    signature = root.find(ds('Signature'))
    if signature is None:
        raise ConfigurationError('document has no ds:Signature placeholder')
    index = root.index(signature)
    root.remove(signature)
    return signature, index


class EnvelopedSignature:
    """
    Enveloped XML signature over a whole document.

    The document carries an empty ds:Signature skeleton; sign() fills in
    DigestValue, SignatureValue and X509Certificate.
    """

    debug = False

    def __init__(self, key, cert):
        self.key = key
        self.cert = cert

    def digest(self, root) -> str:
        """Digest of the document with the ds:Signature subtree excluded."""
        signature, index = detached(root)
        try:
            canonicalizedxml = c14n(root)
        finally:
            root.insert(index, signature)
        digestvalue = sha1(canonicalizedxml)
        if self.debug:
            logger.debug('document c14n: %r', canonicalizedxml)
            logger.debug('document digest: %s', digestvalue)
        return digestvalue

    def sign(self, tree: etree._ElementTree) -> etree._ElementTree:
        root = tree.getroot()
        digestvalue = self.digest(root)

        signature = root.find(ds('Signature'))
        signedinfo = signature.find(ds('SignedInfo'))
        self._text(signedinfo, 'ds:Reference/ds:DigestValue', digestvalue)

        canonicalizedxml = c14n(signedinfo)
        if self.debug:
            logger.debug('signedinfo c14n: %r', canonicalizedxml)
        signaturevalue = signer.sign(canonicalizedxml, self.key, 'sha1')
        self._text(signature, 'ds:SignatureValue', base64.b64encode(signaturevalue).decode())
        self._text(
            signature, 'ds:KeyInfo/ds:X509Data/ds:X509Certificate', signer.cert_body(self.cert)
        )
        return tree

    def _text(self, node, path, value):
        target = node.find(path, namespaces=NSMAP)
        if target is None:
            raise ConfigurationError('signature placeholder has no %s' % path)
        target.text = value
