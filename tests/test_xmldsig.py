#!/usr/bin/env vpython3
# coding: utf-8
import base64
import unittest

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding
from lxml import etree

from sepa import schemas, signer, verifier
from sepa.application_request import ApplicationRequest
from sepa.errors import ConfigurationError, SigningError
from sepa.xmldsig import EnvelopedSignature, c14n, detached, sha1

from . import test_cert

DS = '{http://www.w3.org/2000/09/xmldsig#}'


class SignerTests(unittest.TestCase):
    def test_sign_is_pkcs1v15(self):
        key = test_cert.ca().key
        signature = signer.sign(b'data', key)
        key.public_key().verify(signature, b'data', padding.PKCS1v15(), hashes.SHA1())

    def test_sign_rejects_non_rsa(self):
        with self.assertRaises(SigningError):
            signer.sign(b'data', test_cert.ca().key_create_ec())
        with self.assertRaises(SigningError):
            signer.sign(b'data', None)

    def test_cert_body_forms(self):
        ca = test_cert.ca()
        body = signer.cert_body(ca.cert)
        assert signer.cert_body(ca.cert_pem()) == body
        assert signer.cert_body(ca.cert_pem().decode()) == body
        assert signer.cert_body(base64.b64decode(body)) == body
        assert '\n' not in body and '-----' not in body


class EnvelopedSignatureTests(unittest.TestCase):
    def test_c14n_is_exclusive(self):
        root = etree.fromstring(
            '<a xmlns="urn:a" xmlns:x="urn:x"><b xmlns:y="urn:y" z="1">t</b></a>'
        )
        assert c14n(root[0]) == b'<b xmlns="urn:a" z="1">t</b>'

    def test_c14n_drops_comments(self):
        root = etree.fromstring('<a><!-- note --><b/></a>')
        assert c14n(root) == b'<a><b></b></a>'

    def test_detached_requires_placeholder(self):
        root = etree.fromstring('<a><b/></a>')
        with self.assertRaises(ConfigurationError):
            detached(root)

    def test_digest_keeps_signature_in_place(self):
        tree = etree.fromstring(self.request_xml()).getroottree()
        root = tree.getroot()
        before = etree.tostring(root)
        EnvelopedSignature(None, None).digest(root)
        assert etree.tostring(root) == before
        assert root[-1].tag == DS + 'Signature'

    def test_debug_logs_canonical_forms(self):
        tree = etree.fromstring(self.request_xml()).getroottree()
        sig = EnvelopedSignature(test_cert.ca().key, test_cert.ca().cert)
        sig.debug = True
        with self.assertLogs('sepa.xmldsig.enveloped', level='DEBUG') as logs:
            sig.sign(tree)
        assert any('signedinfo c14n' in line for line in logs.output)
        assert any('document digest' in line for line in logs.output)

    def test_signature_algorithms_match_template(self):
        root = etree.fromstring(self.request_xml())
        signedinfo = root.find('.//%sSignedInfo' % DS)
        assert signedinfo.find(DS + 'SignatureMethod').get('Algorithm') == (
            'http://www.w3.org/2000/09/xmldsig#rsa-sha1'
        )
        assert signedinfo.find('.//%sDigestMethod' % DS).get('Algorithm') == (
            'http://www.w3.org/2000/09/xmldsig#sha1'
        )
        assert not hasattr(EnvelopedSignature, 'hashalgo')
        canonical = c14n(signedinfo)
        signaturevalue = base64.b64decode(root.findtext('.//%sSignatureValue' % DS))
        test_cert.ca().key.public_key().verify(
            signaturevalue, canonical, padding.PKCS1v15(), hashes.SHA1()
        )

    def request_xml(self):
        return ApplicationRequest({
            'private_key': test_cert.ca().key,
            'cert': test_cert.ca().cert,
            'command': 'get_user_info',
            'customer_id': '11111111',
            'environment': 'TEST',
        }).to_xml()


class VerifierTests(unittest.TestCase):
    def setUp(self):
        self.request = ApplicationRequest({
            'private_key': test_cert.ca().key,
            'cert': test_cert.ca().cert,
            'command': 'upload_file',
            'customer_id': '11111111',
            'environment': 'PRODUCTION',
            'file_type': 'TITO',
            'content': b'haisuli',
        })

    def test_verify_signed_request(self):
        assert verifier.verify(self.request.to_xml()) == (True, True)
        assert verifier.verify(self.request.build()) == (True, True)

    def test_verify_tampered_content(self):
        data = self.request.to_xml().replace(b'<CustomerId>11111111<', b'<CustomerId>22222222<')
        digestok, signatureok = verifier.verify(data)
        assert not digestok
        assert signatureok

    def test_verify_tampered_digest(self):
        root = etree.fromstring(self.request.to_xml())
        root.find('.//%sDigestValue' % DS).text = sha1(b'other')
        digestok, signatureok = verifier.verify(etree.tostring(root))
        assert not digestok
        assert not signatureok

    def test_verify_foreign_certificate(self):
        other = test_cert.CA('Someone Else')
        root = etree.fromstring(self.request.to_xml())
        root.find('.//%sX509Certificate' % DS).text = signer.cert_body(other.cert)
        assert verifier.verify(etree.tostring(root)) == (True, False)

    def test_schema_rejects_incomplete_request(self):
        root = etree.fromstring(self.request.to_xml())
        root.remove(root.find('{http://bxd.fi/xmldata/}CustomerId'))
        assert not schemas.validate(root)
        with self.assertRaises(etree.DocumentInvalid):
            schemas.assert_valid(etree.tostring(root))


if __name__ == '__main__':
    unittest.main()
