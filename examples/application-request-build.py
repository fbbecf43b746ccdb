#!/usr/bin/env vpython3
# *-* coding: utf-8 *-*
import sys

from cryptography import x509
from cryptography.hazmat.primitives import serialization

from sepa import schemas, verifier
from sepa.application_request import ApplicationRequest


def main():
    key = serialization.load_pem_private_key(open('nordea.key', 'rb').read(), None)
    cert = x509.load_pem_x509_certificate(open('nordea.crt', 'rb').read())

    request = ApplicationRequest({
        'private_key': key,
        'cert': cert,
        'command': sys.argv[1] if len(sys.argv) > 1 else 'download_file_list',
        'customer_id': '11111111',
        'environment': 'PRODUCTION',
        'status': 'NEW',
        'target_id': '11111111A1',
        'file_type': 'TITO',
    })
    data = request.to_xml()
    open('application-request.xml', 'wb').write(data)
    print('schema valid:', schemas.validate(data))
    print('digest ok, signature ok:', verifier.verify(data))
    print(request.build())


if __name__ == '__main__':
    main()
