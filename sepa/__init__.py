# *-* coding: utf-8 *-*
__author__ = 'Sepa Transfer Library developers'
__license__ = 'MIT'
__version__ = '1.0.0'
__all__ = [
    'application_request', 'commands', 'errors', 'injector', 'params',
    'schemas', 'signer', 'templates', 'verifier', 'xmldsig',
]

SOFTWARE_ID = 'Sepa Transfer Library version ' + __version__
