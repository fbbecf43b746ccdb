# *-* coding: utf-8 *-*
from .enveloped import EnvelopedSignature, c14n, detached, sha1
