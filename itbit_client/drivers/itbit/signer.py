# -*- coding: utf-8 -*-
# itbit_client/drivers/itbit/signer.py
"""
Request signer for itBit.
- canonical message: nonce + JSON array [method, uri, body, nonce, timestamp]
- signature: base64(HMAC-SHA512(secret, uri || SHA256(message)))
"""

import base64
import hashlib
import hmac
import json
from collections import namedtuple


SignedEnvelope = namedtuple('SignedEnvelope', ['uri', 'body', 'nonce', 'timestamp', 'signature'])


def encode_body(args):
    """Compact JSON of the request arguments, in insertion order."""
    return json.dumps(args, separators=(',', ':'), ensure_ascii=False)


def build_message(method, uri, body, nonce, timestamp):
    """
    Build the byte sequence both client and server sign.

    Nonce and timestamp appear as decimal strings inside the array, never as
    numbers.
    """
    payload = json.dumps(
        [method, uri, body, str(nonce), str(timestamp)],
        separators=(',', ':'),
        ensure_ascii=False,
    )
    return (str(nonce) + payload).encode('utf-8')


def sign(message, uri, secret):
    """
    :param message: canonical message bytes from build_message()
    :param uri: full request uri, query string included
    :param secret: shared API secret (bytes)
    :return: base64 signature string
    """
    if isinstance(message, str):
        message = message.encode('utf-8')
    digest = hashlib.sha256(message).digest()
    mac = hmac.new(secret, uri.encode('utf-8') + digest, hashlib.sha512)
    return base64.b64encode(mac.digest()).decode('ascii')


class Signer(object):
    def __init__(self, secret):
        if isinstance(secret, str):
            secret = secret.encode('utf-8')
        self._secret = secret

    def sign_request(self, method, uri, body, nonce, timestamp):
        message = build_message(method, uri, body, nonce, timestamp)
        signature = sign(message, uri, self._secret)
        return SignedEnvelope(uri, body, nonce, timestamp, signature)
