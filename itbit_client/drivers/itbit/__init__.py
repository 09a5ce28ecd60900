# -*- coding: utf-8 -*-
# itbit_client/drivers/itbit/__init__.py
# itBit driver package

from .errors import ErrorKind, ItBitError
from .nonce import NonceSequencer
from .signer import Signer, SignedEnvelope, build_message, encode_body, sign
from .rest import RestClient, classify_response
from .driver import ItBitDriver, init_ItBitDriver

__all__ = [
    'ErrorKind',
    'ItBitError',
    'NonceSequencer',
    'Signer',
    'SignedEnvelope',
    'build_message',
    'encode_body',
    'sign',
    'RestClient',
    'classify_response',
    'ItBitDriver',
    'init_ItBitDriver',
]
