# -*- coding: utf-8 -*-
"""itBit REST API client: signed request pipeline plus endpoint driver."""

from itbit_client.drivers.itbit import (  # noqa: F401
    ErrorKind,
    ItBitDriver,
    ItBitError,
    RestClient,
    init_ItBitDriver,
)

__version__ = "1.0.0"

__all__ = [
    'ErrorKind',
    'ItBitDriver',
    'ItBitError',
    'RestClient',
    'init_ItBitDriver',
]
