# -*- coding: utf-8 -*-
# itbit_client/drivers/itbit/nonce.py
# Per-client nonce counter shared by all signed requests of one client instance.

import threading
import time


class NonceSequencer(object):
    """
    Strictly increasing nonce source.

    Starts at the current epoch time in milliseconds so that a restarted
    process keeps handing out values above the ones it used before.
    """

    def __init__(self, start=None):
        self._value = int(time.time() * 1000) if start is None else int(start)
        self._lock = threading.Lock()

    def next(self):
        """Return the current value and advance the counter."""
        with self._lock:
            value = self._value
            self._value += 1
            return value

    def peek(self):
        with self._lock:
            return self._value
