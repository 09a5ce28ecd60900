# -*- coding: utf-8 -*-
# tests/conftest.py

import sys
from pathlib import Path

import pytest

# Ensure project root (which contains the `itbit_client/` package directory) is on sys.path
_THIS_FILE = Path(__file__).resolve()
_PROJECT_ROOT = _THIS_FILE.parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from itbit_client.drivers.itbit.driver import ItBitDriver  # noqa: E402
from itbit_client.drivers.itbit.rest import RestClient  # noqa: E402

KEY = 'test-key'
SECRET = b'test-secret'
NONCE_START = 1000
TIMESTAMP = 1700000000000


class FakeResponse(object):
    def __init__(self, status_code=200, text='{}'):
        self.status_code = status_code
        self.text = text


class FakeSession(object):
    """Stands in for requests.Session: records calls, replays queued responses."""

    def __init__(self):
        self.calls = []
        self.responses = []
        self.exc = None
        self.closed = False

    def queue(self, status_code=200, text='{}'):
        self.responses.append(FakeResponse(status_code, text))

    def request(self, method, url, headers=None, data=None, timeout=None):
        self.calls.append({
            'method': method,
            'url': url,
            'headers': dict(headers or {}),
            'data': data,
            'timeout': timeout,
        })
        if self.exc is not None:
            raise self.exc
        if self.responses:
            return self.responses.pop(0)
        return FakeResponse()

    def close(self):
        self.closed = True


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def frozen_time(monkeypatch):
    monkeypatch.setattr('itbit_client.drivers.itbit.rest.now_ms', lambda: TIMESTAMP)
    return TIMESTAMP


@pytest.fixture
def client(session, frozen_time):
    return RestClient(key=KEY, secret=SECRET, session=session, nonce_start=NONCE_START)


@pytest.fixture
def anonymous_client(session):
    return RestClient(session=session)


@pytest.fixture
def driver(client):
    return ItBitDriver(client, user_id='user-1')
