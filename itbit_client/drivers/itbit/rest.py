# -*- coding: utf-8 -*-
# itbit_client/drivers/itbit/rest.py
"""
REST adapter for itBit.
Responsibilities:
- Build public requests and signed private requests
- Execute them over one requests.Session per client
- Classify every outcome into (body, None) or (None, ItBitError)
"""

import json
import logging

import requests

from itbit_client.drivers.itbit.errors import ErrorKind, ItBitError
from itbit_client.drivers.itbit.nonce import NonceSequencer
from itbit_client.drivers.itbit.signer import Signer, encode_body
from itbit_client.drivers.itbit.util import clean_args, encode_query, extract_html_text, now_ms

logger = logging.getLogger(__name__)

DEFAULT_SERVER_V1 = 'https://api.itbit.com/v1'
DEFAULT_SERVER_V2 = 'https://www.itbit.com/api/v2'
DEFAULT_TIMEOUT = 20000  # milliseconds
USER_AGENT = 'itBit python client'
SUCCESS_STATUSES = (200, 201, 202)


def describe_request(method, uri, nonce=None, request_body=None):
    """One-line description of a request, used in every error message."""
    if method == 'GET':
        return '%s request to url %s' % (method, uri)
    return '%s request to url %s with nonce %s and data %s' % (method, uri, nonce, request_body)


_UNDECODABLE = object()


def _decode(text):
    try:
        return json.loads(text)
    except ValueError:
        return _UNDECODABLE


def classify_response(status_code, text, transport_error=None, context=None):
    """
    Decide success or failure of a finished request.

    Rules are applied in a fixed order and the first match wins, so an API
    error object in the body is reported as API_ERROR even when the HTTP
    status is also a failure.

    Args:
        status_code: HTTP status, None when no response was received
        text: raw response body text
        transport_error: exception raised by the HTTP layer, if any
        context: dict with method, uri, nonce, request_body of the call

    Returns:
        tuple: (body, None) on success, (None, ItBitError) on failure
    """
    context = context or {}
    desc = describe_request(context.get('method'), context.get('uri'),
                            context.get('nonce'), context.get('request_body'))

    def fail(kind, message, **kwargs):
        kwargs.setdefault('status_code', status_code)
        return None, ItBitError(kind, message, **dict(context, **kwargs))

    if transport_error is not None:
        return fail(ErrorKind.TRANSPORT, 'failed %s: %s' % (desc, transport_error),
                    cause=transport_error)

    if text is None or not text.strip():
        return fail(ErrorKind.EMPTY_RESPONSE, 'failed %s. No response from server' % desc)

    body = _decode(text)
    # null / false / 0 / "" carry no body either
    if body is not _UNDECODABLE and not isinstance(body, (dict, list)) and not body:
        return fail(ErrorKind.EMPTY_RESPONSE, 'failed %s. No response from server' % desc,
                    response_body=text)

    if not isinstance(body, (dict, list)):
        html_text = extract_html_text(text)
        if html_text:
            return fail(ErrorKind.UNPARSEABLE_HTML,
                        'could not parse response body from %s\nResponse body: %s' % (desc, html_text),
                        response_body=html_text)
        return fail(ErrorKind.UNPARSEABLE_BODY,
                    'could not parse json or HTML response from %s' % desc,
                    response_body=text)

    if isinstance(body, dict) and body.get('code'):
        return fail(ErrorKind.API_ERROR,
                    'failed %s. Error code %s, description: %s' % (desc, body['code'], body.get('description')),
                    code=body['code'], description=body.get('description'), response_body=body)

    if isinstance(body, dict) and body.get('error'):
        # e.g. {"error":"The itBit API is currently undergoing maintenance"}
        return fail(ErrorKind.API_ERROR, 'failed %s. Error %s' % (desc, body['error']),
                    code=body['error'], response_body=body)

    if status_code not in SUCCESS_STATUSES:
        return fail(ErrorKind.HTTP_STATUS,
                    'failed %s. Response status code %s, response body %s' % (desc, status_code, text),
                    code=status_code, response_body=text)

    return body, None


class RestClient(object):
    """
    itBit REST client.

    One instance owns the credentials, the nonce counter and the HTTP session;
    it is safe to share between threads.
    """

    def __init__(self, key=None, secret=None, server_v1=None, server_v2=None, timeout=None,
                 session=None, request_logger=None, nonce_start=None):
        """
        :param key: API key (user id of the key pair)
        :param secret: API secret, str or bytes
        :param server_v1: base url of the v1 API (public market data and all private calls)
        :param server_v2: base url of the v2 API (public only)
        :param timeout: timeout of private calls in milliseconds
        :param session: requests.Session to use, a new one by default
        :param request_logger: optional RequestLogger receiving every outcome
        :param nonce_start: first nonce value, defaults to the current time in ms
        """
        if isinstance(secret, str):
            secret = secret.encode('utf-8')
        self.key = key
        self.secret = secret
        self.server_v1 = (server_v1 or DEFAULT_SERVER_V1).rstrip('/')
        self.server_v2 = (server_v2 or DEFAULT_SERVER_V2).rstrip('/')
        self.timeout = timeout or DEFAULT_TIMEOUT
        self.session = session if session is not None else requests.Session()
        self.request_logger = request_logger
        self.nonces = NonceSequencer(nonce_start)
        self._signer = Signer(secret) if secret else None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def close(self):
        self.session.close()

    @property
    def has_credentials(self):
        return bool(self.key) and bool(self.secret)

    def request(self, method, path, args=None, auth=False, version='v1'):
        """Initiate network request
       @param method: GET / POST / PUT / DELETE
       @param path: endpoint path below the server base url
       @param args: dict of arguments, query string or JSON body depending on method
       @param auth: boolean, sign the request with the client credentials
       @param version: 'v1' or 'v2', public requests only
       """
        if auth:
            return self.private_request(method, path, args)
        if method.upper() != 'GET':
            raise ValueError('public requests must use GET, not %s' % method)
        return self.public_request(path, args, version=version)

    def _server(self, version):
        if version == 'v1':
            return self.server_v1
        if version == 'v2':
            return self.server_v2
        raise ValueError('version %s needs to be either v1 or v2' % version)

    def public_request(self, path, args=None, version='v1'):
        server = self._server(version)
        query = encode_query(args)
        if query:
            path = path + ('&' if '?' in path else '?') + query
        uri = server + path
        headers = {'User-Agent': USER_AGENT}
        return self._execute('GET', uri, headers, timeout=None)

    def private_request(self, method, path, args=None):
        method = method.upper()
        args = clean_args(args)
        uri = self.server_v1 + path
        body = ''
        if method in ('POST', 'PUT'):
            body = encode_body(args)
        elif method == 'GET' and args:
            uri += '?' + encode_query(args)

        if not self.has_credentials:
            desc = describe_request(method, uri, request_body=body or encode_body(args))
            return None, ItBitError(
                ErrorKind.CREDENTIALS_MISSING,
                'must provide key and secret to make a private API request (%s)' % desc,
                method=method, uri=uri, request_body=body or encode_body(args),
            )

        timestamp = now_ms()
        nonce = self.nonces.next()
        envelope = self._signer.sign_request(method, uri, body, nonce, timestamp)

        headers = {
            'User-Agent': USER_AGENT,
            'Authorization': '%s:%s' % (self.key, envelope.signature),
            'X-Auth-Timestamp': str(timestamp),
            'X-Auth-Nonce': str(nonce),
        }
        if body:
            headers['Content-Type'] = 'application/json'

        return self._execute(
            method, uri, headers,
            data=body.encode('utf-8') if body else None,
            timeout=self.timeout / 1000.0,
            nonce=nonce,
            request_body=body or encode_body(args),
        )

    def _execute(self, method, uri, headers, data=None, timeout=None, nonce=None, request_body=None):
        context = {'method': method, 'uri': uri, 'nonce': nonce, 'request_body': request_body}
        logger.debug(describe_request(method, uri, nonce, request_body))

        try:
            response = self.session.request(method, uri, headers=headers, data=data, timeout=timeout)
        except requests.RequestException as e:
            body, error = classify_response(None, None, transport_error=e, context=context)
        else:
            body, error = classify_response(response.status_code, response.text, context=context)

        if error is not None:
            logger.warning('[itBit] %s: %s', error.kind.value, error.message)
        if self.request_logger is not None:
            self.request_logger.log_request(
                method, uri, nonce, error.status_code if error else response.status_code,
                error.kind.value if error else 'OK',
            )
        return body, error
