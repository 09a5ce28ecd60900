# -*- coding: utf-8 -*-
# itbit_client/drivers/itbit/errors.py
# Normalized error taxonomy for every failure the REST pipeline can report.

from enum import Enum


class ErrorKind(Enum):
    CREDENTIALS_MISSING = 'CredentialsMissing'
    TRANSPORT = 'Transport'
    EMPTY_RESPONSE = 'EmptyResponse'
    UNPARSEABLE_BODY = 'UnparseableBody'
    UNPARSEABLE_HTML = 'UnparseableHTML'
    API_ERROR = 'ApiError'
    HTTP_STATUS = 'HttpStatus'


class ItBitError(Exception):
    """
    A single failed itBit request.

    The pipeline returns instances of this class in the error slot of its
    ``(body, error)`` result instead of raising them, so callers decide whether
    to raise, log or retry.

    Attributes:
        kind: ErrorKind of the failure
        message: human readable description, always naming the request
        code: server supplied error code (API_ERROR) or HTTP status (HTTP_STATUS)
        description: server supplied description for coded API errors
        status_code: HTTP status of the response, if one was received
        response_body: raw response text or decoded body, if any
        method / uri / nonce / request_body: which call failed
        cause: underlying exception (transport failures)
    """

    def __init__(self, kind, message, code=None, description=None, status_code=None,
                 response_body=None, method=None, uri=None, nonce=None,
                 request_body=None, cause=None):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.code = code
        self.description = description
        self.status_code = status_code
        self.response_body = response_body
        self.method = method
        self.uri = uri
        self.nonce = nonce
        self.request_body = request_body
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __repr__(self):
        return 'ItBitError(kind=%s, code=%r, message=%r)' % (self.kind.value, self.code, self.message)

    def to_dict(self):
        return {
            'kind': self.kind.value,
            'message': self.message,
            'code': self.code,
            'description': self.description,
            'status_code': self.status_code,
            'method': self.method,
            'uri': self.uri,
            'nonce': self.nonce,
        }
