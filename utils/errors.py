"""
Errors Module - API error taxonomy rendered as JSON by the app error handlers
"""


class APIError(Exception):
    """Base class for errors that map onto an HTTP status and a stable message"""

    status_code = 500
    message = 'Server error'

    def __init__(self, message=None, status_code=None, payload=None):
        super().__init__(message or self.message)
        if message is not None:
            self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.payload = payload

    def to_dict(self):
        body = dict(self.payload or {})
        body['message'] = self.message
        return body


class ValidationError(APIError):
    """Missing, malformed or out-of-range input"""

    status_code = 400
    message = 'Validation failed'

    def __init__(self, errors, message=None):
        self.errors = list(errors)
        if message is None and len(self.errors) == 1:
            message = self.errors[0]['message']
        super().__init__(message, payload={'errors': self.errors})


class AuthError(APIError):
    status_code = 401
    message = 'Access token required'


class InvalidToken(AuthError):
    status_code = 403
    message = 'Invalid token'


class ExpiredToken(AuthError):
    status_code = 403
    message = 'Token expired'


class NotFound(APIError):
    status_code = 404
    message = 'Not found'


class UnsupportedMediaType(APIError):
    status_code = 400
    message = 'Only image files are allowed'


class PayloadTooLarge(APIError):
    status_code = 413
    message = 'File is too large'


class InternalError(APIError):
    status_code = 500
    message = 'Internal server error'


__all__ = [
    'APIError',
    'ValidationError',
    'AuthError',
    'InvalidToken',
    'ExpiredToken',
    'NotFound',
    'UnsupportedMediaType',
    'PayloadTooLarge',
    'InternalError'
]
