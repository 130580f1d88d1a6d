"""
Utils Package - Centralized utility modules initialization
"""

from .errors import (
    APIError,
    ValidationError,
    AuthError,
    InvalidToken,
    ExpiredToken,
    NotFound,
    UnsupportedMediaType,
    PayloadTooLarge,
    InternalError
)
from .decorators import login_required, json_body
from .security import (
    get_client_ip,
    hash_password,
    verify_password,
    ensure_admin,
    verify_admin_password,
    change_password,
    issue_token,
    validate_token
)
from .helpers import allowed_file, accept_upload, parse_update_payload
from .notifications import send_contact_notification

__all__ = [
    # Errors
    'APIError',
    'ValidationError',
    'AuthError',
    'InvalidToken',
    'ExpiredToken',
    'NotFound',
    'UnsupportedMediaType',
    'PayloadTooLarge',
    'InternalError',

    # Decorators
    'login_required',
    'json_body',

    # Security
    'get_client_ip',
    'hash_password',
    'verify_password',
    'ensure_admin',
    'verify_admin_password',
    'change_password',
    'issue_token',
    'validate_token',

    # Helpers
    'allowed_file',
    'accept_upload',
    'parse_update_payload',

    # Notifications
    'send_contact_notification'
]
