"""
Security Module - Admin credentials, signed session tokens and request authentication
"""

from datetime import datetime, timezone
import jwt
from flask import request, current_app, g
from werkzeug.security import generate_password_hash, check_password_hash
from extensions import db
from models import Admin
from .errors import AuthError, InvalidToken, ExpiredToken, NotFound


def get_client_ip():
    """Get real client IP address"""
    return request.environ.get('HTTP_X_FORWARDED_FOR',
                              request.environ.get('REMOTE_ADDR', 'unknown'))


def hash_password(password):
    """Hash a password with the configured slow hashing method"""
    return generate_password_hash(password, method=current_app.config['PASSWORD_HASH_METHOD'])


def verify_password(password, password_hash):
    """Verify password against hash"""
    if not isinstance(password, str) or not password or not password_hash:
        return False
    return check_password_hash(password_hash, password)


# Credential store

def get_admin():
    """Return the single admin record, or None before bootstrap"""
    return Admin.query.order_by(Admin.created_at.asc()).first()


def ensure_admin():
    """
    Create the admin record with the default password if none exists

    Returns:
        bool: True when a new admin record was created
    """
    if Admin.query.count() > 0:
        return False

    admin = Admin(password_hash=hash_password(current_app.config['DEFAULT_ADMIN_PASSWORD']))
    db.session.add(admin)
    db.session.commit()
    current_app.logger.warning(
        "Default admin created with the default password - change it immediately")
    return True


def verify_admin_password(password):
    """Return the admin id if the password matches"""
    admin = get_admin()
    if not admin:
        raise NotFound('Admin not found')
    if not verify_password(password, admin.password_hash):
        raise AuthError('Invalid password', status_code=400)
    return admin.id


def change_password(admin_id, current_password, new_password):
    """Rotate the admin password after re-checking the current one"""
    admin = db.session.get(Admin, admin_id)
    if not admin:
        raise NotFound('Admin not found')
    if not verify_password(current_password, admin.password_hash):
        raise AuthError('Current password is incorrect', status_code=400)

    admin.password_hash = hash_password(new_password)
    db.session.commit()
    current_app.logger.info(f"Admin password changed for {admin.id}")


# Tokens

def issue_token(subject_id, issued_at=None):
    """
    Issue a signed token for the given subject

    Args:
        subject_id (str): Admin id embedded as the token subject
        issued_at (datetime, optional): Issue time, defaults to now (UTC)

    Returns:
        str: Encoded JWT expiring JWT_EXPIRATION after issue time
    """
    issued_at = issued_at or datetime.now(timezone.utc)
    payload = {
        'sub': str(subject_id),
        'iat': issued_at,
        'exp': issued_at + current_app.config['JWT_EXPIRATION'],
    }
    return jwt.encode(payload,
                      current_app.config['JWT_SECRET'],
                      algorithm=current_app.config['JWT_ALGORITHM'])


def validate_token(token):
    """
    Validate a token and return its subject

    Raises:
        ExpiredToken: Token is past its expiry
        InvalidToken: Signature check failed or the token is malformed
    """
    try:
        payload = jwt.decode(token,
                             current_app.config['JWT_SECRET'],
                             algorithms=[current_app.config['JWT_ALGORITHM']],
                             options={'require': ['exp', 'sub']})
    except jwt.ExpiredSignatureError:
        raise ExpiredToken()
    except jwt.InvalidTokenError:
        raise InvalidToken()

    subject = payload.get('sub')
    if not subject:
        raise InvalidToken()
    return subject


def get_bearer_token():
    """Extract a bearer token from the Authorization header"""
    auth_header = request.headers.get('Authorization', '')
    parts = auth_header.split(None, 1)
    if len(parts) != 2 or parts[0].lower() != 'bearer':
        return None
    return parts[1].strip() or None


def load_admin_from_request(req):
    """Flask-Login request loader: resolve the bearer token to the admin record"""
    token = get_bearer_token()
    if not token:
        g.auth_error = AuthError()
        return None

    try:
        subject = validate_token(token)
    except AuthError as e:
        g.auth_error = e
        current_app.logger.info(f"Rejected token from {get_client_ip()}: {e.message}")
        return None

    admin = db.session.get(Admin, subject)
    if not admin:
        g.auth_error = InvalidToken()
        return None
    return admin


__all__ = [
    'get_client_ip',
    'hash_password',
    'verify_password',
    'get_admin',
    'ensure_admin',
    'verify_admin_password',
    'change_password',
    'issue_token',
    'validate_token',
    'get_bearer_token',
    'load_admin_from_request'
]
