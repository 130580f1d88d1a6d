"""
Decorators Module - Authentication and request body decorators
"""

from functools import wraps
from flask import g, request
from flask_login import current_user
from .errors import AuthError, ValidationError


def login_required(f):
    """Decorator to require a valid admin bearer token"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not current_user.is_authenticated:
            raise g.get('auth_error') or AuthError()
        return f(*args, **kwargs)
    return decorated_function


def json_body(f):
    """Decorator that passes the parsed JSON object body to the view as `data`"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        data = request.get_json(silent=True)
        if data is None:
            if request.data:
                raise ValidationError([{'field': None, 'message': 'Invalid JSON data'}],
                                      message='Invalid JSON data')
            # Form posts are accepted the same way as JSON bodies
            data = request.form.to_dict()
        if not isinstance(data, dict):
            raise ValidationError([{'field': None, 'message': 'Request body must be a JSON object'}],
                                  message='Invalid request body')
        return f(*args, data=data, **kwargs)
    return decorated_function
