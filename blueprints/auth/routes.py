"""
Auth Routes - Password login and token-protected credential management
"""

from flask import jsonify, current_app
from flask_login import current_user
from utils.decorators import login_required, json_body
from utils.security import (
    get_client_ip, verify_admin_password, change_password, issue_token
)
from utils.validation import require_fields
from utils.errors import AuthError, ValidationError
from . import auth_bp


@auth_bp.route('/login', methods=['POST'])
@json_body
def login(data):
    """Exchange the admin password for a session token"""
    require_fields(data, ['password'], message='Password is required')

    try:
        admin_id = verify_admin_password(data['password'])
    except AuthError:
        current_app.logger.warning(f"Failed login from {get_client_ip()}")
        raise

    current_app.logger.info(f"Admin login from {get_client_ip()}")
    return jsonify({'token': issue_token(admin_id)})


@auth_bp.route('/change-password', methods=['POST'])
@login_required
@json_body
def change_admin_password(data):
    """Rotate the admin password"""
    require_fields(data, ['currentPassword', 'newPassword'],
                   message='Current and new passwords are required')
    if not isinstance(data['newPassword'], str):
        raise ValidationError([{'field': 'newPassword', 'message': 'New password must be a string'}])

    change_password(current_user.id, data['currentPassword'], data['newPassword'])
    return jsonify({'message': 'Password updated successfully'})


@auth_bp.route('/verify', methods=['GET'])
@login_required
def verify():
    """Confirm that the presented token is still valid"""
    return jsonify({'valid': True, 'id': current_user.id})
