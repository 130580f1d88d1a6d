"""
Portfolio Routes - Profile singleton and contact form
"""

from datetime import datetime, timezone
from flask import request, jsonify, current_app
from utils.data import profiles
from utils.decorators import login_required, json_body
from utils.helpers import accept_upload, parse_update_payload
from utils.notifications import send_contact_notification
from utils.security import get_client_ip
from utils.validation import require_fields
from . import portfolio_bp

CONTACT_FIELDS = ['firstName', 'lastName', 'email', 'subject', 'message']


@portfolio_bp.route('/profile', methods=['GET'])
def get_profile():
    """Public profile, created with defaults on first read"""
    return jsonify(profiles.get_or_create_default())


@portfolio_bp.route('/profile', methods=['PUT'])
@login_required
def update_profile():
    """Update the profile from JSON, form fields or a JSON `data` form field"""
    update_data = parse_update_payload()

    # Validate the text fields before an image is written to disk
    profiles.validate(update_data)

    image = request.files.get('profileImage')
    if image and image.filename:
        update_data['profileImage'] = accept_upload(image, field_name='profileImage')

    return jsonify(profiles.upsert(update_data))


@portfolio_bp.route('/contact', methods=['POST'])
@json_body
def contact(data):
    """Contact form: validated, logged and forwarded, never stored"""
    require_fields(data, CONTACT_FIELDS, message='All fields are required')

    submission = {
        'name': f"{str(data['firstName']).strip()} {str(data['lastName']).strip()}",
        'email': str(data['email']).strip(),
        'subject': str(data['subject']).strip(),
        'message': str(data['message']).strip()[:5000],
        'timestamp': datetime.now(timezone.utc).isoformat()
    }
    current_app.logger.info(
        f"Contact form submission from {submission['name']} <{submission['email']}> "
        f"({get_client_ip()}): {submission['subject']}")

    send_contact_notification(submission)
    return jsonify({'message': 'Message sent successfully'})
