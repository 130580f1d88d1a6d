"""
Helpers Module - Upload handling and request body helpers
"""

import os
import json
import time
import secrets
from werkzeug.utils import secure_filename
from flask import current_app, request
from .errors import UnsupportedMediaType, PayloadTooLarge, ValidationError


def file_extension(filename):
    """Return the lowercased extension of a filename without the dot"""
    if not filename or '.' not in filename:
        return ''
    return filename.rsplit('.', 1)[1].lower()


def allowed_file(filename):
    """Check if file extension is allowed"""
    allowed_extensions = current_app.config.get('ALLOWED_EXTENSIONS', {'png', 'jpg', 'jpeg', 'gif', 'webp'})
    return file_extension(filename) in allowed_extensions


def allowed_mimetype(mimetype):
    """Check if the declared content type is an allowed image type"""
    return (mimetype or '').lower() in current_app.config['ALLOWED_MIMETYPES']


def get_file_size(file):
    """Measure an uploaded file without consuming its stream"""
    stream = file.stream
    position = stream.tell()
    stream.seek(0, os.SEEK_END)
    size = stream.tell()
    stream.seek(position)
    return size


def generate_upload_filename(field_name, extension):
    """Build a collision-resistant name: <field>-<millis>-<random>.<ext>"""
    prefix = secure_filename(field_name) or 'upload'
    millis = int(time.time() * 1000)
    return f"{prefix}-{millis}-{secrets.randbelow(10**9)}.{extension}"


def accept_upload(file, field_name='file'):
    """
    Validate and store an uploaded image

    Args:
        file (FileStorage): Uploaded file from request.files
        field_name (str): Form field name, used as the filename prefix

    Returns:
        str: Public path of the stored file, e.g. /uploads/profileImage-...png

    Raises:
        UnsupportedMediaType: Extension or declared content type is not an image
        PayloadTooLarge: File exceeds MAX_IMAGE_SIZE
    """
    if not file or not file.filename:
        raise UnsupportedMediaType('No file uploaded')

    if not allowed_file(file.filename) or not allowed_mimetype(file.mimetype):
        current_app.logger.info(f"Rejected upload {file.filename!r} ({file.mimetype})")
        raise UnsupportedMediaType()

    max_size = current_app.config['MAX_IMAGE_SIZE']
    size = get_file_size(file)
    if size > max_size:
        current_app.logger.info(f"Rejected upload {file.filename!r}: {size} bytes")
        raise PayloadTooLarge(f"File is too large. Maximum size is {max_size // (1024 * 1024)}MB")

    filename = generate_upload_filename(field_name, file_extension(file.filename))
    upload_folder = current_app.config['UPLOAD_FOLDER']
    os.makedirs(upload_folder, exist_ok=True)
    file.save(os.path.join(upload_folder, filename))

    current_app.logger.info(f"Stored upload {filename} ({size} bytes)")
    return f"{current_app.config['UPLOAD_URL_PREFIX']}/{filename}"


def _load_data_field(raw):
    try:
        return json.loads(raw)
    except (TypeError, ValueError):
        raise ValidationError([{'field': 'data', 'message': 'Invalid JSON data'}],
                              message='Invalid JSON data')


def parse_update_payload():
    """
    Resolve a profile update body into a single dict

    Accepts a multipart/form `data` field holding JSON, a JSON body, or plain
    form fields, in that order. An empty `data` field is ignored, and a JSON
    body whose `data` member is a string is unwrapped the same way.
    """
    if request.form.get('data'):
        data = _load_data_field(request.form['data'])
    elif request.is_json:
        data = request.get_json(silent=True)
        if data is None:
            raise ValidationError([{'field': None, 'message': 'Invalid JSON data'}],
                                  message='Invalid JSON data')
        if isinstance(data, dict) and isinstance(data.get('data'), str) and data['data']:
            data = _load_data_field(data['data'])
    else:
        data = request.form.to_dict()
        data.pop('data', None)
        social_links = {
            key.split('.', 1)[1]: value for key, value in data.items()
            if key.startswith('socialLinks.')
        }
        if social_links:
            data['socialLinks'] = social_links

    if not isinstance(data, dict):
        raise ValidationError([{'field': 'data', 'message': 'Request body must be a JSON object'}],
                              message='Invalid request body')
    return data


__all__ = [
    'file_extension',
    'allowed_file',
    'allowed_mimetype',
    'get_file_size',
    'generate_upload_filename',
    'accept_upload',
    'parse_update_payload'
]
