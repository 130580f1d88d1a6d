"""
Content Blueprint - Portfolio collections
Handles: Skills, Projects, Experience, Certificates (public reads, protected writes)
"""

from flask import Blueprint

content_bp = Blueprint('content', __name__, url_prefix='/api')

from . import routes
