"""
Portfolio Blueprint - Public profile and contact endpoints
Handles: Profile read/update with image upload, Contact form
"""

from flask import Blueprint

portfolio_bp = Blueprint('portfolio', __name__, url_prefix='/api')

from . import routes
