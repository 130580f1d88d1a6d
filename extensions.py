"""
Extensions Module - Centralized initialization of Flask extensions
Decouples extensions from the application factory to avoid circular imports
and enable better testing.
"""

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager
from flask_cors import CORS

# Initialize extensions without binding to app
db = SQLAlchemy()
login_manager = LoginManager()
cors = CORS()

__all__ = ['db', 'login_manager', 'cors']
