"""
Portfolio Content API - Main Application Entry Point
Application Factory Pattern with modular blueprints

This module initializes the Flask application with its extensions,
configuration, error handlers and the startup bootstrap. All route handling
is delegated to blueprints.
"""

import os
from datetime import datetime, timezone
from flask import Flask, jsonify, request, send_from_directory
from werkzeug.exceptions import HTTPException, RequestEntityTooLarge
from config import get_config
from extensions import db, login_manager, cors
from utils.errors import APIError, PayloadTooLarge, InternalError
from utils.security import ensure_admin, load_admin_from_request

from blueprints.auth import auth_bp
from blueprints.portfolio import portfolio_bp
from blueprints.content import content_bp


def create_app(config_name=None, **overrides):
    """
    Application Factory Pattern
    Creates and configures Flask application instance

    Args:
        config_name (str): Configuration environment name (optional)
        **overrides: Config values applied after the selected configuration

    Returns:
        Flask: Configured Flask application instance
    """

    app = Flask(__name__)

    # Load configuration
    app.config.from_object(get_config(config_name))
    app.config.update(overrides)
    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))
    app.json.sort_keys = False

    # Initialize extensions with app
    initialize_extensions(app)

    # Register blueprints
    register_blueprints(app)

    # Register error handlers
    register_error_handlers(app)

    # Register request/response hooks
    register_hooks(app)

    # Health check route
    @app.route('/api/health')
    def health_check():
        return jsonify({'status': 'OK', 'timestamp': datetime.now(timezone.utc).isoformat()})

    # Uploaded images
    @app.route(f"{app.config['UPLOAD_URL_PREFIX']}/<path:filename>")
    def uploaded_file(filename):
        return send_from_directory(os.path.abspath(app.config['UPLOAD_FOLDER']), filename)

    bootstrap(app)

    return app


def initialize_extensions(app):
    """Initialize Flask extensions with the app instance"""
    db.init_app(app)

    login_manager.init_app(app)
    login_manager.request_loader(load_admin_from_request)

    cors.init_app(app,
                  resources={r"/api/*": {"origins": app.config['CORS_ORIGINS']}},
                  allow_headers=["Authorization", "Content-Type"],
                  methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"])


def bootstrap(app):
    """Create tables, storage folder and the admin record before serving"""
    with app.app_context():
        from sqlalchemy import text
        db.create_all()
        # Verify connection
        db.session.execute(text('SELECT 1'))
        app.logger.info("✓ Database initialized successfully")

        os.makedirs(app.config['UPLOAD_FOLDER'], exist_ok=True)

        if not ensure_admin():
            app.logger.info("✓ Admin account present")


def register_blueprints(app):
    """Register all application blueprints"""
    app.register_blueprint(auth_bp)
    app.register_blueprint(portfolio_bp)
    app.register_blueprint(content_bp)


def register_error_handlers(app):
    """Register JSON error handlers"""

    @app.errorhandler(APIError)
    def api_error(e):
        if e.status_code >= 500:
            db.session.rollback()
        return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(RequestEntityTooLarge)
    def file_too_large(e):
        max_size = app.config['MAX_CONTENT_LENGTH'] // (1024 * 1024)
        error = PayloadTooLarge(f'Request is too large. Maximum size is {max_size}MB')
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(404)
    def not_found(e):
        if request.path.startswith('/api'):
            return jsonify({'message': 'API endpoint not found'}), 404
        return jsonify({'message': 'Not found'}), 404

    @app.errorhandler(HTTPException)
    def http_error(e):
        return jsonify({'message': e.description or e.name}), e.code

    @app.errorhandler(Exception)
    def internal_server_error(e):
        db.session.rollback()
        app.logger.exception(f"Server Error: {str(e)}")
        body = {'message': 'Server error', 'error': InternalError.message}
        if app.config.get('DEBUG'):
            body['error'] = str(e)
        return jsonify(body), 500


def register_hooks(app):
    """Register request/response hooks"""

    @app.after_request
    def add_security_headers(response):
        """Add security headers to all responses"""
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['X-Frame-Options'] = 'DENY'
        return response


if __name__ == '__main__':
    # Get environment
    env = os.environ.get('FLASK_ENV', 'development')

    # Create app
    app = create_app(env)

    # Run development server
    app.run(
        host='0.0.0.0',
        port=int(os.environ.get('PORT', 5000)),
        debug=(env == 'development')
    )
