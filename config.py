import os
from datetime import timedelta

class Config:
    """Base configuration"""

    # Flask Settings
    SECRET_KEY = os.environ.get('SECRET_KEY', 'CHANGE-THIS-SECRET-KEY-IN-PRODUCTION')
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Token Settings
    JWT_SECRET = os.environ.get('JWT_SECRET', 'your-secret-key-change-this-in-production')
    JWT_ALGORITHM = 'HS256'
    JWT_EXPIRATION = timedelta(hours=24)

    # Database Settings
    _database_url = os.environ.get('DATABASE_URL')
    if _database_url and _database_url.startswith("postgres://"):
        _database_url = _database_url.replace("postgres://", "postgresql://", 1)

    SQLALCHEMY_DATABASE_URI = _database_url or 'sqlite:///portfolio.db'
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_recycle': 3600,
        'pool_pre_ping': True,
    }
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Upload Settings
    MAX_CONTENT_LENGTH = 16 * 1024 * 1024  # 16MB request body
    MAX_IMAGE_SIZE = 5 * 1024 * 1024  # 5MB per image
    UPLOAD_FOLDER = os.environ.get('UPLOAD_FOLDER', 'uploads')
    UPLOAD_URL_PREFIX = '/uploads'
    ALLOWED_EXTENSIONS = {'png', 'jpg', 'jpeg', 'gif', 'webp'}
    ALLOWED_MIMETYPES = {'image/png', 'image/jpeg', 'image/jpg', 'image/gif', 'image/webp'}

    # Admin Settings
    DEFAULT_ADMIN_PASSWORD = os.environ.get('DEFAULT_ADMIN_PASSWORD', 'admin123')
    PASSWORD_HASH_METHOD = os.environ.get('PASSWORD_HASH_METHOD', 'scrypt')

    # CORS
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*')

    # Contact Notification Settings
    CONTACT_TELEGRAM_BOT_TOKEN = os.environ.get('CONTACT_TELEGRAM_BOT_TOKEN')
    CONTACT_TELEGRAM_CHAT_ID = os.environ.get('CONTACT_TELEGRAM_CHAT_ID')


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False


class TestingConfig(Config):
    """Testing configuration"""
    DEBUG = False
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    # For in-memory SQLite during tests, keep engine options empty to avoid
    # passing pool settings to SQLite's StaticPool.
    SQLALCHEMY_ENGINE_OPTIONS = {}
    # Low-cost hash for tests
    PASSWORD_HASH_METHOD = 'pbkdf2:sha256:1000'
    JWT_SECRET = 'testing-jwt-secret-0123456789abcdef'
    CONTACT_TELEGRAM_BOT_TOKEN = None
    CONTACT_TELEGRAM_CHAT_ID = None


# Select configuration based on environment
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': ProductionConfig
}

def get_config(config_name=None):
    """Get configuration by name, falling back to FLASK_ENV"""
    env = config_name or os.environ.get('FLASK_ENV', 'production')
    return config.get(env, config['default'])
