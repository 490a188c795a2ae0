# threaded_comments/core/config.py

import os
from datetime import timedelta


class Config:
    """Settings shared by every environment."""
    # Signs the bearer tokens issued by /auth/register and /auth/login.
    JWT_SECRET_KEY = os.getenv('JWT_SECRET_KEY', 'threaded-comments-development-secret-key')
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(minutes=int(os.getenv('JWT_ACCESS_TOKEN_EXPIRES_MINUTES', '1440')))

    # Comma separated list, or '*' for any origin.
    CORS_ORIGINS = os.getenv('CORS_ORIGINS', '*')

    # Placeholder author for comments posted without a name.
    DEFAULT_AUTHOR = os.getenv('DEFAULT_AUTHOR', 'Guest')
    # Liker identity used when a like request carries no bearer token.
    ANONYMOUS_USER_ID = 'anonymous'

    SEED_DEMO_DATA = os.getenv('SEED_DEMO_DATA', 'true').lower() == 'true'


class DevelopmentConfig(Config):
    """Local development: debug mode on, demo comments loaded."""
    DEBUG = True


class TestingConfig(Config):
    """Test runs start from an empty store."""
    TESTING = True
    DEBUG = False
    SEED_DEMO_DATA = False
    JWT_SECRET_KEY = 'threaded-comments-testing-secret-key'


class ProductionConfig(Config):
    DEBUG = False


# Looked up by create_app() with the FLASK_ENV value.
config_by_name = dict(
    development=DevelopmentConfig,
    testing=TestingConfig,
    production=ProductionConfig
)
