"""
docextract Configuration
Every setting can be overridden by an environment variable of the same name
"""
import os
from functools import lru_cache

PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))


def env_int(name: str, default: int) -> int:
    """Read an integer from the environment, falling back on bad values"""
    raw = (os.environ.get(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


class Config:
    """Base configuration"""
    # Server
    HOST = os.environ.get("HOST", "0.0.0.0")
    PORT = env_int("PORT", 3000)

    # File uploads
    UPLOAD_FOLDER = os.environ.get("UPLOAD_FOLDER", os.path.join(os.getcwd(), "uploads"))
    MAX_CONTENT_LENGTH = env_int("MAX_UPLOAD_MB", 20) * 1024 * 1024
    STATIC_FOLDER = os.environ.get("STATIC_FOLDER", os.path.join(PACKAGE_DIR, "public"))

    # OCR
    OCR_LANG = os.environ.get("OCR_LANG", "eng")
    OCR_TIMEOUT = env_int("OCR_TIMEOUT", 120)  # seconds, 0 disables

    # CORS
    CORS_ORIGINS = os.environ.get("CORS_ORIGINS", "*")

    # Logging
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    # App Version
    APP_VERSION = os.environ.get("APP_VERSION", "1.0.0")
    BUILD_TIME = os.environ.get("BUILD_TIME", "")
    GIT_COMMIT = os.environ.get("GIT_COMMIT", "")


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "DEBUG")


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False


class TestingConfig(Config):
    """Testing configuration"""
    DEBUG = True
    TESTING = True
    OCR_TIMEOUT = 0


config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


@lru_cache()
def get_config(env: str = None):
    """Get configuration by environment name"""
    env = env or os.environ.get("FLASK_ENV", "development")
    return config.get(env, config['default'])
