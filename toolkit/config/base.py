"""
Base Configuration

Main application configuration from environment variables.
"""
import os
from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


def _env_set(name: str) -> frozenset:
    raw = os.getenv(name, '')
    return frozenset(item.strip() for item in raw.split(',') if item.strip())


class Config:
    """Application configuration."""

    # Flask
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    FLASK_ENV = os.getenv('FLASK_ENV', 'development')
    PORT = int(os.getenv('PORT', 5030))

    # File Storage
    UPLOAD_FOLDER = os.getenv('UPLOAD_FOLDER', './storage/uploads')
    DOWNLOAD_FOLDER = os.getenv('DOWNLOAD_FOLDER', UPLOAD_FOLDER)
    MAX_UPLOAD_SIZE = int(os.getenv('MAX_UPLOAD_SIZE', 1073741824))  # 1GB default

    # Uploads
    ALLOWED_TYPES = _env_set('ALLOWED_TYPES')  # empty = any type
    RENAME_UPLOADS = _env_bool('RENAME_UPLOADS', 'true')
    UPLOAD_CLEANUP_ON_ERROR = _env_bool('UPLOAD_CLEANUP_ON_ERROR', 'false')

    # Logging
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_FILE = os.getenv('LOG_FILE')
