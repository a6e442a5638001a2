"""
Application Configuration

Centralized configuration management.
"""
from .base import Config
from .upload import UploadConfig, DEFAULT_MAX_UPLOAD_SIZE

__all__ = [
    'Config',
    'UploadConfig',
    'DEFAULT_MAX_UPLOAD_SIZE',
]
