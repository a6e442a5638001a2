"""
File Upload Utilities
"""
from .handlers import UploadEngine, UploadedFile
from .sniffer import ReplayReader, sniff_content_type
from .validators import check_allowed_type, clean_filename
from .naming import choose_file_name
from .helpers import extract_upload_options
from .downloader import download_static_file

__all__ = [
    'UploadEngine',
    'UploadedFile',
    'ReplayReader',
    'sniff_content_type',
    'check_allowed_type',
    'clean_filename',
    'choose_file_name',
    'extract_upload_options',
    'download_static_file',
]
