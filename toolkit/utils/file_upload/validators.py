"""
File Upload Validators

Validation functions for file uploads.
"""
from typing import AbstractSet

from toolkit.utils.exceptions import FileUploadError, TypeNotAllowedError


def check_allowed_type(content_type: str, allowed_types: AbstractSet[str]) -> None:
    """
    Check a sniffed MIME type against the allow-list.

    Args:
        content_type: Type returned by the sniffer
        allowed_types: Accepted types; empty accepts everything

    Raises:
        TypeNotAllowedError: If the type is not in a non-empty allow-list
    """
    if allowed_types and content_type.lower() not in allowed_types:
        raise TypeNotAllowedError(content_type)


def clean_filename(filename: str) -> str:
    """
    Strip directory components from a client-supplied filename.

    Args:
        filename: Name from the part's Content-Disposition

    Returns:
        Bare file name, safe to join onto the destination directory

    Raises:
        FileUploadError: If nothing usable is left
    """
    name = filename.replace('\\', '/').rsplit('/', 1)[-1].strip()
    if name in ('', '.', '..'):
        raise FileUploadError(f'Invalid file name: {filename!r}')
    return name
