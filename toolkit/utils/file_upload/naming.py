"""
Destination Naming

Decides the on-disk name of an uploaded file.
"""
import os

from toolkit.core.utils import random_string

RANDOM_NAME_LENGTH = 25


def choose_file_name(original: str, rename: bool) -> str:
    """
    Keep the original name, or build a random one with the same extension.

    No existence check is made: a kept name overwrites an existing file and
    random names are only probabilistically unique.
    """
    if not rename:
        return original
    _, ext = os.path.splitext(original)
    return f"{random_string(RANDOM_NAME_LENGTH)}{ext}"
