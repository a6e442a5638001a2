"""
Core Utilities (Shared)

Helper functions for various tasks.
"""
import logging
import os
import random
import re
import string

from toolkit.utils.exceptions import EmptyInputError, EmptyResultError

logger = logging.getLogger(__name__)

RANDOM_STRING_ALPHABET = string.ascii_letters + string.digits

_SLUG_STRIP = re.compile(r'[^a-z0-9]+')

# Seeded from the OS (or the clock) at import; not for secrets.
_random = random.Random()


def random_string(length: int) -> str:
    """
    Generate a pseudo-random alphanumeric string.

    Args:
        length: Number of characters to produce

    Returns:
        String of exactly `length` characters from RANDOM_STRING_ALPHABET

    Raises:
        ValueError: If length is negative
    """
    if length < 0:
        raise ValueError(f"length must be >= 0, got {length}")
    return ''.join(_random.choices(RANDOM_STRING_ALPHABET, k=length))


def create_dir_if_not_exists(path: str, mode: int = 0o755) -> None:
    """Create `path` (and parents) unless it already exists."""
    if not os.path.exists(path):
        os.makedirs(path, mode=mode, exist_ok=True)
        logger.info(f"Created directory {path}")


def slugify(text: str) -> str:
    """
    Turn free text into a lowercase, hyphen-separated slug.

    Args:
        text: Text to convert

    Returns:
        Slug made only of [a-z0-9] runs joined by single hyphens

    Raises:
        EmptyInputError: If text is empty
        EmptyResultError: If nothing slug-worthy is left
    """
    if not text:
        raise EmptyInputError('empty string not permitted')

    slug = _SLUG_STRIP.sub('-', text.lower()).strip('-')
    if not slug:
        raise EmptyResultError('after removing characters, slug is zero length')
    return slug
