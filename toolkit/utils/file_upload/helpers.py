"""
File Upload Helpers

Helper functions for file upload operations.
"""
from typing import Dict, Mapping, Optional

TRUE_VALUES = {'1', 'true', 'yes', 'on'}
FALSE_VALUES = {'0', 'false', 'no', 'off'}


def parse_bool(value: Optional[str], default: bool) -> bool:
    """Parse a query-string flag, falling back to `default` when absent or unrecognised."""
    if value is None:
        return default
    value = value.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    return default


def extract_upload_options(args: Mapping[str, str], default_rename: bool = True) -> Dict:
    """
    Extract upload options from the query string.

    Only request.args is read: touching request.form would consume the
    body before the upload engine parses it.

    Args:
        args: Flask request.args
        default_rename: Value used when no rename flag is given

    Returns:
        Dictionary with extracted options
    """
    return {
        'rename': parse_bool(args.get('rename'), default_rename),
    }
