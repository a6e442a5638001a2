"""
Static File Download

Serves a stored file under a different, user-facing name.
"""
import logging
import os
from flask import Response, send_from_directory

logger = logging.getLogger(__name__)


def download_static_file(directory: str, internal_file_name: str, display_file_name: str) -> Response:
    """
    Send a file as an attachment with a forced save-as name.

    Must run inside a request context. Relative directories resolve
    against the working directory. Range requests, conditional
    headers and Content-Length are handled by Flask/werkzeug.

    Args:
        directory: Folder holding the file
        internal_file_name: Name of the file on disk
        display_file_name: Name the client is told to save it as

    Returns:
        Flask response streaming the file

    Raises:
        werkzeug.exceptions.NotFound: If the file is missing or outside directory
    """
    logger.info(f"Serving {internal_file_name} from {directory} as {display_file_name}")
    return send_from_directory(
        os.path.abspath(directory),
        internal_file_name,
        as_attachment=True,
        download_name=display_file_name,
    )


__all__ = ['download_static_file']
