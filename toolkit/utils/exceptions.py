"""
Custom Exceptions

Toolkit-wide exception classes. Upload errors carry the HTTP status code
a handler should answer with.
"""


class ToolkitError(Exception):
    """Base class for all toolkit errors."""
    pass


class FileUploadError(ToolkitError):
    """Exception raised for file upload errors."""
    status_code = 400


class ParseError(FileUploadError):
    """Request body is not a readable multipart form."""
    pass


class UploadTooLargeError(ParseError):
    """Request body exceeds the configured upload ceiling."""
    status_code = 413


class TypeNotAllowedError(FileUploadError):
    """Sniffed content type is not in the allow-list."""
    status_code = 415

    def __init__(self, content_type: str):
        self.content_type = content_type
        super().__init__(f'File type not permitted: {content_type}')


class UploadIOError(FileUploadError):
    """Reading a file part or writing it to disk failed."""
    status_code = 500


class TooManyFilesError(FileUploadError):
    """Single-file upload received more than one file."""
    pass


class NoFileUploadedError(FileUploadError):
    """Single-file upload received no file at all."""
    pass


class ValidationError(ToolkitError):
    """Exception raised for validation errors."""
    pass


class EmptyInputError(ValidationError):
    pass


class EmptyResultError(ValidationError):
    pass
