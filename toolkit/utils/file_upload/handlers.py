"""
File Upload Handlers

Parses multipart requests and saves their file parts to disk.
"""
from dataclasses import dataclass, asdict
from typing import Dict, List, Optional, Tuple
from werkzeug.datastructures import FileStorage
from werkzeug.exceptions import ClientDisconnected, RequestEntityTooLarge
from werkzeug.formparser import parse_form_data
from werkzeug.wrappers import Request
import logging
import os

from toolkit.config.upload import UploadConfig
from toolkit.utils.exceptions import (
    FileUploadError,
    NoFileUploadedError,
    ParseError,
    TooManyFilesError,
    UploadIOError,
    UploadTooLargeError,
)
from .naming import choose_file_name
from .sniffer import ReplayReader, sniff_content_type
from .validators import check_allowed_type, clean_filename

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


@dataclass(frozen=True)
class UploadedFile:
    """A file part that was written to disk."""

    original_file_name: str
    new_file_name: str
    file_size: int
    content_type: str

    def to_dict(self) -> Dict:
        return asdict(self)


class UploadEngine:
    """
    Saves the file parts of multipart requests into a directory.

    Each engine carries its own UploadConfig, so engines with different
    limits can live side by side. The engine parses request.environ itself:
    call it before anything reads request.form or request.files.
    """

    def __init__(self, config: Optional[UploadConfig] = None):
        self.config = config or UploadConfig()

    def upload_many(
        self,
        request: Request,
        destination_dir: str,
        rename: bool = True
    ) -> List[UploadedFile]:
        """
        Save every file part of the request.

        Args:
            request: Request with a multipart/form-data body
            destination_dir: Existing directory to write into
            rename: Replace each name with a random one (extension kept)

        Returns:
            One UploadedFile per file part, in body order

        Raises:
            ParseError: If the body is not multipart or is malformed
            UploadTooLargeError: If the body exceeds max_upload_size
            TypeNotAllowedError: If a part's sniffed type is not allowed
            UploadIOError: If the body ends early, or reading a part or writing a file fails
        """
        parsed = self._parse_file_parts(request)
        try:
            return self._save_parts(_named_parts(parsed), destination_dir, rename)
        finally:
            _close_parts(parsed)

    def upload_one(
        self,
        request: Request,
        destination_dir: str,
        rename: bool = True
    ) -> UploadedFile:
        """
        Save the single file part of the request.

        Same as upload_many, but the body must carry exactly one file. The
        count is checked before anything is written.

        Raises:
            NoFileUploadedError: If the body has no file part
            TooManyFilesError: If the body has more than one file part
        """
        parsed = self._parse_file_parts(request)
        try:
            parts = _named_parts(parsed)
            if not parts:
                raise NoFileUploadedError('No file uploaded')
            if len(parts) > 1:
                raise TooManyFilesError(f'Too many files uploaded: expected 1, got {len(parts)}')
            return self._save_parts(parts, destination_dir, rename)[0]
        finally:
            _close_parts(parsed)

    def _parse_file_parts(self, request: Request) -> List[Tuple[str, FileStorage]]:
        if request.mimetype != 'multipart/form-data':
            raise ParseError(
                f"Expected a multipart/form-data body, got {request.mimetype or 'no content type'}"
            )

        try:
            # cls=list keeps parts in body order across field names
            _, _, files = parse_form_data(
                request.environ,
                max_content_length=self.config.max_upload_size,
                cls=list,
                silent=False,
            )
        except RequestEntityTooLarge as e:
            raise UploadTooLargeError(
                f'Upload rejected by size limits (body limit {self.config.max_upload_size} bytes): '
                f'{e.description}'
            ) from e
        except ClientDisconnected as e:
            logger.error(f"Request body ended early: {e.description}")
            raise UploadIOError(f'Request body ended before it was fully read: {e.description}') from e
        except ValueError as e:
            raise ParseError(f'Could not parse multipart form: {e}') from e

        return files

    def _save_parts(
        self,
        parts: List[Tuple[str, FileStorage]],
        destination_dir: str,
        rename: bool
    ) -> List[UploadedFile]:
        uploaded: List[UploadedFile] = []
        try:
            for field, storage in parts:
                uploaded.append(self._save_part(field, storage, destination_dir, rename))
        except FileUploadError:
            if self.config.cleanup_on_error:
                self._remove_written(uploaded, destination_dir)
            raise
        return uploaded

    def _save_part(
        self,
        field: str,
        storage: FileStorage,
        destination_dir: str,
        rename: bool
    ) -> UploadedFile:
        original_name = clean_filename(storage.filename)
        reader = ReplayReader(storage.stream)

        try:
            content_type = sniff_content_type(reader)
        except OSError as e:
            logger.error(f"Failed to read upload part '{field}' ({original_name}): {e}")
            raise UploadIOError(f'Failed to read {original_name}: {e}') from e

        try:
            check_allowed_type(content_type, self.config.allowed_types)
        except FileUploadError:
            logger.warning(f"Rejected {original_name}: type {content_type} not permitted")
            raise

        new_name = choose_file_name(original_name, rename)
        save_path = os.path.join(destination_dir, new_name)

        try:
            file_size = self._write(reader, save_path)
        except OSError as e:
            logger.error(f"Failed to save {original_name} to {save_path}: {e}")
            raise UploadIOError(f'Failed to save file {original_name}: {e}') from e

        logger.info(f"✅ Saved {original_name} as {new_name} ({file_size} bytes, {content_type})")
        return UploadedFile(
            original_file_name=original_name,
            new_file_name=new_name,
            file_size=file_size,
            content_type=content_type,
        )

    @staticmethod
    def _write(reader: ReplayReader, save_path: str) -> int:
        written = 0
        with open(save_path, 'wb') as out:
            while True:
                chunk = reader.read(CHUNK_SIZE)
                if not chunk:
                    break
                out.write(chunk)
                written += len(chunk)
        return written

    @staticmethod
    def _remove_written(uploaded: List[UploadedFile], destination_dir: str) -> None:
        for record in uploaded:
            path = os.path.join(destination_dir, record.new_file_name)
            try:
                os.remove(path)
                logger.info(f"Removed {path} after failed upload")
            except OSError as e:
                logger.error(f"Could not remove {path} during cleanup: {e}")


def _named_parts(parts: List[Tuple[str, FileStorage]]) -> List[Tuple[str, FileStorage]]:
    # Parts without a filename are plain form fields
    return [(field, storage) for field, storage in parts if storage.filename]


def _close_parts(parts: List[Tuple[str, FileStorage]]) -> None:
    for _, storage in parts:
        storage.close()
