"""
File Routes

Upload, download and small text helpers over HTTP.
"""
from flask import Blueprint, request, jsonify, current_app
from typing import Callable, Tuple
import logging

from toolkit.core.utils import random_string, slugify
from toolkit.utils.exceptions import FileUploadError, ValidationError
from toolkit.utils.file_upload import download_static_file, extract_upload_options

files_bp = Blueprint('files', __name__)
logger = logging.getLogger(__name__)

MAX_RANDOM_STRING_LENGTH = 256


def _handle_upload(upload: Callable, serialize: Callable) -> Tuple[dict, int]:
    engine = current_app.extensions['upload_engine']
    options = extract_upload_options(request.args, current_app.config['RENAME_UPLOADS'])
    try:
        result = upload(engine, request, current_app.config['UPLOAD_FOLDER'], options['rename'])
        return serialize(result), 201
    except FileUploadError as e:
        logger.warning(f"File upload error: {e}")
        return {'error': str(e)}, e.status_code
    except Exception as e:
        logger.error(f"Upload error: {e}", exc_info=True)
        return {'error': 'Internal server error'}, 500


@files_bp.route('/upload', methods=['POST'])
def upload_files():
    response, status = _handle_upload(
        lambda engine, *args: engine.upload_many(*args),
        lambda files: {'files': [f.to_dict() for f in files]}
    )
    return jsonify(response), status


@files_bp.route('/upload-one', methods=['POST'])
def upload_one_file():
    response, status = _handle_upload(
        lambda engine, *args: engine.upload_one(*args),
        lambda file: {'file': file.to_dict()}
    )
    return jsonify(response), status


@files_bp.route('/download/<path:filename>', methods=['GET'])
def download_file(filename):
    display_name = request.args.get('name') or filename.rsplit('/', 1)[-1]
    return download_static_file(current_app.config['DOWNLOAD_FOLDER'], filename, display_name)


@files_bp.route('/slugify', methods=['POST'])
def make_slug():
    data = request.get_json(silent=True) or {}
    text = data.get('text')
    if not isinstance(text, str):
        return jsonify({'error': 'text (string) required'}), 400
    try:
        return jsonify({'slug': slugify(text)})
    except ValidationError as e:
        return jsonify({'error': str(e)}), 400


@files_bp.route('/random-string', methods=['GET'])
def make_random_string():
    length = request.args.get('length', 32, type=int)
    if not 1 <= length <= MAX_RANDOM_STRING_LENGTH:
        return jsonify({'error': f'length must be between 1 and {MAX_RANDOM_STRING_LENGTH}'}), 400
    return jsonify({'value': random_string(length)})


@files_bp.route('/', methods=['GET'])
def index():
    """API information endpoint."""
    return jsonify({
        'service': 'Upload Toolkit',
        'status': 'running',
        'endpoints': {
            'upload': '/upload',
            'upload_one': '/upload-one',
            'download': '/download/<filename>?name=<display name>',
            'slugify': '/slugify',
            'random_string': '/random-string?length=<n>'
        }
    })
