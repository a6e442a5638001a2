from flask import Flask, jsonify
from flask_cors import CORS
import logging
import os
from toolkit.config import Config, UploadConfig
from toolkit.core.utils import create_dir_if_not_exists
from toolkit.utils.file_upload import UploadEngine

logger = logging.getLogger(__name__)


def create_app(config_object=None):
    app = Flask(__name__)
    app.config.from_object(config_object or Config)

    CORS(app, origins=["*"])

    # Configure logging only if not already configured (prevent duplicate handlers)
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        handlers = [logging.StreamHandler()]
        if app.config.get('LOG_FILE'):
            handlers.append(logging.FileHandler(app.config['LOG_FILE']))
        logging.basicConfig(
            level=app.config.get('LOG_LEVEL', 'INFO'),
            format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
            handlers=handlers
        )

    # send_from_directory resolves relative paths against the app root, not the cwd
    for key in ('UPLOAD_FOLDER', 'DOWNLOAD_FOLDER'):
        app.config[key] = os.path.abspath(app.config.get(key) or app.config['UPLOAD_FOLDER'])
    create_dir_if_not_exists(app.config['UPLOAD_FOLDER'])

    app.extensions['upload_engine'] = UploadEngine(UploadConfig.from_mapping(app.config))

    from toolkit.api.files import files_bp
    app.register_blueprint(files_bp)
    logger.info("✅ Blueprints registered successfully")

    # Error handlers
    @app.errorhandler(413)
    def file_too_large(e):
        return jsonify({
            'error': 'File too large',
            'max_size_mb': app.config['MAX_UPLOAD_SIZE'] / (1024 * 1024)
        }), 413

    @app.errorhandler(500)
    def internal_error(e):
        return jsonify({'error': 'Internal server error'}), 500

    @app.errorhandler(404)
    def not_found(e):
        return jsonify({'error': 'Not found'}), 404

    return app
