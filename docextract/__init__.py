"""
docextract Application Factory
"""
import logging
import os
from datetime import datetime, timezone
from flask import Flask, jsonify
from flask_cors import CORS
from docextract.config import config, get_config
from docextract.errors import register_error_handlers
from docextract.uploads import ensure_upload_dir


def resolve_log_level(value) -> int:
    """Map LOG_LEVEL to a logging level, INFO when the name is unknown"""
    if isinstance(value, int):
        return value
    level = logging.getLevelName(str(value or "").strip().upper())
    return level if isinstance(level, int) else logging.INFO


def upload_dir_writable(path: str) -> bool:
    return os.path.isdir(path) and os.access(path, os.W_OK)


def create_app(config_name=None, **overrides):
    cfg = config.get(config_name) if config_name else get_config()
    cfg = cfg or config['default']
    app = Flask(__name__, static_folder=overrides.get('STATIC_FOLDER', cfg.STATIC_FOLDER), static_url_path='')
    app.config.from_object(cfg)
    app.config.update(overrides)

    app.logger.setLevel(resolve_log_level(app.config['LOG_LEVEL']))

    # Initialize extensions
    CORS(app, origins=app.config['CORS_ORIGINS'])

    ensure_upload_dir(app.config['UPLOAD_FOLDER'])

    # Register blueprints
    from docextract.api import api_bp

    app.register_blueprint(api_bp)  # No prefix - /extract-text sits at the root
    register_error_handlers(app)

    @app.route('/')
    def index():
        return app.send_static_file('index.html')

    # Health check endpoint
    @app.route('/healthz')
    def healthz():
        """Health check for load balancers and monitoring"""
        from docextract.services.ocr_service import ocr_ready, tesseract_path

        ocr_ok, ocr_msg = ocr_ready()
        uploads_ok = upload_dir_writable(app.config['UPLOAD_FOLDER'])

        return jsonify({
            "status": "ok" if (ocr_ok and uploads_ok) else "degraded",
            "version": app.config['APP_VERSION'],
            "ocr_ready": ocr_ok,
            "ocr_message": ocr_msg,
            "tesseract_path": tesseract_path(),
            "upload_dir_writable": uploads_ok,
            "timestamp": datetime.now(timezone.utc).isoformat()
        })

    # Version endpoint
    @app.route('/version')
    def version():
        """Version and build info"""
        from docextract.services import SUPPORTED_EXTENSIONS

        return jsonify({
            "version": app.config['APP_VERSION'],
            "build_time": app.config['BUILD_TIME'],
            "git_commit": app.config['GIT_COMMIT'],
            "supported_extensions": sorted(SUPPORTED_EXTENSIONS),
            "ocr_lang": app.config['OCR_LANG'],
        })

    return app
