"""
API Blueprint - upload, dispatch, extract, respond
"""
from flask import Blueprint, jsonify, request, current_app

from docextract.services import extract_text
from docextract.uploads import staged_upload

api_bp = Blueprint('api', __name__)


def log_ocr_progress(event):
    current_app.logger.debug("OCR progress: %s", event)


@api_bp.route("/extract-text", methods=["POST"])
def extract_text_route():
    file = request.files.get("file")
    current_app.logger.info(
        "Received file: %s (%s)",
        getattr(file, "filename", None),
        getattr(file, "mimetype", None),
    )

    cfg = current_app.config
    with staged_upload(file, cfg["UPLOAD_FOLDER"], current_app.logger) as upload:
        current_app.logger.debug("File extension: %s", upload.extension)
        text = extract_text(
            upload,
            ocr_lang=cfg["OCR_LANG"],
            ocr_timeout=cfg["OCR_TIMEOUT"],
            progress=log_ocr_progress,
        )

    return jsonify({"text": text}), 200
