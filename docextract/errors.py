"""
Error taxonomy and JSON error responses
"""
from enum import Enum

from flask import jsonify, current_app, request
from werkzeug.exceptions import InternalServerError, RequestEntityTooLarge


class ErrorKind(Enum):
    """Terminal request failures, each with its HTTP status and client-facing message"""
    NO_FILE_UPLOADED = ("no_file_uploaded", 400, "No file uploaded")
    UNSUPPORTED_FILE_TYPE = ("unsupported_file_type", 400, "Unsupported file type")
    PDF_READ_FAILED = ("pdf_read_failed", 500, "Error processing PDF")
    PDF_PARSE_FAILED = ("pdf_parse_failed", 500, "Error processing PDF")
    OCR_FAILED = ("ocr_failed", 500, "Error processing image")
    FILE_TOO_LARGE = ("file_too_large", 413, "File too large")

    def __init__(self, code, status, message):
        self.code = code
        self.status = status
        self.message = message


class ExtractionError(Exception):
    """Raised anywhere in the pipeline; the underlying library error rides on __cause__"""

    def __init__(self, kind: ErrorKind, detail: str = ""):
        super().__init__(detail or kind.message)
        self.kind = kind
        self.detail = detail

    @property
    def status(self) -> int:
        return self.kind.status

    @property
    def message(self) -> str:
        return self.kind.message

    def to_dict(self):
        return {"error": self.kind.message}


def register_error_handlers(app):
    """Serialize pipeline failures as {"error": ...} with the kind's status"""

    @app.errorhandler(ExtractionError)
    def handle_extraction_error(err):
        filename = getattr(request.files.get("file"), "filename", "") or ""
        if err.status >= 500:
            current_app.logger.error(
                "%s while handling %r: %s", err.kind.code, filename, err.detail or err.__cause__,
                exc_info=err.__cause__ or err,
            )
        else:
            current_app.logger.info("Rejected %r: %s", filename, err.kind.code)
        return jsonify(err.to_dict()), err.status

    @app.errorhandler(RequestEntityTooLarge)
    def handle_too_large(err):
        current_app.logger.info("Rejected upload over %s bytes", current_app.config.get("MAX_CONTENT_LENGTH"))
        kind = ErrorKind.FILE_TOO_LARGE
        return jsonify({"error": kind.message}), kind.status

    @app.errorhandler(InternalServerError)
    def handle_internal_error(err):
        # Flask has already logged the traceback of the original exception
        current_app.logger.error("Unhandled error: %r", getattr(err, "original_exception", None) or err)
        return jsonify({"error": "Internal server error"}), 500
