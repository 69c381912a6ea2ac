"""Extractor dispatch: pick a backend from the uploaded file's extension."""
from __future__ import annotations

from typing import Dict, Optional

from docextract.errors import ErrorKind, ExtractionError
from docextract.services import ocr_service, pdf_service
from docextract.services.ocr_service import ProgressCallback
from docextract.uploads import UploadedFile

PDF = "pdf"
IMAGE = "image"

SUPPORTED_EXTENSIONS: Dict[str, str] = {
    ".pdf": PDF,
    ".jpg": IMAGE,
    ".jpeg": IMAGE,
    ".png": IMAGE,
}


def is_supported(extension: str) -> bool:
    return (extension or "").lower() in SUPPORTED_EXTENSIONS


def extract_text(
    upload: UploadedFile,
    ocr_lang: str = "eng",
    ocr_timeout: int = 0,
    progress: Optional[ProgressCallback] = None,
) -> str:
    if not is_supported(upload.extension):
        raise ExtractionError(ErrorKind.UNSUPPORTED_FILE_TYPE, f"extension {upload.extension!r}")
    if SUPPORTED_EXTENSIONS[upload.extension.lower()] == PDF:
        return pdf_service.extract_pdf_text(upload.path)
    return ocr_service.extract_image_text(upload.path, lang=ocr_lang, timeout=ocr_timeout, progress=progress)
