"""Image OCR through tesseract.

pytesseract shells out to the tesseract binary, so readiness depends on the
host as much as on installed packages; see ocr_ready().
"""
from __future__ import annotations

import os
import shutil
from typing import Any, Callable, Dict, Optional, Tuple

import pytesseract
from PIL import Image

from docextract.errors import ErrorKind, ExtractionError

ProgressCallback = Callable[[Dict[str, Any]], None]

# Ensure pytesseract can find the tesseract binary on common hosts.
try:
    if shutil.which("tesseract") is None:
        for cand in ("/usr/bin/tesseract", "/usr/local/bin/tesseract"):
            if os.path.exists(cand):
                pytesseract.pytesseract.tesseract_cmd = cand
                break
except Exception:
    pass


def tesseract_path() -> str:
    cmd = pytesseract.pytesseract.tesseract_cmd
    return shutil.which(cmd) or (cmd if os.path.exists(cmd) else "")


def ocr_ready() -> Tuple[bool, str]:
    try:
        _ = pytesseract.get_tesseract_version()
    except Exception as e:
        return False, f"tesseract not available: {e}"
    return True, ""


def _emit(progress: Optional[ProgressCallback], status: str, value: float) -> None:
    if progress is not None:
        progress({"status": status, "progress": value})


def extract_image_text(
    path: str,
    lang: str = "eng",
    timeout: int = 0,
    progress: Optional[ProgressCallback] = None,
) -> str:
    """Run tesseract over the image at path.

    progress, when given, receives {"status", "progress"} events as the
    image is loaded and recognized. A timeout of 0 leaves tesseract unbounded.
    """
    try:
        _emit(progress, "loading image", 0.0)
        with Image.open(path) as img:
            img.load()
            _emit(progress, "recognizing text", 0.0)
            text = pytesseract.image_to_string(img, lang=lang, timeout=timeout) or ""
    except Exception as e:
        raise ExtractionError(ErrorKind.OCR_FAILED, f"OCR failed for {path}") from e
    _emit(progress, "recognizing text", 1.0)
    return text
