"""
Upload staging: write the multipart file to disk for the length of one request
"""
from __future__ import annotations

import os
import re
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional

from docextract.errors import ErrorKind, ExtractionError


@dataclass(frozen=True)
class UploadedFile:
    path: str
    original_filename: str
    extension: str


def ensure_upload_dir(upload_dir: str) -> None:
    os.makedirs(upload_dir, exist_ok=True)


def file_extension(filename: str) -> str:
    """Lowercased extension with its leading dot, '' when there is none"""
    return os.path.splitext((filename or "").strip())[1].lower()


def staged_filename(original_filename: str) -> str:
    # Timestamp keeps the directory listing ordered; the random token keeps
    # same-millisecond uploads apart.
    ext = re.sub(r"[^a-z0-9.]", "", file_extension(original_filename))
    return f"{int(time.time() * 1000)}_{os.urandom(8).hex()}{ext}"


def save_upload(file_storage, upload_dir: str) -> UploadedFile:
    """Persist a werkzeug FileStorage into upload_dir.

    Raises ExtractionError(NO_FILE_UPLOADED) when the form carried no file,
    which includes a browser submitting the field with nothing selected.
    """
    original = (getattr(file_storage, "filename", "") or "").strip()
    if file_storage is None or not original:
        raise ExtractionError(ErrorKind.NO_FILE_UPLOADED)

    ensure_upload_dir(upload_dir)
    upload = UploadedFile(
        path=os.path.join(upload_dir, staged_filename(original)),
        original_filename=original,
        extension=file_extension(original),
    )
    try:
        file_storage.save(upload.path)
    except Exception:
        discard_upload(upload)
        raise
    return upload


def discard_upload(upload: Optional[UploadedFile], logger=None) -> None:
    if upload is None:
        return
    try:
        os.remove(upload.path)
    except FileNotFoundError:
        pass
    except OSError as e:
        if logger is not None:
            logger.warning("Could not delete staged upload %s: %s", upload.path, e)


@contextmanager
def staged_upload(file_storage, upload_dir: str, logger=None) -> Iterator[UploadedFile]:
    """Yield the saved upload and delete it however the block exits"""
    upload = save_upload(file_storage, upload_dir)
    try:
        yield upload
    finally:
        discard_upload(upload, logger)
