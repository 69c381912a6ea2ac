"""PDF text extraction.

Text comes from the PDF's own text layer via PyPDF2; scanned PDFs without one
come back as an empty string rather than an error.
"""
from __future__ import annotations

import io
from typing import List

import PyPDF2

from docextract.errors import ErrorKind, ExtractionError


def read_file_bytes(path: str) -> bytes:
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as e:
        raise ExtractionError(ErrorKind.PDF_READ_FAILED, f"could not read {path}") from e


def extract_pdf_text(path: str) -> str:
    data = read_file_bytes(path)
    try:
        reader = PyPDF2.PdfReader(io.BytesIO(data))
        parts: List[str] = []
        for page in reader.pages:
            parts.append(page.extract_text() or "")
    except Exception as e:
        raise ExtractionError(ErrorKind.PDF_PARSE_FAILED, f"could not parse {path}") from e
    return "\n".join(parts).strip()
