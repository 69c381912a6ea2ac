"""
Test Configuration and Fixtures
"""
import io

import pytest
from PIL import Image

from docextract import create_app
from docextract.services import ocr_service


def build_pdf(text):
    """Single-page PDF with one line of Helvetica text and a valid xref table"""
    content = b"BT /F1 24 Tf 72 720 Td (" + text.encode("latin-1") + b") Tj ET"
    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
        b"/Contents 4 0 R /Resources << /Font << /F1 5 0 R >> >> >>",
        b"<< /Length %d >>\nstream\n" % len(content) + content + b"\nendstream",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]
    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for num, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % num + body + b"\nendobj\n"
    xref_at = len(out)
    out += b"xref\n0 %d\n" % (len(objects) + 1)
    out += b"0000000000 65535 f \n"
    for off in offsets:
        out += b"%010d 00000 n \n" % off
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\n" % (len(objects) + 1)
    out += b"startxref\n%d\n%%%%EOF\n" % xref_at
    return bytes(out)


def build_image(fmt):
    buf = io.BytesIO()
    Image.new("RGB", (64, 32), "white").save(buf, format=fmt)
    return buf.getvalue()


@pytest.fixture
def upload_dir(tmp_path):
    return str(tmp_path / "uploads")


@pytest.fixture
def app(upload_dir):
    """Create application for testing"""
    app = create_app('testing', UPLOAD_FOLDER=upload_dir)
    yield app


@pytest.fixture
def client(app):
    """Create test client"""
    return app.test_client()


@pytest.fixture
def hello_pdf():
    return build_pdf("Hello World")


@pytest.fixture
def png_bytes():
    return build_image("PNG")


@pytest.fixture
def jpeg_bytes():
    return build_image("JPEG")


@pytest.fixture
def fake_ocr(monkeypatch):
    """Replace tesseract with a stub; records the kwargs of every call"""
    calls = []

    def image_to_string(img, lang=None, timeout=0, **kwargs):
        calls.append({"size": img.size, "lang": lang, "timeout": timeout})
        return "Hello World\n"

    monkeypatch.setattr(ocr_service.pytesseract, "image_to_string", image_to_string)
    return calls
