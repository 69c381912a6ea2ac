"""WSGI entry point: gunicorn docextract.wsgi:app"""
import os

from docextract import create_app

app = create_app(os.environ.get("FLASK_ENV", "production"))
