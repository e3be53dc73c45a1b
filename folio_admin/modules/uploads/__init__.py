"""
Uploads Module
==============

Validates cover images and forwards them to the portfolio API, which
stores them and answers with a public URL.
"""

from flask import Blueprint

uploads_bp = Blueprint(
    'uploads',
    __name__,
    url_prefix='/upload'
)

from . import routes

__all__ = ['uploads_bp']
