"""
Messages Module
===============

Inbox for contact-form submissions received by the portfolio API.
Messages are created by the API; the dashboard only marks them as read.
"""

from flask import Blueprint

messages_bp = Blueprint(
    'messages',
    __name__,
    url_prefix='/messages',
    template_folder='templates'
)

from . import routes

__all__ = ['messages_bp']
