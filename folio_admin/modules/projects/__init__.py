"""
Projects Module
===============

Admin interface for the portfolio projects held by the API.

Provides:
- Project grid with a web/mobile filter
- Project creation and editing
- Deletion with confirmation
"""

from flask import Blueprint

projects_bp = Blueprint(
    'projects',
    __name__,
    url_prefix='/projects',
    template_folder='templates'
)

from . import routes

__all__ = ['projects_bp']
