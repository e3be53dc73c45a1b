"""
Auth Module

Provides the dashboard authentication gate:
- Username/password login against the portfolio API
- Bearer token stored in the Flask session
- Route guard for every dashboard page
- Logout
"""

from flask import Blueprint

auth_bp = Blueprint(
    'auth',
    __name__,
    template_folder='templates'
)

from . import routes
from .utils import login_required

__all__ = ['auth_bp', 'login_required']
