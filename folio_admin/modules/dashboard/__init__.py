"""
Dashboard Module
================

Landing page of the admin panel.

Provides:
- Project and message counters
- Project distribution chart (mobile vs web)
- Seven-day message activity chart
"""

from flask import Blueprint

dashboard_bp = Blueprint(
    'dashboard',
    __name__,
    template_folder='templates'
)

from . import routes

__all__ = ['dashboard_bp']
