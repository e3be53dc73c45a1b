"""
Layout Module
=============

Shared page chrome for the dashboard: base template, sidebar navigation,
page titles and the error page. Holds no routes of its own.
"""

from flask import Blueprint

layout_bp = Blueprint(
    'layout',
    __name__,
    template_folder='templates',
    static_folder='static',
    static_url_path='/layout/static'
)

from . import navigation

__all__ = ['layout_bp']
