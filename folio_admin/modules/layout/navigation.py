"""
Sidebar navigation and page titles.
"""

from flask import request

from . import layout_bp
from ...core.config import get_config_value

NAV_ITEMS = [
    {'label': 'Dashboard', 'href': '/', 'icon': 'grid'},
    {'label': 'Inbox', 'href': '/messages', 'icon': 'mail'},
    {'label': 'Projects', 'href': '/projects', 'icon': 'folder'},
]


def is_active(path, href):
    """Root only matches itself; other items also match their sub-pages"""
    if path == href:
        return True
    return href != '/' and path.startswith(href)


def page_title(path):
    if not path:
        return 'Admin Panel'
    if path == '/':
        return 'Dashboard'
    if path.startswith('/projects/create'):
        return 'Create Project'
    if path == '/projects':
        return 'Projects'
    if path.startswith('/projects/'):
        return 'Edit Project'
    if path.startswith('/messages'):
        return 'Inbox'
    return 'Admin Panel'


def navigation_for(path):
    return [dict(item, active=is_active(path, item['href'])) for item in NAV_ITEMS]


@layout_bp.app_context_processor
def inject_layout():
    path = request.path
    return {
        'brand_name': get_config_value('BRAND_NAME', 'Folio Admin'),
        'nav_items': navigation_for(path),
        'page_title': page_title(path),
    }
