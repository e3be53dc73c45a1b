from functools import wraps
from urllib.parse import urlparse

from flask import jsonify, redirect, request, url_for

from ...core.api_client import get_token
from ...core.errors import wants_json


def login_required(f):
    """Decorator to require a stored API token"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if not get_token():
            if wants_json():
                return jsonify({'error': 'Authentication required'}), 401
            return redirect(url_for('auth.login', next=request.path))
        return f(*args, **kwargs)
    return decorated_function


def is_safe_next(target):
    """Only allow redirects to paths on this site"""
    if not target:
        return False
    parsed = urlparse(target)
    return not parsed.scheme and not parsed.netloc and target.startswith('/')
