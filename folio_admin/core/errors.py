"""
Application-level handling of portfolio API failures.

The client has already flashed the message and dropped the token on 401;
what is left is deciding where the browser goes next.
"""

from flask import jsonify, redirect, render_template, request, url_for

from .api_client import ApiError
from .logging_service import logger


def wants_json():
    """JSON endpoints live under /api/ in every module, plus the upload proxy"""
    return (
        '/api/' in request.path
        or request.path.startswith('/upload/')
        or request.is_json
    )


def handle_api_error(error):
    if error.is_unauthorized:
        logger.warning('auth', f"Session rejected by API on {request.path}")
        if wants_json():
            return jsonify({'error': error.message}), 401
        if request.endpoint != 'auth.login':
            return redirect(url_for('auth.login'))

    logger.warning('api', f"Unhandled API error on {request.path}: {error.message}",
                   {'status_code': error.status_code})

    if wants_json():
        return jsonify({'error': error.message}), error.status_code or 502
    return render_template('errors/api_error.html', error=error), 502


def register_error_handlers(app):
    app.register_error_handler(ApiError, handle_api_error)
