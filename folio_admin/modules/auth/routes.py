"""
Auth Routes
===========

Login exchanges a username and password for a bearer token at
POST /auth/login on the portfolio API.
"""

from flask import flash, redirect, render_template, request, session, url_for

from . import auth_bp
from .utils import is_safe_next
from ...core.api_client import ApiError, clear_token, get_api, get_token, set_token
from ...core.logging_service import logger


def extract_token(body):
    """The API answers either {token} or {data: {token}}"""
    if not isinstance(body, dict):
        return None
    token = body.get('token')
    if not token and isinstance(body.get('data'), dict):
        token = body['data'].get('token')
    return token or None


@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    """Admin login route"""
    if get_token():
        return redirect(url_for('dashboard.index'))

    next_page = request.args.get('next')

    if request.method == 'POST':
        username = request.form.get('username', '').strip()
        password = request.form.get('password', '')

        if not username or not password:
            flash('Please enter both username and password', 'error')
            return render_template('auth/login.html', username=username), 400

        try:
            body = get_api().post('/auth/login', json={'username': username, 'password': password})
        except ApiError as e:
            logger.warning('auth', f"Login failed for {username}", {'status_code': e.status_code})
            return render_template('auth/login.html', username=username), e.status_code or 502

        token = extract_token(body)
        if not token:
            logger.error('auth', 'Login response did not include a token')
            flash('Login failed: Invalid response from server', 'error')
            return render_template('auth/login.html', username=username), 502

        set_token(token)
        session['username'] = username
        logger.log_user_action('auth', 'login', user_id=username)
        flash('Welcome back!', 'success')
        return redirect(next_page if is_safe_next(next_page) else url_for('dashboard.index'))

    return render_template('auth/login.html', username='')


@auth_bp.route('/logout')
def logout():
    """Admin logout route"""
    username = session.pop('username', None)
    clear_token()
    logger.log_user_action('auth', 'logout', user_id=username)
    flash('Logged out', 'success')
    return redirect(url_for('auth.login'))
