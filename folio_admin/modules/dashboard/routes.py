"""
Dashboard Routes
================

The dashboard pulls projects and messages from the portfolio API in
parallel and derives every counter and chart series locally.
"""

from concurrent.futures import ThreadPoolExecutor

from flask import copy_current_request_context, flash, jsonify, render_template

from . import dashboard_bp
from .stats import build_dashboard_data
from ..auth.utils import login_required
from ...core.api_client import ApiError, get_api, unwrap_list
from ...core.logging_service import logger


def fetch_projects_and_messages():
    """
    Fetch both collections concurrently and wait for both.

    The workers never flash; failures are surfaced here once both calls have
    returned, so concurrent errors cannot race on the session's flash list.
    """
    api = get_api()

    def fetch(path):
        # each worker needs its own copy of the request context
        @copy_current_request_context
        def call():
            return unwrap_list(api.get(path, notify=False))
        return call

    with ThreadPoolExecutor(max_workers=2) as pool:
        futures = [pool.submit(fetch('/projects')), pool.submit(fetch('/messages'))]
        errors = [f.exception() for f in futures if f.exception() is not None]

    for error in errors:
        if not isinstance(error, ApiError):
            raise error
    for error in errors:
        flash(error.message, 'error')
    if errors:
        raise next((e for e in errors if e.is_unauthorized), errors[0])

    projects, messages = (f.result() for f in futures)
    return projects, messages


def load_dashboard_data():
    try:
        projects, messages = fetch_projects_and_messages()
    except ApiError as e:
        if e.is_unauthorized:
            raise
        logger.warning('dashboard', f"Could not load statistics: {e.message}")
        projects, messages = [], []
    return build_dashboard_data(projects, messages)


@dashboard_bp.route('/')
@login_required
def index():
    """Admin dashboard with counters and charts"""
    return render_template('dashboard/dashboard.html', **load_dashboard_data())


@dashboard_bp.route('/api/stats')
@login_required
def stats():
    """Chart data as JSON"""
    return jsonify(load_dashboard_data())
