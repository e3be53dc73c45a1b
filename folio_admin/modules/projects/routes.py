"""
Projects Routes
===============

Project CRUD over the portfolio API.
- `type`: web/mobile (filterable on the list page)
- `status`: draft/published (controls public visibility)
"""

from flask import flash, jsonify, redirect, render_template, request, url_for

from . import projects_bp
from .forms import (PROJECT_TYPES, clean_payload, empty_form, form_from_project,
                    form_from_request, validate_form)
from ..auth.utils import login_required
from ...core.api_client import ApiError, get_api, unwrap_list, unwrap_record
from ...core.logging_service import logger

FILTERS = ('all',) + PROJECT_TYPES


def filter_projects(projects, project_type):
    """Client-side type filter; unknown values show everything"""
    if project_type not in PROJECT_TYPES:
        return projects
    return [p for p in projects if p.get('type') == project_type]


def _reraise_unauthorized(error):
    if error.is_unauthorized:
        raise error


def fetch_project(project_id):
    """Return the project record, or None when the API cannot provide it"""
    try:
        return unwrap_record(get_api().get(f'/projects/find/{project_id}'))
    except ApiError as e:
        _reraise_unauthorized(e)
        return None


def _render_form(form, project_id=None, status=200):
    return render_template('projects/project_form.html', form=form,
                           project_id=project_id), status


# ===== Pages =====

@projects_bp.route('')
@login_required
def list_projects():
    """Project grid"""
    active_filter = request.args.get('type', 'all').lower()
    if active_filter not in FILTERS:
        active_filter = 'all'

    try:
        projects = unwrap_list(get_api().get('/projects'))
    except ApiError as e:
        _reraise_unauthorized(e)
        projects = []

    return render_template(
        'projects/projects.html',
        projects=filter_projects(projects, active_filter),
        filters=FILTERS,
        active_filter=active_filter,
    )


@projects_bp.route('/create', methods=['GET', 'POST'])
@login_required
def create_project():
    """Create a new project"""
    if request.method == 'GET':
        return _render_form(empty_form())

    form = form_from_request(request.form)
    errors = validate_form(form)
    if errors:
        for error in errors:
            flash(error, 'error')
        return _render_form(form, status=400)

    try:
        get_api().post('/projects', json=clean_payload(form))
    except ApiError as e:
        _reraise_unauthorized(e)
        return _render_form(form, status=e.status_code or 502)

    logger.log_user_action('projects', f"created project '{form['title']}'")
    flash('Project created successfully', 'success')
    return redirect(url_for('projects.list_projects'))


@projects_bp.route('/<project_id>/edit', methods=['GET', 'POST'])
@login_required
def edit_project(project_id):
    """Edit an existing project"""
    if request.method == 'GET':
        project = fetch_project(project_id)
        if not project:
            return render_template('projects/not_found.html'), 404
        return _render_form(form_from_project(project), project_id)

    form = form_from_request(request.form)
    errors = validate_form(form)
    if errors:
        for error in errors:
            flash(error, 'error')
        return _render_form(form, project_id, status=400)

    try:
        get_api().put(f'/projects/{project_id}', json=clean_payload(form))
    except ApiError as e:
        _reraise_unauthorized(e)
        return _render_form(form, project_id, status=e.status_code or 502)

    logger.log_user_action('projects', f"updated project {project_id}")
    flash('Project updated successfully', 'success')
    return redirect(url_for('projects.list_projects'))


@projects_bp.route('/<project_id>/delete', methods=['GET', 'POST'])
@login_required
def delete_project(project_id):
    """Confirmation screen (GET) and deletion (POST)"""
    if request.method == 'GET':
        project = fetch_project(project_id)
        if not project:
            return render_template('projects/not_found.html'), 404
        return render_template('projects/confirm_delete.html', project=project,
                               project_id=project_id)

    try:
        get_api().delete(f'/projects/{project_id}')
    except ApiError as e:
        _reraise_unauthorized(e)
        return redirect(url_for('projects.list_projects'))

    logger.log_user_action('projects', f"deleted project {project_id}")
    flash('Project deleted successfully', 'success')
    return redirect(url_for('projects.list_projects'))


# ===== JSON API =====

@projects_bp.route('/api/<project_id>', methods=['DELETE'])
@login_required
def api_delete_project(project_id):
    """Delete used by the grid script; the card is removed in place"""
    get_api().delete(f'/projects/{project_id}', notify=False)
    logger.log_user_action('projects', f"deleted project {project_id}")
    return jsonify({'success': True, 'id': project_id, 'message': 'Project deleted successfully'})
