"""
Messages Routes
===============
"""

from datetime import datetime

from flask import flash, jsonify, redirect, render_template, url_for

from . import messages_bp
from ..auth.utils import login_required
from ...core.api_client import ApiError, get_api, unwrap_list
from ...core.logging_service import logger


def mark_message_read(message_id, notify=True):
    get_api().put(f'/messages/{message_id}', notify=notify)
    logger.log_user_action('messages', f"marked message {message_id} as read")


@messages_bp.route('')
@login_required
def inbox():
    """Inbox, newest first as returned by the API"""
    try:
        messages = unwrap_list(get_api().get('/messages'))
    except ApiError as e:
        if e.is_unauthorized:
            raise
        messages = []

    unread = sum(1 for m in messages if not m.get('isRead'))
    return render_template('messages/inbox.html', messages=messages, unread=unread)


@messages_bp.route('/<message_id>/read', methods=['POST'])
@login_required
def mark_read(message_id):
    try:
        mark_message_read(message_id)
    except ApiError as e:
        if e.is_unauthorized:
            raise
        return redirect(url_for('messages.inbox'))

    flash('Marked as read', 'success')
    return redirect(url_for('messages.inbox'))


@messages_bp.route('/api/<message_id>/read', methods=['PUT'])
@login_required
def api_mark_read(message_id):
    """Used by the inbox script to flip the card in place"""
    try:
        mark_message_read(message_id, notify=False)
    except ApiError as e:
        if e.is_unauthorized:
            raise
        return jsonify({'error': e.message}), e.status_code or 502
    return jsonify({'success': True, 'id': message_id, 'isRead': True, 'message': 'Marked as read'})


@messages_bp.app_template_filter('message_date')
def message_date(value):
    """Format an ISO timestamp from the API for the inbox"""
    if not value:
        return ''
    try:
        parsed = datetime.fromisoformat(value.replace('Z', '+00:00'))
    except (AttributeError, TypeError, ValueError):
        return value
    return parsed.strftime('%b %d, %Y %H:%M')
