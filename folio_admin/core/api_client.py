"""
Portfolio API Client
====================

Every screen of the dashboard talks to the remote portfolio API through
this client. It attaches the stored bearer token, surfaces failures as
flash notifications and drops the session token when the API answers 401.
"""

import requests
from flask import current_app, flash, has_request_context, session

from .config import get_config_value
from .logging_service import logger

DEFAULT_ERROR_MESSAGE = 'Something went wrong'
TOKEN_KEY = 'token'


class ApiError(Exception):
    """A failed call to the portfolio API"""

    def __init__(self, message, status_code=None, payload=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.payload = payload

    @property
    def is_unauthorized(self):
        return self.status_code == 401


# ===== Session token helpers =====

def get_token():
    if not has_request_context():
        return None
    return session.get(TOKEN_KEY)


def set_token(token):
    session[TOKEN_KEY] = token


def clear_token():
    session.pop(TOKEN_KEY, None)


# ===== Response helpers =====

def _parse_body(response):
    """Decode a JSON body, falling back to the raw text"""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def error_message(body, fallback=None):
    """Pick the human-readable message out of an error body"""
    if isinstance(body, dict):
        for key in ('message', 'error'):
            value = body.get(key)
            if isinstance(value, str) and value.strip():
                return value
    return fallback or DEFAULT_ERROR_MESSAGE


def unwrap_list(body):
    """Return the record list from a bare list or a {"data": [...]} wrapper"""
    if isinstance(body, list):
        return body
    if isinstance(body, dict) and isinstance(body.get('data'), list):
        return body['data']
    return []


def unwrap_record(body):
    """Return the record from a {"data": {...}} wrapper or the body itself"""
    if isinstance(body, dict) and isinstance(body.get('data'), dict):
        return body['data']
    if isinstance(body, dict) and body:
        return body
    return None


class ApiClient:
    """requests-based client for the portfolio REST API"""

    def __init__(self, base_url=None, timeout=None, http=None):
        self.base_url = (base_url or get_config_value('API_URL')).rstrip('/')
        self.timeout = timeout or get_config_value('API_TIMEOUT', 15)
        self.http = http or requests.Session()

    def url_for(self, path):
        return f"{self.base_url}/{path.lstrip('/')}"

    def _headers(self):
        headers = {'Accept': 'application/json'}
        token = get_token()
        if token:
            headers['Authorization'] = f'Bearer {token}'
        return headers

    def _fail(self, error, notify):
        """Surface a failed call to the user before it propagates"""
        if has_request_context():
            if notify:
                flash(error.message, 'error')
            if error.is_unauthorized:
                clear_token()
        return error

    def request(self, method, path, json=None, files=None, notify=True):
        """
        Send a request to the API and return the decoded body.

        Args:
            method: HTTP method
            path: Path relative to API_URL, e.g. '/projects'
            json: JSON payload (sent with Content-Type application/json)
            files: Multipart files mapping, used for uploads
            notify: Flash the error message when the call fails

        Raises:
            ApiError: on transport failure or any status >= 400
        """
        method = method.upper()
        try:
            response = self.http.request(
                method,
                self.url_for(path),
                json=json,
                files=files,
                headers=self._headers(),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.log_error_with_traceback('api', e, {'method': method, 'path': path})
            raise self._fail(ApiError(str(e) or DEFAULT_ERROR_MESSAGE), notify)

        logger.log_api_call('api', path, method, response.status_code)

        body = _parse_body(response)
        if response.status_code >= 400:
            error = ApiError(
                error_message(body, fallback=response.reason),
                status_code=response.status_code,
                payload=body,
            )
            raise self._fail(error, notify)

        return body

    def get(self, path, **kwargs):
        return self.request('GET', path, **kwargs)

    def post(self, path, json=None, **kwargs):
        return self.request('POST', path, json=json, **kwargs)

    def put(self, path, json=None, **kwargs):
        return self.request('PUT', path, json=json, **kwargs)

    def delete(self, path, **kwargs):
        return self.request('DELETE', path, **kwargs)

    def upload(self, path, file_storage, field='image', **kwargs):
        """Forward an uploaded werkzeug FileStorage as multipart form data"""
        files = {
            field: (file_storage.filename, file_storage.stream, file_storage.mimetype)
        }
        return self.request('POST', path, files=files, **kwargs)


def get_api():
    """Return the API client registered on the current app"""
    return current_app.extensions['folio_admin'].api
