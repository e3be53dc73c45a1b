"""
Folio Admin - A Flask dashboard for a portfolio API
===================================================

A modular admin dashboard over a remote portfolio REST API with:
- Token authentication and route guarding
- Project management (list, create, edit, delete)
- Message inbox
- Statistics with charts

Usage:
    from flask import Flask
    from folio_admin import FolioAdmin

    app = Flask(__name__)
    FolioAdmin(app, {'API_URL': 'https://example.com/api'})
"""

from flask import Flask

from .core.api_client import ApiClient
from .core.config import Config
from .core.errors import register_error_handlers
from .core.logging_service import logger

__version__ = '0.1.0'

DEFAULT_MODULES = ['layout', 'auth', 'dashboard', 'projects', 'messages', 'uploads']


class FolioAdmin:
    """Flask extension that registers every dashboard module on an app"""

    def __init__(self, app=None, config=None):
        self._config = dict(config or {})
        self._registered = []
        self.api = None
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        for key in ('SECRET_KEY', 'API_URL', 'API_TIMEOUT', 'LOG_DB',
                    'MAX_IMAGE_SIZE', 'BRAND_NAME'):
            if key in self._config:
                app.config[key] = self._config[key]
            elif app.config.get(key) is None:
                app.config[key] = getattr(Config, key)

        if not app.config.get('SECRET_KEY'):
            app.config['SECRET_KEY'] = 'dev-secret-key-change-in-production'
            print("Warning: FLASK_SECRET_KEY is not set, using an insecure development key")

        self.api = ApiClient(app.config['API_URL'], app.config['API_TIMEOUT'])
        app.extensions['folio_admin'] = self

        self._register_modules(app)
        register_error_handlers(app)

    def _register_modules(self, app):
        from .modules.layout import layout_bp
        from .modules.auth import auth_bp
        from .modules.dashboard import dashboard_bp
        from .modules.projects import projects_bp
        from .modules.messages import messages_bp
        from .modules.uploads import uploads_bp

        blueprints = {
            'layout': layout_bp,
            'auth': auth_bp,
            'dashboard': dashboard_bp,
            'projects': projects_bp,
            'messages': messages_bp,
            'uploads': uploads_bp,
        }
        for name in DEFAULT_MODULES:
            app.register_blueprint(blueprints[name])
            self._registered.append(name)

    def get_registered_modules(self):
        return list(self._registered)


def create_app(config=None):
    """Build a standalone dashboard application"""
    app = Flask(__name__)
    app.config['SESSION_COOKIE_HTTPONLY'] = True
    app.config['SESSION_COOKIE_SAMESITE'] = 'Lax'
    FolioAdmin(app, config)
    with app.app_context():
        logger.info('system', 'Folio admin dashboard initialised',
                    {'api_url': app.config['API_URL']})
    return app


__all__ = ['FolioAdmin', 'create_app']
