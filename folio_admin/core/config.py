import os
from dotenv import load_dotenv

load_dotenv(override=True)

class Config:
    """
    Base configuration for the Folio admin dashboard.
    Deployments provide the backend URL and secrets via environment variables.
    """
    # Flask settings
    SECRET_KEY = os.getenv('FLASK_SECRET_KEY')

    # Remote portfolio API
    API_URL = os.getenv('API_URL', 'http://localhost:5000/api')
    API_TIMEOUT = float(os.getenv('API_TIMEOUT', '15'))

    # Get DB_DIR from environment, or use a default if not set
    DB_DIR = os.getenv('DB_DIR', os.path.join(os.getcwd(), 'databases'))
    LOG_DB = os.getenv('LOG_DB', os.path.join(DB_DIR, 'app_logs.db'))

    # Uploads are validated before being proxied to the API
    MAX_IMAGE_SIZE = int(os.getenv('MAX_IMAGE_SIZE', str(5 * 1024 * 1024)))

    BRAND_NAME = os.getenv('BRAND_NAME', 'Folio Admin')

    # Port for local server
    port = int(os.getenv('PORT', '3000'))


def get_config_value(key, default=None):
    """Get configuration value: Flask app config first, then Config, then env var"""
    try:
        from flask import current_app
        val = current_app.config.get(key)
        if val is not None:
            return val
    except RuntimeError:
        pass
    val = getattr(Config, key, None)
    if val is not None:
        return val
    return os.getenv(key, default)
