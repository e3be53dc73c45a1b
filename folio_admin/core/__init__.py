"""
Folio Admin Core
================

Core utilities shared by the dashboard modules.
"""

from .config import Config, get_config_value
from .database import Database
from .logging_service import LoggingService, logger
from .api_client import ApiClient, ApiError, get_api

__all__ = [
    'Config', 'get_config_value', 'Database', 'LoggingService', 'logger',
    'ApiClient', 'ApiError', 'get_api',
]
