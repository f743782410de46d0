# Settings package
from core.settings.app import AppSettings, get_app_settings, get_server_settings
from core.settings.sections.amazon import AmazonSettings
from core.settings.sections.server import ServerSettings

__all__ = [
    "AppSettings",
    "AmazonSettings",
    "ServerSettings",
    "get_app_settings",
    "get_server_settings",
]
