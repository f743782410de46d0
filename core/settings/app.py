# core/settings/app.py
from functools import lru_cache

from pydantic import BaseModel, ConfigDict

from core.settings.sections.amazon import AmazonSettings
from core.settings.sections.server import ServerSettings


class AppSettings(BaseModel):
    """
    Central application settings aggregator.

    Built once per process by get_app_settings() and handed to each
    component explicitly.
    """

    model_config = ConfigDict(frozen=True)

    amazon: AmazonSettings
    server: ServerSettings


@lru_cache()
def get_app_settings() -> AppSettings:
    """Return cached global settings for the entire app."""
    return AppSettings(amazon=AmazonSettings(), server=ServerSettings())


@lru_cache()
def get_server_settings() -> ServerSettings:
    """Listener settings only; usable before LWA credentials are configured."""
    return ServerSettings()
