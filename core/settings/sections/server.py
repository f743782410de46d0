from pydantic import Field

from core.settings.base import RelayBaseSettings


class ServerSettings(RelayBaseSettings):
    """HTTP listener and logging settings."""

    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=3000, alias="PORT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
