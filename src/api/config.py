"""Server configuration with environment variable loading.

Settings for the uvicorn process, logging and the NiceGUI drop page.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Load environment variables from .env file
load_dotenv()

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class ServerConfig(BaseModel):
    """Configuration for the combined API and drop page server.

    Attributes:
        host: Interface uvicorn binds to.
        port: TCP port for both the API and the drop page.
        log_level: Root logging level name.
        storage_secret: Secret NiceGUI uses to sign its user storage.
        api_base_url: Base URL the drop page calls; empty means this server.
        poll_interval: Seconds between drop page output refreshes.
    """

    model_config = ConfigDict(validate_default=True)

    host: str = Field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = Field(
        default_factory=lambda: os.getenv("PORT", "8000"),
        ge=1,
        le=65535,
    )
    log_level: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    storage_secret: str = Field(
        default_factory=lambda: os.getenv(
            "NICEGUI_STORAGE_SECRET", "pdf-form-extractor-secret"
        )
    )
    api_base_url: str = Field(default_factory=lambda: os.getenv("API_BASE_URL", ""))
    poll_interval: float = Field(
        default_factory=lambda: os.getenv("POLL_INTERVAL", "2.0"),
        gt=0,
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize the level name and reject unknown levels."""
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @field_validator("api_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.strip().rstrip("/")

    @property
    def api_url(self) -> str:
        """Base URL for API calls; this server when none is configured."""
        return self.api_base_url or f"http://127.0.0.1:{self.port}"


def get_server_config() -> ServerConfig:
    """Create server configuration from environment.

    Returns:
        Configured ServerConfig instance.

    Raises:
        ValidationError: If an environment value is malformed or out of range.
    """
    return ServerConfig()
