"""Runtime settings for the Firebase CLI.

Settings are read from environment variables with the FIREBASE_ prefix:
- FIREBASE_TOKEN: refresh token to authenticate with
- FIREBASE_DEBUG: enable HTTP trace logging (true/false)
- FIREBASE_HTTP_TIMEOUT: request deadline in seconds (unset waits forever)

Base URLs of the backend services live in ``firebase_cli.origins``.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Firebase CLI settings.

    Attributes:
        token: Refresh token used when no --token option is given
        debug: Whether to log HTTP requests and responses
        http_timeout: Request deadline in seconds, or None for no deadline

    Example:
        >>> settings = Settings()
        >>> settings.debug
        False
    """

    token: str | None = Field(default=None)
    debug: bool = Field(default=False)
    http_timeout: float | None = Field(default=None, gt=0)

    model_config = SettingsConfigDict(
        env_prefix="FIREBASE_",
        case_sensitive=False,
    )
