"""Base URLs of the backend services the CLI talks to.

Each origin can be overridden through an environment variable. A few
origins accept more than one variable; the first one set wins:

- deploy: FIREBASE_DEPLOY_URL, then FIREBASE_UPLOAD_URL
- google: FIREBASE_TOKEN_URL, then FIREBASE_GOOGLE_URL

Origins are resolved once per process (see ``get_origins``).
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Origins(BaseSettings):
    """Origin table, one base URL per backend service.

    Example:
        >>> origins = get_origins()
        >>> origins.resolve("admin")
        'https://admin.firebase.com'
    """

    admin: str = Field(
        default="https://admin.firebase.com",
        validation_alias="FIREBASE_ADMIN_URL",
    )
    auth: str = Field(
        default="https://accounts.google.com",
        validation_alias="FIREBASE_AUTH_URL",
    )
    billing: str = Field(
        default="https://cloudbilling.googleapis.com",
        validation_alias="FIREBASE_BILLING_URL",
    )
    cloud_logging: str = Field(
        default="https://logging.googleapis.com",
        validation_alias="FIREBASE_CLOUDLOGGING_URL",
    )
    console: str = Field(
        default="https://console.firebase.google.com",
        validation_alias="FIREBASE_CONSOLE_URL",
    )
    deploy: str = Field(
        default="https://deploy.firebase.com",
        validation_alias=AliasChoices("FIREBASE_DEPLOY_URL", "FIREBASE_UPLOAD_URL"),
    )
    functions: str = Field(
        default="https://cloudfunctions.googleapis.com",
        validation_alias="FIREBASE_FUNCTIONS_URL",
    )
    google: str = Field(
        default="https://www.googleapis.com",
        validation_alias=AliasChoices("FIREBASE_TOKEN_URL", "FIREBASE_GOOGLE_URL"),
    )
    hosting: str = Field(
        default="https://firebaseapp.com",
        validation_alias="FIREBASE_HOSTING_URL",
    )
    pubsub: str = Field(
        default="https://pubsub.googleapis.com",
        validation_alias="FIREBASE_PUBSUB_URL",
    )
    realtime: str = Field(
        default="https://firebaseio.com",
        validation_alias="FIREBASE_REALTIME_URL",
    )
    rules: str = Field(
        default="https://firebaserules.googleapis.com",
        validation_alias="FIREBASE_RULES_URL",
    )
    runtime_config: str = Field(
        default="https://runtimeconfig.googleapis.com",
        validation_alias="FIREBASE_RUNTIMECONFIG_URL",
    )

    # "In this context, the client secret is obviously not treated as a secret"
    # https://developers.google.com/identity/protocols/OAuth2InstalledApp
    client_id: str = Field(
        default="563584335869-fgrhgmd47bqnekij5i8b5pr03ho849e6.apps.googleusercontent.com",
        validation_alias="FIREBASE_CLIENT_ID",
    )
    client_secret: str = Field(
        default="j9iVZfS8kkCEFUPaAeJV0sAi",
        validation_alias="FIREBASE_CLIENT_SECRET",
    )

    model_config = SettingsConfigDict(
        case_sensitive=False,
        frozen=True,
    )

    def resolve(self, service: str) -> str:
        """Return the base URL for a logical service name.

        Args:
            service: Service name, e.g. "admin", "cloud-logging", "upload"

        Returns:
            Base URL for the service

        Raises:
            KeyError: If the service is unknown
        """
        key = service.lower().replace("-", "_")
        key = _SERVICE_ALIASES.get(key, key)
        if key not in _SERVICES:
            raise KeyError(f"Unknown service: {service}")
        url: str = getattr(self, key)
        return url


_SERVICES = frozenset(
    {
        "admin",
        "auth",
        "billing",
        "cloud_logging",
        "console",
        "deploy",
        "functions",
        "google",
        "hosting",
        "pubsub",
        "realtime",
        "rules",
        "runtime_config",
    }
)

_SERVICE_ALIASES = {
    "cloudlogging": "cloud_logging",
    "runtimeconfig": "runtime_config",
    "upload": "deploy",
    "token": "google",
}


@lru_cache(maxsize=1)
def get_origins() -> Origins:
    """Load the origin table once for the lifetime of the process."""
    return Origins()


def resolve(service: str) -> str:
    """Resolve a service's base URL from the process-wide origin table."""
    return get_origins().resolve(service)
