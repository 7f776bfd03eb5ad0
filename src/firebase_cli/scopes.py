"""OAuth scopes requested by CLI commands."""

from __future__ import annotations

from collections.abc import Iterable

EMAIL = "email"
OPENID = "openid"
CLOUD_PROJECTS_READONLY = "https://www.googleapis.com/auth/cloudplatformprojects.readonly"
FIREBASE_PLATFORM = "https://www.googleapis.com/auth/firebase"
CLOUD_PLATFORM = "https://www.googleapis.com/auth/cloud-platform"

# Requested by every command, whatever it declares on top.
BASELINE_SCOPES: frozenset[str] = frozenset(
    {EMAIL, OPENID, CLOUD_PROJECTS_READONLY, FIREBASE_PLATFORM}
)


def build_scopes(extra: Iterable[str] | None = None) -> frozenset[str]:
    """Union the baseline scopes with command-declared extras.

    Args:
        extra: Additional scopes declared by the running command

    Returns:
        De-duplicated scope set, always containing the baseline scopes
    """
    return BASELINE_SCOPES | frozenset(extra or ())
