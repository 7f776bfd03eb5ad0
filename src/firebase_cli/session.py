"""Per-command credential and scope state."""

from __future__ import annotations

from collections.abc import Iterable

import structlog

from firebase_cli.scopes import BASELINE_SCOPES, build_scopes

logger = structlog.get_logger(__name__)


class ClientSession:
    """Refresh credential and scope set for one command invocation.

    Created once when a command starts and passed to every request that
    needs authentication. Both values are set during command setup and only
    read afterwards, so concurrent requests share it without locking.

    Attributes:
        refresh_token: Stored refresh credential (or None when logged out)
        scopes: Scopes the access token must carry

    Example:
        >>> session = ClientSession()
        >>> session.set_token("1//refresh")
        >>> session.set_scopes(["https://www.googleapis.com/auth/cloud-platform"])
    """

    def __init__(
        self,
        refresh_token: str | None = None,
        scopes: Iterable[str] | None = None,
    ) -> None:
        self.refresh_token = refresh_token
        self.scopes: frozenset[str] = BASELINE_SCOPES
        if scopes is not None:
            self.set_scopes(scopes)

    def set_token(self, token: str | None) -> None:
        """Set the refresh credential used to mint access tokens."""
        self.refresh_token = token

    def set_scopes(self, extra: Iterable[str] | None) -> None:
        """Set the command's scopes on top of the baseline scopes."""
        self.scopes = build_scopes(extra)
        logger.debug("command_scopes", scopes=sorted(self.scopes))
