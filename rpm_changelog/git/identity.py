"""Packager identity for changelog entries.

The identity comes from the config file when it names both a user and an
email, and from ``git config`` otherwise.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from rpm_changelog.core.config import Config
from rpm_changelog.core.result import Err, Ok, Result
from rpm_changelog.platform.process import run as run_process
from rpm_changelog.spec.changelog import Identity
from rpm_changelog.spec.errors import IdentityUnavailable

_GIT_TIMEOUT_SECONDS = 10.0

__all__ = [
    "GitIdentityProvider",
    "IdentityProvider",
    "StaticIdentityProvider",
    "resolve_identity_provider",
]


class IdentityProvider(Protocol):
    def fetch(self) -> Result[Identity, IdentityUnavailable]: ...


@dataclass(frozen=True, slots=True)
class StaticIdentityProvider:
    identity: Identity

    def fetch(self) -> Result[Identity, IdentityUnavailable]:
        return Ok(self.identity)


class GitIdentityProvider:
    """Reads ``user.name`` and ``user.email`` with ``git config --get``."""

    def __init__(self, cwd: Path) -> None:
        self.cwd = cwd

    def fetch(self) -> Result[Identity, IdentityUnavailable]:
        name = self._get("user.name")
        if isinstance(name, Err):
            return name
        email = self._get("user.email")
        if isinstance(email, Err):
            return email
        return Ok(Identity(name=name.value, email=email.value))

    def _get(self, key: str) -> Result[str, IdentityUnavailable]:
        result = run_process(
            ["git", "config", "--get", key],
            cwd=self.cwd,
            timeout=_GIT_TIMEOUT_SECONDS,
        )
        if isinstance(result, Err):
            # git exits 1 with no output when the key is unset
            detail = result.error.stderr.strip() or f"{key} is not set"
            return Err(IdentityUnavailable(detail))

        value = result.value.strip()
        if not value:
            return Err(IdentityUnavailable(f"{key} is empty"))
        return Ok(value)


def resolve_identity_provider(config: Config | None, cwd: Path) -> IdentityProvider:
    if config is not None and config.identity.is_complete:
        identity = config.identity
        assert identity.name is not None and identity.email is not None
        return StaticIdentityProvider(Identity(name=identity.name, email=identity.email))
    return GitIdentityProvider(cwd)
