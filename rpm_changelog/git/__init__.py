"""Git collaborators.

Usage:
    from rpm_changelog.git import GitIdentityProvider

    match GitIdentityProvider(Path.cwd()).fetch():
        case Ok(identity):
            print(identity)
        case Err(e):
            print(e.message)
"""

from rpm_changelog.git.identity import (
    GitIdentityProvider,
    IdentityProvider,
    StaticIdentityProvider,
    resolve_identity_provider,
)

__all__ = [
    "GitIdentityProvider",
    "IdentityProvider",
    "StaticIdentityProvider",
    "resolve_identity_provider",
]
