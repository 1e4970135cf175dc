"""Commands' business logic, independent of the CLI framework."""

from rpm_changelog.services.bump import BumpService
from rpm_changelog.services.changelog import ChangelogService

__all__ = ["BumpService", "ChangelogService"]
