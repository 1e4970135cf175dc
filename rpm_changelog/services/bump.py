from __future__ import annotations

from rpm_changelog.core.result import Err, Ok, Result
from rpm_changelog.output.console import ConsoleProtocol, Style
from rpm_changelog.spec.document import SpecDocument
from rpm_changelog.spec.errors import SpecError
from rpm_changelog.spec.fields import find_release_line
from rpm_changelog.spec.macros import build_macro_table
from rpm_changelog.spec.release import ReleaseBump, bump_release_line


class BumpService:
    """Increment the Release tag of a spec document in place."""

    def __init__(self, *, console: ConsoleProtocol) -> None:
        self._console = console

    def plan(self, document: SpecDocument) -> Result[ReleaseBump, SpecError]:
        lines = document.lines
        ref = find_release_line(lines)
        if isinstance(ref, Err):
            return ref
        return bump_release_line(ref.value, build_macro_table(lines))

    def bump(
        self, document: SpecDocument, *, dry_run: bool = False
    ) -> Result[tuple[SpecDocument, ReleaseBump], SpecError]:
        planned = self.plan(document)
        if isinstance(planned, Err):
            return planned

        change = planned.value
        updated = document.replace_line(change.line_index, change.new_line)

        if change.expanded:
            self._console.warning(
                f"'{change.old_value}' has no leading number; replaced by its expansion"
            )
        if dry_run:
            self._console.print(f"would bump {change.summary}", Style.DIM)
            return Ok((updated, change))

        updated.save()
        self._console.success(f"Release bumped: {change.old_value} -> {change.new_value}")
        return Ok((updated, change))
