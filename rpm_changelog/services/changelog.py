from __future__ import annotations

import datetime

from rpm_changelog.core.result import Err, Ok, Result
from rpm_changelog.git.identity import IdentityProvider
from rpm_changelog.output.console import ConsoleProtocol, Style
from rpm_changelog.spec.changelog import Clock, format_changelog_date, render_changelog, resolve_evr
from rpm_changelog.spec.document import SpecDocument
from rpm_changelog.spec.errors import FieldNotFound, SpecError
from rpm_changelog.spec.fields import extract_fields
from rpm_changelog.spec.macros import build_macro_table


class ChangelogService:
    """Generate a changelog entry for a spec and put it in the document.

    Nothing is written unless the whole entry could be produced: the tags
    are checked first, then the identity is fetched, then the text is
    rendered.
    """

    def __init__(
        self,
        *,
        console: ConsoleProtocol,
        identity: IdentityProvider,
        clock: Clock = datetime.date.today,
        message: str | None = None,
    ) -> None:
        self._console = console
        self._identity = identity
        self._clock = clock
        self._message = message

    def entry(self, document: SpecDocument) -> Result[str, SpecError]:
        """Return the entry text, ``"* <header>\\n- <message>"``."""
        lines = document.lines
        fields = extract_fields(lines)
        missing = fields.missing()
        if missing:
            return Err(FieldNotFound(missing))

        identity = self._identity.fetch()
        if isinstance(identity, Err):
            return identity

        evr = resolve_evr(fields, build_macro_table(lines))
        date = format_changelog_date(self._clock())
        return Ok(render_changelog(evr, date, identity.value) + (self._message or ""))

    def insert(
        self,
        document: SpecDocument,
        *,
        cursor: tuple[int, int] | None = None,
        dry_run: bool = False,
    ) -> Result[SpecDocument, SpecError]:
        """Insert the entry at cursor, or at the top of %changelog.

        Args:
            document: Current snapshot of the spec file
            cursor: 0-based (line, column); None for the default placement
            dry_run: Compute the new document without saving it
        """
        entry = self.entry(document)
        if isinstance(entry, Err):
            return entry

        if cursor is None:
            updated = document.add_changelog_entry(entry.value)
        else:
            line, column = cursor
            updated = document.insert(line, column, entry.value)

        header = entry.value.split("\n", 1)[0]
        if dry_run:
            self._console.print(f"would add: {header}", Style.DIM)
            return Ok(updated)

        updated.save()
        self._console.success(f"Changelog generated: {header}")
        return Ok(updated)
