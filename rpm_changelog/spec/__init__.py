"""Spec file engine: macros, tag lookup, release bump and changelog entries."""

from rpm_changelog.spec.changelog import (
    Clock,
    Identity,
    format_changelog_date,
    generate_changelog,
    render_changelog,
    resolve_evr,
)
from rpm_changelog.spec.document import SpecDocument, load_document
from rpm_changelog.spec.errors import (
    FieldNotFound,
    IdentityUnavailable,
    NoActiveDocument,
    NonIntegerRelease,
    SpecError,
)
from rpm_changelog.spec.fields import FieldReference, SpecFields, extract_fields, find_release_line
from rpm_changelog.spec.macros import MacroTable, build_macro_table, expand
from rpm_changelog.spec.release import ReleaseBump, bump_release, bump_release_line

__all__ = [
    # changelog
    "Clock",
    "Identity",
    "format_changelog_date",
    "generate_changelog",
    "render_changelog",
    # document
    "SpecDocument",
    "load_document",
    # errors
    "FieldNotFound",
    "IdentityUnavailable",
    "NoActiveDocument",
    "NonIntegerRelease",
    "SpecError",
    # fields
    "FieldReference",
    "SpecFields",
    "extract_fields",
    "find_release_line",
    # macros
    "MacroTable",
    "build_macro_table",
    "expand",
    # release
    "ReleaseBump",
    "bump_release",
    "bump_release_line",
]
