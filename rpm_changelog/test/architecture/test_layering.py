"""Import-direction checks between layers."""

from __future__ import annotations

from ._utils import iter_source_files, matches_prefix, package_root, parse_imports

# The spec engine is pure text processing: no host, no console, no processes.
_SPEC_FORBIDDEN = (
    "rpm_changelog.cli",
    "rpm_changelog.services",
    "rpm_changelog.git",
    "rpm_changelog.output",
    "rpm_changelog.platform",
    "subprocess",
    "rich",
    "typer",
)


def test_spec_engine_stays_pure() -> None:
    root = package_root()
    offenders: list[str] = []

    for file_path in iter_source_files(root / "spec"):
        rel = file_path.relative_to(root)
        for item in parse_imports(file_path):
            if any(matches_prefix(item.module, p) for p in _SPEC_FORBIDDEN):
                offenders.append(f"{rel}:{item.line}: forbidden import '{item.module}'")

    assert not offenders, "spec engine dependency violations:\n" + "\n".join(offenders)


def test_services_do_not_import_cli_modules() -> None:
    root = package_root()
    offenders: list[str] = []

    for file_path in iter_source_files(root / "services"):
        rel = file_path.relative_to(root)
        for item in parse_imports(file_path):
            if matches_prefix(item.module, "rpm_changelog.cli") or item.module == "typer":
                offenders.append(f"{rel}:{item.line}: forbidden import '{item.module}'")

    assert not offenders, "services -> cli dependency violations:\n" + "\n".join(offenders)
