"""RPM macro definitions and ``%{name}`` expansion.

Only ``%global`` and ``%define`` lines are understood. Conditionals,
parametric macros and the ``%name`` short form are left alone.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from types import MappingProxyType

__all__ = ["MacroTable", "build_macro_table", "expand"]

MacroTable = Mapping[str, str]

_DEFINITION_RE = re.compile(r"%(?:global|define)\s+(\w+)\s+(.+)")
_REFERENCE_RE = re.compile(r"%\{([^}]+)\}")


def build_macro_table(lines: Sequence[str] | str) -> MacroTable:
    """Collect macro definitions, top to bottom.

    A later definition of the same name replaces the earlier one. The
    stored value is the raw, unexpanded remainder of the line.
    """
    if isinstance(lines, str):
        lines = lines.split("\n")

    table: dict[str, str] = {}
    for line in lines:
        m = _DEFINITION_RE.search(line)
        if m is None:
            continue
        table[m.group(1)] = m.group(2).strip()
    return MappingProxyType(table)


def expand(table: MacroTable, text: str) -> str:
    """Replace every known ``%{name}`` in text with its full expansion.

    Unknown references are kept verbatim. A reference to a macro that is
    already being expanded higher up the chain is also kept verbatim, so
    ``%global a %{a}`` expands to ``%{a}`` instead of recursing forever.
    """
    # One frame per level of the chain: pieces still to process (reversed),
    # the names being expanded above it, and the text produced so far.
    frames = [_frame(text, frozenset())]
    while True:
        pieces, active, out = frames[-1]
        if not pieces:
            frames.pop()
            value = "".join(out)
            if not frames:
                return value
            frames[-1][2].append(value)
            continue

        is_reference, piece = pieces.pop()
        if not is_reference:
            out.append(piece)
        elif piece in active or piece not in table:
            out.append(f"%{{{piece}}}")
        else:
            frames.append(_frame(table[piece], active | {piece}))


def _frame(
    text: str, active: frozenset[str]
) -> tuple[list[tuple[bool, str]], frozenset[str], list[str]]:
    # split() with one group alternates literal text and reference names.
    pieces = [(i % 2 == 1, piece) for i, piece in enumerate(_REFERENCE_RE.split(text))]
    pieces.reverse()
    return pieces, active, []
