"""
diaglines.layout
================

Sorting and per-line grouping.

- sort_diagnostics: stable (line, column) order, input untouched
- LayoutElement variants: Spacing, DiagnosticMarker, BlankMarker, OverlapMarker
- group_lines: fold the sorted diagnostics into one LineStack per source line
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import TypeAlias

from diaglines.diagnostic import Diagnostic, Severity

# (line, col_start, col_end) -> display cells, already bound to one buffer
CellDistance: TypeAlias = Callable[[int, int, int], int]


def sort_diagnostics(diagnostics: Iterable[Diagnostic]) -> list[Diagnostic]:
    """Return a new list ordered by line then column; ties keep input order."""
    return sorted(diagnostics, key=lambda d: (d.line, d.column))


# -----------------------------------------------------------------------------
# Stack elements
# -----------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Spacing:
    width: int


@dataclass(frozen=True, slots=True)
class DiagnosticMarker:
    diagnostic: Diagnostic


@dataclass(frozen=True, slots=True)
class BlankMarker:
    diagnostic: Diagnostic


@dataclass(frozen=True, slots=True)
class OverlapMarker:
    severity: Severity


LayoutElement: TypeAlias = Spacing | DiagnosticMarker | BlankMarker | OverlapMarker
LineStack: TypeAlias = tuple[LayoutElement, ...]


# -----------------------------------------------------------------------------
# Grouping
# -----------------------------------------------------------------------------


@dataclass(slots=True)
class _GroupState:
    prev_line: int = -1
    prev_col: int = 0

    def gap(self, d: Diagnostic, cell_distance: CellDistance) -> LayoutElement:
        if d.line != self.prev_line:
            return Spacing(max(0, cell_distance(d.line, 0, d.column)))
        if d.column != self.prev_col:
            # the previous connector glyph already occupies one cell
            return Spacing(max(0, cell_distance(d.line, self.prev_col + 1, d.column) - 1))
        return OverlapMarker(d.severity)

    def advance(self, d: Diagnostic) -> None:
        self.prev_line = d.line
        self.prev_col = d.column


def group_lines(
    diagnostics: Sequence[Diagnostic], cell_distance: CellDistance
) -> Mapping[int, LineStack]:
    """
    Build the LineStack for every line that has diagnostics. ``diagnostics``
    must already be sorted (see sort_diagnostics). Lines keep first-seen order.
    """
    stacks: dict[int, list[LayoutElement]] = {}
    state = _GroupState()

    for d in diagnostics:
        stack = stacks.setdefault(d.line, [])
        stack.append(state.gap(d, cell_distance))
        stack.append(BlankMarker(d) if d.is_blank else DiagnosticMarker(d))
        state.advance(d)

    return {line: tuple(elems) for line, elems in stacks.items()}


__all__ = [
    "CellDistance",
    "sort_diagnostics",
    "Spacing",
    "DiagnosticMarker",
    "BlankMarker",
    "OverlapMarker",
    "LayoutElement",
    "LineStack",
    "group_lines",
]
