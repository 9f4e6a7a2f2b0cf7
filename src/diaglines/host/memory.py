"""
diaglines.host.memory
=====================

In-process reference host: plain-text buffers with tab/wide-character aware
cell widths, a keyed annotation store, and a list of viewport widths per buffer.
Useful for previews, tests and any non-editor consumer.
"""

from __future__ import annotations

import warnings
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType

from rich.cells import cell_len

from diaglines.constants import DEFAULT_TAB_WIDTH
from diaglines.lines import RenderBatch, VirtualLine
from diaglines.reporting.warnings_bridge import LayoutWarning

# (line, column) -> text already drawn inline before that column
InlineMap = Mapping[tuple[int, int], str]


@dataclass(frozen=True, slots=True)
class TextBuffer:
    lines: tuple[str, ...]
    tab_width: int = DEFAULT_TAB_WIDTH
    inline: InlineMap = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.tab_width < 1:
            raise ValueError(f"tab_width must be >= 1 (got {self.tab_width})")
        object.__setattr__(self, "inline", MappingProxyType(dict(self.inline)))

    @classmethod
    def from_text(cls, text: str, *, tab_width: int = DEFAULT_TAB_WIDTH, inline: InlineMap | None = None) -> TextBuffer:
        return cls(tuple(text.splitlines()), tab_width, inline or {})

    def line_text(self, line: int) -> str:
        return self.lines[line] if 0 <= line < len(self.lines) else ""

    def column_cells(self, line: int, column: int) -> int:
        """Cell offset where ``column`` starts on ``line``."""
        if not (0 <= line < len(self.lines)):
            warnings.warn(
                LayoutWarning(f"line {line} is outside the buffer ({len(self.lines)} lines); treating it as empty"),
                stacklevel=3,
            )
            return 0
        text = self.lines[line]
        if not (0 <= column <= len(text)):
            clamped = min(max(column, 0), len(text))
            warnings.warn(
                LayoutWarning(f"column {column} is outside line {line} (0..{len(text)}); clamped to {clamped}"),
                stacklevel=3,
            )
            column = clamped
        cells = cell_len(text[:column].expandtabs(self.tab_width))
        for (ln, col), deco in self.inline.items():
            if ln == line and col <= column:
                cells += cell_len(deco)
        return cells

    def cell_distance(self, line: int, col_start: int, col_end: int) -> int:
        """
        Cells from the start of column ``col_start - 1`` (the line start when
        ``col_start`` is 0) to the start of ``col_end``. Callers pass the column
        after the previous connector, which lands the next one under its column.
        """
        base = 0 if col_start <= 0 else self.column_cells(line, col_start - 1)
        return self.column_cells(line, col_end) - base


class MemoryHost:
    """Host implementation that keeps everything in dictionaries."""

    def __init__(self) -> None:
        self._buffers: dict[int, TextBuffer] = {}
        self._loaded: set[int] = set()
        self._viewports: dict[int, list[int]] = {}
        self._store: dict[tuple[int, int], dict[int, tuple[VirtualLine, ...]]] = {}

    # ---- buffer/window management (host side) ----

    def add_buffer(self, buffer: int, contents: TextBuffer | str, *, loaded: bool = True) -> TextBuffer:
        tb = contents if isinstance(contents, TextBuffer) else TextBuffer.from_text(contents)
        self._buffers[buffer] = tb
        if loaded:
            self._loaded.add(buffer)
        return tb

    def buffer(self, buffer: int) -> TextBuffer:
        try:
            return self._buffers[buffer]
        except KeyError as e:
            raise KeyError(f"Unknown buffer {buffer}. Known: {sorted(self._buffers)}") from e

    def unload(self, buffer: int) -> None:
        self._loaded.discard(buffer)

    def show(self, buffer: int, width: int) -> None:
        """Record a viewport of ``width`` cells displaying ``buffer``."""
        self._viewports.setdefault(buffer, []).append(width)

    def hide_viewports(self, buffer: int) -> None:
        self._viewports.pop(buffer, None)

    def batch(self, namespace: int, buffer: int) -> RenderBatch:
        """Read-only snapshot of the lines currently published for a key."""
        return MappingProxyType(dict(self._store.get((namespace, buffer), {})))

    # ---- Host protocol ----

    def cell_distance(self, buffer: int, line: int, col_start: int, col_end: int) -> int:
        return self.buffer(buffer).cell_distance(line, col_start, col_end)

    def smallest_viewport_width(self, buffer: int) -> int | None:
        widths = self._viewports.get(buffer)
        return min(widths) if widths else None

    def clear(self, buffer: int, namespace: int) -> None:
        self._store.pop((namespace, buffer), None)

    def present(
        self, buffer: int, namespace: int, line: int, virtual_lines: Sequence[VirtualLine]
    ) -> None:
        self._store.setdefault((namespace, buffer), {})[line] = tuple(virtual_lines)

    def is_loaded(self, buffer: int) -> bool:
        return buffer in self._loaded
