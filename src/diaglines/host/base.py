from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from diaglines.lines import VirtualLine


@runtime_checkable
class Host(Protocol):
    """
    Capabilities the renderer consumes from the editor (or any other surface
    that owns buffers and draws annotation lines). All calls are synchronous.
    """

    def cell_distance(self, buffer: int, line: int, col_start: int, col_end: int) -> int:
        """
        Display cells between two columns of ``line``, counting tabs, wide
        characters and inline decorations. ``cell_distance(b, l, 0, c)`` is the
        left margin of column ``c``.
        """
        ...

    def smallest_viewport_width(self, buffer: int) -> int | None:
        """Narrowest viewport showing ``buffer``; None if it is not displayed."""
        ...

    def clear(self, buffer: int, namespace: int) -> None: ...

    def present(
        self, buffer: int, namespace: int, line: int, virtual_lines: Sequence[VirtualLine]
    ) -> None:
        """Anchor ``virtual_lines`` directly below ``line``, replacing prior lines there."""
        ...

    def is_loaded(self, buffer: int) -> bool: ...
