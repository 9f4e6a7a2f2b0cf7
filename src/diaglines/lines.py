from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TypeAlias

from diaglines.constants import EMPTY_STYLE


@dataclass(frozen=True, slots=True)
class StyledSegment:
    text: str
    style: str = EMPTY_STYLE

    def __iter__(self):  # type: ignore[no-untyped-def]
        # unpacks as (text, style), the shape hosts expect for chunk lists
        yield self.text
        yield self.style


VirtualLine: TypeAlias = tuple[StyledSegment, ...]
RenderBatch: TypeAlias = Mapping[int, tuple[VirtualLine, ...]]


def line_text(vline: VirtualLine) -> str:
    """Plain text of a virtual line with styles dropped."""
    return "".join(seg.text for seg in vline)


def prefix_length(segments: tuple[StyledSegment, ...] | list[StyledSegment]) -> int:
    return sum(len(seg.text) for seg in segments)
