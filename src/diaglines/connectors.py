"""
Connector rendering: turn one line's LineStack into the VirtualLines drawn
beneath it. Markers are visited from the end of the stack so the right-most
diagnostic ends up nearest the source line and earlier ones stack below it.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from diaglines import constants as C
from diaglines.diagnostic import Diagnostic
from diaglines.layout import BlankMarker, DiagnosticMarker, LineStack, OverlapMarker, Spacing
from diaglines.lines import StyledSegment, VirtualLine, prefix_length
from diaglines.styles import IconSet, StyleProfile
from diaglines.wrap import wrap

__all__ = ["ConnectorOptions", "render_stack", "joint_symbol"]


@dataclass(frozen=True, slots=True)
class ConnectorOptions:
    styles: StyleProfile
    icons: IconSet
    width: int = C.DEFAULT_WIDTH
    highlight_whole_line: bool = True


@dataclass(slots=True)
class _LeftContext:
    """Fold state for the elements left of the diagnostic being drawn."""

    segments: list[StyledSegment] = field(default_factory=list)
    multi: int = 0
    overlap: bool = False


def joint_symbol(overlap: bool, multi: int) -> str:
    if overlap and multi > 0:
        return C.JOINT_OVERLAP_MULTI
    if overlap:
        return C.JOINT_OVERLAP
    if multi > 0:
        return C.JOINT_MULTI
    return C.JOINT_PLAIN


def _fill_style(d: Diagnostic, opts: ConnectorOptions) -> str:
    if opts.highlight_whole_line:
        return opts.styles.style_for(d.severity)
    return opts.styles.empty_style


def _left_context(stack: LineStack, index: int, d: Diagnostic, opts: ConnectorOptions) -> _LeftContext:
    ctx = _LeftContext()
    sev_style = opts.styles.style_for(d.severity)
    fill = _fill_style(d, opts)

    for j in range(index):
        elem = stack[j]
        if isinstance(elem, Spacing):
            if ctx.multi == 0:
                ctx.segments.append(StyledSegment(" " * elem.width, fill))
            else:
                # a blank diagnostic further left turns the gap into a line
                ctx.segments.append(StyledSegment(C.HORIZONTAL * elem.width, sev_style))
        elif isinstance(elem, DiagnosticMarker):
            # an overlap right after shares this column, so no extra bar
            if not isinstance(stack[j + 1], OverlapMarker):
                ctx.segments.append(
                    StyledSegment(C.VERTICAL, opts.styles.style_for(elem.diagnostic.severity))
                )
            ctx.overlap = False
        elif isinstance(elem, BlankMarker):
            corner = C.BLANK_FIRST if ctx.multi == 0 else C.BLANK_NEXT
            ctx.segments.append(
                StyledSegment(corner, opts.styles.style_for(elem.diagnostic.severity))
            )
            ctx.multi += 1
        elif isinstance(elem, OverlapMarker):
            ctx.overlap = True

    return ctx


def _message_lines(d: Diagnostic, available: int) -> list[str]:
    out: list[str] = []
    for chunk in wrap(d.display_text(), available):
        out.extend(piece for piece in chunk.split("\n") if piece)
    return out


def _render_marker(stack: LineStack, index: int, opts: ConnectorOptions) -> list[VirtualLine]:
    elem = stack[index]
    assert isinstance(elem, DiagnosticMarker)
    d = elem.diagnostic
    sev_style = opts.styles.style_for(d.severity)
    fill = _fill_style(d, opts)

    ctx = _left_context(stack, index, d, opts)
    left = tuple(ctx.segments)

    center: tuple[StyledSegment, ...] = (
        StyledSegment(joint_symbol(ctx.overlap, ctx.multi) + C.JOINT_TAIL, sev_style),
        StyledSegment(opts.icons.icon_for(d.severity), opts.icons.style_for(d.severity)),
        StyledSegment(C.ICON_PAD, sev_style),
    )
    if ctx.overlap:
        continuation: tuple[StyledSegment, ...] = (
            StyledSegment(C.VERTICAL, sev_style),
            StyledSegment(" " * (C.CONTINUATION_WIDTH - 1), fill),
        )
    else:
        continuation = (StyledSegment(" " * C.CONTINUATION_WIDTH, fill),)

    available = max(C.MIN_MESSAGE_WIDTH, opts.width - prefix_length(left))

    vlines: list[VirtualLine] = []
    for text in _message_lines(d, available):
        vlines.append(left + center + (StyledSegment(text, sev_style),))
        center = continuation
    return vlines


def render_stack(stack: LineStack, opts: ConnectorOptions) -> tuple[VirtualLine, ...]:
    """Render every DiagnosticMarker of ``stack``, last marker first."""
    out: list[VirtualLine] = []
    for i in range(len(stack) - 1, -1, -1):
        if isinstance(stack[i], DiagnosticMarker):
            out.extend(_render_marker(stack, i, opts))
    return tuple(out)
