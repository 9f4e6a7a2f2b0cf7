"""
diaglines preview: draw a buffer with its published virtual lines underneath,
as a Rich renderable. Style ids coming out of the layout are editor highlight
names; a PreviewTheme maps them onto Rich styles.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from rich.console import Console, RenderableType
from rich.panel import Panel
from rich.text import Text

from diaglines.host.memory import TextBuffer
from diaglines.lines import RenderBatch, VirtualLine

__all__ = ["PreviewTheme", "Previewer", "preview_buffer", "virtual_line_text"]


# ─────────────────────── Theme ───────────────────────

_ERROR, _WARN, _INFO, _HINT = "red", "yellow", "cyan", "green"

_DEFAULT_STYLES: Mapping[str, str] = MappingProxyType({
    # native
    "DiagnosticVirtualTextError": _ERROR,
    "DiagnosticVirtualTextWarn": _WARN,
    "DiagnosticVirtualTextInfo": _INFO,
    "DiagnosticVirtualTextHint": _HINT,
    # coc
    "CocErrorVirtualText": _ERROR,
    "CocWarningVirtualText": _WARN,
    "CocInfoVirtualText": _INFO,
    "CocHintVirtualText": _HINT,
    # icons
    "DiagnosticVirtualIconError": f"bold {_ERROR}",
    "DiagnosticVirtualIconWarn": f"bold {_WARN}",
    "DiagnosticVirtualIconInfo": f"bold {_INFO}",
    "DiagnosticVirtualIconHint": f"bold {_HINT}",
})


@dataclass(frozen=True, slots=True)
class PreviewTheme:
    styles: Mapping[str, str] = field(default_factory=lambda: _DEFAULT_STYLES)
    line_no: str = "dim"
    code: str = ""
    border: str = "dim"

    def rich_style(self, style_id: str) -> str:
        # unknown ids (and the empty style) draw unstyled
        return self.styles.get(style_id, "")


# ─────────────────────── Builders ───────────────────────


def virtual_line_text(vline: VirtualLine, theme: PreviewTheme | None = None) -> Text:
    theme = theme or PreviewTheme()
    out = Text()
    for seg in vline:
        out.append(seg.text, style=theme.rich_style(seg.style))
    return out


def preview_buffer(
    buffer: TextBuffer,
    batch: RenderBatch,
    *,
    theme: PreviewTheme | None = None,
    show_line_numbers: bool = True,
) -> Text:
    """
    Every source line followed by the virtual lines anchored below it. Tabs are
    expanded with the buffer's tab width so connectors line up with the text.
    """
    theme = theme or PreviewTheme()
    gutter_w = len(str(len(buffer.lines)))

    rows: list[Text] = []
    for idx, raw in enumerate(buffer.lines):
        code_line = Text(raw.expandtabs(buffer.tab_width), style=theme.code)
        if show_line_numbers:
            gutter = Text(f"{idx + 1:>{gutter_w}}", style=theme.line_no)
            rows.append(Text.assemble(gutter, Text(" | "), code_line))
        else:
            rows.append(code_line)

        for vline in batch.get(idx, ()):
            body = virtual_line_text(vline, theme)
            if show_line_numbers:
                rows.append(Text.assemble(Text(" " * gutter_w), Text(" | "), body))
            else:
                rows.append(body)

    out = Text()
    for i, row in enumerate(rows):
        if i:
            out.append("\n")
        out.append(row)
    return out


# ─────────────────────── Printer ───────────────────────


class Previewer:
    """
    Lightweight printer for buffer previews. Bind it to a Console (e.g. one
    writing to a file or StringIO) and call emit().
    """

    def __init__(
        self,
        console: Console | None = None,
        theme: PreviewTheme | None = None,
        *,
        show_line_numbers: bool = True,
    ):
        self.console = console or Console()
        self.theme = theme or PreviewTheme()
        self.show_line_numbers = show_line_numbers

    def renderable(self, buffer: TextBuffer, batch: RenderBatch, *, title: str | None = None) -> RenderableType:
        body = preview_buffer(buffer, batch, theme=self.theme, show_line_numbers=self.show_line_numbers)
        if title is None:
            return body
        return Panel.fit(body, title=title, border_style=self.theme.border, padding=(0, 1))

    def emit(self, buffer: TextBuffer, batch: RenderBatch, *, title: str | None = None) -> None:
        self.console.print(self.renderable(buffer, batch, title=title))
