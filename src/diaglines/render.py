from __future__ import annotations

from collections.abc import Mapping, Sequence
from functools import partial
from typing import Any, Protocol, runtime_checkable

from diaglines.config import RenderConfig
from diaglines.connectors import ConnectorOptions, render_stack
from diaglines.diagnostic import Diagnostic, Severity
from diaglines.errors import CallContractError
from diaglines.host.base import Host
from diaglines.layout import group_lines, sort_diagnostics
from diaglines.lines import VirtualLine
from diaglines.styles import DEFAULT_ICONS, IconSet, SourceId, StyleProfile, get_profile

RenderOptions = RenderConfig | Mapping[str, Any] | None


def _is_int(val: object) -> bool:
    return isinstance(val, int) and not isinstance(val, bool)


def _check_fields(i: int, d: Diagnostic) -> None:
    where = f"diagnostics[{i}]"
    for name in ("line", "column"):
        if not _is_int(getattr(d, name)):
            raise CallContractError(f"{where}.{name}", "int", getattr(d, name))
    if not isinstance(d.severity, Severity):
        raise CallContractError(f"{where}.severity", "Severity", d.severity)
    if not isinstance(d.message, str):
        raise CallContractError(f"{where}.message", "str", d.message)
    if d.code is not None and not isinstance(d.code, str):
        raise CallContractError(f"{where}.code", "str | None", d.code)


def _check_key(namespace: object, buffer: object) -> None:
    for name, val in (("namespace", namespace), ("buffer", buffer)):
        if not _is_int(val):
            raise CallContractError(name, "int", val)


def _validate_call(namespace: object, buffer: object, diagnostics: object) -> None:
    _check_key(namespace, buffer)
    if not isinstance(diagnostics, (list, tuple)):
        raise CallContractError("diagnostics", "a list of diagnostics", diagnostics)
    for i, d in enumerate(diagnostics):
        if not isinstance(d, Diagnostic):
            raise CallContractError(f"diagnostics[{i}]", "Diagnostic", d)
        _check_fields(i, d)


def _resolve_styles(styles: StyleProfile | None, source: str | SourceId | None) -> StyleProfile:
    if styles is not None:
        if not isinstance(styles, StyleProfile):
            raise CallContractError("styles", "StyleProfile | None", styles)
        return styles
    try:
        return get_profile(source)
    except KeyError as e:
        raise CallContractError("source", "a known style source", source) from e


def layout_lines(
    host: Host,
    buffer: int,
    diagnostics: Sequence[Diagnostic],
    opts: ConnectorOptions,
) -> dict[int, tuple[VirtualLine, ...]]:
    """Sort, group and draw; returns line -> virtual lines without publishing."""
    ordered = sort_diagnostics(diagnostics)
    stacks = group_lines(ordered, partial(host.cell_distance, buffer))
    return {line: render_stack(stack, opts) for line, stack in stacks.items()}


# Public API

def render(
    namespace: int,
    buffer: int,
    diagnostics: Sequence[Diagnostic],
    config: RenderOptions = None,
    styles: StyleProfile | None = None,
    icons: IconSet | None = None,
    source: str | SourceId | None = None,
    *,
    host: Host,
) -> None:
    """
    Replace every annotation line of (namespace, buffer) with the layout for
    ``diagnostics``. Invalid arguments raise CallContractError before anything
    is cleared; an unloaded buffer is left alone.
    """
    _validate_call(namespace, buffer, diagnostics)
    cfg = RenderConfig.from_options(config)
    profile = _resolve_styles(styles, source)
    if icons is not None and not isinstance(icons, IconSet):
        raise CallContractError("icons", "IconSet | None", icons)

    if not host.is_loaded(buffer):
        return

    if not diagnostics:
        host.clear(buffer, namespace)
        return

    viewport = host.smallest_viewport_width(buffer) if cfg.auto_width else None
    opts = ConnectorOptions(
        styles=profile,
        icons=icons or DEFAULT_ICONS,
        width=cfg.resolve_width(viewport),
        highlight_whole_line=cfg.highlight_whole_line,
    )
    # laid out in full before the clear so a failing host leaves prior lines intact
    batch = layout_lines(host, buffer, diagnostics, opts)

    host.clear(buffer, namespace)
    for line, vlines in batch.items():
        host.present(buffer, namespace, line, vlines)


def hide(namespace: int, buffer: int, *, host: Host) -> None:
    """Remove everything previously rendered for (namespace, buffer)."""
    _check_key(namespace, buffer)
    host.clear(buffer, namespace)


@runtime_checkable
class Renderer(Protocol):
    """Capability surface for drawing and removing diagnostic virtual lines."""
    def show(self, namespace: int, buffer: int, diagnostics: Sequence[Diagnostic]) -> None:
        ...

    def hide(self, namespace: int, buffer: int) -> None:
        ...


class VirtualLinesRenderer:
    """Default renderer bound to one host, profile and config."""

    def __init__(
        self,
        host: Host,
        config: RenderOptions = None,
        *,
        styles: StyleProfile | None = None,
        icons: IconSet | None = None,
        source: str | SourceId | None = None,
    ):
        self.host = host
        self.config = RenderConfig.from_options(config)
        self.styles = _resolve_styles(styles, source)
        self.icons = icons or DEFAULT_ICONS

    def show(self, namespace: int, buffer: int, diagnostics: Sequence[Diagnostic]) -> None:
        render(
            namespace,
            buffer,
            diagnostics,
            self.config,
            styles=self.styles,
            icons=self.icons,
            host=self.host,
        )

    def hide(self, namespace: int, buffer: int) -> None:
        hide(namespace, buffer, host=self.host)


__all__ = ["render", "hide", "layout_lines", "Renderer", "VirtualLinesRenderer"]
