from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, fields, replace
from enum import StrEnum
from types import MappingProxyType
from typing import Any

from diaglines.constants import DEFAULT_SOURCE, EMPTY_STYLE
from diaglines.diagnostic import Severity

"""
Frozen style configuration: which highlight style each severity uses, and which
icon (plus icon style) marks it. Profiles are built once, cached, and passed by
reference into the connector renderer.
"""

# ---------------------------------------------------------------------------
# Identity
# ---------------------------------------------------------------------------

class SourceId(StrEnum):
    NATIVE = "native"  # editor built-in diagnostic highlights
    COC = "coc"        # coc.nvim virtual-text highlights


StyleMap = Mapping[Severity, str]


def _freeze(mapping: Mapping[Severity, str]) -> StyleMap:
    missing = [s.value for s in Severity if s not in mapping]
    if missing:
        raise ValueError("Style mapping is missing severities: " + ", ".join(missing))
    return MappingProxyType({Severity(k): v for k, v in mapping.items()})


# ---------------------------------------------------------------------------
# Profiles (immutable config bags)
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class StyleProfile:
    name: str
    severity_styles: StyleMap
    # used for plain padding when whole-line highlighting is off
    empty_style: str = EMPTY_STYLE

    def __post_init__(self) -> None:
        object.__setattr__(self, "severity_styles", _freeze(self.severity_styles))

    def style_for(self, severity: Severity) -> str:
        return self.severity_styles[severity]

    def evolve(self, **overrides: Any) -> StyleProfile:
        _validate_override_keys(StyleProfile, overrides)
        return replace(self, **overrides)


@dataclass(frozen=True, slots=True)
class IconSet:
    icons: StyleMap
    icon_styles: StyleMap = field(default_factory=lambda: DEFAULT_ICON_STYLES)

    def __post_init__(self) -> None:
        object.__setattr__(self, "icons", _freeze(self.icons))
        object.__setattr__(self, "icon_styles", _freeze(self.icon_styles))

    def icon_for(self, severity: Severity) -> str:
        return self.icons[severity]

    def style_for(self, severity: Severity) -> str:
        return self.icon_styles[severity]

    def evolve(self, **overrides: Any) -> IconSet:
        _validate_override_keys(IconSet, overrides)
        return replace(self, **overrides)


def _validate_override_keys(cls: type, overrides: Mapping[str, Any] | None) -> None:
    if not overrides:
        return
    allowed = {f.name for f in fields(cls)}
    unknown = [k for k in overrides.keys() if k not in allowed]
    if unknown:
        raise KeyError(f"Unknown {cls.__name__} override keys: " + ", ".join(sorted(unknown)))


# ---------------------------------------------------------------------------
# Built-ins
# ---------------------------------------------------------------------------

DEFAULT_ICON_STYLES: StyleMap = MappingProxyType({
    Severity.ERROR: "DiagnosticVirtualIconError",
    Severity.WARN: "DiagnosticVirtualIconWarn",
    Severity.INFO: "DiagnosticVirtualIconInfo",
    Severity.HINT: "DiagnosticVirtualIconHint",
})

# Nerd Font glyphs: times-circle, warning, info-circle, lightbulb
DEFAULT_ICONS: IconSet = IconSet(
    icons={
        Severity.ERROR: "\uf057",
        Severity.WARN: "\uf071",
        Severity.INFO: "\uf05a",
        Severity.HINT: "\uf0eb",
    },
)

NATIVE_PROFILE: StyleProfile = StyleProfile(
    name=SourceId.NATIVE.value,
    severity_styles={
        Severity.ERROR: "DiagnosticVirtualTextError",
        Severity.WARN: "DiagnosticVirtualTextWarn",
        Severity.INFO: "DiagnosticVirtualTextInfo",
        Severity.HINT: "DiagnosticVirtualTextHint",
    },
)

COC_PROFILE: StyleProfile = StyleProfile(
    name=SourceId.COC.value,
    severity_styles={
        Severity.ERROR: "CocErrorVirtualText",
        Severity.WARN: "CocWarningVirtualText",
        Severity.INFO: "CocInfoVirtualText",
        Severity.HINT: "CocHintVirtualText",
    },
)

_PROFILE_REGISTRY: dict[str, StyleProfile] = {
    SourceId.NATIVE.value: NATIVE_PROFILE,
    SourceId.COC.value: COC_PROFILE,
}
_RESERVED_NAMES: frozenset[str] = frozenset(sid.value for sid in SourceId)
_NAME_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def get_profile(source: str | SourceId | None = None) -> StyleProfile:
    """Fetch a profile by source name; ``None`` selects the native profile."""
    key = DEFAULT_SOURCE if source is None else str(source).strip().lower()
    try:
        return _PROFILE_REGISTRY[key]
    except KeyError:
        raise KeyError(f"Unknown style source: {source!r}. Known: {sorted(_PROFILE_REGISTRY)}") from None


def register_profile(
    name: str, /, *, base: str | SourceId, overrides: Mapping[str, Any] | None = None
) -> StyleProfile:
    """Create and register a profile by cloning an existing one.

    - name: C identifier rules (case-insensitive; stored lowercase), not a built-in name
    - base: an existing source name (e.g. "coc")
    - overrides: StyleProfile field overrides (validated)
    """
    key = name.strip().lower()
    if not _NAME_RE.match(key):
        raise ValueError(f"Invalid profile name {name!r}: must match {_NAME_RE.pattern!r}")
    if key in _RESERVED_NAMES:
        raise ValueError(f"'{key}' is a built-in profile name and cannot be re-registered.")
    if key in _PROFILE_REGISTRY:
        raise ValueError(f"A profile named '{key}' already exists. Choose a different name.")

    prof = get_profile(base).evolve(name=key, **(overrides or {}))
    _PROFILE_REGISTRY[key] = prof
    return prof


def list_profiles() -> Iterable[str]:
    return sorted(_PROFILE_REGISTRY.keys())


__all__ = [
    "SourceId",
    "StyleMap",
    "StyleProfile",
    "IconSet",
    "DEFAULT_ICONS",
    "DEFAULT_ICON_STYLES",
    "NATIVE_PROFILE",
    "COC_PROFILE",
    "get_profile",
    "register_profile",
    "list_profiles",
]
