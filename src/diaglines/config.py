from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import msgspec
import msgspec.structs

from diaglines.constants import AUTO_WIDTH_MARGIN, DEFAULT_WIDTH, MIN_MESSAGE_WIDTH
from diaglines.errors import CallContractError

# key editor option tables nest the virtual-line settings under
OPTIONS_KEY = "virtual_lines"


class RenderConfig(msgspec.Struct, frozen=True, kw_only=True, forbid_unknown_fields=True):
    width: int = DEFAULT_WIDTH
    auto_width: bool = False
    highlight_whole_line: bool = True

    @classmethod
    def from_options(cls, options: RenderConfig | Mapping[str, Any] | None) -> RenderConfig:
        """
        Accept a RenderConfig, a flat mapping, or an editor-style table with the
        settings under ``"virtual_lines"``. Anything else is a caller error.
        """
        if options is None:
            return cls()
        if isinstance(options, RenderConfig):
            return options
        if not isinstance(options, Mapping):
            raise CallContractError("config", "RenderConfig | Mapping | None", options)

        raw: Any = options
        if OPTIONS_KEY in options:
            raw = options[OPTIONS_KEY]
            if raw is True or raw is None:
                raw = {}
            elif not isinstance(raw, Mapping):
                raise CallContractError(f"config[{OPTIONS_KEY!r}]", "Mapping", raw)
        try:
            return msgspec.convert(dict(raw), type=cls)
        except msgspec.ValidationError as e:
            raise CallContractError("config", f"valid render options ({e})", options) from e

    def evolve(self, **changes: Any) -> RenderConfig:
        return msgspec.structs.replace(self, **changes)

    def resolve_width(self, viewport_width: int | None) -> int:
        """Target message width, honoring auto_width when a viewport is known."""
        if self.auto_width and viewport_width is not None:
            return max(MIN_MESSAGE_WIDTH, viewport_width - AUTO_WIDTH_MARGIN)
        return self.width


__all__ = ["OPTIONS_KEY", "RenderConfig"]
