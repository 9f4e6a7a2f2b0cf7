"""
Opt-in bridge that routes diaglines warnings to a rich console.
This preserves Python's warnings semantics and filtering.

Do NOT install this at import time. Let scripts/hosts opt in.
"""

from __future__ import annotations

import warnings
from collections.abc import Callable
from typing import TextIO

from rich.console import Console
from rich.text import Text

__all__ = [
    "DiaglinesWarning",
    "LayoutWarning",
    "install_warnings_bridge",
]


# ─────────── Warning categories ───────────


class DiaglinesWarning(Warning):
    """Base diaglines warning category."""


class LayoutWarning(DiaglinesWarning):
    """Layout degraded instead of failing (clamped column, missing line, ...)."""


# ─────────── Opt-in bridge (diaglines-only by default) ───────────


def install_warnings_bridge(
    *,
    console: Console | None = None,
    only_diaglines: bool = True,
    style: str = "bold yellow",
) -> Callable[[], None]:
    """
    Route Python's warnings display for diaglines warnings through Rich.

    - Returns an `uninstall()` function to restore the previous handler.
    - If `only_diaglines=True` (default), other warnings are passed through unchanged.
    """
    # Default to stderr per warnings convention
    con = console or Console(stderr=True)

    prev_showwarning = warnings.showwarning

    def _showwarning(
        message: Warning | str,
        category: type[Warning],
        filename: str,
        lineno: int,
        file: TextIO | None = None,
        line: str | None = None,
    ) -> None:
        if issubclass(category, DiaglinesWarning):
            out = Text()
            out.append(f"{category.__name__}: ", style=style)
            out.append(str(message))
            con.print(out)
            return
        if only_diaglines:
            return prev_showwarning(message, category, filename, lineno, file=file, line=line)
        con.print(f"{category.__name__}: {message} ({filename}:{lineno})")

    warnings.showwarning = _showwarning

    def uninstall() -> None:
        warnings.showwarning = prev_showwarning

    return uninstall
