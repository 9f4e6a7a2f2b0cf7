"""
Input model for diaglines: a severity enum and the immutable Diagnostic record
that the layout passes consume.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

__all__ = ["Severity", "Diagnostic"]


class Severity(StrEnum):
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    HINT = "hint"

    @classmethod
    def from_level(cls, level: int) -> Severity:
        """Map an editor numeric level (1 = error ... 4 = hint) to a Severity."""
        try:
            return _LEVELS[level]
        except KeyError:
            raise ValueError(f"Unknown severity level: {level!r} (expected 1..4)") from None

    @property
    def level(self) -> int:
        return _LEVELS_INV[self]


_LEVELS: dict[int, Severity] = {
    1: Severity.ERROR,
    2: Severity.WARN,
    3: Severity.INFO,
    4: Severity.HINT,
}
_LEVELS_INV: dict[Severity, int] = {v: k for k, v in _LEVELS.items()}


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A message attached to a 0-indexed (line, column) of a buffer."""

    line: int
    column: int
    severity: Severity
    message: str
    code: str | None = None

    @property
    def is_blank(self) -> bool:
        # empty or whitespace-only messages only contribute a connector glyph
        return not self.message.strip()

    def display_text(self) -> str:
        if self.code is not None:
            return f"{self.code}: {self.message}"
        return self.message
