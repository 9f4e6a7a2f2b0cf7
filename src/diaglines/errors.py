"""
diaglines exceptions. Layout never raises; these cover caller-contract
violations and malformed diagnostic input.
"""

from __future__ import annotations

__all__ = ["DiaglinesError", "CallContractError", "DiagnosticDecodeError"]


class DiaglinesError(Exception):
    """Base diaglines exception."""


class CallContractError(DiaglinesError, TypeError):
    """
    A render call was made with the wrong shape (argument types, non-list
    diagnostics, undecodable config). Raised before any output is touched.
    """

    def __init__(self, argument: str, expected: str, got: object) -> None:
        self.argument = argument
        self.expected = expected
        self.got = got
        super().__init__(f"{argument}: expected {expected}, got {type(got).__name__} ({got!r})")


class DiagnosticDecodeError(DiaglinesError, ValueError):
    """Editor-shaped diagnostic records could not be decoded."""
