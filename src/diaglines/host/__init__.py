"""
diaglines.host
==============

Unified import surface for the consumed host protocol and the in-memory host.
"""

from __future__ import annotations

from diaglines.host.base import Host
from diaglines.host.memory import InlineMap, MemoryHost, TextBuffer

__all__ = [
    "Host",
    "InlineMap",
    "MemoryHost",
    "TextBuffer",
]
