"""
diaglines.constants
===================

Single place for glyphs and layout numbers. The grouper, connector renderer and
config all import from here so we never duplicate box-drawing characters.
"""

from __future__ import annotations

from typing import Final

# ---- connector glyphs ---------------------------------------------------------

VERTICAL: Final = "│"
HORIZONTAL: Final = "─"

# joint symbols, chosen by (overlap, blank markers on the left)
JOINT_PLAIN: Final = "└"
JOINT_MULTI: Final = "┴"
JOINT_OVERLAP: Final = "├"
JOINT_OVERLAP_MULTI: Final = "┼"

# corners drawn for blank markers in the left context
BLANK_FIRST: Final = "└"
BLANK_NEXT: Final = "┴"

JOINT_TAIL: Final = HORIZONTAL * 3
ICON_PAD: Final = "  "

# continuation blocks keep the message column without repeating the joint
CONTINUATION_WIDTH: Final = 6

# ---- widths -------------------------------------------------------------------

DEFAULT_WIDTH: Final = 80
MIN_MESSAGE_WIDTH: Final = 20  # floor for both auto width and available width
AUTO_WIDTH_MARGIN: Final = 10

DEFAULT_TAB_WIDTH: Final = 8

# ---- styles -------------------------------------------------------------------

EMPTY_STYLE: Final = ""
DEFAULT_SOURCE: Final = "native"
