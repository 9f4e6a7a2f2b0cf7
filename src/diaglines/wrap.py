from __future__ import annotations


def wrap(text: str, width: int) -> list[str]:
    """Greedy word wrap of ``text`` into lines of at most ``width`` characters.

    Each step looks at the next ``width + 1`` characters and breaks before the
    last whitespace run inside that window, so a space sitting right after a
    full-width word still counts as a break point. The whitespace run is
    consumed by the break. Without whitespace the line is hard-broken at
    exactly ``width``. A non-empty remainder is appended last; the result
    always has at least one entry.
    """
    if width < 1:
        raise ValueError(f"wrap width must be >= 1 (got {width})")

    lines: list[str] = []
    rest = text
    while len(rest) > width:
        window = rest[: width + 1]
        cut = _last_space_run(window)
        if cut is None:
            lines.append(rest[:width])
            rest = rest[width:]
            continue
        start, end = cut
        if start:
            lines.append(window[:start])
        rest = rest[end:].lstrip()
    if rest or not lines:
        lines.append(rest)
    return lines


def _last_space_run(window: str) -> tuple[int, int] | None:
    """Return [start, end) of the last whitespace run in ``window``."""
    end = len(window)
    while end > 0 and not window[end - 1].isspace():
        end -= 1
    if end == 0:
        return None
    start = end - 1
    while start > 0 and window[start - 1].isspace():
        start -= 1
    return start, end
