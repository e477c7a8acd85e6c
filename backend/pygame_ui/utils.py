from typing import Tuple

from .theme import PAGE_COLORS


def page_color(page: str) -> Tuple[int, int, int]:
    """Deterministic color per page label, so a page keeps its color across frames."""
    h = 2166136261  # FNV-1a seed
    for ch in str(page):
        h ^= ord(ch)
        h = (h * 16777619) & 0xFFFFFFFF

    base = PAGE_COLORS[h % len(PAGE_COLORS)]

    # Small brightness variation so pages sharing a palette slot still differ.
    bump = ((h >> 8) % 26) - 13  # -13..+12
    r = max(0, min(255, base[0] + bump))
    g = max(0, min(255, base[1] + bump))
    b = max(0, min(255, base[2] + bump))
    return (r, g, b)


def visible_window(index: int, total: int, width: int) -> Tuple[int, int]:
    """Range [start, end) of step columns to draw so that `index` stays on screen."""
    if total <= width:
        return 0, total
    start = max(0, min(index - width // 2, total - width))
    return start, start + width


def cycle(options, current, delta: int = 1):
    idx = options.index(current) if current in options else 0
    return options[(idx + delta) % len(options)]
