"""Output formatting utilities for TaxMap Spain.

Provides reusable functions for:
- Formatting distribution shares the way the chart tooltip shows them
- Expanding the chart palette to one color per slice
"""

from itertools import cycle, islice
from typing import Any, List, Sequence


def format_share(value: Any) -> str:
    """Format a share value for display without a spurious decimal part.

    Examples:
        format_share(35) -> "35"
        format_share(35.0) -> "35"
        format_share(12.5) -> "12.5"
        format_share("n/a") -> "n/a"
    """
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_tooltip(category: str, value: Any) -> str:
    """Tooltip text for a single slice: ``"<category>: <value>%"``."""
    return f"{category}: {format_share(value)}%"


def cycle_colors(palette: Sequence[str], count: int) -> List[str]:
    """Return *count* colors taken from *palette*, repeating as needed.

    Examples:
        cycle_colors(["a", "b"], 3) -> ["a", "b", "a"]
        cycle_colors(["a", "b"], 0) -> []
    """
    if count <= 0 or not palette:
        return []
    return list(islice(cycle(palette), count))
