"""
Utility functions for hf-models.

Formatting helpers shared by the table renderer and the CLI.
"""

from datetime import datetime
from typing import Optional


def format_number(n: int) -> str:
    """
    Format an integer with thousands separators.

    Args:
        n: Number to format

    Returns:
        Formatted string (e.g., "1,234,567")
    """
    return f"{n:,}"


def format_date(value: Optional[datetime], default: str = "N/A") -> str:
    """Format a timestamp as YYYY-MM-DD, or ``default`` when missing."""
    if value is None:
        return default
    return value.strftime("%Y-%m-%d")


def or_na(value: Optional[str]) -> str:
    """Return the value, or "N/A" when empty."""
    return value if value else "N/A"


def format_params(n: int) -> str:
    """
    Format a parameter count to a short human-readable string.

    Args:
        n: Number of parameters

    Returns:
        Short string (e.g., "7.6B", "350.0M")
    """
    size = float(n)
    for unit in ["", "K", "M", "B"]:
        if abs(size) < 1000.0:
            return f"{size:.1f}{unit}" if unit else f"{int(size)}"
        size /= 1000.0
    return f"{size:.1f}T"
