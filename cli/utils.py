"""Utility functions for CLI output."""

from datetime import datetime
from typing import Optional


def format_file_size(size_bytes: Optional[int]) -> str:
    """
    Format file size in bytes to human-readable format with appropriate unit.

    Uses binary units (1024-based) and automatically selects the most
    appropriate unit (B, KiB, MiB, GiB, TiB).

    Args:
        size_bytes: File size in bytes, or None when unknown

    Returns:
        Formatted string with size and unit (e.g., "1.50 MiB", "512 B")
    """
    if size_bytes is None:
        return "unknown"

    if size_bytes < 1024:
        return f"{size_bytes} B"

    units = ['KiB', 'MiB', 'GiB', 'TiB']
    size = size_bytes / 1024.0

    for unit in units:
        if size < 1024.0:
            return f"{size:.2f} {unit}"
        size /= 1024.0

    return f"{size:.2f} PiB"


def format_timestamp(moment: Optional[datetime]) -> str:
    """Format a creation time for display."""
    if moment is None:
        return "unknown"
    return moment.strftime('%Y-%m-%d %H:%M:%S UTC')
