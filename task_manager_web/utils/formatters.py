"""
Display formatting utilities
"""

from typing import Optional


def format_status(status: Optional[str]) -> str:
    """
    Format task status for display

    Args:
        status: Status value, e.g. "IN_PROGRESS"

    Returns:
        Status with underscores replaced by spaces, e.g. "IN PROGRESS"
    """
    return (status or "").replace("_", " ")


def format_task_count(count: int) -> str:
    """Task count shown next to the list heading, e.g. "(3)" """
    return f"({count})"
