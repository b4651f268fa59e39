#!/usr/bin/env python3
"""
Utility functions for the Catbox uploader.
"""

import logging
import wcwidth
from typing import Union

logger = logging.getLogger(__name__)

BLUE = "\033[94m"
GREEN = "\033[92m"
END = "\033[0m"


def format_time(seconds: float) -> str:
    """
    Format seconds into a human-readable time string.

    Args:
        seconds: Number of seconds

    Returns:
        Human-readable time string
    """
    hours, remainder = divmod(int(seconds), 3600)
    minutes, seconds = divmod(remainder, 60)

    if hours > 0:
        return f"{hours}h {minutes}m {seconds}s"
    elif minutes > 0:
        return f"{minutes}m {seconds}s"
    else:
        return f"{seconds}s"


def format_size(size_bytes: Union[int, float]) -> str:
    """
    Format a size in bytes to a human-readable string.

    Args:
        size_bytes: Size in bytes

    Returns:
        Human-readable string with appropriate unit (B, KB, MB, GB)
    """
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.2f} KB"
    elif size_bytes < 1024 * 1024 * 1024:
        return f"{size_bytes / (1024 * 1024):.2f} MB"
    else:
        return f"{size_bytes / (1024 * 1024 * 1024):.2f} GB"


def format_speed(bytes_per_second: float) -> str:
    """
    Format a speed in bytes/second to a human-readable string.

    Args:
        bytes_per_second: Speed in bytes per second

    Returns:
        Human-readable string with appropriate unit (B/s, KB/s, MB/s, GB/s)
    """
    if bytes_per_second < 1024:
        return f"{bytes_per_second:.2f} B/s"
    elif bytes_per_second < 1024 * 1024:
        return f"{bytes_per_second / 1024:.2f} KB/s"
    elif bytes_per_second < 1024 * 1024 * 1024:
        return f"{bytes_per_second / (1024 * 1024):.2f} MB/s"
    else:
        return f"{bytes_per_second / (1024 * 1024 * 1024):.2f} GB/s"


def get_visual_width(text) -> int:
    """
    Calculate the visual width of text, considering emojis and other wide characters.

    Args:
        text: The string to calculate visual width for

    Returns:
        int: The visual width of the text
    """
    text = str(text)
    width = wcwidth.wcswidth(text)
    # wcswidth returns -1 when the text contains control characters
    return width if width >= 0 else len(text)


def print_info(message: str) -> None:
    print(message)


def print_success(message: str) -> None:
    print(f"{GREEN}{message}{END}")


def confirm_action(message: str) -> bool:
    """
    Ask a yes/no question. Only 'y' or 'yes' confirms.

    End of input counts as no. KeyboardInterrupt propagates to the caller.

    Args:
        message: The question to display

    Returns:
        bool: True if user confirmed, False otherwise
    """
    try:
        response = input(f"{message} ").strip().lower()
    except EOFError:
        print("\nOperation cancelled.")
        return False
    return response in ["y", "yes"]
