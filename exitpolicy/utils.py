"""Generic platform helpers."""

import sys


def is_windows() -> bool:
    """
    Determine whether the current operating system is Windows.

    Returns:
        bool: True if the current platform is Windows, False otherwise.
    """
    return sys.platform == "win32"
