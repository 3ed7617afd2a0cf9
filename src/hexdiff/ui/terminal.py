"""
Terminal capability detection for the output stream.
"""

import curses
from typing import TextIO


def supports_color(stream: TextIO) -> bool:
    """
    Check whether a stream is an interactive terminal able to show color.

    A stream that is not a TTY never gets color. For a TTY the terminfo
    entry decides; if it cannot be loaded the TTY is assumed to be capable.

    Args:
        stream: The output stream lines will be written to

    Returns:
        bool: True if color codes should be written to the stream
    """

    isatty = getattr(stream, 'isatty', None)
    if isatty is None or not isatty():
        return False

    try:
        curses.setupterm(fd=stream.fileno())
    except (curses.error, AttributeError, OSError, ValueError):
        return True

    return curses.tigetnum('colors') > 0
