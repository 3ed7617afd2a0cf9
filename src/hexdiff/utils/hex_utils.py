"""
Utility functions for hex formatting.
"""

from typing import Optional, Sequence, Tuple

ABSENT_HEX = "XX"
NON_PRINTABLE = "."


def is_printable(value: int) -> bool:
    """
    Check whether a byte renders as itself in the ASCII column.

    Space and control characters are excluded, they break column alignment.

    Args:
        value (int): Byte value

    Returns:
        bool: True for '!' (0x21) through '~' (0x7E)
    """

    return 0x21 <= value <= 0x7E


def format_offset(offset: int, width: int = 8) -> str:
    """
    Format a byte offset as a hex string.

    Args:
        offset (int): Byte offset to format
        width (int): Number of hex digits to use

    Returns:
        str: Formatted hex string with a 0x prefix
    """

    return f"0x{offset:0{width}X}"


def format_byte(value: Optional[int]) -> Tuple[str, str]:
    """
    Format a single byte as its hex pair and ASCII glyph.

    Args:
        value (Optional[int]): Byte value, or None past the end of a buffer

    Returns:
        Tuple[str, str]: Two-character hex pair and one-character glyph
    """

    if value is None:
        return ABSENT_HEX, NON_PRINTABLE

    glyph = chr(value) if is_printable(value) else NON_PRINTABLE
    return f"{value:02X}", glyph


def byte_at(data: Sequence[int], offset: int) -> Optional[int]:
    """Get the byte at offset, or None if it lies past the end of data."""

    if 0 <= offset < len(data):
        return data[offset]

    return None
