"""
Utility package for hex formatting and color support functions.
"""

from .hex_utils import (
    is_printable,
    format_offset,
    format_byte,
    byte_at
)
from .colors import Colorizer

__all__ = [
    'is_printable',
    'format_offset',
    'format_byte',
    'byte_at',
    'Colorizer'
]
