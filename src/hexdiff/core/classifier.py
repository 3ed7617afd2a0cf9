"""
Classification of byte positions compared across multiple buffers.
"""

from enum import Enum
from typing import Dict, Final, List, Optional, Sequence, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .buffer import InputBuffer
    from .options import HexdiffOptions

Flags = Tuple[bool, bool, bool]


class ByteClass(Enum):
    """Agreement of one byte position across all compared buffers."""
    FULL_MATCH = 'full_match'
    PARTIAL_MATCH = 'partial_match'
    FULL_MISMATCH = 'full_mismatch'


CLASS_COLORS: Final[Dict[ByteClass, str]] = {
    ByteClass.FULL_MATCH: 'green',
    ByteClass.PARTIAL_MATCH: 'blue',
    ByteClass.FULL_MISMATCH: 'red',
}


def classify_position(values: Sequence[Optional[int]]) -> ByteClass:
    """
    Classify one byte position across all buffers.

    None marks a buffer that ended before this position. It counts as a
    value of its own: two None entries are equal, and None differs from
    every byte, 0x00 included.

    Args:
        values: One optional byte per buffer, in buffer order

    Returns:
        FULL_MATCH if every value is the same, FULL_MISMATCH if every value
        is distinct, PARTIAL_MATCH for any other mixture
    """

    unique: List[Optional[int]] = []
    for value in values:
        if value not in unique:
            unique.append(value)

    if len(unique) <= 1:
        return ByteClass.FULL_MATCH

    if len(unique) == len(values):
        return ByteClass.FULL_MISMATCH

    return ByteClass.PARTIAL_MATCH


def classify_block(buffers: Sequence['InputBuffer'], offset: int, block: int) -> List[ByteClass]:
    """Classify block consecutive positions starting at offset."""

    return [
        classify_position([buf.byte_at(offset + i) for buf in buffers])
        for i in range(block)
    ]


def flags_for_classes(classes: Sequence[ByteClass]) -> Flags:
    """Return (has_full_mismatch, has_full_match, has_partial_match)."""

    return (
        ByteClass.FULL_MISMATCH in classes,
        ByteClass.FULL_MATCH in classes,
        ByteClass.PARTIAL_MATCH in classes,
    )


def should_display_flags(flags: Flags, options: 'HexdiffOptions') -> bool:
    """Decide if a line with the given flags passes the enabled filters."""

    has_full_mismatch, has_full_match, has_partial_match = flags

    return ((options.show_full_mismatch and has_full_mismatch)
            or (options.show_full_match and has_full_match)
            or (options.show_partial_match and has_partial_match))
