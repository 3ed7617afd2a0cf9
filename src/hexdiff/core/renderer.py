"""
Rendering of the header and classified, color-coded hex lines.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence

from .buffer import InputBuffer
from .classifier import CLASS_COLORS, Flags, classify_position, flags_for_classes
from ..utils.colors import Colorizer
from ..utils.hex_utils import format_byte, format_offset

OFFSET_LABEL = "OFFSET"
OFFSET_WIDTH = 12
OFFSET_GAP = "    "
COLUMN_GAP = "  "
HEADER_GAP = "   "


@dataclass
class RenderedLine:
    """
    One output line in both its raw and colored forms.

    raw holds only the uncolored byte columns, without the offset prefix, so
    lines with identical content compare equal wherever they occur.
    """
    offset: int
    raw: str
    display: str
    has_full_mismatch: bool = False
    has_full_match: bool = False
    has_partial_match: bool = False

    @property
    def flags(self) -> Flags:
        return self.has_full_mismatch, self.has_full_match, self.has_partial_match


def header_width(block: int) -> int:
    """Width of one buffer's name column, wide enough for its hex and ASCII columns."""

    return (block * 4) + 2


def render_header(names: Sequence[str], block: int, terse: bool = False) -> str:
    """
    Render the column header line.

    Args:
        names: Display names of the buffers, in order
        block: Bytes per line
        terse: Only include the first buffer's name

    Returns:
        str: Header line without a trailing newline
    """

    width = header_width(block)
    shown = names[:1] if terse else names

    columns = ''.join(f"{name:<{width}}{HEADER_GAP}" for name in shown)
    return f"{OFFSET_LABEL:<{OFFSET_WIDTH}}{columns}"


def render_line(offset: int, buffers: Sequence[InputBuffer], block: int,
                terse: bool = False, colorizer: Optional[Colorizer] = None) -> RenderedLine:
    """
    Classify and render the block of positions starting at offset.

    Every buffer takes part in classification even when terse limits the
    display to the first one. Glyphs are colored by the class of their
    position, so one offset has the same color in every column.
    """

    if colorizer is None:
        colorizer = Colorizer(enabled=False)

    values: List[List[Optional[int]]] = [[] for _ in buffers]
    colors: List[str] = []
    classes = []

    for i in range(block):
        at_pos = [buf.byte_at(offset + i) for buf in buffers]
        byte_class = classify_position(at_pos)

        classes.append(byte_class)
        colors.append(CLASS_COLORS[byte_class])

        for column, value in zip(values, at_pos):
            column.append(value)

    has_full_mismatch, has_full_match, has_partial_match = flags_for_classes(classes)

    prefix = format_offset(offset) + OFFSET_GAP
    raw_columns = []
    display_columns = []

    for column in (values[:1] if terse else values):
        hex_raw, ascii_raw = [], []
        hex_disp, ascii_disp = [], []

        for value, color in zip(column, colors):
            hex2, glyph = format_byte(value)

            hex_raw.append(hex2 + ' ')
            ascii_raw.append(glyph)

            hex_disp.append(colorizer.paint(color, hex2) + ' ')
            ascii_disp.append(colorizer.paint(color, glyph))

        raw_columns.append(f"{''.join(hex_raw)}|{''.join(ascii_raw)}|")
        display_columns.append(f"{''.join(hex_disp)}|{''.join(ascii_disp)}|")

    return RenderedLine(
        offset=offset,
        raw=COLUMN_GAP.join(raw_columns),
        display=prefix + COLUMN_GAP.join(display_columns),
        has_full_mismatch=has_full_mismatch,
        has_full_match=has_full_match,
        has_partial_match=has_partial_match,
    )
