"""
Core package for multi-buffer hexdump and diff functionality.

This package implements the comparison engine. It includes the positional
classifier, the line renderer and the driver that walks the buffers, along
with the InputBuffer and HexdiffOptions types they operate on.
"""

from .buffer import InputBuffer
from .classifier import (
    ByteClass,
    classify_position,
    classify_block,
    flags_for_classes,
    should_display_flags
)
from .options import HexdiffOptions, InvalidBlockSizeError
from .renderer import RenderedLine, render_header, render_line
from .driver import HexDiffer, NoInputsError, run

__all__ = [
    'InputBuffer',
    'ByteClass',
    'classify_position',
    'classify_block',
    'flags_for_classes',
    'should_display_flags',
    'HexdiffOptions',
    'InvalidBlockSizeError',
    'RenderedLine',
    'render_header',
    'render_line',
    'HexDiffer',
    'NoInputsError',
    'run'
]
