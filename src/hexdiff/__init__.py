"""
HexDiff - multi-file hexdump and binary diff.
"""

from .core import HexDiffer, HexdiffOptions, InputBuffer, NoInputsError, run

__version__ = "0.1.0"

__all__ = ['HexDiffer', 'HexdiffOptions', 'InputBuffer', 'NoInputsError', 'run']
