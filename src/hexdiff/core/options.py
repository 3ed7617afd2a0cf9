"""
Options controlling hexdump/diff output.
"""

import dataclasses
from dataclasses import dataclass

DEFAULT_BLOCK = 16


class InvalidBlockSizeError(ValueError):
    """Raised for a negative block size."""


@dataclass
class HexdiffOptions:
    """
    Resolved display options for a comparison.

    A block of 0 means DEFAULT_BLOCK. When none of the three show_* filters
    is enabled every line is shown.
    """
    block: int = DEFAULT_BLOCK
    show_full_mismatch: bool = False
    show_full_match: bool = False
    show_partial_match: bool = False
    terse: bool = False
    collapse_repeats: bool = False

    def normalized(self) -> 'HexdiffOptions':
        """
        Return a copy with defaults applied.

        Raises:
            InvalidBlockSizeError: If block is negative
        """

        if self.block < 0:
            raise InvalidBlockSizeError(f"Block size must not be negative, got {self.block}")

        opts = dataclasses.replace(self)

        if opts.block == 0:
            opts.block = DEFAULT_BLOCK

        if not (opts.show_full_mismatch or opts.show_full_match or opts.show_partial_match):
            opts.show_full_mismatch = True
            opts.show_full_match = True
            opts.show_partial_match = True

        return opts
