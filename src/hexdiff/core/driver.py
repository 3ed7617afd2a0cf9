"""
Driver that walks the offset space and emits the filtered, collapsed hexdump/diff.
"""

import sys
from typing import Iterable, Iterator, List, Optional, Sequence, TextIO, Tuple, Union

from .buffer import ByteSource, InputBuffer
from .classifier import should_display_flags
from .options import HexdiffOptions
from .renderer import render_header, render_line
from ..ui.terminal import supports_color
from ..utils.colors import Colorizer

REPEAT_MARKER = "*"

Input = Union[InputBuffer, Tuple[str, ByteSource]]


class NoInputsError(ValueError):
    """Raised when a comparison is started without any buffers."""

    def __init__(self) -> None:
        super().__init__("No inputs provided")


def as_buffers(inputs: Iterable[Input]) -> List[InputBuffer]:
    """Wrap (name, data) pairs as InputBuffers, passing InputBuffers through."""

    buffers = []
    for item in inputs:
        if isinstance(item, InputBuffer):
            buffers.append(item)
            continue

        name, data = item
        buffers.append(InputBuffer(name, data))

    return buffers


class HexDiffer:
    """Produces the output lines of a hexdump/diff over one or more buffers."""

    def __init__(self, inputs: Iterable[Input], options: Optional[HexdiffOptions] = None,
                 colorizer: Optional[Colorizer] = None) -> None:
        self.buffers = as_buffers(inputs)
        if not self.buffers:
            raise NoInputsError()

        self.options = (options or HexdiffOptions()).normalized()
        self.colorizer = colorizer or Colorizer(enabled=False)

    @property
    def names(self) -> Sequence[str]:
        return [buf.name for buf in self.buffers]

    def max_length(self) -> int:
        """Length of the longest buffer, where the walk stops."""

        return max(len(buf) for buf in self.buffers)

    def header(self) -> str:
        return render_header(self.names, self.options.block, self.options.terse)

    def lines(self) -> Iterator[str]:
        """
        Yield the header followed by every shown line, without newlines.

        Lines rejected by the filters are skipped without affecting repeat
        collapsing. With collapse_repeats a run of lines whose raw form equals
        the previously emitted line is replaced by a single '*'.
        """

        opts = self.options
        yield self.header()

        previous_raw: Optional[str] = None
        in_repeat = False

        for offset in range(0, self.max_length(), opts.block):
            line = render_line(offset, self.buffers, opts.block, opts.terse, self.colorizer)

            if not should_display_flags(line.flags, opts):
                continue

            if opts.collapse_repeats and line.raw == previous_raw:
                if not in_repeat:
                    in_repeat = True
                    yield REPEAT_MARKER
                continue

            in_repeat = False
            previous_raw = line.raw
            yield line.display


def run(inputs: Iterable[Input], options: Optional[HexdiffOptions] = None, quiet: bool = False,
        stream: Optional[TextIO] = None, color: Optional[bool] = None) -> None:
    """
    Render a hexdump/diff of one or more buffers to a stream.

    A single buffer produces a plain hexdump. Several buffers produce a
    side-by-side diff with bytes colored green where all buffers match,
    blue where some differ and red where all differ.

    Args:
        inputs: InputBuffers or (name, data) pairs, in display order
        options: Display options, normalized before the scan
        quiet: Produce no output at all
        stream: Output stream, sys.stdout by default
        color: Force color on or off; None enables it only when the stream
            is a color-capable terminal

    Raises:
        NoInputsError: If inputs is empty, before anything is written
    """

    if quiet:
        return

    if stream is None:
        stream = sys.stdout

    if color is None:
        color = supports_color(stream)

    differ = HexDiffer(inputs, options, Colorizer(enabled=color))

    for line in differ.lines():
        stream.write(line + "\n")
