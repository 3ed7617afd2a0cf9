import io

import pytest

from hexdiff.core import InputBuffer
from hexdiff.utils import Colorizer


class FakeTerminal(io.StringIO):
    """In-memory stream that reports itself as a TTY."""

    def isatty(self):
        return True

    def fileno(self):
        return 1


@pytest.fixture
def fake_terminal() -> FakeTerminal:
    return FakeTerminal()


@pytest.fixture
def three_way() -> list:
    """Three buffers where only the third byte of the second one differs."""
    return [
        InputBuffer("a.bin", b"ABCD"),
        InputBuffer("b.bin", b"ABcD"),
        InputBuffer("c.bin", b"ABCD"),
    ]


@pytest.fixture
def short_pair() -> list:
    """Two buffers where the second ends one byte early."""
    return [InputBuffer("long.bin", b"AB"), InputBuffer("short.bin", b"A")]


@pytest.fixture
def plain() -> Colorizer:
    return Colorizer(enabled=False)


@pytest.fixture
def colored() -> Colorizer:
    return Colorizer(enabled=True)
