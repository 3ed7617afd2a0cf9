from pygments.console import colorize

from hexdiff.core import InputBuffer, render_header, render_line


class TestRenderHeader:
    def test_two_names(self):
        header = render_header(["a.bin", "b.bin"], 4)

        assert header == "OFFSET      " + "a.bin".ljust(18) + "   " + "b.bin".ljust(18) + "   "

    def test_default_block_width(self):
        header = render_header(["firmware.bin"], 16)

        assert header == "OFFSET      " + "firmware.bin".ljust(66) + "   "

    def test_terse_shows_first_name_only(self):
        header = render_header(["a.bin", "b.bin"], 4, terse=True)

        assert "b.bin" not in header
        assert header.startswith("OFFSET      a.bin")

    def test_long_name_not_truncated(self):
        name = "x" * 40
        assert name in render_header([name], 2)


class TestRenderLine:
    def test_short_pair(self, short_pair, plain):
        line = render_line(0, short_pair, 2, colorizer=plain)

        assert line.raw == "41 42 |AB|  41 XX |A.|"
        assert line.display == "0x00000000    41 42 |AB|  41 XX |A.|"
        assert line.flags == (True, True, False)

    def test_three_way_flags(self, three_way, plain):
        line = render_line(0, three_way, 4, colorizer=plain)

        assert line.has_full_match
        assert line.has_partial_match
        assert not line.has_full_mismatch

    def test_offset_prefix(self, plain):
        buffers = [InputBuffer("a", bytes(range(32)))]
        line = render_line(0x10, buffers, 16, colorizer=plain)

        assert line.offset == 0x10
        assert line.display.startswith("0x00000010    10 11 12")

    def test_glyphs(self, plain):
        buffers = [InputBuffer("a", b"\x00 \x7f~!a")]
        line = render_line(0, buffers, 6, colorizer=plain)

        assert line.raw == "00 20 7F 7E 21 61 |...~!a|"

    def test_past_end_of_every_buffer(self, plain):
        buffers = [InputBuffer("a", b"A")]
        line = render_line(0, buffers, 3, colorizer=plain)

        assert line.raw == "41 XX XX |A..|"

    def test_terse_still_classifies_all(self, short_pair, plain):
        line = render_line(0, short_pair, 2, terse=True, colorizer=plain)

        assert line.raw == "41 42 |AB|"
        assert line.has_full_mismatch

    def test_colors_follow_position(self, short_pair, colored):
        line = render_line(0, short_pair, 2, colorizer=colored)

        green_a = colorize("green", "41")
        assert line.display.count(green_a) == 2
        assert colorize("red", "42") in line.display
        assert colorize("red", "XX") in line.display
        assert colorize("red", "B") in line.display
        assert colorize("red", ".") in line.display

    def test_partial_is_blue(self, three_way, colored):
        line = render_line(0, three_way, 4, colorizer=colored)

        assert colorize("blue", "63") in line.display
        assert colorize("blue", "c") in line.display

    def test_raw_independent_of_color(self, three_way, plain, colored):
        uncolored = render_line(0, three_way, 4, colorizer=plain)
        painted = render_line(0, three_way, 4, colorizer=colored)

        assert uncolored.raw == painted.raw
        assert "\x1b[" not in painted.raw
        assert "\x1b[" in painted.display

    def test_raw_ignores_offset(self, plain):
        buffers = [InputBuffer("a", b"ABAB")]

        first = render_line(0, buffers, 2, colorizer=plain)
        second = render_line(2, buffers, 2, colorizer=plain)

        assert first.raw == second.raw
        assert first.display != second.display

    def test_default_colorizer_is_plain(self, short_pair):
        line = render_line(0, short_pair, 2)

        assert line.display == "0x00000000    " + line.raw
