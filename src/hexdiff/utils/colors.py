"""
Terminal color annotation using Pygments' console codes.
"""

from pygments.console import codes, colorize


class Colorizer:
    """Wraps text in ANSI color codes, or passes it through when disabled."""

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled

    def paint(self, color: str, text: str) -> str:
        """
        Color a piece of text.

        Args:
            color (str): Pygments console color name, e.g. 'green'
            text (str): Text to color

        Returns:
            str: The colored text, or text unchanged when disabled
        """

        if color not in codes:
            raise ValueError(f"Unknown console color: {color}")

        if not self.enabled or not text:
            return text

        return colorize(color, text)

    def __repr__(self) -> str:
        return f"Colorizer(enabled={self.enabled})"
