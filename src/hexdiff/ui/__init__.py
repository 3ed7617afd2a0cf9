"""
UI package for terminal output support.

This package decides how output reaches the user's terminal, currently
whether the output stream can display color.
"""

from .terminal import supports_color

__all__ = ['supports_color']
