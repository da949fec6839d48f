"""Style, unit, responsive breakpoint, pointer and menu primitives for user interfaces."""

__version__ = "0.1.0"

__all__ = ["menu", "pointer", "responsive", "style", "styletypes", "unit"]