# src/arcade_snake/__init__.py
"""Single-player snake on a fixed grid, played with pygame."""

__version__ = "0.1.0"
