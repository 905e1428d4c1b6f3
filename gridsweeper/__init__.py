"""Minesweeper building blocks: board generation, flood-fill reveal, layout and menu helpers."""

__version__ = "0.1.0"
__all__ = ["board", "floodfill", "layout", "menu"]