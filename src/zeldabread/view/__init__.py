"""Read-only queries for map renderers. Nothing here draws anything."""

from .map_view import LegendRow, cell_color, legend, render_ascii

__all__ = ["LegendRow", "cell_color", "legend", "render_ascii"]
