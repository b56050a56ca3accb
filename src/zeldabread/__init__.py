"""
ZeldaBread dungeon core.

Generates corridor-style dungeon layouts, classifies their rooms into gameplay
categories, and tracks per-player fog of war. Rendering, input and audio stay
outside this package; they consume the read-only queries exposed here.
"""

__version__ = "0.3.0"

__all__ = [
    "__version__",
    "dungeon",
    "exploration",
    "movement",
    "engine",
    "config",
    "view",
]
