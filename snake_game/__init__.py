"""Keyboard Snake on a resizable tile grid.

``SnakeGame`` is resolved lazily so that importing the logic modules
(grid, snake, state) does not open a window or touch the mixer::

    from snake_game import SnakeGame
"""

__version__ = "0.1"

__all__ = ["SnakeGame"]


def __getattr__(name: str):
    if name == "SnakeGame":
        from .utils import SnakeGame

        return SnakeGame
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__():
    return sorted(__all__)
