from .paint import Canvas, paint_rect
from .state import GameState

__all__ = ["Canvas", "GameState", "paint_rect"]
