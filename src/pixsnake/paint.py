from __future__ import annotations

import numpy as np
import pygame

Color = tuple[int, int, int]


def paint_rect(pixels: np.ndarray, x: int, y: int, w: int, h: int, color: Color) -> None:
    """Fill cols [x, x+w) and rows [y, y+h) of an (h, w, 3) buffer.

    Anything outside the buffer is dropped silently, so rects straddling the
    edge of the grid only paint their visible part.
    """
    height, width = pixels.shape[:2]
    x0 = max(0, x)
    y0 = max(0, y)
    x1 = min(width, x + w)
    y1 = min(height, y + h)
    if x0 >= x1 or y0 >= y1:
        return
    pixels[y0:y1, x0:x1] = color


class Canvas:
    """Raw RGB pixel buffer; linear index of (row, col) is row * width + col."""

    def __init__(self, width: int, height: int):
        self.width = int(width)
        self.height = int(height)
        self.color = np.zeros((self.height, self.width, 3), dtype=np.uint8)

    def clear(self, color: Color) -> None:
        self.color[:, :] = color

    def rect(self, x: int, y: int, w: int, h: int, color: Color) -> None:
        paint_rect(self.color, x, y, w, h, color)

    def pixel(self, index: int) -> Color:
        r, g, b = self.color.reshape(-1, 3)[index]
        return (int(r), int(g), int(b))

    def present(self, surface: pygame.Surface) -> None:
        # surfarray wants columns first; the canvas stores rows first.
        pygame.surfarray.blit_array(surface, np.transpose(self.color, (1, 0, 2)))
