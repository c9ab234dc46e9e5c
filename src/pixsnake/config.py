from __future__ import annotations

from dataclasses import dataclass

# ----- Window & grid -----
CELL_COUNT = 25
CELL_SIZE = 20
BORDER = 2
FRUIT_BORDER = 5

# ----- Colors -----
BACKGROUND = (0, 0, 0)
SNAKE = (255, 255, 255)
FRUIT = (220, 40, 40)

# ----- Timing -----
TICK_MS = 100
FPS = 60

# ----- Initial snake -----
START_BODY = ((4, 5), (5, 5))
START_DIRECTION = (1, 0)
START_GROWTH = 3


@dataclass(frozen=True)
class Settings:
    cell_count: int = CELL_COUNT
    cell_size: int = CELL_SIZE
    tick_ms: int = TICK_MS
    seed: int | None = None
    full_repaint: bool = False

    def __post_init__(self) -> None:
        min_cells = max(max(cell) for cell in START_BODY) + 1
        if self.cell_count < min_cells:
            raise ValueError(f"cell_count must be at least {min_cells}, got {self.cell_count}")
        if self.cell_size <= 2 * FRUIT_BORDER:
            raise ValueError(f"cell_size must exceed {2 * FRUIT_BORDER}, got {self.cell_size}")
        if self.tick_ms < 0:
            raise ValueError(f"tick_ms must not be negative, got {self.tick_ms}")

    @property
    def canvas_size(self) -> int:
        return self.cell_count * self.cell_size
