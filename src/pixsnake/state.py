from __future__ import annotations

import logging
import random
from collections import deque
from dataclasses import dataclass, field

from . import config
from .geometry import DIRECTIONS, Cell, wrap_cell

logger = logging.getLogger(__name__)

NO_FRUIT = (-1, -1)


@dataclass
class GameState:
    body: deque[Cell]              # oldest first, head at body[-1]
    head_dx: int
    head_dy: int
    to_grow: int
    cell_count: int = config.CELL_COUNT
    fruit_x: int = -1
    fruit_y: int = -1
    erase_last: bool = False
    game_over: bool = False
    moves: deque[Cell] = field(default_factory=deque)
    last_tick: int = 0             # ms timestamp of last drawn tick
    cleared: bool = False          # one-time background fill done
    rng: random.Random = field(default_factory=random.Random, repr=False)

    @classmethod
    def new(cls, cell_count: int = config.CELL_COUNT, rng: random.Random | None = None) -> GameState:
        dx, dy = config.START_DIRECTION
        return cls(
            body=deque(config.START_BODY),
            head_dx=dx,
            head_dy=dy,
            to_grow=config.START_GROWTH,
            cell_count=cell_count,
            rng=rng if rng is not None else random.Random(),
        )

    @property
    def head(self) -> Cell:
        return self.body[-1]

    @property
    def head_x(self) -> int:
        return self.body[-1][0]

    @property
    def head_y(self) -> int:
        return self.body[-1][1]

    @property
    def heading(self) -> Cell:
        return (self.head_dx, self.head_dy)

    @property
    def fruit(self) -> Cell | None:
        if (self.fruit_x, self.fruit_y) == NO_FRUIT:
            return None
        return (self.fruit_x, self.fruit_y)

    def occupies(self, cell: Cell) -> bool:
        return cell in self.body

    def enqueue(self, direction: Cell) -> None:
        if direction not in DIRECTIONS:
            raise ValueError(f"not a unit direction: {direction}")
        self.moves.append(direction)

    def advance(self) -> None:
        """Run one simulation tick. No-op once the game is over."""
        if self.game_over:
            return

        # Turns only: a queued move on the current axis (reverse or repeat) is dropped.
        if self.moves:
            dx, dy = self.moves.popleft()
            if abs(dx) != abs(self.head_dx) and abs(dy) != abs(self.head_dy):
                self.head_dx, self.head_dy = dx, dy

        head = wrap_cell(self.head, self.heading, self.cell_count)

        # Fruit may land on the body; there is no retry.
        if self.fruit is None:
            self.fruit_x = self.rng.randrange(self.cell_count)
            self.fruit_y = self.rng.randrange(self.cell_count)
            logger.debug("fruit spawned at %s", self.fruit)
        elif self.fruit == head:
            self.fruit_x, self.fruit_y = NO_FRUIT
            self.to_grow += 1
            logger.debug("fruit eaten at %s, to_grow=%d", head, self.to_grow)

        # Checked against the body before this tick's trim, so the tail cell still counts.
        if head in self.body:
            self.game_over = True
            logger.info("game over at %s, length %d", head, len(self.body))
            return

        self.body.append(head)
        self.to_grow -= 1

        if self.erase_last:
            self.body.popleft()
            self.erase_last = False

        if self.to_grow < 0:
            self.to_grow += 1
            self.erase_last = True
