from __future__ import annotations

import enum
import logging
import random
from dataclasses import dataclass

import pygame

from .geometry import DOWN, LEFT, RIGHT, UP, Cell
from .state import GameState

logger = logging.getLogger(__name__)


class Action(enum.Enum):
    MOVE = "move"
    RESET = "reset"
    QUIT = "quit"
    IGNORE = "ignore"


@dataclass(frozen=True)
class Intent:
    action: Action
    direction: Cell | None = None


IGNORE = Intent(Action.IGNORE)
RESET = Intent(Action.RESET)
QUIT = Intent(Action.QUIT)

KEY_DIRECTIONS = {
    pygame.K_UP: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_RIGHT: RIGHT,
    pygame.K_w: UP,
    pygame.K_s: DOWN,
    pygame.K_a: LEFT,
    pygame.K_d: RIGHT,
}
RESET_KEY = pygame.K_r
QUIT_KEY = pygame.K_ESCAPE


def intent_from_event(event: pygame.event.Event) -> Intent:
    if event.type == pygame.QUIT:
        return QUIT
    if event.type != pygame.KEYDOWN:
        return IGNORE
    direction = KEY_DIRECTIONS.get(event.key)
    if direction is not None:
        return Intent(Action.MOVE, direction)
    if event.key == RESET_KEY:
        return RESET
    if event.key == QUIT_KEY:
        return QUIT
    return IGNORE


def apply_intent(state: GameState, intent: Intent, rng: random.Random | None = None) -> GameState:
    """Return the state to keep using. Quitting is left to the caller."""
    if intent.action is Action.MOVE and intent.direction is not None:
        state.enqueue(intent.direction)
    elif intent.action is Action.RESET and state.game_over:
        logger.info("reset after game over, length was %d", len(state.body))
        return GameState.new(state.cell_count, rng if rng is not None else state.rng)
    return state
