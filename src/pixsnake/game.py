from __future__ import annotations

import logging
import random
import sys

import pygame

from . import config
from .input import Action, apply_intent, intent_from_event
from .paint import Canvas
from .render import render
from .state import GameState

logger = logging.getLogger(__name__)


def main(settings: config.Settings | None = None) -> None:
    settings = settings or config.Settings()
    rng = random.Random(settings.seed)

    pygame.init()
    size = settings.canvas_size
    screen = pygame.display.set_mode((size, size))
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()
    canvas = Canvas(size, size)

    state = GameState.new(settings.cell_count, rng)
    logger.info("started: %dx%d cells, %d px each", settings.cell_count, settings.cell_count, settings.cell_size)

    while True:
        for event in pygame.event.get():
            intent = intent_from_event(event)
            if intent.action is Action.QUIT:
                logger.info("quit")
                pygame.quit()
                sys.exit()
            state = apply_intent(state, intent, rng)

        ticked = render(
            state,
            canvas,
            pygame.time.get_ticks(),
            cell_size=settings.cell_size,
            tick_ms=settings.tick_ms,
            full=settings.full_repaint,
        )
        if ticked:
            canvas.present(screen)
            pygame.display.flip()

        clock.tick(config.FPS)
