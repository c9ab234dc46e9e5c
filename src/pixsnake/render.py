from __future__ import annotations

from . import config
from .geometry import Cell, edge_rect, inset_rect, step_between
from .paint import Canvas, Color
from .state import GameState


def _fill_cell(canvas: Canvas, cell: Cell, cell_size: int, border: int, color: Color) -> None:
    canvas.rect(*inset_rect(cell, cell_size, border), color)


def _draw_segment(
    canvas: Canvas,
    cell: Cell,
    prev: Cell | None,
    nxt: Cell | None,
    heading: Cell,
    cell_size: int,
    extent: int,
) -> None:
    """Draw one body cell from scratch, touching nothing outside it.

    The inset square gets a border-wide strip toward each neighbour, so two
    adjacent segments meet across the shared edge. The head (no `nxt`) gets a
    shorter nub on the side it is heading instead.
    """
    inner = cell_size - 2 * config.BORDER
    _fill_cell(canvas, cell, cell_size, 0, config.BACKGROUND)
    _fill_cell(canvas, cell, cell_size, config.BORDER, config.SNAKE)
    for other in (prev, nxt):
        if other is None:
            continue
        toward = step_between(cell, other, extent)
        if toward is not None:
            canvas.rect(*edge_rect(cell, toward, cell_size, config.BORDER, config.BORDER, inner), config.SNAKE)
    if nxt is None:
        canvas.rect(*edge_rect(cell, heading, cell_size, config.BORDER, config.BORDER, inner // 2), config.SNAKE)


def _redraw(canvas: Canvas, state: GameState, index: int, cell_size: int) -> None:
    body = state.body
    prev = body[index - 1] if index > 0 else None
    nxt = body[index + 1] if index + 1 < len(body) else None
    _draw_segment(canvas, body[index], prev, nxt, state.heading, cell_size, state.cell_count)


def _draw_fruit(canvas: Canvas, state: GameState, cell_size: int) -> None:
    # Fruit under the body stays hidden until the tail uncovers it.
    fruit = state.fruit
    if fruit is not None and not state.occupies(fruit):
        _fill_cell(canvas, fruit, cell_size, config.FRUIT_BORDER, config.FRUIT)


def render(
    state: GameState,
    canvas: Canvas,
    now_ms: int,
    cell_size: int = config.CELL_SIZE,
    tick_ms: int = config.TICK_MS,
    full: bool = False,
) -> bool:
    """Advance and draw one tick if the interval has elapsed.

    After the first tick only the cells that changed are painted: the vacated
    tail and the new tail, the fruit, the neck and the head. The result is the
    same picture `repaint` would give. With `full` the whole grid is repainted
    every tick instead. Returns True when a tick ran.
    """
    if state.game_over:
        return False
    if now_ms - state.last_tick <= tick_ms:
        return False

    if not state.cleared:
        repaint(state, canvas, cell_size)

    vacated = state.body[0] if state.erase_last else None

    state.advance()
    state.last_tick = now_ms
    if state.game_over:
        return True

    if full:
        repaint(state, canvas, cell_size)
        return True

    if vacated is not None:
        _fill_cell(canvas, vacated, cell_size, 0, config.BACKGROUND)
        _redraw(canvas, state, 0, cell_size)
    _draw_fruit(canvas, state, cell_size)
    last = len(state.body) - 1
    _redraw(canvas, state, last - 1, cell_size)
    _redraw(canvas, state, last, cell_size)
    return True


def repaint(state: GameState, canvas: Canvas, cell_size: int = config.CELL_SIZE) -> None:
    """Clear the canvas and draw the fruit and every body segment."""
    canvas.clear(config.BACKGROUND)
    _draw_fruit(canvas, state, cell_size)
    body = list(state.body)
    for i, cell in enumerate(body):
        prev = body[i - 1] if i > 0 else None
        nxt = body[i + 1] if i + 1 < len(body) else None
        _draw_segment(canvas, cell, prev, nxt, state.heading, cell_size, state.cell_count)
    state.cleared = True
