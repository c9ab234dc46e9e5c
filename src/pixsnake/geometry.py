from __future__ import annotations

Cell = tuple[int, int]
Rect = tuple[int, int, int, int]

UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)


def wrap(coordinate: int, delta: int, extent: int) -> int:
    """Step `coordinate` by `delta` on a ring of `extent` cells."""
    if extent <= 0:
        raise ValueError(f"extent must be positive, got {extent}")
    return (coordinate + delta + extent) % extent


def wrap_cell(cell: Cell, direction: Cell, extent: int) -> Cell:
    return (wrap(cell[0], direction[0], extent), wrap(cell[1], direction[1], extent))


def opposite(direction: Cell) -> Cell:
    return (-direction[0], -direction[1])


def inset_rect(cell: Cell, cell_size: int, border: int) -> Rect:
    x, y = cell
    return (x * cell_size + border, y * cell_size + border, cell_size - 2 * border, cell_size - 2 * border)


def edge_rect(cell: Cell, direction: Cell, cell_size: int, border: int, depth: int, span: int) -> Rect:
    """Strip of `depth` pixels starting at the inset edge facing `direction`.

    The strip is `span` pixels long and centred along that edge. It may run past
    the cell (and past the canvas at the wrap seam); the painter clips it.
    """
    x, y = cell
    dx, dy = direction
    inner = cell_size - 2 * border
    offset = (inner - span) // 2
    left = x * cell_size + border
    top = y * cell_size + border
    if dx > 0:
        return (left + inner, top + offset, depth, span)
    if dx < 0:
        return (left - depth, top + offset, depth, span)
    if dy > 0:
        return (left + offset, top + inner, span, depth)
    return (left + offset, top - depth, span, depth)


def step_between(a: Cell, b: Cell, extent: int) -> Cell | None:
    """Direction that moves `a` onto its grid neighbour `b`, across the seam if needed."""
    for direction in DIRECTIONS:
        if wrap_cell(a, direction, extent) == b:
            return direction
    return None
