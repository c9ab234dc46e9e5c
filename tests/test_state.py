import random
from collections import deque

import pytest

from conftest import FAR, advance_clear
from pixsnake.geometry import DOWN, LEFT, RIGHT, UP, wrap_cell
from pixsnake.state import GameState


def make_state(body, heading, to_grow=0, erase_last=False):
    state = GameState(
        body=deque(body),
        head_dx=heading[0],
        head_dy=heading[1],
        to_grow=to_grow,
        cell_count=25,
        erase_last=erase_last,
        rng=random.Random(0),
    )
    state.fruit_x, state.fruit_y = FAR
    return state


def test_initial_state(state):
    assert list(state.body) == [(4, 5), (5, 5)]
    assert (state.head_x, state.head_y) == (5, 5)
    assert state.heading == RIGHT
    assert state.to_grow == 3
    assert (state.fruit_x, state.fruit_y) == (-1, -1)
    assert state.fruit is None
    assert not state.game_over
    assert not state.erase_last


def test_first_advance(state):
    state.advance()
    assert (state.head_x, state.head_y) == (6, 5)
    assert list(state.body) == [(4, 5), (5, 5), (6, 5)]
    assert state.to_grow == 2
    assert not state.erase_last


def test_fruit_spawns_in_grid_when_absent():
    state = GameState.new(25, random.Random(1234))
    for _ in range(20):
        state.fruit_x, state.fruit_y = -1, -1
        state.advance()
        assert 0 <= state.fruit_x < 25
        assert 0 <= state.fruit_y < 25


def test_fruit_sentinel_is_paired(state):
    for _ in range(30):
        state.advance()
        assert (state.fruit_x == -1) == (state.fruit_y == -1)


def test_eating_fruit_clears_it_and_owes_growth(state):
    state.fruit_x, state.fruit_y = 6, 5
    state.advance()
    assert state.fruit is None
    assert state.to_grow == 3


@pytest.mark.parametrize("direction", [LEFT, RIGHT])
def test_same_axis_moves_are_dropped(state, direction):
    state.enqueue(direction)
    advance_clear(state)
    assert state.heading == RIGHT
    assert not state.moves


def test_turn_is_applied(state):
    state.enqueue(UP)
    advance_clear(state)
    assert state.heading == UP
    assert state.head == (5, 4)


def test_one_queued_move_per_advance(state):
    state.enqueue(UP)
    state.enqueue(LEFT)
    advance_clear(state)
    assert state.heading == UP
    assert list(state.moves) == [LEFT]
    advance_clear(state)
    assert state.heading == LEFT
    assert state.head == (4, 4)


def test_reverse_through_a_turn_is_dropped(state):
    state.enqueue(DOWN)
    state.enqueue(UP)
    advance_clear(state, 2)
    assert state.heading == DOWN


def test_enqueue_rejects_non_unit_direction(state):
    with pytest.raises(ValueError):
        state.enqueue((1, 1))
    with pytest.raises(ValueError):
        state.enqueue((0, 0))


def test_head_wraps_around():
    state = make_state([(23, 5), (24, 5)], RIGHT)
    state.advance()
    assert state.head == (0, 5)
    state = make_state([(5, 1), (5, 0)], UP)
    state.advance()
    assert state.head == (5, 24)


def test_length_settles_after_growth_is_used_up(state):
    advance_clear(state, state.to_grow + 1)
    settled = len(state.body)
    assert settled == 6
    assert state.to_grow == 0
    assert state.erase_last
    for _ in range(10):
        advance_clear(state)
        assert len(state.body) == settled
        assert state.head == state.body[-1]


def test_tail_is_trimmed_one_tick_late(state):
    advance_clear(state, 4)
    oldest = state.body[0]
    advance_clear(state)
    assert oldest not in state.body
    assert state.body[0] == wrap_cell(oldest, RIGHT, 25)


@pytest.mark.parametrize("k", [1, 3])
def test_each_fruit_adds_one_segment(state, k):
    advance_clear(state, 4)
    before = len(state.body)
    for _ in range(k):
        state.fruit_x, state.fruit_y = wrap_cell(state.head, state.heading, 25)
        state.advance()
        assert state.fruit is None
        advance_clear(state, 2)
    assert len(state.body) == before + k
    assert not state.game_over


def test_self_collision_ends_game_and_freezes():
    body = [(7, 5), (6, 5), (5, 5), (5, 6), (4, 6), (4, 5)]
    state = make_state(body, UP)
    state.enqueue(RIGHT)
    state.advance()
    assert state.game_over
    assert list(state.body) == body
    assert state.head == (4, 5)

    state.enqueue(DOWN)
    for _ in range(3):
        state.advance()
    assert state.game_over
    assert list(state.body) == body
    assert (state.head_x, state.head_y) == (4, 5)


def test_vacating_tail_still_counts_as_collision():
    # The tail is only trimmed after the collision check.
    body = [(5, 5), (6, 5), (6, 6), (5, 6), (4, 6), (4, 5)]
    state = make_state(body, UP, erase_last=True)
    state.enqueue(RIGHT)
    state.advance()
    assert state.game_over


def test_occupies(state):
    assert state.occupies((4, 5))
    assert not state.occupies((6, 5))
