import pytest

from sparse_life import gol_simulator
from sparse_life.board import Board
from sparse_life.gol_simulator import (NEIGHBOR_OFFSETS, count_live_neighbors, apply_rule,
                                       next_state, step, run, simulate)

BLOCK = Board([(0, 0), (1, 0), (0, 1), (1, 1)])
HORIZONTAL = Board([(0, 0), (1, 0), (2, 0)])
VERTICAL = Board([(1, -1), (1, 0), (1, 1)])
GLIDER = Board([(1, 0), (2, 1), (0, 2), (1, 2), (2, 2)])


def test_neighbor_offsets_are_moore_neighborhood():
    assert len(NEIGHBOR_OFFSETS) == 8
    assert (0, 0) not in NEIGHBOR_OFFSETS
    assert set(NEIGHBOR_OFFSETS) == {(dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1)} - {(0, 0)}


def test_count_live_neighbors_full_ring_and_none():
    ring = Board(NEIGHBOR_OFFSETS)
    assert count_live_neighbors((0, 0), ring) == 8
    assert count_live_neighbors((0, 0), Board()) == 0
    assert count_live_neighbors((0, 0), Board([(0, 0), (5, 5)])) == 0


def test_count_live_neighbors_ignores_cell_itself():
    assert count_live_neighbors((1, 1), BLOCK) == 3


def test_apply_rule_table():
    for n in range(9):
        assert apply_rule(True, n) == (n in (2, 3))
        assert apply_rule(False, n) == (n == 3)


def test_next_state_birth_and_death():
    assert next_state((1, 1), False, Board([(0, 0), (2, 0), (0, 2)]))
    assert not next_state((0, 0), True, Board([(0, 0)]))
    assert next_state((0, 0), True, BLOCK)


def test_step_empty_board_is_fixed_point():
    assert step(Board()) == Board()


def test_step_returns_new_board():
    nxt = step(BLOCK)
    assert nxt == BLOCK
    assert nxt is not BLOCK


def test_block_is_still_life():
    assert step(BLOCK) == BLOCK


def test_blinker_alternates_with_period_two():
    assert step(HORIZONTAL) == VERTICAL
    assert step(VERTICAL) == HORIZONTAL
    assert run(HORIZONTAL, 2) == HORIZONTAL


def test_single_cell_and_pair_die():
    assert step(Board([(3, 4)])) == Board()
    assert step(Board([(0, 0), (1, 0)])) == Board()


@pytest.mark.parametrize('dx,dy', [(10, -3), (-1000000, 7), (2 ** 70, -(2 ** 70))])
def test_step_is_translation_invariant(dx, dy):
    for board in (BLOCK, HORIZONTAL, GLIDER):
        assert step(board.translate(dx, dy)) == step(board).translate(dx, dy)


def test_step_is_deterministic():
    cells = [(0, 0), (1, 0), (2, 0), (2, 1), (1, 2), (5, 5), (6, 5), (5, 6)]
    first = step(Board(cells))
    second = step(Board(reversed(cells)))
    assert first == second
    assert first.sorted_cells() == second.sorted_cells()


def test_glider_moves_diagonally_after_four_generations():
    assert run(GLIDER, 4) == GLIDER.translate(1, 1)


def test_vertical_blinker_end_to_end():
    start = Board([(1, 0), (1, 1), (1, 2)])
    assert run(start, 1) == Board([(0, 1), (1, 1), (2, 1)])
    assert run(start, 2) == start


def test_run_zero_generations_returns_input():
    assert run(GLIDER, 0) == GLIDER


def test_run_rejects_negative_generations():
    with pytest.raises(ValueError):
        run(BLOCK, -1)


def test_run_prints_progress(capsys):
    run(HORIZONTAL, 4, print_every=2)
    err = capsys.readouterr().err
    assert "Generation 2/4, live cells: 3" in err
    assert "Generation 4/4, live cells: 3" in err


def test_simulate_stops_on_repetition():
    hist = simulate(HORIZONTAL, steps=50)
    assert hist == [HORIZONTAL, VERTICAL, HORIZONTAL]
    assert simulate(BLOCK, steps=50) == [BLOCK, BLOCK]


def test_simulate_respects_step_limit():
    hist = simulate(GLIDER, steps=5)
    assert len(hist) == 5
    assert hist[0] == GLIDER
    assert hist[4] == GLIDER.translate(1, 1)


def test_step_evaluates_each_candidate_once(monkeypatch):
    calls = []
    original = gol_simulator.next_state

    def recording_next_state(cell, is_alive, board):
        calls.append(cell)
        return original(cell, is_alive, board)

    monkeypatch.setattr(gol_simulator, 'next_state', recording_next_state)
    assert gol_simulator.step(BLOCK) == BLOCK
    # 4x4 square around the block
    assert len(calls) == 16
    assert len(set(calls)) == 16
    assert set(calls) == {(x, y) for x in range(-1, 3) for y in range(-1, 3)}
