"""
Game of Life simulator on a sparse, unbounded board (B3/S23).
"""
import sys
from .board import Board

# Moore neighborhood: the 8 cells at Chebyshev distance 1
NEIGHBOR_OFFSETS = tuple((dx, dy)
                         for dx in (-1, 0, 1) for dy in (-1, 0, 1)
                         if not (dx == 0 and dy == 0))
# a cell and its neighborhood, i.e. every cell a live cell can influence
CANDIDATE_OFFSETS = ((0, 0),) + NEIGHBOR_OFFSETS


def count_live_neighbors(cell, board):
    """Number of live cells in the Moore neighborhood of `cell` (0..8)."""
    x, y = cell
    return sum(1 for dx, dy in NEIGHBOR_OFFSETS if (x + dx, y + dy) in board)


def apply_rule(is_alive, live_neighbors):
    """Standard Life transition for a cell with the given neighbor count."""
    if is_alive:
        # under- or overpopulation kills, 2 or 3 neighbors survive
        return live_neighbors in (2, 3)
    # reproduction
    return live_neighbors == 3


def next_state(cell, is_alive, board):
    """Whether `cell` is alive in the generation after `board`."""
    return apply_rule(is_alive, count_live_neighbors(cell, board))


def step(board):
    """Perform one GoL update and return a new Board.

    Only live cells and their neighbors can change state, so those are the
    only candidates evaluated. Each candidate is evaluated once per
    generation, always against the input board.
    """
    evaluated = {}
    alive_next = set()
    for x, y in board:
        for dx, dy in CANDIDATE_OFFSETS:
            cell = (x + dx, y + dy)
            if cell in evaluated:
                continue
            alive = next_state(cell, board.is_alive(cell), board)
            evaluated[cell] = alive
            if alive:
                alive_next.add(cell)
    return Board(alive_next)


def run(board, generations, print_every=0):
    """Apply `step` `generations` times and return the final board."""
    if generations < 0:
        raise ValueError(f"generations must be >= 0, got {generations}")
    for gen in range(1, generations + 1):
        board = step(board)
        if print_every > 0 and gen % print_every == 0:
            print(f"Generation {gen}/{generations}, live cells: {len(board)}", file=sys.stderr)
    return board


def simulate(board, steps=50):
    """Simulate for given steps or until repetition. Returns history.

    History starts with `board` and holds at most `steps` boards. When a
    board repeats, the repeated board is the last entry.
    """
    seen = set()
    history = []
    b = board
    for _ in range(steps):
        history.append(b)
        if b in seen:
            break
        seen.add(b)
        b = step(b)
    return history
