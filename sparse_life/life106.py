"""
Reading and writing boards: Life 1.06 text and dense .npy arrays.
Dense arrays follow the (H, W) uint8 layout of saved patterns: row index is y,
column index is x.
"""
import re
import numpy as np
from .board import Board

FILE_HEADER = '#Life 1.06'
# plain signed decimal, no underscores or non-ASCII digits
INT_TOKEN = re.compile(r'[+-]?[0-9]+')


class HeaderError(ValueError):
    """Input does not start with the expected Life 1.06 header."""


def _parse_cell(line):
    # two leading integer tokens; further tokens are ignored
    tokens = line.split()
    if len(tokens) < 2:
        return None
    if not (INT_TOKEN.fullmatch(tokens[0]) and INT_TOKEN.fullmatch(tokens[1])):
        return None
    return int(tokens[0]), int(tokens[1])


def parse_life106(lines, header=FILE_HEADER, require_header=True):
    """
    Build a Board from Life 1.06 lines.

    Parsing stops at the first line that is not two integers, or at end of
    input; the cells read so far are kept.

    Args:
        lines: iterable of text lines (newlines optional).
        header: header token expected on the first line.
        require_header: raise HeaderError if the first line is not `header`.
    """
    cells = []
    it = iter(lines)
    first = next(it, None)
    if first is None:
        return Board()
    if first.rstrip() != header:
        if require_header:
            raise HeaderError(f"Expected header {header!r}, got {first.rstrip()!r}")
        cell = _parse_cell(first)
        if cell is None:
            return Board()
        cells.append(cell)
    for line in it:
        cell = _parse_cell(line)
        if cell is None:
            break
        cells.append(cell)
    return Board(cells)


def read_life106(path, header=FILE_HEADER, require_header=True):
    with open(path, 'r') as f:
        return parse_life106(f, header=header, require_header=require_header)


def format_life106(board, header=FILE_HEADER, sort=True):
    """Render a board as lines: optional header, then one 'x y' per live cell."""
    lines = [header] if header else []
    cells = board.sorted_cells() if sort else list(board)
    lines.extend(f"{x} {y}" for x, y in cells)
    return lines


def write_life106(board, path, header=FILE_HEADER, sort=True):
    with open(path, 'w') as f:
        for line in format_life106(board, header=header, sort=sort):
            f.write(line + '\n')


def from_array(grid, origin=(0, 0)):
    """Board of the nonzero entries of a 2D array, shifted by origin (x, y)."""
    arr = np.asarray(grid)
    if arr.ndim != 2:
        raise ValueError("Expected 2D arrays")
    ox, oy = origin
    ys, xs = np.nonzero(arr)
    return Board((int(x) + ox, int(y) + oy) for y, x in zip(ys, xs))


def to_array(board):
    """Smallest uint8 array covering the board, and the (x, y) of its [0, 0] entry."""
    box = board.bounding_box()
    if box is None:
        return np.zeros((0, 0), dtype=np.uint8), (0, 0)
    min_x, min_y, max_x, max_y = box
    grid = np.zeros((max_y - min_y + 1, max_x - min_x + 1), dtype=np.uint8)
    for x, y in board:
        grid[y - min_y, x - min_x] = 1
    return grid, (min_x, min_y)


def load_npy(path, origin=(0, 0)):
    return from_array(np.load(path), origin=origin)


def save_npy(board, path):
    """Save the board's dense array; returns the origin, which .npy cannot hold."""
    grid, origin = to_array(board)
    np.save(path, grid)
    return origin
