"""
Sparse board of live Game of Life cells on an unbounded integer grid.
Coordinates are (x, y) tuples of ints; only live cells are stored.
"""


def as_coordinate(cell):
    """Coerce an (x, y) pair to a tuple of ints."""
    x, y = cell
    try:
        ix, iy = int(x), int(y)
    except OverflowError:
        raise ValueError(f"Coordinate components must be finite integers, got {cell!r}")
    if ix != x or iy != y:
        raise ValueError(f"Coordinate components must be integers, got {cell!r}")
    return (ix, iy)


class Board:
    """Immutable set of live cells. Absence of a coordinate means dead."""

    __slots__ = ('_cells',)

    def __init__(self, cells=()):
        self._cells = frozenset(as_coordinate(c) for c in cells)

    def is_alive(self, cell):
        return cell in self._cells

    def __contains__(self, cell):
        return cell in self._cells

    def __iter__(self):
        return iter(self._cells)

    def __len__(self):
        return len(self._cells)

    def __bool__(self):
        return bool(self._cells)

    def __eq__(self, other):
        if isinstance(other, Board):
            return self._cells == other._cells
        if isinstance(other, (set, frozenset)):
            return self._cells == other
        return NotImplemented

    def __hash__(self):
        return hash(self._cells)

    def __repr__(self):
        return f"Board({self.sorted_cells()!r})"

    def sorted_cells(self):
        """Live cells ordered by x, then y."""
        return sorted(self._cells)

    def translate(self, dx, dy):
        return Board((x + dx, y + dy) for x, y in self._cells)

    def bounding_box(self):
        """Return (min_x, min_y, max_x, max_y), or None for an empty board."""
        if not self._cells:
            return None
        xs = [x for x, _ in self._cells]
        ys = [y for _, y in self._cells]
        return min(xs), min(ys), max(xs), max(ys)

    def normalized(self):
        """Same shape translated so the bounding box starts at (0, 0)."""
        box = self.bounding_box()
        if box is None:
            return self
        return self.translate(-box[0], -box[1])
