import numpy as np
from collections import namedtuple
from enum import IntEnum


class Direction(IntEnum):
    """Wall slots of a cell. TOP faces y + 1, BOTTOM faces y - 1."""
    RIGHT = 0
    LEFT = 1
    TOP = 2
    BOTTOM = 3

    @property
    def opposite(self):
        return OPPOSITE[self]


OPPOSITE = {
    Direction.RIGHT: Direction.LEFT,
    Direction.LEFT: Direction.RIGHT,
    Direction.TOP: Direction.BOTTOM,
    Direction.BOTTOM: Direction.TOP,
}


class CellState(IntEnum):
    UNTOUCHED = 0
    CURRENT = 1
    COMPLETED = 2
    START_OF_MAZE = 3
    END_OF_MAZE = 4
    SOLUTION = 5


# Events pushed to the presentation layer
CellChanged = namedtuple('CellChanged', ['cell', 'state'])
WallRemoved = namedtuple('WallRemoved', ['cell', 'direction'])


class MazeError(Exception):
    """Base class for maze errors."""


class InvalidDimension(MazeError, ValueError):
    pass


class DisconnectedGraph(MazeError, RuntimeError):
    """Start and end are not connected; the grid is not a spanning tree."""


class SolveBeforeFinalized(MazeError, RuntimeError):
    pass


class SolveInProgress(MazeError, RuntimeError):
    pass


NO_PARENT = -1


def neighbor_index(index, direction, width, height):
    """Returns the index next to `index` in `direction`, or None off the grid.

    Cells are stored column by column: index = x * height + y.
    """
    x, y = divmod(index, height)
    if direction == Direction.RIGHT:
        return index + height if x < width - 1 else None
    if direction == Direction.LEFT:
        return index - height if x > 0 else None
    if direction == Direction.TOP:
        return index + 1 if y < height - 1 else None
    if direction == Direction.BOTTOM:
        return index - 1 if y > 0 else None
    raise ValueError(f"Unknown direction: {direction!r}")


def create_grid(width, height, listener=None):
    """Allocates a width x height grid with every wall standing."""
    for name, value in (('width', width), ('height', height)):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise InvalidDimension(f"{name} must be an integer, got {value!r}")
        if value < 1:
            raise InvalidDimension(f"{name} must be at least 1, got {value}")
    return Grid(int(width), int(height), listener)


class Grid:
    """
    Rectangular grid of cells backed by numpy arrays.
    walls[i, d] is True while cell i still has its wall in direction d.
    """
    def __init__(self, width, height, listener=None):
        self.width = width
        self.height = height
        self.size = width * height
        self.walls = np.ones((self.size, 4), dtype=bool)
        self.states = np.full(self.size, CellState.UNTOUCHED, dtype=np.uint8)
        self.parents = np.full(self.size, NO_PARENT, dtype=np.int64)
        self.listener = listener

    def _emit(self, event):
        if self.listener is not None:
            self.listener(event)

    def coords(self, index):
        x, y = divmod(int(index), self.height)
        return (x, y)

    def index_of(self, x, y):
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Cell ({x}, {y}) is outside a {self.width}x{self.height} grid")
        return x * self.height + y

    def neighbor(self, index, direction):
        return neighbor_index(index, direction, self.width, self.height)

    def neighbors(self, index):
        """(direction, index) pairs for every in-bounds neighbor, in direction order."""
        result = []
        for direction in Direction:
            other = self.neighbor(index, direction)
            if other is not None:
                result.append((direction, other))
        return result

    def open_neighbors(self, index):
        return [(d, n) for d, n in self.neighbors(index) if self.has_passage(index, n)]

    def state(self, index):
        return CellState(int(self.states[index]))

    def set_state(self, index, state):
        self.states[index] = state
        self._emit(CellChanged(self.coords(index), CellState(state)))

    def remove_wall(self, index, direction):
        """Clears a single wall. Only meant for the outer boundary (entrance/exit)."""
        self.walls[index, direction] = False
        self._emit(WallRemoved(self.coords(index), Direction(direction)))

    def remove_wall_pair(self, a, b, direction):
        """Opens the passage from a to its neighbor b, which lies in `direction`."""
        direction = Direction(direction)
        if self.neighbor(a, direction) != b:
            raise ValueError(f"Cell {self.coords(b)} is not {direction.name} of {self.coords(a)}")
        self.walls[a, direction] = False
        self.walls[b, direction.opposite] = False
        self._emit(WallRemoved(self.coords(a), direction))
        self._emit(WallRemoved(self.coords(b), direction.opposite))

    def has_passage(self, a, b):
        for direction in Direction:
            if self.neighbor(a, direction) == b:
                return not self.walls[a, direction] and not self.walls[b, direction.opposite]
        return False

    def passage_count(self):
        """Number of open wall pairs between cells inside the grid."""
        columns = self.walls.reshape(self.width, self.height, 4)
        horizontal = ~columns[:-1, :, Direction.RIGHT] & ~columns[1:, :, Direction.LEFT]
        vertical = ~columns[:, :-1, Direction.TOP] & ~columns[:, 1:, Direction.BOTTOM]
        return int(horizontal.sum() + vertical.sum())

    def reset_parents(self):
        self.parents.fill(NO_PARENT)
