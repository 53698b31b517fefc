import random
from enum import Enum

from maze import CellState, Direction, create_grid


class GenerationState(Enum):
    NOT_STARTED = 'not_started'
    IN_PROGRESS = 'in_progress'
    FINALIZED = 'finalized'


class MazeGenerator:
    """
    Generates a perfect maze using randomized depth-first search
    (recursive backtracking) over a grid of walled cells.

    The walk keeps the current path as a stack. Each step either knocks down
    the wall to a random neighbor that is neither on the path nor completed,
    or, at a dead end, pops the top cell and marks it completed. Once every
    cell is completed the entrance (left wall of (0, 0)) and the exit (right
    wall of (width-1, height-1)) are opened.
    """
    def __init__(self, width, height, rng=None, listener=None):
        self.grid = create_grid(width, height, listener)
        self.rng = rng if rng is not None else random.Random()
        self.state = GenerationState.NOT_STARTED
        self.path = []
        self.completed = []
        self._on_path = set()
        self._completed = set()
        self.step_count = 0

    @property
    def width(self):
        return self.grid.width

    @property
    def height(self):
        return self.grid.height

    @property
    def start_index(self):
        return 0

    @property
    def end_index(self):
        return self.grid.size - 1

    @property
    def finalized(self):
        return self.state is GenerationState.FINALIZED

    def _begin(self):
        # DFS can start anywhere; the entrance and exit are fixed afterwards
        first = self.rng.randrange(self.grid.size)
        self.path.append(first)
        self._on_path.add(first)
        self.grid.set_state(first, CellState.CURRENT)
        self.state = GenerationState.IN_PROGRESS

    def _candidates(self, index):
        return [(direction, other) for direction, other in self.grid.neighbors(index)
                if other not in self._completed and other not in self._on_path]

    def _advance(self):
        current = self.path[-1]
        candidates = self._candidates(current)
        if candidates:
            direction, chosen = self.rng.choice(candidates)
            self.grid.remove_wall_pair(current, chosen, direction)
            self.path.append(chosen)
            self._on_path.add(chosen)
            self.grid.set_state(chosen, CellState.CURRENT)
        else:
            # Dead end, backtrack
            self.path.pop()
            self._on_path.discard(current)
            self.completed.append(current)
            self._completed.add(current)
            self.grid.set_state(current, CellState.COMPLETED)
        self.step_count += 1

    def _finalize(self):
        self.grid.set_state(self.start_index, CellState.START_OF_MAZE)
        self.grid.remove_wall(self.start_index, Direction.LEFT)
        self.grid.set_state(self.end_index, CellState.END_OF_MAZE)
        self.grid.remove_wall(self.end_index, Direction.RIGHT)
        self.state = GenerationState.FINALIZED

    def step(self):
        """Runs one unit of work. Returns False once the maze is finalized."""
        if self.state is GenerationState.FINALIZED:
            return False
        if self.state is GenerationState.NOT_STARTED:
            self._begin()
        if len(self.completed) < self.grid.size:
            self._advance()
        if len(self.completed) == self.grid.size:
            self._finalize()
        return True

    def steps(self):
        """Yields after every carve or backtrack so a host can draw in between."""
        while self.step():
            yield self.state

    def generate(self):
        """Carves the whole maze at once."""
        for _ in self.steps():
            pass
        return self.grid
