from collections import deque

from maze import (CellState, DisconnectedGraph, NO_PARENT, SolveBeforeFinalized)


class MazeSolver:
    """Breadth-first search from the exit back to the entrance of a finished maze."""
    def __init__(self, generator):
        self.generator = generator
        self.grid = generator.grid

    def _index(self, cell, default):
        if cell is None:
            return default
        return self.grid.index_of(*cell)

    def solve(self, start=None, end=None):
        """
        Returns the path from start to end as a list of (x, y) cells.
        Defaults to the entrance (0, 0) and the exit (width-1, height-1).
        """
        if not self.generator.finalized:
            raise SolveBeforeFinalized("The maze must be fully generated before it can be solved")

        grid = self.grid
        start_index = self._index(start, self.generator.start_index)
        end_index = self._index(end, self.generator.end_index)
        grid.reset_parents()

        # Search from the end so the parent chain already reads start -> end
        frontier = deque([end_index])
        visited = {end_index}
        reached = False
        while frontier:
            current = frontier.popleft()
            if current == start_index:
                reached = True
                frontier.clear()
                break
            for _direction, other in grid.neighbors(current):
                if other not in visited and grid.has_passage(current, other):
                    visited.add(other)
                    frontier.append(other)
                    grid.parents[other] = current

        if not reached:
            raise DisconnectedGraph(
                f"No passage from {grid.coords(start_index)} to {grid.coords(end_index)}")

        path = [start_index]
        while grid.parents[path[-1]] != NO_PARENT:
            path.append(int(grid.parents[path[-1]]))
        if path[-1] != end_index:
            raise DisconnectedGraph(f"Parent chain ended at {grid.coords(path[-1])}")
        return [grid.coords(index) for index in path]

    def paint_steps(self, path):
        """Marks the path cells as SOLUTION one at a time, keeping the corner markers."""
        grid = self.grid
        for cell in path:
            index = grid.index_of(*cell)
            if grid.state(index) in (CellState.START_OF_MAZE, CellState.END_OF_MAZE):
                continue
            grid.set_state(index, CellState.SOLUTION)
            yield cell

    def paint(self, path):
        for _ in self.paint_steps(path):
            pass
        return path
