import random

import pytest

from generator import MazeGenerator
from maze import CellState, DisconnectedGraph, Direction, SolveBeforeFinalized
from solver import MazeSolver


def is_walkable(grid, path):
    for (x1, y1), (x2, y2) in zip(path, path[1:]):
        if not grid.has_passage(grid.index_of(x1, y1), grid.index_of(x2, y2)):
            return False
    return True


def test_fixed_maze_right_then_up(right_then_up):
    generator = MazeGenerator(2, 2, rng=right_then_up)
    generator.generate()
    assert MazeSolver(generator).solve() == [(0, 0), (1, 0), (1, 1)]


def test_fixed_maze_up_then_right(up_then_right):
    generator = MazeGenerator(2, 2, rng=up_then_right)
    generator.generate()
    assert MazeSolver(generator).solve() == [(0, 0), (0, 1), (1, 1)]


@pytest.mark.parametrize("width, height", [(5, 5), (30, 30), (1, 6), (9, 4)])
def test_path_runs_from_entrance_to_exit(width, height, seeded):
    generator = MazeGenerator(width, height, rng=seeded)
    generator.generate()
    path = MazeSolver(generator).solve()
    assert path[0] == (0, 0)
    assert path[-1] == (width - 1, height - 1)
    assert len(set(path)) == len(path)
    assert is_walkable(generator.grid, path)


def test_single_cell_maze():
    generator = MazeGenerator(1, 1)
    generator.generate()
    assert MazeSolver(generator).solve() == [(0, 0)]


def test_resolve_gives_identical_path(seeded):
    generator = MazeGenerator(15, 11, rng=seeded)
    generator.generate()
    solver = MazeSolver(generator)
    first = solver.solve()
    solver.paint(first)
    assert solver.solve() == first
    assert MazeSolver(generator).solve() == first


def test_custom_endpoints(seeded):
    generator = MazeGenerator(8, 8, rng=seeded)
    generator.generate()
    path = MazeSolver(generator).solve(start=(3, 5), end=(6, 1))
    assert path[0] == (3, 5)
    assert path[-1] == (6, 1)
    assert is_walkable(generator.grid, path)


def test_solve_before_finalized(seeded):
    generator = MazeGenerator(5, 5, rng=seeded)
    with pytest.raises(SolveBeforeFinalized):
        MazeSolver(generator).solve()
    generator.step()
    with pytest.raises(SolveBeforeFinalized):
        MazeSolver(generator).solve()


def test_corrupted_grid_raises_disconnected_graph(right_then_up):
    generator = MazeGenerator(2, 2, rng=right_then_up)
    grid = generator.generate()
    # rebuild the wall between (1, 0) and (1, 1)
    grid.walls[grid.index_of(1, 0), Direction.TOP] = True
    grid.walls[grid.index_of(1, 1), Direction.BOTTOM] = True
    with pytest.raises(DisconnectedGraph):
        MazeSolver(generator).solve()


def test_one_sided_wall_blocks_the_solver(right_then_up):
    generator = MazeGenerator(2, 2, rng=right_then_up)
    grid = generator.generate()
    grid.walls[grid.index_of(1, 1), Direction.BOTTOM] = True
    with pytest.raises(DisconnectedGraph):
        MazeSolver(generator).solve()


def test_paint_keeps_the_corner_markers():
    generator = MazeGenerator(10, 10, rng=random.Random(7))
    grid = generator.generate()
    solver = MazeSolver(generator)
    path = solver.solve()
    painted = list(solver.paint_steps(path))
    assert painted == path[1:-1]
    assert grid.state(0) is CellState.START_OF_MAZE
    assert grid.state(grid.size - 1) is CellState.END_OF_MAZE
    for x, y in painted:
        assert grid.state(grid.index_of(x, y)) is CellState.SOLUTION
    solution_cells = sum(1 for i in range(grid.size) if grid.state(i) is CellState.SOLUTION)
    assert solution_cells == len(path) - 2
