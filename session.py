from generator import MazeGenerator
from maze import SolveBeforeFinalized, SolveInProgress
from solver import MazeSolver


class MazeSession:
    """
    Holds the maze currently shown by a host and runs the generate/solve commands.
    Starting a new maze drops the old one, including any unfinished generation.
    """
    def __init__(self, rng=None, listener=None):
        self.rng = rng
        self.listener = listener
        self.generator = None
        self.solver = None
        self.solution = None
        self._painting = None

    @property
    def generating(self):
        return self.generator is not None and not self.generator.finalized

    @property
    def solving(self):
        return self._painting is not None

    @property
    def can_solve(self):
        return self.generator is not None and self.generator.finalized and not self.solving

    def generate(self, width, height, stepwise=False):
        """Starts a fresh maze. Returns the grid, or an iterator of steps when stepwise."""
        generator = MazeGenerator(width, height, rng=self.rng, listener=self.listener)
        self.generator = generator
        self.solver = None
        self.solution = None
        self._painting = None
        if stepwise:
            return generator.steps()
        return generator.generate()

    def solve(self, stepwise=False):
        """Solves the current maze. Returns the path, or an iterator of paint steps when stepwise."""
        if self.generator is None or not self.generator.finalized:
            raise SolveBeforeFinalized("No finished maze to solve")
        if self.solving:
            raise SolveInProgress("The solution is still being drawn")
        self.solver = MazeSolver(self.generator)
        self.solution = self.solver.solve()
        if stepwise:
            self._painting = self._paint(self.generator, self.solver, self.solution)
            return self._painting
        self.solver.paint(self.solution)
        return self.solution

    def _paint(self, generator, solver, path):
        try:
            for cell in solver.paint_steps(path):
                yield cell
        finally:
            # A new maze may have replaced this one while painting
            if self.generator is generator:
                self._painting = None
