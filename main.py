import argparse
import random
import sys

import pygame

from maze import CellState, Direction, MazeError
from session import MazeSession

# --- Constants ---
MAZE_WIDTH, MAZE_HEIGHT = 10, 10
MIN_MAZE_SIZE, MAX_MAZE_SIZE = 5, 30
CELL_SIZE = 24
WALL_THICKNESS = 2
MARGIN = 20
STATUS_HEIGHT = 40
STEP_DELAY = 0.025  # seconds between animated operations
MIN_STEP_DELAY, MAX_STEP_DELAY = 0.01, 0.09
FPS = 240

BLACK, WHITE, GREEN, RED, BLUE, GRAY, YELLOW = (0,0,0), (255,255,255), (0,255,0), (255,0,0), (0,0,255), (100,100,100), (255,255,0)
STATE_COLORS = {
    CellState.UNTOUCHED: GRAY,
    CellState.CURRENT: BLUE,
    CellState.COMPLETED: BLACK,
    CellState.START_OF_MAZE: GREEN,
    CellState.END_OF_MAZE: RED,
    CellState.SOLUTION: YELLOW,
}


def cell_rect(grid, x, y):
    # y grows upwards in the maze, downwards on screen
    left = MARGIN + x * CELL_SIZE
    top = MARGIN + (grid.height - 1 - y) * CELL_SIZE
    return pygame.Rect(left, top, CELL_SIZE, CELL_SIZE)


def draw_maze(surface, grid):
    for index in range(grid.size):
        x, y = grid.coords(index)
        rect = cell_rect(grid, x, y)
        pygame.draw.rect(surface, STATE_COLORS[grid.state(index)], rect)
        walls = grid.walls[index]
        if walls[Direction.RIGHT]: pygame.draw.line(surface, WHITE, rect.topright, rect.bottomright, WALL_THICKNESS)
        if walls[Direction.LEFT]: pygame.draw.line(surface, WHITE, rect.topleft, rect.bottomleft, WALL_THICKNESS)
        if walls[Direction.TOP]: pygame.draw.line(surface, WHITE, rect.topleft, rect.topright, WALL_THICKNESS)
        if walls[Direction.BOTTOM]: pygame.draw.line(surface, WHITE, rect.bottomleft, rect.bottomright, WALL_THICKNESS)

def draw_status(surface, font, session):
    if session.generating:
        text = "Generating new maze..."
    elif session.solving:
        text = "Solving maze..."
    elif session.can_solve:
        text = "[G] new maze   [S] solve   [Esc] quit"
    else:
        text = "[G] new maze   [Esc] quit"
    label = font.render(text, True, WHITE)
    surface.blit(label, (MARGIN, surface.get_height() - STATUS_HEIGHT + 10))


def format_maze(grid):
    """ASCII rendering, top row first. Solution cells are drawn as '*'."""
    marks = {CellState.START_OF_MAZE: 'S', CellState.END_OF_MAZE: 'E', CellState.SOLUTION: '*'}
    lines = []
    top = '+'
    for x in range(grid.width):
        top += ('---' if grid.walls[grid.index_of(x, grid.height - 1), Direction.TOP] else '   ') + '+'
    lines.append(top)
    for y in range(grid.height - 1, -1, -1):
        row = ' ' if not grid.walls[grid.index_of(0, y), Direction.LEFT] else '|'
        floor = '+'
        for x in range(grid.width):
            index = grid.index_of(x, y)
            row += ' ' + marks.get(grid.state(index), ' ') + ' '
            row += '|' if grid.walls[index, Direction.RIGHT] else ' '
            floor += ('---' if grid.walls[index, Direction.BOTTOM] else '   ') + '+'
        lines.append(row)
        lines.append(floor)
    return '\n'.join(lines)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Generate a perfect maze and solve it')
    parser.add_argument('--width', type=int, default=MAZE_WIDTH, help='Number of columns')
    parser.add_argument('--height', type=int, default=MAZE_HEIGHT, help='Number of rows')
    parser.add_argument('--instant', action='store_true', help='Skip the step-by-step animation')
    parser.add_argument('--delay', type=float, default=STEP_DELAY,
                        help=f'Seconds between animated steps ({MIN_STEP_DELAY}-{MAX_STEP_DELAY})')
    parser.add_argument('--seed', type=int, help='Seed for a reproducible maze')
    parser.add_argument('--headless', action='store_true', help='Print the maze and its solution instead of opening a window')
    args = parser.parse_args(argv)

    if args.width < 1 or args.height < 1:
        parser.error('width and height must be positive')
    if not (MIN_MAZE_SIZE <= args.width <= MAX_MAZE_SIZE and MIN_MAZE_SIZE <= args.height <= MAX_MAZE_SIZE):
        print(f"Note: mazes between {MIN_MAZE_SIZE} and {MAX_MAZE_SIZE} cells per side display best")
    args.delay = min(max(args.delay, MIN_STEP_DELAY), MAX_STEP_DELAY)
    return args


def run_headless(args):
    session = MazeSession(rng=random.Random(args.seed))
    session.generate(args.width, args.height)
    print(f"Generated {args.width}x{args.height} maze in {session.generator.step_count} steps")
    path = session.solve()
    print(format_maze(session.generator.grid))
    print(f"Solution: {len(path)} cells")


def main(argv=None):
    args = parse_args(argv)
    if args.headless:
        try:
            run_headless(args)
        except MazeError as e:
            print(f"Error: {e}")
            sys.exit(1)
        return

    stepwise = not args.instant
    window_size = (args.width * CELL_SIZE + 2 * MARGIN,
                   args.height * CELL_SIZE + 2 * MARGIN + STATUS_HEIGHT)
    try:
        pygame.init()
        screen = pygame.display.set_mode(window_size)
        pygame.display.set_caption("Maze Generator (DFS) and Solver (BFS)")
        clock = pygame.time.Clock()
        font = pygame.font.SysFont(None, 24)

        session = MazeSession(rng=random.Random(args.seed))
        process = session.generate(args.width, args.height, stepwise)
        since_step = 0.0
        reported = False
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT or (event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE):
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_g and not session.generating and not session.solving:
                    process = session.generate(args.width, args.height, stepwise)
                    reported = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_s and session.can_solve and not session.solution:
                    process = session.solve(stepwise)
                    print(f"Solution: {len(session.solution)} cells")
            if not running: break

            since_step += clock.tick(FPS) / 1000.0
            while stepwise and process is not None and since_step >= args.delay:
                since_step -= args.delay
                if next(process, None) is None:
                    process = None
            if process is None or not stepwise:
                since_step = 0.0

            if session.generator.finalized and not reported:
                print(f"Generated {args.width}x{args.height} maze in {session.generator.step_count} steps")
                reported = True

            screen.fill(BLACK)
            draw_maze(screen, session.generator.grid)
            draw_status(screen, font, session)
            pygame.display.update()
    except MazeError as e:
        print(f"Error: {e}")
        sys.exit(1)
    finally:
        pygame.quit()

if __name__ == "__main__":
    main()
