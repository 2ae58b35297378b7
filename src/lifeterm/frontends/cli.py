"""Command-line interface for the terminal Game of Life."""

import argparse
import sys
import time
from typing import List, Optional

from ..core.game import GameOfLife
from ..core.patterns import GOSPER_GLIDER_GUN, GLIDER_GUN_ANCHOR
from .terminal import TerminalRenderer

DEFAULT_WIDTH = 40
DEFAULT_HEIGHT = 40
DEFAULT_INTERVAL_MS = 100


class CLIGameOfLife:
    """Runs an animated Game of Life in the terminal."""

    def __init__(self, renderer: Optional[TerminalRenderer] = None):
        """Initialize CLI interface.

        Args:
            renderer: Renderer used for every frame (defaults to stdout)
        """
        self.renderer = renderer or TerminalRenderer()

    def create_game(
        self,
        width: int,
        height: int,
        randomize: bool = False,
        population_rate: float = GameOfLife.LIVE_PROBABILITY,
        verbose: bool = False,
    ) -> GameOfLife:
        """Build a game and seed it once.

        Args:
            width: Grid width
            height: Grid height
            randomize: Random fill instead of the Gosper glider gun
            population_rate: Live probability for the random fill
            verbose: Print setup details

        Returns:
            Seeded game

        Raises:
            ValueError: If the dimensions are invalid or the glider gun doesn't fit
        """
        game = GameOfLife(width, height)

        if verbose:
            print(f"Initializing {width}x{height} grid")

        if randomize:
            if verbose:
                print(f"Generating random population (rate: {population_rate:.2%})")
            game.randomize(probability=population_rate)
        else:
            if verbose:
                print(f"Placing '{GOSPER_GLIDER_GUN.name}' at {GLIDER_GUN_ANCHOR}")
            game.add_preset_pattern()

        if verbose:
            print(f"Initial population: {game.population} cells")

        return game

    def run(self, game: GameOfLife, interval_ms: int, max_generations: Optional[int] = None) -> int:
        """Animate the game: render, wait, advance.

        Args:
            game: Game to animate
            interval_ms: Pause after each frame in milliseconds
            max_generations: Stop after this many generations (None runs forever)

        Returns:
            Number of generations advanced
        """
        advanced = 0
        while max_generations is None or advanced < max_generations:
            self.renderer.render(game)
            time.sleep(interval_ms / 1000.0)
            game.next_generation()
            advanced += 1

        self.renderer.render(game)
        return advanced


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Animate Conway's Game of Life in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Gosper glider gun on a 40x40 grid
  lifeterm

  # Random 15% fill
  lifeterm --random
  lifeterm rand

  # Larger, faster, stop after 500 generations
  lifeterm -W 80 -H 50 -i 30 -m 500
        """,
    )

    parser.add_argument(
        "mode",
        nargs="?",
        help="Any word containing 'rand' selects a random fill (same as --random)",
    )

    # Grid configuration
    parser.add_argument(
        "-W", "--width", type=int, default=DEFAULT_WIDTH, help=f"Grid width (default: {DEFAULT_WIDTH})"
    )

    parser.add_argument(
        "-H", "--height", type=int, default=DEFAULT_HEIGHT, help=f"Grid height (default: {DEFAULT_HEIGHT})"
    )

    # Seeding configuration
    parser.add_argument(
        "-r",
        "--random",
        action="store_true",
        help="Start from a random fill instead of the Gosper glider gun",
    )

    parser.add_argument(
        "-p",
        "--population",
        type=float,
        default=GameOfLife.LIVE_PROBABILITY,
        help=f"Random fill live probability 0.0-1.0 (default: {GameOfLife.LIVE_PROBABILITY})",
    )

    # Animation configuration
    parser.add_argument(
        "-i",
        "--interval",
        type=int,
        default=DEFAULT_INTERVAL_MS,
        help=f"Frame interval in milliseconds (default: {DEFAULT_INTERVAL_MS})",
    )

    parser.add_argument(
        "-m",
        "--max-generations",
        type=int,
        help="Stop after this many generations (default: run until interrupted)",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print setup details before the animation starts",
    )

    return parser


def wants_random(args: argparse.Namespace) -> bool:
    """Whether the arguments select the random fill."""
    return bool(args.random or (args.mode and "rand" in args.mode))


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    if args.width <= 0:
        errors.append("Width must be positive")

    if args.height <= 0:
        errors.append("Height must be positive")

    if not 0.0 <= args.population <= 1.0:
        errors.append("Population rate must be between 0.0 and 1.0")

    if args.interval < 0:
        errors.append("Interval must be non-negative")

    if args.max_generations is not None and args.max_generations <= 0:
        errors.append("Max generations must be positive")

    if args.width > 0 and args.height > 0 and not wants_random(args):
        _, _, max_row, max_col = GOSPER_GLIDER_GUN.get_bounding_box()
        min_width = GLIDER_GUN_ANCHOR[1] + max_col + 1
        min_height = GLIDER_GUN_ANCHOR[0] + max_row + 1
        if args.width < min_width or args.height < min_height:
            errors.append(f"Grid must be at least {min_width}x{min_height} for the glider gun")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI interface.

    Args:
        argv: Arguments to parse (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if not validate_args(args):
        return 1

    cli = CLIGameOfLife()

    try:
        game = cli.create_game(
            width=args.width,
            height=args.height,
            randomize=wants_random(args),
            population_rate=args.population,
            verbose=args.verbose,
        )

        generations = cli.run(game, args.interval, args.max_generations)

        print(f"Simulation stopped after {generations} generations (population: {game.population})")
        return 0

    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 1
    except Exception as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
