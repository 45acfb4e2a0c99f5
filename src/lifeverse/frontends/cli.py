"""Command-line interface that animates a universe in the terminal."""

import argparse
import sys
import time
from typing import Optional, Tuple, Dict, Any

from ..core.universe import Universe, DEFAULT_WIDTH, DEFAULT_HEIGHT, DEAD_GLYPH, ALIVE_GLYPH
from ..core.patterns import PatternLibrary

ASCII_DEAD_GLYPH = "."
ASCII_ALIVE_GLYPH = "*"


class CLIUniverse:
    """Command-line host: renders a universe, ticks it, and repeats."""

    def __init__(self):
        """Initialize CLI interface."""
        self.pattern_library = PatternLibrary()

    def create_universe(
        self,
        width: int,
        height: int,
        pattern: Optional[str] = None,
        pattern_x: int = 0,
        pattern_y: int = 0,
        verbose: bool = False,
    ) -> Universe:
        """Create a universe, optionally replacing the default seed with a pattern.

        Args:
            width: Universe width
            height: Universe height
            pattern: Optional pattern name to load
            pattern_x: X offset for pattern placement
            pattern_y: Y offset for pattern placement
            verbose: Print progress updates

        Returns:
            The new universe
        """
        universe = Universe(width, height)

        if verbose:
            print(f"Initializing {width}x{height} toroidal universe")

        if pattern:
            loaded_pattern = self.pattern_library.get_pattern(pattern)
            if loaded_pattern:
                if verbose:
                    print(f"Loading pattern '{pattern}' at ({pattern_x}, {pattern_y})")
                loaded_pattern.apply_to_universe(universe, pattern_x, pattern_y)
            else:
                print(f"Warning: Pattern '{pattern}' not found, using default seed")
        elif verbose:
            print("Using default seed (cell i alive when i % 2 == 0 or i % 7 == 0)")

        if verbose:
            print(f"Initial population: {universe.population} cells")

        return universe

    def run_simulation(
        self,
        width: int,
        height: int,
        generations: int,
        pattern: Optional[str] = None,
        pattern_x: int = 0,
        pattern_y: int = 0,
        delay: float = 0.0,
        dead_glyph: str = DEAD_GLYPH,
        alive_glyph: str = ALIVE_GLYPH,
        verbose: bool = False,
    ) -> Tuple[Universe, Dict[str, Any]]:
        """Animate a universe: render, print, tick, wait, ``generations`` times.

        Args:
            width: Universe width
            height: Universe height
            generations: Number of frames to show
            pattern: Optional pattern name to load
            pattern_x: X offset for pattern placement
            pattern_y: Y offset for pattern placement
            delay: Seconds to wait between frames
            dead_glyph: Character drawn for dead cells
            alive_glyph: Character drawn for alive cells
            verbose: Print progress updates

        Returns:
            Tuple of (universe, statistics)
        """
        universe = self.create_universe(width, height, pattern, pattern_x, pattern_y, verbose)
        initial_population = universe.population

        start_time = time.time()

        for frame in range(generations):
            if verbose:
                print(f"\nGeneration {universe.generation}:")
            print(universe.render(dead_glyph, alive_glyph))
            universe.tick()
            if delay > 0 and frame < generations - 1:
                time.sleep(delay)

        duration = time.time() - start_time

        stats = {
            "generation": universe.generation,
            "grid_size": universe.shape,
            "initial_population": initial_population,
            "population": universe.population,
            "population_density": universe.population / (universe.width * universe.height),
            "duration_seconds": duration,
            "generations_per_second": universe.generation / duration if duration > 0 else 0,
        }

        return universe, stats

    def list_patterns(self) -> None:
        """List available patterns by category."""
        categories = self.pattern_library.get_patterns_by_category()

        print("Available patterns:")
        for category, patterns in categories.items():
            print(f"\n{category}:")
            for pattern_name in patterns:
                pattern = self.pattern_library.get_pattern(pattern_name)
                if pattern:
                    size = pattern.get_size()
                    print(f"  {pattern_name}: {size[0]}x{size[1]}, {len(pattern.cells)} cells")
                    if pattern.description:
                        print(f"    {pattern.description}")


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Animate Conway's Game of Life on a toroidal universe in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Show the first generation of the default 64x64 universe
  lifeverse-cli

  # Animate 100 generations of the default universe
  lifeverse-cli --generations 100

  # Glider on a small universe drawn with ASCII characters
  lifeverse-cli -W 12 -H 12 --pattern Glider -g 48 --ascii

  # List available patterns
  lifeverse-cli --list-patterns
        """,
    )

    # Universe configuration
    parser.add_argument(
        "-W", "--width", type=int, default=DEFAULT_WIDTH, help=f"Universe width (default: {DEFAULT_WIDTH})"
    )

    parser.add_argument(
        "-H", "--height", type=int, default=DEFAULT_HEIGHT, help=f"Universe height (default: {DEFAULT_HEIGHT})"
    )

    # Pattern configuration
    parser.add_argument(
        "--pattern",
        type=str,
        help="Load a specific pattern instead of the default seed",
    )

    parser.add_argument(
        "--pattern-x",
        type=int,
        default=0,
        help="X offset for pattern placement (default: 0, centred)",
    )

    parser.add_argument(
        "--pattern-y",
        type=int,
        default=0,
        help="Y offset for pattern placement (default: 0, centred)",
    )

    # Animation configuration
    parser.add_argument(
        "-g",
        "--generations",
        type=int,
        default=1,
        help="Number of generations to display (default: 1)",
    )

    parser.add_argument(
        "-d",
        "--delay",
        type=float,
        default=0.01,
        help="Seconds to wait between generations (default: 0.01)",
    )

    # Output configuration
    parser.add_argument(
        "--dead-glyph",
        type=str,
        default=DEAD_GLYPH,
        help=f"Character drawn for dead cells (default: {DEAD_GLYPH})",
    )

    parser.add_argument(
        "--alive-glyph",
        type=str,
        default=ALIVE_GLYPH,
        help=f"Character drawn for alive cells (default: {ALIVE_GLYPH})",
    )

    parser.add_argument(
        "--ascii",
        action="store_true",
        help=f"Draw cells as '{ASCII_DEAD_GLYPH}' and '{ASCII_ALIVE_GLYPH}'",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print detailed progress information",
    )

    parser.add_argument(
        "--list-patterns",
        action="store_true",
        help="List all available patterns and exit",
    )

    return parser


def print_results(stats: dict, verbose: bool) -> None:
    """Print a summary of the animation run.

    Args:
        stats: Statistics dictionary
        verbose: Whether to show detailed statistics
    """
    print(f"Displayed {stats['generation']} generations")

    if verbose:
        print("\nDetailed Statistics:")
        print(f"  Universe size: {stats['grid_size'][0]}x{stats['grid_size'][1]}")
        print(f"  Initial population: {stats['initial_population']}")
        print(f"  Final population: {stats['population']}")
        print(f"  Population density: {stats['population_density']:.2%}")
        print(f"  Duration: {stats['duration_seconds']:.3f} seconds")
        print(f"  Speed: {stats['generations_per_second']:.0f} generations/second")
    else:
        print(f"Population: {stats['initial_population']} -> {stats['population']}")


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

    if args.generations <= 0:
        errors.append("Generations must be positive")

    if args.delay < 0:
        errors.append("Delay must be non-negative")

    if args.pattern_x < 0:
        errors.append("Pattern X offset must be non-negative")

    if args.pattern_y < 0:
        errors.append("Pattern Y offset must be non-negative")

    if len(args.dead_glyph) != 1 or len(args.alive_glyph) != 1:
        errors.append("Glyphs must be single characters")
    elif args.dead_glyph == args.alive_glyph:
        errors.append("Dead and alive glyphs must differ")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def main() -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args()

    cli = CLIUniverse()

    if args.list_patterns:
        cli.list_patterns()
        return 0

    if args.ascii:
        args.dead_glyph = ASCII_DEAD_GLYPH
        args.alive_glyph = ASCII_ALIVE_GLYPH

    if not validate_args(args):
        return 1

    if args.pattern:
        pattern = cli.pattern_library.get_pattern(args.pattern)

        if not pattern:
            available = cli.pattern_library.list_patterns()
            print(f"Error: Pattern '{args.pattern}' not found")
            print(f"Available patterns: {', '.join(available)}")
            print("Use --list-patterns to see detailed information")
            return 1

        # Auto-center pattern if no offset specified
        if args.pattern_x == 0 and args.pattern_y == 0:
            pattern_size = pattern.get_size()
            args.pattern_x = max(0, (args.width - pattern_size[0]) // 2)
            args.pattern_y = max(0, (args.height - pattern_size[1]) // 2)
            if args.verbose:
                print(f"Auto-centering pattern at ({args.pattern_x}, {args.pattern_y})")

    try:
        _, stats = cli.run_simulation(
            width=args.width,
            height=args.height,
            generations=args.generations,
            pattern=args.pattern,
            pattern_x=args.pattern_x,
            pattern_y=args.pattern_y,
            delay=args.delay,
            dead_glyph=args.dead_glyph,
            alive_glyph=args.alive_glyph,
            verbose=args.verbose,
        )

        print_results(stats, args.verbose)
        return 0

    except KeyboardInterrupt:
        print("\nAnimation interrupted by user")
        return 1
    except Exception as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
