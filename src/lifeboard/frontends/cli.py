"""Command-line runner for life boards."""

import argparse
import logging
import sys
import time
from typing import Any, Dict, List, Optional, Tuple

from ..core.config import SimulationConfig, build_board
from ..core.errors import LifeBoardError
from ..core.interface import LifeBoard
from ..core.parallel import DEFAULT_N_THREADS
from ..core.patterns import PatternLibrary


class CLILifeRunner:
    """Runs a board for a fixed number of steps and prints it."""

    def __init__(self) -> None:
        self.pattern_library = PatternLibrary()

    def run_simulation(
        self,
        config: SimulationConfig,
        show_grid: bool = False,
        show_every: int = 0,
        verbose: bool = False,
    ) -> Tuple[LifeBoard, Dict[str, Any]]:
        """Run a simulation.

        Args:
            config: Board and run settings
            show_grid: Print the initial and final boards
            show_every: Print the board every N generations (0 to disable)
            verbose: Print progress updates

        Returns:
            Tuple of (final_board, statistics)

        Raises:
            LifeBoardError: If the board cannot be built or a step fails
        """
        board = build_board(config, self.pattern_library)
        initial_population = board.population

        if verbose:
            kind = "serial" if config.n_threads is None else f"{config.n_threads} threads"
            print(f"Initialized {board.width}x{board.height} board ({kind})")
            print(f"Initial population: {initial_population} cells")

        if show_grid:
            print("\nInitial board:")
            print(self._format_board(board, config))

        start_time = time.time()

        if show_every > 0:
            remaining = config.steps
            while remaining > 0:
                chunk = min(show_every, remaining)
                board.simulate_n_steps(chunk)
                remaining -= chunk
                print(f"\nGeneration {board.generation}:")
                print(self._format_board(board, config))
        else:
            board.simulate_n_steps(config.steps)

        duration = time.time() - start_time

        if show_grid:
            print("\nFinal board:")
            print(self._format_board(board, config))

        stats = {
            "generation": board.generation,
            "initial_population": initial_population,
            "population": board.population,
            "grid_size": (board.width, board.height),
            "n_threads": config.n_threads,
            "duration_seconds": duration,
            "generations_per_second": config.steps / duration if duration > 0 else 0.0,
        }
        return board, stats

    def list_patterns(self) -> None:
        """Print the available patterns."""
        print("Available patterns:")
        for name in self.pattern_library.list_patterns():
            pattern = self.pattern_library.get_pattern(name)
            width, height = pattern.get_size()
            print(f"  {name:<10} {width}x{height}  {pattern.description}")

    def _format_board(self, board: LifeBoard, config: SimulationConfig) -> str:
        border = "+" + "-" * board.width + "+"
        lines = [border]
        for line in board.render(config.alive_char, config.dead_char).split("\n"):
            lines.append("|" + line + "|")
        lines.append(border)
        return "\n".join(lines)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="lifeboard",
        description="Run Conway's Game of Life on a fixed-size, non-wrapping board",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # 100 steps of a random 80x40 board on 4 threads
  lifeboard -W 80 -H 40 -j 4 -n 100 -g

  # Serial reference board, reproducible seed
  lifeboard --serial --seed 7 -n 50

  # Watch a glider every 4 generations
  lifeboard -W 20 -H 20 --pattern Glider --pattern-row 1 --pattern-col 1 -n 40 -e 4
        """,
    )

    parser.add_argument("-W", "--width", type=int, default=64, help="Board width (default: 64)")

    parser.add_argument("-H", "--height", type=int, default=32, help="Board height (default: 32)")

    parser.add_argument(
        "-j",
        "--threads",
        type=int,
        default=DEFAULT_N_THREADS,
        help=f"Worker threads for the parallel board (default: {DEFAULT_N_THREADS})",
    )

    parser.add_argument(
        "--serial",
        action="store_true",
        help="Use the single-threaded board instead",
    )

    parser.add_argument(
        "-n",
        "--steps",
        type=int,
        default=10,
        help="Generations to simulate (default: 10)",
    )

    parser.add_argument(
        "-p",
        "--population",
        type=float,
        default=0.5,
        help="Initial random population rate 0.0-1.0 (default: 0.5)",
    )

    parser.add_argument("--seed", type=int, help="Random seed for reproducible boards")

    parser.add_argument(
        "--pattern",
        type=str,
        help="Start from a named pattern instead of a random board",
    )

    parser.add_argument("--pattern-row", type=int, help="Row offset for the pattern (default: centred)")

    parser.add_argument("--pattern-col", type=int, help="Column offset for the pattern (default: centred)")

    parser.add_argument(
        "-g",
        "--show-grid",
        action="store_true",
        help="Display the initial and final boards",
    )

    parser.add_argument(
        "-e",
        "--show-every",
        type=int,
        default=0,
        help="Display the board every N generations (default: off)",
    )

    parser.add_argument("--alive-char", type=str, default="#", help="Glyph for living cells (default: '#')")

    parser.add_argument("--dead-char", type=str, default=" ", help="Glyph for dead cells (default: ' ')")

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print progress information and debug logging",
    )

    parser.add_argument(
        "--list-patterns",
        action="store_true",
        help="List all available patterns and exit",
    )

    return parser


def config_from_args(args: argparse.Namespace) -> SimulationConfig:
    """Translate parsed arguments into a SimulationConfig."""
    return SimulationConfig(
        width=args.width,
        height=args.height,
        n_threads=None if args.serial else args.threads,
        steps=args.steps,
        population_rate=args.population,
        seed=args.seed,
        pattern=args.pattern,
        pattern_row=args.pattern_row,
        pattern_col=args.pattern_col,
        alive_char=args.alive_char,
        dead_char=args.dead_char,
    )


def print_results(stats: Dict[str, Any]) -> None:
    """Print the summary of a finished run."""
    width, height = stats["grid_size"]
    threads = "serial" if stats["n_threads"] is None else f"{stats['n_threads']} threads"
    print(f"\nBoard: {width}x{height} ({threads})")
    print(f"Generation: {stats['generation']}")
    print(f"Population: {stats['initial_population']} -> {stats['population']}")
    print(f"Duration: {stats['duration_seconds']:.3f}s ({stats['generations_per_second']:.1f} gen/s)")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    cli = CLILifeRunner()

    if args.list_patterns:
        cli.list_patterns()
        return 0

    config = config_from_args(args)
    errors = config.validate()
    if args.show_every < 0:
        errors.append("Show-every interval must be non-negative")
    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return 1

    try:
        _, stats = cli.run_simulation(
            config,
            show_grid=args.show_grid,
            show_every=args.show_every,
            verbose=args.verbose,
        )
    except LifeBoardError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print_results(stats)
    return 0


if __name__ == "__main__":
    sys.exit(main())
