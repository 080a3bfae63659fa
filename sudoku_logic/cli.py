"""Command-line interface for the logical Sudoku solver."""

import argparse
import logging
import sys

from .benchmark import Benchmark
from .benchmark.benchmark import load_puzzles
from .benchmark.visualizer import Visualizer
from .core.board import UNIT_SIZE_SQUARED, SudokuBoard
from .solvers import BruteForceSolver, LogicalSolver
from .strategies import DEFAULT_STRATEGIES, select_strategies


def _names(value: str):
    return [name.strip() for name in value.split(",") if name.strip()]


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Deductive Sudoku solver with human-style strategies",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Solve a puzzle logically
  sudoku-logic solve --puzzle "0100405602306150..."

  # Compare with brute force, without the chain strategies
  sudoku-logic solve -a all -p "0100405602..." --exclude xy_chains,x_cycles_rule_1

  # Benchmark a puzzle file
  sudoku-logic benchmark --puzzles-file puzzles.txt --output results/
        """
    )
    parser.add_argument(
        "--log-level", default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Solve command
    solve_parser = subparsers.add_parser("solve", help="Solve a Sudoku puzzle")
    solve_parser.add_argument(
        "--puzzle", "-p", type=str, required=True,
        help="Puzzle string (81 chars, 0 for empty cells)"
    )
    solve_parser.add_argument(
        "--algorithm", "-a",
        choices=["logical", "brute-force", "all"],
        default="logical",
        help="Solving algorithm to use (default: logical)"
    )
    solve_parser.add_argument(
        "--strategies", type=_names, default=[],
        help="Comma-separated strategies to use, in pipeline order (default: all)"
    )
    solve_parser.add_argument(
        "--exclude", type=_names, default=[],
        help="Comma-separated strategies to leave out"
    )
    solve_parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Show detailed solving statistics"
    )

    # Strategies command
    subparsers.add_parser("strategies", help="List strategies in pipeline order")

    # Benchmark command
    bench_parser = subparsers.add_parser("benchmark", help="Run solver benchmarks")
    bench_parser.add_argument(
        "--puzzles-file", "-f", type=str, required=True,
        help="Text file with one puzzle per line"
    )
    bench_parser.add_argument(
        "--output", "-o", type=str, default="results",
        help="Output directory for results (default: results)"
    )
    bench_parser.add_argument(
        "--timeout", type=float, default=60.0,
        help="Seconds allowed per puzzle per solver (default: 60)"
    )
    bench_parser.add_argument(
        "--no-charts", action="store_true",
        help="Skip chart generation"
    )

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    if args.command == "solve":
        cmd_solve(args)
    elif args.command == "strategies":
        cmd_strategies(args)
    elif args.command == "benchmark":
        cmd_benchmark(args)


def cmd_solve(args):
    """Handle the solve command."""
    try:
        board = SudokuBoard.from_string(args.puzzle)
    except ValueError:
        print(f"board must be {UNIT_SIZE_SQUARED} numbers with blanks expressed as 0")
        sys.exit(1)
    try:
        strategies = select_strategies(args.strategies, args.exclude)
    except KeyError as e:
        print(f"Error: {e.args[0]}")
        sys.exit(1)

    print("Input puzzle:")
    print(board)
    print()

    solvers = {}
    if args.algorithm in ("logical", "all"):
        solvers["Logical"] = LogicalSolver(strategies)
    if args.algorithm in ("brute-force", "all"):
        solvers["BruteForce"] = BruteForceSolver()

    for name, solver in solvers.items():
        print(f"Solving with {name}...")
        solution, stats = solver.solve(board)

        if stats.solved:
            print(f"✓ Solved in {stats.time_seconds:.4f}s")
            if args.verbose:
                print(f"  Iterations: {stats.iterations:,}")
                print(f"  Backtracks: {stats.backtracks:,}")
                print(f"  Memory: {stats.memory_bytes / 1024:.2f} KB")
                for strategy, count in stats.extra.get("strategies", {}).items():
                    print(f"  {strategy}: {count}")
            print(solution)
        else:
            print(f"✗ {stats.extra.get('error_message', 'Failed to solve')}")
            if args.verbose:
                print(f"  Time: {stats.time_seconds:.4f}s")
                print(f"  Iterations: {stats.iterations:,}")
        print()


def cmd_strategies(args):
    """Handle the strategies command."""
    for index, strategy in enumerate(DEFAULT_STRATEGIES, 1):
        print(f"{index:2d}. {strategy.__name__}")


def cmd_benchmark(args):
    """Handle the benchmark command."""
    try:
        puzzles = load_puzzles(args.puzzles_file)
    except (OSError, ValueError) as e:
        print(f"Error loading puzzles: {e}")
        sys.exit(1)

    print("=" * 60)
    print("SUDOKU SOLVER BENCHMARK")
    print("=" * 60)
    print(f"Puzzles: {len(puzzles)}")

    benchmark = Benchmark(puzzles, timeout_seconds=args.timeout)

    print(f"Algorithms: {', '.join(benchmark.solvers.keys())}")
    print(f"Output directory: {args.output}")
    print("=" * 60)

    results = benchmark.run()
    summary = benchmark.get_summary()

    print("\n" + "=" * 60)
    print("RESULTS SUMMARY")
    print("=" * 60)

    print("\nBy Algorithm:")
    print("-" * 50)
    for algo, stats in summary["results_by_algorithm"].items():
        print(f"\n{algo}:")
        print(f"  Accuracy: {stats['accuracy']:.1f}% ({stats['total_solved']}/{stats['total_tested']})")
        print(f"  Avg Time: {stats['avg_time_seconds']:.4f}s")
        print(f"  Avg Memory: {stats['avg_memory_mb']:.2f} MB")
        for error, count in stats["errors"].items():
            print(f"  {error}: {count}")

    if summary["strategy_usage"]:
        print("\nStrategy usage:")
        print("-" * 50)
        for strategy, count in summary["strategy_usage"].items():
            print(f"  {strategy}: {count}")

    benchmark.save_results(args.output)

    if not args.no_charts:
        print("\nGenerating charts...")
        visualizer = Visualizer(results, args.output)
        charts = visualizer.generate_all()
        visualizer.generate_summary_table()
        print(f"Charts saved to {args.output}/")
        for chart in charts:
            print(f"  - {chart.split('/')[-1]}")

    print("\n" + "=" * 60)
    print("Benchmark complete!")


if __name__ == "__main__":
    main()
