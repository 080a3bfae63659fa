"""Benchmarking framework for comparing the logical and brute-force solvers."""

from __future__ import annotations
from collections import Counter
from concurrent.futures import ThreadPoolExecutor, TimeoutError
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
import json
import logging
import os

from tqdm import tqdm

from ..core.board import SudokuBoard
from ..solvers import BaseSolver, BruteForceSolver, LogicalSolver

logger = logging.getLogger(__name__)


def load_puzzles(path: str) -> List[SudokuBoard]:
    """
    Read puzzles from a text file, one 81-character puzzle per line.

    Blank lines and lines starting with ``#`` are skipped.

    Raises:
        ValueError: if a line is not a valid puzzle. The message names the line.
    """
    puzzles = []
    with open(path, "r") as f:
        for line_number, line in enumerate(f, 1):
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            try:
                puzzles.append(SudokuBoard.from_string(line))
            except ValueError as e:
                raise ValueError(f"{path}:{line_number}: {e}") from e
    return puzzles


@dataclass
class BenchmarkResult:
    """Results from a single benchmark run."""
    puzzle_id: int
    puzzle: str
    algorithm: str
    solved: bool
    time_seconds: float
    memory_bytes: int
    iterations: int
    backtracks: int
    nodes_explored: int
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "puzzle_id": self.puzzle_id,
            "puzzle": self.puzzle,
            "algorithm": self.algorithm,
            "solved": self.solved,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "memory_mb": self.memory_bytes / (1024 * 1024),
            "iterations": self.iterations,
            "backtracks": self.backtracks,
            "nodes_explored": self.nodes_explored,
            **self.extra
        }


class Benchmark:
    """
    Runs every solver on every puzzle and collects performance metrics.

    The logical solver also reports how often each strategy made progress,
    which shows which techniques a puzzle set actually needs.
    """

    def __init__(
        self,
        puzzles: List[SudokuBoard],
        solvers: Optional[Dict[str, BaseSolver]] = None,
        timeout_seconds: float = 60.0,
    ):
        """
        Initialize the benchmark.

        Args:
            puzzles: Puzzles to solve.
            solvers: Dict of solver_name -> solver_instance (default: logical and brute force).
            timeout_seconds: Maximum time per puzzle per solver.
        """
        self.puzzles = puzzles
        self.timeout_seconds = timeout_seconds
        if solvers is None:
            self.solvers = {
                LogicalSolver.name: LogicalSolver(),
                BruteForceSolver.name: BruteForceSolver(),
            }
        else:
            self.solvers = solvers
        self.results: List[BenchmarkResult] = []

    def run(self, show_progress: bool = True) -> List[BenchmarkResult]:
        """
        Run the full benchmark suite.

        Returns:
            List of BenchmarkResult objects.
        """
        self.results = []
        pbar = tqdm(
            total=len(self.puzzles) * len(self.solvers),
            desc="Benchmarking",
            disable=not show_progress,
        )
        for puzzle_id, puzzle in enumerate(self.puzzles):
            for solver_name, solver in self.solvers.items():
                self.results.append(self._run_single(puzzle, puzzle_id, solver_name, solver))
                pbar.update(1)
        pbar.close()
        return self.results

    def _run_single(
        self,
        puzzle: SudokuBoard,
        puzzle_id: int,
        solver_name: str,
        solver: BaseSolver,
    ) -> BenchmarkResult:
        """Run a single solver on a single puzzle."""
        # Leaving the block joins the worker, so a timed out solve finishes
        # before the next one starts tracing memory.
        with ThreadPoolExecutor(max_workers=1) as executor:
            future = executor.submit(solver.solve, puzzle)
            try:
                solution, stats = future.result(timeout=self.timeout_seconds)
            except TimeoutError:
                logger.warning("%s timed out on puzzle %d", solver_name, puzzle_id)
                return self._failed(puzzle, puzzle_id, solver_name, "Timeout")

        return BenchmarkResult(
            puzzle_id=puzzle_id,
            puzzle=puzzle.to_string(),
            algorithm=solver_name,
            solved=stats.solved,
            time_seconds=stats.time_seconds,
            memory_bytes=stats.memory_bytes,
            iterations=stats.iterations,
            backtracks=stats.backtracks,
            nodes_explored=stats.nodes_explored,
            extra=dict(stats.extra),
        )

    def _failed(self, puzzle: SudokuBoard, puzzle_id: int, solver_name: str, error: str) -> BenchmarkResult:
        return BenchmarkResult(
            puzzle_id=puzzle_id,
            puzzle=puzzle.to_string(),
            algorithm=solver_name,
            solved=False,
            time_seconds=self.timeout_seconds,
            memory_bytes=0,
            iterations=0,
            backtracks=0,
            nodes_explored=0,
            extra={"error": error},
        )

    def strategy_usage(self, solver_name: str = LogicalSolver.name) -> Dict[str, int]:
        """Rounds won by each strategy, summed over all puzzles."""
        usage: Counter = Counter()
        for result in self.results:
            if result.algorithm == solver_name:
                usage.update(result.extra.get("strategies", {}))
        return dict(usage.most_common())

    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics from benchmark results."""
        summary = {
            "total_puzzles": len(self.puzzles),
            "solvers_tested": list(self.solvers.keys()),
            "results_by_algorithm": {},
            "strategy_usage": self.strategy_usage(),
        }

        for solver_name in self.solvers:
            solver_results = [r for r in self.results if r.algorithm == solver_name]
            if not solver_results:
                continue
            solved = [r for r in solver_results if r.solved]
            times = [r.time_seconds for r in solver_results]
            memory = [r.memory_bytes for r in solver_results]
            errors = Counter(r.extra["error"] for r in solver_results if "error" in r.extra)

            summary["results_by_algorithm"][solver_name] = {
                "accuracy": len(solved) / len(solver_results) * 100,
                "avg_time_seconds": sum(times) / len(times),
                "max_time_seconds": max(times),
                "min_time_seconds": min(times),
                "avg_memory_mb": sum(memory) / len(memory) / (1024 * 1024),
                "total_solved": len(solved),
                "total_tested": len(solver_results),
                "errors": dict(errors),
            }

        return summary

    def save_results(self, output_dir: str) -> None:
        """Save benchmark results and the summary to JSON files."""
        os.makedirs(output_dir, exist_ok=True)

        results_file = os.path.join(output_dir, "benchmark_results.json")
        with open(results_file, "w") as f:
            json.dump([r.to_dict() for r in self.results], f, indent=2)

        summary_file = os.path.join(output_dir, "benchmark_summary.json")
        with open(summary_file, "w") as f:
            json.dump(self.get_summary(), f, indent=2)

        logger.info("Results saved to %s", output_dir)
