"""Visualization utilities for benchmark results."""

from __future__ import annotations
from collections import Counter
import os
from typing import Dict, List

import matplotlib.pyplot as plt
import numpy as np
import seaborn as sns

from .benchmark import BenchmarkResult


class Visualizer:
    """
    Chart generator for solver benchmark results.

    Compares solve time, accuracy and memory per algorithm, and shows which
    strategies the logical solver relied on.
    """

    COLORS = {
        "Logical": "#3498db",     # Blue
        "BruteForce": "#e74c3c",  # Red
    }

    def __init__(self, results: List[BenchmarkResult], output_dir: str = "results"):
        """
        Initialize the visualizer.

        Args:
            results: List of benchmark results.
            output_dir: Directory to save generated charts.
        """
        self.results = results
        self.output_dir = output_dir
        os.makedirs(output_dir, exist_ok=True)

        sns.set_style("whitegrid")
        sns.set_palette("husl")

    def _algorithms(self) -> List[str]:
        return sorted(set(r.algorithm for r in self.results))

    def _save(self, name: str) -> str:
        plt.tight_layout()
        path = os.path.join(self.output_dir, name)
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close()
        return path

    def generate_all(self) -> List[str]:
        """
        Generate all charts.

        Returns:
            List of paths to generated chart files.
        """
        charts = [
            self.plot_time_comparison(),
            self.plot_accuracy_comparison(),
            self.plot_memory_comparison(),
            self.plot_time_distribution(),
        ]
        if self.strategy_usage():
            charts.append(self.plot_strategy_usage())
        return charts

    def plot_time_comparison(self) -> str:
        """Create bar chart comparing average solve times."""
        fig, ax = plt.subplots(figsize=(10, 6))

        algorithms = self._algorithms()
        avg_times = [
            np.mean([r.time_seconds for r in self.results if r.algorithm == algo])
            for algo in algorithms
        ]
        colors = [self.COLORS.get(algo, "#95a5a6") for algo in algorithms]

        bars = ax.bar(algorithms, avg_times, color=colors, edgecolor='black', linewidth=0.5)
        for bar, time in zip(bars, avg_times):
            ax.annotate(f'{time:.4f}s',
                        xy=(bar.get_x() + bar.get_width() / 2, bar.get_height()),
                        xytext=(0, 3),
                        textcoords="offset points",
                        ha='center', va='bottom', fontsize=10)

        ax.set_xlabel('Algorithm', fontsize=12)
        ax.set_ylabel('Average Time (seconds)', fontsize=12)
        ax.set_title('Average Solve Time by Algorithm', fontsize=14, fontweight='bold')
        ax.set_ylim(bottom=0)
        return self._save("time_comparison.png")

    def plot_accuracy_comparison(self) -> str:
        """
        Stacked bar chart of outcomes per algorithm: solved, or the error
        that stopped the solve.
        """
        fig, ax = plt.subplots(figsize=(10, 6))

        algorithms = self._algorithms()
        outcomes: Dict[str, Counter] = {}
        for algo in algorithms:
            outcomes[algo] = Counter(
                "Solved" if r.solved else r.extra.get("error", "Failed")
                for r in self.results if r.algorithm == algo
            )
        labels = sorted({label for counts in outcomes.values() for label in counts},
                        key=lambda label: (label != "Solved", label))

        palette = sns.color_palette("husl", len(labels))
        bottom = np.zeros(len(algorithms))
        for label, color in zip(labels, palette):
            totals = np.array([sum(outcomes[algo].values()) for algo in algorithms])
            shares = np.array([outcomes[algo][label] for algo in algorithms]) / totals * 100
            ax.bar(algorithms, shares, bottom=bottom, label=label, color=color,
                   edgecolor='black', linewidth=0.5)
            bottom += shares

        ax.set_xlabel('Algorithm', fontsize=12)
        ax.set_ylabel('Puzzles (%)', fontsize=12)
        ax.set_title('Solve Outcome by Algorithm', fontsize=14, fontweight='bold')
        ax.legend(title='Outcome', bbox_to_anchor=(1.05, 1), loc='upper left')
        ax.set_ylim(0, 105)
        return self._save("accuracy_comparison.png")

    def plot_memory_comparison(self) -> str:
        """Create bar chart comparing memory usage."""
        fig, ax = plt.subplots(figsize=(10, 6))

        algorithms = self._algorithms()
        avg_memory = [
            np.mean([r.memory_bytes / (1024 * 1024) for r in self.results if r.algorithm == algo])
            for algo in algorithms
        ]
        colors = [self.COLORS.get(algo, "#95a5a6") for algo in algorithms]

        bars = ax.bar(algorithms, avg_memory, color=colors, edgecolor='black', linewidth=0.5)
        for bar, mem in zip(bars, avg_memory):
            ax.annotate(f'{mem:.2f} MB',
                        xy=(bar.get_x() + bar.get_width() / 2, bar.get_height()),
                        xytext=(0, 3),
                        textcoords="offset points",
                        ha='center', va='bottom', fontsize=10)

        ax.set_xlabel('Algorithm', fontsize=12)
        ax.set_ylabel('Average Memory (MB)', fontsize=12)
        ax.set_title('Memory Usage by Algorithm', fontsize=14, fontweight='bold')
        ax.set_ylim(bottom=0)
        return self._save("memory_comparison.png")

    def plot_time_distribution(self) -> str:
        """Create box plot showing time distribution."""
        fig, ax = plt.subplots(figsize=(12, 6))

        algorithms = self._algorithms()
        sns.boxplot(
            x=[r.algorithm for r in self.results],
            y=[r.time_seconds for r in self.results],
            order=algorithms,
            color="#95a5a6",
            ax=ax,
        )

        ax.set_xlabel('Algorithm', fontsize=12)
        ax.set_ylabel('Time (seconds)', fontsize=12)
        ax.set_title('Solve Time Distribution by Algorithm', fontsize=14, fontweight='bold')
        return self._save("time_distribution.png")

    def strategy_usage(self) -> Dict[str, int]:
        """Rounds won by each strategy across all results."""
        usage: Counter = Counter()
        for r in self.results:
            usage.update(r.extra.get("strategies", {}))
        return dict(usage.most_common())

    def plot_strategy_usage(self) -> str:
        """Horizontal bar chart of how many rounds each strategy won."""
        usage = self.strategy_usage()
        fig, ax = plt.subplots(figsize=(10, max(4, 0.35 * len(usage))))

        sns.barplot(x=list(usage.values()), y=list(usage.keys()), color="#3498db", ax=ax)

        ax.set_xlabel('Rounds', fontsize=12)
        ax.set_ylabel('Strategy', fontsize=12)
        ax.set_xscale('log')
        ax.set_title('Strategy Usage (Logical Solver)', fontsize=14, fontweight='bold')
        return self._save("strategy_usage.png")

    def generate_summary_table(self) -> str:
        """Generate a markdown summary table."""
        lines = [
            "# Benchmark Summary\n",
            "| Algorithm | Accuracy | Avg Time | Avg Memory | Avg Iterations |",
            "|-----------|----------|----------|------------|----------------|"
        ]

        for algo in self._algorithms():
            algo_results = [r for r in self.results if r.algorithm == algo]

            solved = sum(1 for r in algo_results if r.solved)
            accuracy = (solved / len(algo_results)) * 100

            avg_time = np.mean([r.time_seconds for r in algo_results])
            avg_memory = np.mean([r.memory_bytes / (1024 * 1024) for r in algo_results])
            avg_iters = np.mean([r.iterations for r in algo_results])

            lines.append(
                f"| {algo} | {accuracy:.1f}% | {avg_time:.4f}s | {avg_memory:.2f} MB | {int(avg_iters):,} |"
            )

        usage = self.strategy_usage()
        if usage:
            lines += ["", "| Strategy | Rounds |", "|----------|--------|"]
            lines += [f"| {name} | {count} |" for name, count in usage.items()]

        path = os.path.join(self.output_dir, "benchmark_summary.md")
        with open(path, "w") as f:
            f.write("\n".join(lines))

        return path
