#!/usr/bin/env python3
"""
Performance evaluation script for the maximum-pairing folding algorithms.

This script benchmarks the runtime and memory usage of the $O(N^{3})$ Nussinov
folder and the $O(N^{4})$ Akutsu simple-pseudoknot folder across a range of
sequence lengths. It analyzes the empirical time complexity and generates
plots for visualization.
"""

import time
import tracemalloc
import random
from pathlib import Path
from typing import Callable, Dict

import numpy as np
import matplotlib.pyplot as plt

from rnafoldml.folding import akutsu, nussinov
from rnafoldml.structures import Rna, SecondaryStructure

# Folder entry points and their theoretical time complexity exponents.
FOLDERS: Dict[str, Callable[[Rna], SecondaryStructure]] = {
    "nussinov": nussinov.predict,
    "akutsu": akutsu.predict,
}
THEORETICAL_EXPONENTS: Dict[str, float] = {
    "nussinov": 3.0,
    "akutsu": 4.0,
}


def generate_random_sequence(length: int, seed: int = None) -> str:
    """
    Generate a random RNA sequence of a given length.

    Parameters
    ----------
    length : int
        The desired length of the RNA sequence ($N$).
    seed : int, optional
        Seed for the random number generator for reproducibility.
        The default is None.

    Returns
    -------
    str
        A random RNA sequence composed of 'A', 'C', 'G', 'U' bases.
    """
    rng = random.Random(seed)
    return ''.join(rng.choices(['A', 'C', 'G', 'U'], k=length))


def run_fold(engine: str, sequence: str) -> dict:
    """
    Fold an RNA sequence with the named engine.

    Returns
    -------
    dict
        A dictionary containing:
        'num_pairs' : int
            The number of base pairs of the predicted structure.
        'length' : int
            The length of the sequence ($N$).
        'structure' : SecondaryStructure
            The predicted structure.
    """
    structure = FOLDERS[engine](Rna(seq=sequence, name=f"random_{len(sequence)}"))

    return {
        'num_pairs': structure.num_pairs,
        'length': len(sequence),
        'structure': structure,
    }


def benchmark_runtime(engine: str, sequence_lengths: list[int], num_trials: int = 3) -> dict:
    """
    Benchmark the mean runtime of one engine across different sequence lengths ($N$).

    Parameters
    ----------
    engine : str
        Key of `FOLDERS`.
    sequence_lengths : list of int
        List of sequence lengths ($N$) to test.
    num_trials : int, optional
        Number of folding runs per length for averaging. The default is 3.

    Returns
    -------
    dict
        A dictionary containing:
        'lengths' : list of int
            The sequence lengths tested.
        'mean_times' : list of float
            The mean runtime (in seconds) for each length.
        'std_times' : list of float
            The standard deviation of runtime for each length.
        'num_pairs' : list of int
            The pair count of the last trial for each length.
    """
    # Warm-up so numba compilation is not charged to the first length.
    run_fold(engine, generate_random_sequence(8, seed=0))

    results = {
        'lengths': sequence_lengths,
        'mean_times': [],
        'std_times': [],
        'num_pairs': []
    }

    for n in sequence_lengths:
        print(f"\nBenchmarking {engine} N={n}...")
        trial_times = []

        for trial in range(num_trials):
            # Sequence changes per trial
            seq = generate_random_sequence(n, seed=42 + trial)

            start = time.perf_counter()
            result = run_fold(engine, seq)
            elapsed = time.perf_counter() - start

            trial_times.append(elapsed)
            print(f"  Trial {trial + 1}/{num_trials}: {elapsed:.3f}s")

        results['mean_times'].append(float(np.mean(trial_times)))
        results['std_times'].append(float(np.std(trial_times)))
        results['num_pairs'].append(result['num_pairs'])

        print(f"  Mean: {results['mean_times'][-1]:.3f}s ± {results['std_times'][-1]:.3f}s")
        print(f"  Base pairs: {results['num_pairs'][-1]}")

    return results


def benchmark_memory(engine: str, sequence_lengths: list[int]) -> dict:
    """
    Benchmark peak memory usage across different sequence lengths ($N$).

    Uses Python's `tracemalloc` to measure the peak memory allocated
    during the DP calculation.

    Returns
    -------
    dict
        A dictionary containing:
        'lengths' : list of int
            The sequence lengths tested.
        'peak_memory_mb' : list of float
            The peak memory usage (in megabytes) for each length.
    """
    results = {
        'lengths': sequence_lengths,
        'peak_memory_mb': []
    }

    for n in sequence_lengths:
        print(f"\nMeasuring {engine} memory for N={n}...")
        seq = generate_random_sequence(n, seed=42)

        tracemalloc.start()
        # tracemalloc tracks peak memory until tracemalloc.stop()
        run_fold(engine, seq)
        _, peak = tracemalloc.get_traced_memory()
        tracemalloc.stop()

        peak_mb = peak / 1024 ** 2
        results['peak_memory_mb'].append(peak_mb)

        print(f"  Peak memory: {peak_mb:.2f} MB")

    return results


def analyze_complexity(lengths: list[int], times: list[float], theoretical_k: float = None) -> tuple[float, np.ndarray]:
    """
    Fit empirical runtime data to the relationship $T \\propto N^{k}$ and
    estimate the time complexity exponent $k$.

    This is done by performing a linear regression on the log-log transformed data:
    $\\log(T) = k \\cdot \\log(N) + c$

    Parameters
    ----------
    lengths : list of int
        Sequence lengths ($N$).
    times : list of float
        Mean runtimes ($T$) corresponding to each length.
    theoretical_k : float, optional
        Exponent to compare against in the printed summary.

    Returns
    -------
    tuple of (float, numpy.ndarray)
        The estimated exponent $k$ and an array of fitted times.
    """
    log_n = np.log(lengths)
    log_time = np.log(times)

    # Linear fit in log-log space: log(T) = k*log(N) + c
    coeffs = np.polyfit(log_n, log_time, 1)
    k = float(coeffs[0])
    c = float(coeffs[1])

    # Fitted curve: T = e^c * N^k
    fitted_times = np.exp(c) * np.array(lengths, dtype=float) ** k

    print(f"\n{'=' * 60}")
    print("COMPLEXITY ANALYSIS")
    print(f"{'=' * 60}")
    print(f"Empirical complexity: O(N^{k:.2f})")
    if theoretical_k is not None:
        print(f"Theoretical:          O(N^{theoretical_k:.0f})")
    print(f"{'=' * 60}\n")

    return k, fitted_times


def plot_results(runtime_results: Dict[str, dict], memory_results: Dict[str, dict],
                 fitted: Dict[str, tuple[float, np.ndarray]], output_dir: Path = Path('performance_results')) -> Path:
    """
    Create and save runtime and memory plots for every benchmarked engine.

    Parameters
    ----------
    runtime_results : dict
        `benchmark_runtime` results keyed by engine.
    memory_results : dict
        `benchmark_memory` results keyed by engine.
    fitted : dict
        `analyze_complexity` results keyed by engine.
    output_dir : Path
        Directory the figure is saved to.

    Returns
    -------
    Path
        The saved figure.
    """
    fig, axes = plt.subplots(1, 2, figsize=(14, 5))
    ax1, ax2 = axes

    for engine, results in runtime_results.items():
        k, fitted_times = fitted[engine]
        lengths = results['lengths']
        ax1.errorbar(lengths, results['mean_times'], yerr=results['std_times'], fmt='o-', capsize=5,
                     label=f'{engine} measured', linewidth=2, markersize=8)
        ax1.plot(lengths, fitted_times, '--', label=f'{engine} fitted $O(N^{{{k:.2f}}})$', linewidth=2, alpha=0.7)

        ax2.plot(lengths, memory_results[engine]['peak_memory_mb'], 's-', linewidth=2, markersize=8,
                 label=engine)

    ax1.set_xlabel('Sequence Length ($N$)', fontsize=12)
    ax1.set_ylabel('Runtime (seconds)', fontsize=12)
    ax1.set_title('Runtime Performance (Log-Log)', fontsize=14, fontweight='bold')
    ax1.legend(fontsize=10)
    ax1.grid(True, alpha=0.3)
    ax1.set_yscale('log')
    ax1.set_xscale('log')

    ax2.set_xlabel('Sequence Length ($N$)', fontsize=12)
    ax2.set_ylabel('Peak Memory (MB)', fontsize=12)
    ax2.set_title('Memory Usage (Log-Log)', fontsize=14, fontweight='bold')
    ax2.legend(fontsize=10)
    ax2.grid(True, alpha=0.3)
    ax2.set_yscale('log')
    ax2.set_xscale('log')

    plt.tight_layout()

    output_dir.mkdir(parents=True, exist_ok=True)
    figure_path = output_dir / 'performance_analysis.png'
    fig.savefig(figure_path, dpi=300, bbox_inches='tight')
    plt.close(fig)
    print(f"\nPlot saved to: {figure_path}")

    return figure_path


def generate_markdown_table(engine: str, runtime_results: dict, memory_results: dict) -> str:
    """
    Build the performance results of one engine as a Markdown table.

    Parameters
    ----------
    engine : str
        Engine name, used in the heading.
    runtime_results : dict
        Results from `benchmark_runtime`.
    memory_results : dict
        Results from `benchmark_memory`.

    Returns
    -------
    str
        The table, one row per sequence length.
    """
    lines = [
        f"**{engine}**",
        "",
        "| Sequence Length ($N$) | Runtime (s) | Peak Memory (MB) | Base Pairs |",
        "|-----------------------|-------------|------------------|------------|",
    ]

    for i, n in enumerate(runtime_results['lengths']):
        time_mean = runtime_results['mean_times'][i]
        time_std = runtime_results['std_times'][i]
        memory = memory_results['peak_memory_mb'][i]
        num_pairs = runtime_results['num_pairs'][i]
        lines.append(f"| {n:21d} | {time_mean:6.3f} ± {time_std:.3f} | {memory:16.2f} | {num_pairs:10d} |")

    return "\n".join(lines)


def main():
    """
    Main performance evaluation workflow.

    Executes runtime and memory benchmarks for each engine, analyzes the
    empirical complexity, generates plots, and prints the results tables.
    """
    print("=" * 60)
    print("RNA MAXIMUM PAIRING FOLDING - PERFORMANCE EVALUATION")
    print("=" * 60)

    # Configuration
    sequence_lengths = [20, 40, 60, 80, 100]  # Adjust based on time constraints
    num_trials = 3  # Number of runs per length for averaging

    print(f"\nSequence lengths to test: {sequence_lengths}")
    print(f"Trials per length: {num_trials}")

    runtime_results, memory_results, fitted = {}, {}, {}
    for engine in FOLDERS:
        print("\n" + "=" * 60)
        print(f"{engine.upper()}: RUNTIME BENCHMARKING")
        print("=" * 60)
        runtime_results[engine] = benchmark_runtime(engine, sequence_lengths, num_trials)

        print("\n" + "=" * 60)
        print(f"{engine.upper()}: MEMORY BENCHMARKING")
        print("=" * 60)
        memory_results[engine] = benchmark_memory(engine, sequence_lengths)

        fitted[engine] = analyze_complexity(
            runtime_results[engine]['lengths'],
            runtime_results[engine]['mean_times'],
            THEORETICAL_EXPONENTS[engine],
        )

    plot_results(runtime_results, memory_results, fitted)

    print("\n" + "=" * 60)
    print("MARKDOWN TABLES FOR README")
    print("=" * 60 + "\n")
    for engine in FOLDERS:
        print(generate_markdown_table(engine, runtime_results[engine], memory_results[engine]))
        print()

    print("\n" + "=" * 60)
    print("EVALUATION COMPLETE")
    print("=" * 60)


if __name__ == "__main__":
    main()
