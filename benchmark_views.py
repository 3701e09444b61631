#!/usr/bin/env python3
"""Performance benchmarking suite for map2d views.

This script times the projection operations of Map2D on random sparse maps
of varying sizes and densities, to show how the row-major views compare
with the column scans and the full transpose.
"""

import argparse
import time
from typing import Any, Dict, List

import pandas as pd

try:
    from map2d import Map2D, random_map2d, to_frame
except ImportError:
    print("Please install map2d package first: pip install -e .")
    exit(1)


OPERATIONS = ["row_view", "column_view", "row_map_view", "column_map_view", "to_frame"]


def benchmark_operation(m: Map2D, operation: str, repeats: int = 5) -> Dict[str, Any]:
    """Benchmark a single view operation.

    Parameters
    ----------
    m : Map2D
        Map to project
    operation : str
        Operation name, one of ``OPERATIONS``
    repeats : int
        Number of timed calls; the mean is reported

    Returns
    -------
    Dict[str, Any]
        Benchmark results
    """
    calls = {
        "row_view": lambda: m.row_view(0),
        "column_view": lambda: m.column_view(0),
        "row_map_view": m.row_map_view,
        "column_map_view": m.column_map_view,
        "to_frame": lambda: to_frame(m),
    }
    call = calls[operation]

    start_time = time.perf_counter()
    for _ in range(repeats):
        call()
    runtime = (time.perf_counter() - start_time) / repeats

    return {
        "operation": operation,
        "runtime": runtime,
        "entries": m.size(),
    }


def run_benchmark_suite(
    n_rows_list: List[int] = [100, 1000],
    n_cols_list: List[int] = [10, 100],
    density_list: List[float] = [0.1, 0.5],
    operations: List[str] = OPERATIONS,
    repeats: int = 5,
    seed: int = 42,
) -> List[Dict[str, Any]]:
    """Run comprehensive benchmark suite.

    Parameters
    ----------
    n_rows_list : List[int]
        List of row counts to test
    n_cols_list : List[int]
        List of column counts to test
    density_list : List[float]
        List of densities to test
    operations : List[str]
        List of operations to benchmark
    repeats : int
        Timed calls per operation
    seed : int
        Seed for map generation

    Returns
    -------
    List[Dict[str, Any]]
        Detailed benchmark results
    """
    results = []
    total_configs = len(n_rows_list) * len(n_cols_list) * len(density_list)
    config_num = 0

    print(f"Running benchmark suite: {total_configs} configurations × {len(operations)} operations")
    print()

    for n_rows in n_rows_list:
        for n_cols in n_cols_list:
            for density in density_list:
                config_num += 1
                print(f"[{config_num}/{total_configs}] {n_rows} rows × {n_cols} cols, density={density:.2f}")
                m = random_map2d(n_rows, n_cols, density=density, rng=seed)

                for operation in operations:
                    result = benchmark_operation(m, operation, repeats)
                    result.update({
                        "n_rows": n_rows,
                        "n_cols": n_cols,
                        "density": density,
                        "config_id": f"{n_rows}x{n_cols}_d{density:.2f}",
                    })
                    results.append(result)
                    print(f"  {operation}: {result['runtime'] * 1000:.3f}ms")
                print()

    return results


def analyze_results(results: List[Dict[str, Any]]) -> None:
    """Analyze and display benchmark results.

    Parameters
    ----------
    results : List[Dict[str, Any]]
        Benchmark results from run_benchmark_suite
    """
    df = pd.DataFrame(results)

    print("=" * 60)
    print("BENCHMARK RESULTS SUMMARY")
    print("=" * 60)
    print()

    print("MEAN RUNTIME BY OPERATION (ms):")
    print((df.groupby("operation")["runtime"].agg(["mean", "min", "max"]) * 1000).round(3))
    print()

    print("RUNTIME PER ENTRY BY OPERATION (µs):")
    df["per_entry"] = df["runtime"] / df["entries"].clip(lower=1) * 1e6
    print(df.pivot_table(index="config_id", columns="operation", values="per_entry").round(3))
    print()


def main():
    """Main benchmark runner with command line interface."""
    parser = argparse.ArgumentParser(description="Benchmark map2d view operations")
    parser.add_argument("--rows", nargs="+", type=int, default=[100, 1000],
                        help="List of row counts to test")
    parser.add_argument("--cols", nargs="+", type=int, default=[10, 100],
                        help="List of column counts to test")
    parser.add_argument("--density", nargs="+", type=float, default=[0.1, 0.5],
                        help="List of densities (0.0-1.0)")
    parser.add_argument("--operations", nargs="+", default=OPERATIONS,
                        choices=OPERATIONS,
                        help="Operations to benchmark")
    parser.add_argument("--repeats", type=int, default=5,
                        help="Timed calls per operation")
    parser.add_argument("--save", type=str, help="Save detailed results to CSV file")
    parser.add_argument("--quick", action="store_true",
                        help="Run quick benchmark (fewer configurations)")

    args = parser.parse_args()

    if args.quick:
        results = run_benchmark_suite(
            n_rows_list=[100],
            n_cols_list=[10],
            density_list=[0.5],
            operations=args.operations,
            repeats=2,
        )
    else:
        results = run_benchmark_suite(
            n_rows_list=args.rows,
            n_cols_list=args.cols,
            density_list=args.density,
            operations=args.operations,
            repeats=args.repeats,
        )

    analyze_results(results)

    if args.save:
        pd.DataFrame(results).to_csv(args.save, index=False)
        print(f"\nDetailed results saved to {args.save}")


if __name__ == "__main__":
    main()
