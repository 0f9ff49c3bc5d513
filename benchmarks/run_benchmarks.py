#!/usr/bin/env python3
"""Run all httprollup microbenchmarks and print a summary table.

Usage:
    python -m benchmarks.run_benchmarks
    # or
    python benchmarks/run_benchmarks.py
"""

import sys
import os

# Ensure project root is importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))


def run_all():
    results = []

    print("=" * 70)
    print("  httprollup Microbenchmark Suite")
    print("=" * 70)
    print()

    # ---- Flat parsing -------------------------------------------------------
    print("[1/2] Flat query strings")
    print("-" * 70)
    try:
        from benchmarks.microbenchmarks.bench_parsing import (
            bench_rollup_flat,
            bench_rollup_nested,
            bench_rollup_force_list,
            bench_stdlib_parse_qs,
            print_result,
        )

        flat_result = bench_rollup_flat()
        print_result(flat_result)
        results.append({"framework": "httprollup", **flat_result})

        stdlib_result = bench_stdlib_parse_qs()
        print_result(stdlib_result)
        results.append({"framework": "stdlib", **stdlib_result})
    except Exception as exc:
        print(f"  ERROR: {exc}")
    print()

    # ---- Nested parsing -----------------------------------------------------
    print("[2/2] Nested query strings")
    print("-" * 70)
    try:
        nested_result = bench_rollup_nested()
        print_result(nested_result)
        results.append({"framework": "httprollup", **nested_result})

        force_result = bench_rollup_force_list()
        print_result(force_result)
        results.append({"framework": "httprollup", **force_result})
    except Exception as exc:
        print(f"  ERROR: {exc}")
    print()

    # ---- Summary table ------------------------------------------------------
    print("=" * 70)
    print("  Summary")
    print("=" * 70)
    print()
    print(f"  {'Benchmark':<30s} {'Median (s)':>12s} {'Ops/sec':>14s}")
    print(f"  {'-' * 30} {'-' * 12} {'-' * 14}")

    for r in results:
        name = r.get("name", r.get("framework", "?"))
        median = r.get("median_s", 0)
        ops = r.get("ops_per_sec", 0)
        print(f"  {name:<30s} {median:>12.4f} {ops:>14,.0f}")

    print()
    print("Done.")


if __name__ == "__main__":
    run_all()
