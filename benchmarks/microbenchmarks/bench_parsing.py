"""Microbenchmark: query string rollup performance.

1. rollup_query_string on flat query strings (10K iterations).
2. rollup_query_string on dotted, nested query strings (10K iterations).
3. rollup_query_string in FORCE_LIST mode (10K iterations).
4. stdlib urllib.parse.parse_qs on the same flat input, for comparison.
"""

import time
import statistics


def _flat_queries(n):
    return [
        f"page={i % 10};limit=20;sort=name;order=asc;filter=active;q=search+term+{i}"
        for i in range(n)
    ]


def _nested_queries(n):
    return [
        f"employee.name.first=Jane{i};employee.name.last=Smith;"
        f"employee.city=New%20York;id={i};phone=(212)123-4567;"
        f"phone=(212)555-1212;@fax=(212)999-8877"
        for i in range(n)
    ]


def _time(name, n, fn, inputs):
    # Warm up
    for qs in inputs[:100]:
        fn(qs)

    timings = []
    for _ in range(5):
        start = time.perf_counter()
        for qs in inputs:
            fn(qs)
        elapsed = time.perf_counter() - start
        timings.append(elapsed)

    return {
        "name": name,
        "n": n,
        "min_s": min(timings),
        "median_s": statistics.median(timings),
        "mean_s": statistics.mean(timings),
        "ops_per_sec": n / statistics.median(timings),
    }


def bench_rollup_flat(n=10_000):
    """Benchmark rollup_query_string on flat input."""
    from httprollup import rollup_query_string

    return _time("rollup (flat)", n, rollup_query_string, _flat_queries(n))


def bench_rollup_nested(n=10_000):
    """Benchmark rollup_query_string on dotted names and repeated keys."""
    from httprollup import rollup_query_string

    return _time("rollup (nested)", n, rollup_query_string, _nested_queries(n))


def bench_rollup_force_list(n=10_000):
    """Benchmark rollup_query_string with FORCE_LIST."""
    from httprollup import rollup_query_string

    config = {"FORCE_LIST": True}
    return _time(
        "rollup (FORCE_LIST)",
        n,
        lambda qs: rollup_query_string(qs, config),
        _nested_queries(n),
    )


def bench_stdlib_parse_qs(n=10_000):
    """Benchmark stdlib urllib.parse.parse_qs for comparison."""
    from urllib.parse import parse_qs

    return _time(
        "stdlib parse_qs",
        n,
        lambda qs: parse_qs(qs, separator=";"),
        _flat_queries(n),
    )


def print_result(result):
    """Pretty-print a benchmark result dict."""
    print(f"  {result['name']:>30s}: "
          f"median={result['median_s']:.4f}s  "
          f"min={result['min_s']:.4f}s  "
          f"({result['ops_per_sec']:,.0f} ops/sec)")


def main():
    n = 10_000

    print(f"Rollup benchmarks ({n} iterations, 5 rounds each)")
    print("-" * 70)

    flat_result = bench_rollup_flat(n)
    print_result(flat_result)

    stdlib_result = bench_stdlib_parse_qs(n)
    print_result(stdlib_result)

    speedup = stdlib_result["median_s"] / flat_result["median_s"]
    print(f"\n  rollup is {speedup:.2f}x "
          f"{'faster' if speedup > 1 else 'slower'} than stdlib parse_qs")
    print()

    nested_result = bench_rollup_nested(n)
    print_result(nested_result)

    force_result = bench_rollup_force_list(n)
    print_result(force_result)

    print()
    return flat_result, stdlib_result, nested_result, force_result


if __name__ == "__main__":
    main()
