"""Benchmark: comment parse and render throughput.

Measures how many comment parse operations and pretty-print passes can
complete per second using the public elmdoc API.  The render benchmark
is dominated by word-by-word markdown reflow.
"""
from __future__ import annotations

import json
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import elmdoc

_ITERATIONS: int = 2_000
_RENDER_ITERATIONS: int = 500

_SAMPLE_BODY = """A library for fast immutable arrays. The elements in an array must have the
same type, and lookups, updates and appends are all logarithmic or better,
which makes arrays a good fit for large collections that change often.

# Arrays
@docs Array

# Creation
@docs empty, initialize, repeat, fromList

# Query
@docs isEmpty, length, get

# Manipulate
@docs set, push, append, slice

Arrays are usually built with `fromList`:

    fromList [ 1, 2, 3 ]

    initialize 4 identity --> fromList [ 0, 1, 2, 3 ]

Mapping, folding and filtering all run in linear time.

@docs toList, toIndexedList, map, indexedMap, foldl, foldr, filter
"""


def _report(operation: str, iterations: int, total: float) -> dict[str, object]:
    result: dict[str, object] = {
        "operation": operation,
        "iterations": iterations,
        "total_seconds": round(total, 4),
        "ops_per_second": round(iterations / total, 1),
        "avg_latency_ms": round(total / iterations * 1000, 4),
    }
    print(
        f"[bench_throughput] {result['operation']}: "
        f"{result['ops_per_second']:,.0f} ops/sec  "
        f"avg {result['avg_latency_ms']:.4f} ms"
    )
    return result


def bench_parse_throughput() -> dict[str, object]:
    """Benchmark module comment parsing throughput.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms.
    """
    start = time.perf_counter()
    for _ in range(_ITERATIONS):
        elmdoc.parse_file_comment(_SAMPLE_BODY)
    total = time.perf_counter() - start
    return _report("elmdoc_parse_throughput", _ITERATIONS, total)


def bench_render_throughput(width: int = 80) -> dict[str, object]:
    """Benchmark pretty-printing (reflow + tag packing) of a parsed comment.

    Returns
    -------
    dict with keys: operation, iterations, total_seconds, ops_per_second,
    avg_latency_ms.
    """
    comment = elmdoc.parse_file_comment(_SAMPLE_BODY)

    start = time.perf_counter()
    for _ in range(_RENDER_ITERATIONS):
        elmdoc.pretty_file_comment(width, comment)
    total = time.perf_counter() - start
    return _report(f"elmdoc_render_throughput_w{width}", _RENDER_ITERATIONS, total)


if __name__ == "__main__":
    results_dir = Path(__file__).parent / "results"
    results_dir.mkdir(exist_ok=True)

    for bench_fn, fname in [
        (bench_parse_throughput, "parse_throughput_baseline.json"),
        (bench_render_throughput, "render_throughput_baseline.json"),
    ]:
        result = bench_fn()
        output_path = results_dir / fname
        with open(output_path, "w", encoding="utf-8") as fh:
            json.dump(result, fh, indent=2)
        print(f"Results saved to {output_path}")
