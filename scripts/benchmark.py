#!/usr/bin/env python3
"""Benchmark script for optargs expansion cost.

Output size grows as 2^n (sequential) or sum of n!/(n-i)! (shuffled),
so each benchmark names its optional-parameter count.
Outputs results in JSON format compatible with github-action-benchmark.
"""

from __future__ import annotations

import argparse
import json
import time
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from optargs.domain.model.declaration import Declaration


def benchmark_import_time() -> float:
    """Measure import time of optargs package."""
    start = time.perf_counter()
    import optargs  # noqa: F401

    return time.perf_counter() - start


def _declaration(optional: int) -> Declaration:
    from optargs.domain.model.declaration import Declaration
    from optargs.domain.model.enums import DeclarationKind
    from optargs.domain.model.parameter import Parameter

    params = [Parameter(name="a", position=0)]
    params.extend(
        Parameter(name=f"p{i}", position=i + 1, optional=True, default=str(i))
        for i in range(optional)
    )
    return Declaration(name="f", kind=DeclarationKind.CALLABLE, parameters=tuple(params))


def benchmark_expand(optional: int, *, shuffle: bool) -> tuple[float, int]:
    """Measure expansion time; returns (seconds, branch count)."""
    from optargs.application.services.expander import Expander
    from optargs.domain.model.configuration import ExpansionConfig

    config = ExpansionConfig().with_options({"shuffle": shuffle, "warn_threshold": None})
    declaration = _declaration(optional)

    start = time.perf_counter()
    expansion = Expander().expand(declaration, config)
    return time.perf_counter() - start, expansion.branch_count


def benchmark_emit(optional: int) -> float:
    """Measure dispatcher rendering time for a sequential expansion."""
    from optargs.application.emitters.python_emitter import PythonEmitter
    from optargs.application.services.expander import Expander

    expansion = Expander().expand(_declaration(optional))
    assert expansion.dispatcher is not None

    start = time.perf_counter()
    PythonEmitter().emit(expansion.dispatcher)
    return time.perf_counter() - start


def main() -> None:
    """Run benchmarks and output results."""
    parser = argparse.ArgumentParser(description="Run optargs benchmarks")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("benchmark-results.json"),
        help="Output file for benchmark results",
    )
    args = parser.parse_args()

    results = []

    # Import time
    import_time = benchmark_import_time()
    results.append(
        {
            "name": "Import Time",
            "unit": "seconds",
            "value": import_time,
        }
    )

    # Expansion
    for optional, shuffle in ((10, False), (6, True)):
        seconds, branches = benchmark_expand(optional, shuffle=shuffle)
        mode = "shuffled" if shuffle else "sequential"
        results.append(
            {
                "name": f"Expand n={optional} {mode} ({branches} branches)",
                "unit": "seconds",
                "value": seconds,
            }
        )

    # Emission
    results.append(
        {
            "name": "Emit n=10 sequential",
            "unit": "seconds",
            "value": benchmark_emit(10),
        }
    )

    # Write results
    args.output.write_text(json.dumps(results, indent=2))
    print(f"Benchmark results written to {args.output}")
    for r in results:
        print(f"  {r['name']}: {r['value']:.4f} {r['unit']}")


if __name__ == "__main__":
    main()
