"""
Profiling script for the calculate pipeline.

Measures per-stage timing for representative formulae.
Run with: python benchmarks/bench_calculate.py
"""
import time
import statistics

from molweight import MolecularWeightCalculator
from molweight.core.aggregator import aggregate
from molweight.core.evaluator import evaluate
from molweight.core.parser import parse
from molweight.core.tokenizer import tokenize


def _median_ms(fn, n_runs: int, warmup: int) -> float:
    times = []
    for i in range(warmup + n_runs):
        t0 = time.perf_counter()
        fn()
        t1 = time.perf_counter()
        if i >= warmup:
            times.append(t1 - t0)
    return statistics.median(times) * 1000


def bench_calculate(
    calculator: MolecularWeightCalculator,
    formula: str,
    label: str = "",
    n_runs: int = 1000,
    warmup: int = 50,
):
    """Run a single benchmark configuration and report median timing per stage."""
    table = calculator.periodic_table
    tokens = tokenize(formula)
    tree = parse(tokens)
    tally = evaluate(tree, table)

    stages = {
        "tokenize": lambda: tokenize(formula),
        "parse": lambda: parse(tokens),
        "evaluate": lambda: evaluate(tree, table),
        "aggregate": lambda: aggregate(tally, table, formula=formula),
        "total": lambda: calculator.calculate(formula),
    }

    print(f"  {label or formula}")
    for name, fn in stages.items():
        print(f"    {name:<10} median: {_median_ms(fn, n_runs, warmup) * 1000:.1f} us")
    print()


def main():
    calculator = MolecularWeightCalculator()

    configs = [
        {"formula": "H2O", "label": "H2O (small)"},
        {"formula": "CuSO4.5H2O", "label": "CuSO4.5H2O (hydrate)"},
        {"formula": "Fe2(SO4)3", "label": "Fe2(SO4)3 (one group)"},
        {
            "formula": "K4(Fe(CN)6)3(Ca3(PO4)2)2.12H2O",
            "label": "nested groups + hydrate",
        },
        {
            "formula": "C" + "(CH2)" * 50,
            "label": "50 sibling groups",
        },
        {
            "formula": "(" * 60 + "H2O" + ")2" * 60,
            "label": "60 levels of nesting",
        },
    ]

    print("=" * 60)
    print("Benchmarks (median of 1000 runs, 50 warmup)")
    print("=" * 60)

    for cfg in configs:
        bench_calculate(calculator, **cfg)


if __name__ == "__main__":
    main()
