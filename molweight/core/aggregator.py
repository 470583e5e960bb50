"""
Turns an element tally into masses and mass percentages.
"""
from __future__ import annotations

import math
from typing import Mapping

import numpy as np

from .errors import EmptyFormulaError, UnknownElementError
from .results import BreakdownEntry, CalculationResult


def aggregate(
    tally: Mapping[str, int],
    periodic_table: Mapping[str, float],
    formula: str = "",
) -> CalculationResult:
    """
    Compute the molar mass and per-element breakdown of a tally.

    Subtotals are `count * atomic_weight` in float64; the total is their
    left-to-right sum in alphabetical symbol order. Nothing is rounded here.

    Args:
        tally: Element symbol -> atom count (as produced by evaluate())
        periodic_table: Element symbol -> atomic weight (g/mol)
        formula: Input formula string, kept on the result for display

    Returns:
        CalculationResult with entries sorted by element symbol

    Raises:
        EmptyFormulaError: If the tally is empty or the total mass is zero
        UnknownElementError: If a tallied symbol has no atomic weight
        OverflowError: If the total mass is not representable as a float
    """
    if not tally:
        raise EmptyFormulaError()

    symbols = sorted(tally)
    for symbol in symbols:
        if symbol not in periodic_table:
            raise UnknownElementError(symbol)

    counts = np.array([tally[s] for s in symbols], dtype=np.float64)
    weights = np.array([periodic_table[s] for s in symbols], dtype=np.float64)
    subtotals = counts * weights

    # cumsum adds strictly left to right; np.sum() uses pairwise summation
    total_weight = float(np.cumsum(subtotals)[-1])

    if total_weight == 0.0:
        raise EmptyFormulaError()
    if not math.isfinite(total_weight):
        raise OverflowError(
            f"Molar mass of '{formula}' is too large to represent"
        )

    percentages = subtotals / total_weight * 100.0

    breakdown = tuple(
        BreakdownEntry(
            element=symbol,
            atom_count=int(tally[symbol]),
            atomic_weight=float(weights[i]),
            subtotal_mass=float(subtotals[i]),
            percentage=float(percentages[i]),
        )
        for i, symbol in enumerate(symbols)
    )

    return CalculationResult(
        total_weight=total_weight,
        breakdown=breakdown,
        formula=formula,
    )
