"""
molweight: A Python package for computing molar masses of chemical formulae.

Formulae are tokenized and parsed with a recursive-descent parser that
supports nested parenthesised groups and hydration notation
(e.g. "CuSO4.5H2O"), then evaluated against an immutable periodic table
into a per-element mass and percentage breakdown.
"""

__version__ = "0.1.0"

# Main API
from .core.calculator import MolecularWeightCalculator
from .core.results import CalculationResult, BreakdownEntry

# Lower-level components
from .core.tokenizer import Token, TokenKind, tokenize
from .core.parser import Atom, Group, ParsedFormula, parse, parse_formula
from .core.evaluator import evaluate
from .core.aggregator import aggregate

# Errors
from .core.errors import (
    FormulaError,
    InvalidCharacterError,
    InvalidMultiplierError,
    UnclosedGroupError,
    UnexpectedCloseParenError,
    EmptyGroupError,
    NestingTooDeepError,
    MultipleHydrationClausesError,
    TrailingInputError,
    UnexpectedEndOfInputError,
    UnexpectedTokenError,
    UnknownElementError,
    EmptyFormulaError,
)

# Element data
from .elements.periodic_table import (
    Element,
    PeriodicTable,
    default_periodic_table,
    list_elements,
)
from .elements.compounds import COMMON_COMPOUNDS, get_compound_formula

# Module-level singleton for convenience functions
_default_calculator = None


def _get_default_calculator() -> MolecularWeightCalculator:
    global _default_calculator
    if _default_calculator is None:
        _default_calculator = MolecularWeightCalculator()
    return _default_calculator


def calculate_molecular_weight(
    formula: str,
    periodic_table=None,
) -> CalculationResult:
    """
    Convenience function for computing a molar mass right away.

    Calling this function is equivalent to creating a
    MolecularWeightCalculator and calling its calculate() method.

    Args:
        formula: Chemical formula, e.g. "H2O", "Fe2(SO4)3", "CuSO4.5H2O"

        periodic_table: Optional symbol -> atomic weight mapping.
            Default: None (built-in table, shared calculator)

    Returns:
        CalculationResult with total_weight (g/mol) and a breakdown
        sorted by element symbol

    Raises:
        FormulaError: Subclass describing the first problem in the formula

    Example:
        >>> from molweight import calculate_molecular_weight
        >>>
        >>> result = calculate_molecular_weight("CuSO4.5H2O")
        >>> print(result)
        >>> round(result.total_weight, 3)
        249.677
    """
    if periodic_table is not None:
        return MolecularWeightCalculator(periodic_table).calculate(formula)
    return _get_default_calculator().calculate(formula)


def count_atoms(formula: str) -> dict[str, int]:
    """
    Count atoms per element using the built-in periodic table.

    Example:
        >>> count_atoms("Ca3(PO4)2")
        {'Ca': 3, 'P': 2, 'O': 8}
    """
    return _get_default_calculator().count_atoms(formula)


__all__ = [
    # Primary API
    "MolecularWeightCalculator",
    "CalculationResult",
    "BreakdownEntry",

    # Convenience functions
    "calculate_molecular_weight",
    "count_atoms",

    # Pipeline stages
    "Token",
    "TokenKind",
    "tokenize",
    "Atom",
    "Group",
    "ParsedFormula",
    "parse",
    "parse_formula",
    "evaluate",
    "aggregate",

    # Errors
    "FormulaError",
    "InvalidCharacterError",
    "InvalidMultiplierError",
    "UnclosedGroupError",
    "UnexpectedCloseParenError",
    "EmptyGroupError",
    "NestingTooDeepError",
    "MultipleHydrationClausesError",
    "TrailingInputError",
    "UnexpectedEndOfInputError",
    "UnexpectedTokenError",
    "UnknownElementError",
    "EmptyFormulaError",

    # Element data
    "Element",
    "PeriodicTable",
    "default_periodic_table",
    "list_elements",
    "COMMON_COMPOUNDS",
    "get_compound_formula",
]
