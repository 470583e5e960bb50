"""
Main API entry point for molweight

This module contains MolecularWeightCalculator, which chains
- tokenizing
- parsing
- evaluation against a periodic table
- mass aggregation
"""
from __future__ import annotations

from typing import Mapping, Optional

from .aggregator import aggregate
from .evaluator import evaluate
from .parser import ParsedFormula, parse
from .results import CalculationResult
from .tokenizer import Token, tokenize
from ..elements.periodic_table import PeriodicTable, default_periodic_table


class MolecularWeightCalculator:
    """
    API for computing molar masses of chemical formulae

    Holds a read-only periodic table and no other state, so a single
    instance can serve any number of formulae, from any number of threads.

    Supported notation:
        - element symbols with optional counts: H2O, NaCl
        - nested parenthesised groups: Fe2(SO4)3, Mg(Fe(CN)6)2
        - one hydration/adduct clause with optional leading
          multiplier: CuSO4.5H2O, Na2CO3.H2O

    Example:
        >>> calculator = MolecularWeightCalculator()
        >>> result = calculator.calculate("Fe2(SO4)3")
        >>> round(result.total_weight, 2)
        399.86
        >>> calculator.count_atoms("Ca3(PO4)2")
        {'Ca': 3, 'P': 2, 'O': 8}
    """

    def __init__(
        self,
        periodic_table: Optional[Mapping[str, float]] = None,
    ):
        """
        Initialize the calculator with a periodic table.

        Args:
            periodic_table: Element symbol -> atomic weight mapping.
                A plain mapping is validated and wrapped in a
                PeriodicTable. Default is the built-in IUPAC table.
        """
        if periodic_table is None:
            periodic_table = default_periodic_table()
        elif not isinstance(periodic_table, PeriodicTable):
            periodic_table = PeriodicTable(periodic_table)

        self.periodic_table: PeriodicTable = periodic_table

    @staticmethod
    def tokenize(formula: str) -> list[Token]:
        return tokenize(formula)

    @staticmethod
    def parse(formula: str) -> ParsedFormula:
        """
        Parse a formula into its tree without checking element symbols.

        Raises:
            FormulaError: On any lexical or grammatical error
        """
        return parse(tokenize(formula))

    def count_atoms(
        self,
        formula: str,
    ) -> dict[str, int]:
        """
        Count atoms per element, validating symbols against the table.

        Args:
            formula: Formula string, e.g. "CuSO4.5H2O"

        Returns:
            Dict mapping element symbols to atom counts, in order of
            first appearance

        Raises:
            FormulaError: On the first problem found
        """
        return evaluate(self.parse(formula), self.periodic_table)

    def calculate(
        self,
        formula: str,
    ) -> CalculationResult:
        """
        Compute the molar mass and per-element breakdown of a formula.

        Stops at the first error; no partial results are returned.

        Args:
            formula: Formula string, e.g. "Fe2(SO4)3"

        Returns:
            CalculationResult with total_weight in g/mol and breakdown
            entries sorted by element symbol

        Raises:
            TypeError: If formula is not a string
            FormulaError: Subclass describing the first problem found
                (InvalidCharacterError, UnclosedGroupError,
                UnknownElementError, EmptyFormulaError, ...)
        """
        tally = self.count_atoms(formula)
        return aggregate(tally, self.periodic_table, formula=formula)

    def __repr__(self) -> str:
        return f"MolecularWeightCalculator(periodic_table={self.periodic_table!r})"
