"""
Tests for folding formula trees into element tallies
"""
import pytest

from molweight.core.errors import EmptyFormulaError, UnknownElementError
from molweight.core.evaluator import evaluate
from molweight.core.parser import Group, ParsedFormula, parse_formula
from molweight.elements.periodic_table import default_periodic_table


class TestEvaluate:

    def setup_method(self):
        self.table = default_periodic_table()

    def _tally(self, formula: str) -> dict[str, int]:
        return evaluate(parse_formula(formula), self.table)

    @pytest.mark.parametrize("formula,expected", [
        ("Fe", {"Fe": 1}),
        ("H2O", {"H": 2, "O": 1}),
        ("C6H12O6", {"C": 6, "H": 12, "O": 6}),
        ("CH3COOH", {"C": 2, "H": 4, "O": 2}),
        ("Ca(OH)2", {"Ca": 1, "O": 2, "H": 2}),
        ("Fe2(SO4)3", {"Fe": 2, "S": 3, "O": 12}),
        ("C3H4OH(COOH)3", {"C": 6, "H": 8, "O": 7}),
    ])
    def test_tally(self, formula, expected):
        assert self._tally(formula) == expected

    def test_multiplier_distributes_through_group(self):
        """
        Ca3(PO4)2 is 3 Ca, 2 P, 8 O, not 3 Ca, 1 P, 4 O
        """
        assert self._tally("Ca3(PO4)2") == {"Ca": 3, "P": 2, "O": 8}

    def test_nested_multipliers_compose(self):
        """
        Counts are scaled by the product of every enclosing multiplier
        """
        assert self._tally("K4(Fe(CN)6)3") == {"K": 4, "Fe": 3, "C": 18, "N": 18}
        assert self._tally("((H2)3)5") == {"H": 30}

    def test_hydration_scaled_by_leading_multiplier(self):
        assert self._tally("CuSO4.5H2O") == {"Cu": 1, "S": 1, "O": 9, "H": 10}

    def test_hydration_default_multiplier(self):
        assert self._tally("Na2CO3.H2O") == {"Na": 2, "C": 1, "O": 4, "H": 2}

    def test_hydration_with_nested_group(self):
        assert self._tally("Mg.2(H2O)3") == {"Mg": 1, "H": 12, "O": 6}

    def test_repeated_symbols_are_merged(self):
        assert self._tally("HOHOH") == {"H": 3, "O": 2}

    def test_order_of_first_appearance(self):
        assert list(self._tally("OHCa")) == ["O", "H", "Ca"]

    def test_large_counts_do_not_overflow(self):
        """
        Python ints are unbounded, so compounding u32 multipliers stays exact
        """
        big = 2**32 - 1
        tally = self._tally(f"((H{big}){big}){big}")
        assert tally == {"H": big ** 3}

    def test_unknown_element(self):
        with pytest.raises(UnknownElementError) as exc_info:
            self._tally("Xx2")
        assert exc_info.value.symbol == "Xx"
        assert exc_info.value.position == 0

    def test_first_unknown_element_is_reported(self):
        """
        The leftmost unknown symbol wins, hydration term included
        """
        with pytest.raises(UnknownElementError) as exc_info:
            self._tally("H2(Qq)Zz.Jj")
        assert exc_info.value.symbol == "Qq"

        with pytest.raises(UnknownElementError) as exc_info:
            self._tally("H2O.5Jq")
        assert exc_info.value.symbol == "Jq"

    def test_custom_table(self):
        """
        Only symbols present in the given table are accepted
        """
        with pytest.raises(UnknownElementError):
            evaluate(parse_formula("NaCl"), {"Na"})
        assert evaluate(parse_formula("Na2"), {"Na"}) == {"Na": 2}

    def test_empty_tree(self):
        tree = ParsedFormula(main=Group(children=()))
        with pytest.raises(EmptyFormulaError):
            evaluate(tree, self.table)
