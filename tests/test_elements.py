"""
Tests for the periodic table and preset compounds
"""
import json
import math

import pytest

from molweight import calculate_molecular_weight
from molweight.elements import (
    COMMON_COMPOUNDS,
    ELEMENTS,
    PeriodicTable,
    default_periodic_table,
    get_compound_formula,
    get_element,
    list_elements,
)


class TestElementData:

    def test_all_118_elements(self):
        assert len(ELEMENTS) == 118
        assert [e.number for e in ELEMENTS] == list(range(1, 119))
        assert len({e.symbol for e in ELEMENTS}) == 118

    def test_weights_increase_roughly_with_number(self):
        """
        Sanity check against typos: no weight is off by more than a
        few units from its neighbours' trend
        """
        for prev, cur in zip(ELEMENTS, ELEMENTS[1:]):
            assert cur.mass > prev.mass - 2.0, cur.symbol

    @pytest.mark.parametrize("symbol,mass", [
        ("H", 1.008),
        ("C", 12.011),
        ("O", 15.999),
        ("Fe", 55.845),
        ("Cu", 63.546),
    ])
    def test_known_weights(self, symbol, mass):
        assert get_element(symbol).mass == mass

    def test_get_element(self):
        iron = get_element("Fe")
        assert iron.number == 26
        assert iron.name == "Iron"
        with pytest.raises(KeyError):
            get_element("Xx")

    def test_list_elements_sorted(self):
        symbols = list_elements()
        assert symbols == sorted(symbols)
        assert len(symbols) == 118
        assert symbols[0] == "Ac"


class TestPeriodicTable:

    def test_default_table(self):
        table = default_periodic_table()
        assert len(table) == 118
        assert table["Fe"] == 55.845
        assert "Xx" not in table
        assert "fe" not in table

    def test_default_table_is_cached(self):
        assert default_periodic_table() is default_periodic_table()

    def test_is_read_only(self):
        table = PeriodicTable({"H": 1.008})
        with pytest.raises(TypeError):
            table["H"] = 2.0
        with pytest.raises(TypeError):
            table._weights["He"] = 4.0

    def test_accepts_pairs(self):
        table = PeriodicTable([("H", 1.008), ("O", 15.999)])
        assert dict(table) == {"H": 1.008, "O": 15.999}

    def test_weights_coerced_to_float(self):
        assert type(PeriodicTable({"C": 12})["C"]) is float

    @pytest.mark.parametrize("symbol", ["h", "HE", "Abc", "", "1", 6])
    def test_rejects_bad_symbols(self, symbol):
        with pytest.raises(ValueError, match="Invalid element symbol"):
            PeriodicTable({symbol: 1.0})

    @pytest.mark.parametrize("weight", [0.0, -1.0, math.inf, math.nan])
    def test_rejects_bad_weights(self, weight):
        with pytest.raises(ValueError, match="positive and finite"):
            PeriodicTable({"H": weight})

    def test_repr(self):
        assert repr(PeriodicTable({"H": 1.008})) == "PeriodicTable(n_elements=1)"

    def test_from_json_object(self, tmp_path):
        path = tmp_path / "weights.json"
        path.write_text(json.dumps({"H": 1.008, "O": 15.999}))
        table = PeriodicTable.from_json(path)
        assert table["O"] == 15.999

    def test_from_json_list(self, tmp_path):
        path = tmp_path / "weights.json"
        path.write_text(json.dumps([
            {"symbol": "Na", "mass": 22.990},
            {"symbol": "Cl", "mass": 35.45},
        ]))
        table = PeriodicTable.from_json(str(path))
        assert calculate_molecular_weight("NaCl", periodic_table=table).total_weight == (
            pytest.approx(58.44)
        )

    def test_from_json_bad_shape(self, tmp_path):
        path = tmp_path / "weights.json"
        path.write_text(json.dumps([{"sym": "H"}]))
        with pytest.raises(ValueError, match="'symbol' and 'mass'"):
            PeriodicTable.from_json(path)

        path.write_text(json.dumps(42))
        with pytest.raises(ValueError, match="Expected a JSON object or list"):
            PeriodicTable.from_json(path)

    def test_from_molmass(self):
        pytest.importorskip("molmass")
        table = PeriodicTable.from_molmass()
        assert table["Fe"] == pytest.approx(55.845, abs=0.01)
        assert table["O"] == pytest.approx(15.999, abs=0.01)
        result = calculate_molecular_weight("CuSO4.5H2O", periodic_table=table)
        assert result.total_weight == pytest.approx(249.7, abs=0.5)


class TestCommonCompounds:

    @pytest.mark.parametrize("name,formula", COMMON_COMPOUNDS)
    def test_every_preset_calculates(self, name, formula):
        result = calculate_molecular_weight(formula)
        assert result.total_weight > 0

    def test_names_are_unique(self):
        names = [name.casefold() for name, _ in COMMON_COMPOUNDS]
        assert len(names) == len(set(names))

    def test_get_compound_formula(self):
        assert get_compound_formula("Glucose") == "C6H12O6"
        assert get_compound_formula("copper sulfate pentahydrate") == "CuSO4.5H2O"

    def test_get_unknown_compound(self):
        with pytest.raises(KeyError, match="Unobtainium"):
            get_compound_formula("Unobtainium")
