"""
Preset compounds offered for quick selection.
"""
from __future__ import annotations

COMMON_COMPOUNDS: tuple[tuple[str, str], ...] = (
    ('Water', 'H2O'),
    ('Sulfuric Acid', 'H2SO4'),
    ('Copper Sulfate', 'CuSO4'),
    ('Copper Sulfate Pentahydrate', 'CuSO4.5H2O'),
    ('Sodium Hydroxide', 'NaOH'),
    ('Iron Oxide', 'Fe2O3'),
    ('Iron(III) Sulfate', 'Fe2(SO4)3'),
    ('Carbon Dioxide', 'CO2'),
    ('Ethanol', 'C2H5OH'),
    ('Methane', 'CH4'),
    ('Ammonia', 'NH3'),
    ('Hydrochloric Acid', 'HCl'),
    ('Nitric Acid', 'HNO3'),
    ('Acetic Acid', 'CH3COOH'),
    ('Citric Acid', 'C3H4OH(COOH)3'),
    ('Benzene', 'C6H6'),
    ('Glucose', 'C6H12O6'),
    ('Sodium Chloride', 'NaCl'),
    ('Sodium Carbonate Monohydrate', 'Na2CO3.H2O'),
    ('Calcium Carbonate', 'CaCO3'),
    ('Calcium Phosphate', 'Ca3(PO4)2'),
    ('Aluminum Oxide', 'Al2O3'),
    ('Zinc Oxide', 'ZnO'),
    ('Nickel Sulfate', 'NiSO4'),
    ('Cobalt Sulfate', 'CoSO4'),
)

_BY_NAME: dict[str, str] = {
    name.casefold(): formula for name, formula in COMMON_COMPOUNDS
}


def get_compound_formula(name: str) -> str:
    """
    Return the formula of a preset compound.

    Args:
        name: Compound name, case-insensitive (e.g. "glucose")

    Raises:
        KeyError: If no preset has this name
    """
    try:
        return _BY_NAME[name.casefold()]
    except KeyError:
        raise KeyError(f"No common compound named '{name}'") from None
