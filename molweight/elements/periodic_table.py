"""
Periodic table data and the immutable symbol -> atomic weight mapping
used by the formula evaluator and mass aggregator.

Weights are IUPAC conventional standard atomic weights (g/mol). Elements
without a standard atomic weight use the mass number of their longest-lived
isotope.
"""
from __future__ import annotations

import json
import math
import re
from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache
from os import PathLike
from types import MappingProxyType
from typing import Iterable, Iterator, Union

_SYMBOL_PATTERN = re.compile(r"[A-Z][a-z]?")


@dataclass(frozen=True, slots=True)
class Element:
    number: int
    symbol: str
    name: str
    mass: float


ELEMENTS: tuple[Element, ...] = (
    Element(1, 'H', 'Hydrogen', 1.008),
    Element(2, 'He', 'Helium', 4.0026),
    Element(3, 'Li', 'Lithium', 6.94),
    Element(4, 'Be', 'Beryllium', 9.0122),
    Element(5, 'B', 'Boron', 10.81),
    Element(6, 'C', 'Carbon', 12.011),
    Element(7, 'N', 'Nitrogen', 14.007),
    Element(8, 'O', 'Oxygen', 15.999),
    Element(9, 'F', 'Fluorine', 18.998),
    Element(10, 'Ne', 'Neon', 20.180),
    Element(11, 'Na', 'Sodium', 22.990),
    Element(12, 'Mg', 'Magnesium', 24.305),
    Element(13, 'Al', 'Aluminium', 26.982),
    Element(14, 'Si', 'Silicon', 28.085),
    Element(15, 'P', 'Phosphorus', 30.974),
    Element(16, 'S', 'Sulfur', 32.06),
    Element(17, 'Cl', 'Chlorine', 35.45),
    Element(18, 'Ar', 'Argon', 39.948),
    Element(19, 'K', 'Potassium', 39.098),
    Element(20, 'Ca', 'Calcium', 40.078),
    Element(21, 'Sc', 'Scandium', 44.956),
    Element(22, 'Ti', 'Titanium', 47.867),
    Element(23, 'V', 'Vanadium', 50.942),
    Element(24, 'Cr', 'Chromium', 51.996),
    Element(25, 'Mn', 'Manganese', 54.938),
    Element(26, 'Fe', 'Iron', 55.845),
    Element(27, 'Co', 'Cobalt', 58.933),
    Element(28, 'Ni', 'Nickel', 58.693),
    Element(29, 'Cu', 'Copper', 63.546),
    Element(30, 'Zn', 'Zinc', 65.38),
    Element(31, 'Ga', 'Gallium', 69.723),
    Element(32, 'Ge', 'Germanium', 72.630),
    Element(33, 'As', 'Arsenic', 74.922),
    Element(34, 'Se', 'Selenium', 78.971),
    Element(35, 'Br', 'Bromine', 79.904),
    Element(36, 'Kr', 'Krypton', 83.798),
    Element(37, 'Rb', 'Rubidium', 85.468),
    Element(38, 'Sr', 'Strontium', 87.62),
    Element(39, 'Y', 'Yttrium', 88.906),
    Element(40, 'Zr', 'Zirconium', 91.224),
    Element(41, 'Nb', 'Niobium', 92.906),
    Element(42, 'Mo', 'Molybdenum', 95.95),
    Element(43, 'Tc', 'Technetium', 98.0),
    Element(44, 'Ru', 'Ruthenium', 101.07),
    Element(45, 'Rh', 'Rhodium', 102.91),
    Element(46, 'Pd', 'Palladium', 106.42),
    Element(47, 'Ag', 'Silver', 107.87),
    Element(48, 'Cd', 'Cadmium', 112.41),
    Element(49, 'In', 'Indium', 114.82),
    Element(50, 'Sn', 'Tin', 118.71),
    Element(51, 'Sb', 'Antimony', 121.76),
    Element(52, 'Te', 'Tellurium', 127.60),
    Element(53, 'I', 'Iodine', 126.90),
    Element(54, 'Xe', 'Xenon', 131.29),
    Element(55, 'Cs', 'Caesium', 132.91),
    Element(56, 'Ba', 'Barium', 137.33),
    Element(57, 'La', 'Lanthanum', 138.91),
    Element(58, 'Ce', 'Cerium', 140.12),
    Element(59, 'Pr', 'Praseodymium', 140.91),
    Element(60, 'Nd', 'Neodymium', 144.24),
    Element(61, 'Pm', 'Promethium', 145.0),
    Element(62, 'Sm', 'Samarium', 150.36),
    Element(63, 'Eu', 'Europium', 151.96),
    Element(64, 'Gd', 'Gadolinium', 157.25),
    Element(65, 'Tb', 'Terbium', 158.93),
    Element(66, 'Dy', 'Dysprosium', 162.50),
    Element(67, 'Ho', 'Holmium', 164.93),
    Element(68, 'Er', 'Erbium', 167.26),
    Element(69, 'Tm', 'Thulium', 168.93),
    Element(70, 'Yb', 'Ytterbium', 173.05),
    Element(71, 'Lu', 'Lutetium', 174.97),
    Element(72, 'Hf', 'Hafnium', 178.49),
    Element(73, 'Ta', 'Tantalum', 180.95),
    Element(74, 'W', 'Tungsten', 183.84),
    Element(75, 'Re', 'Rhenium', 186.21),
    Element(76, 'Os', 'Osmium', 190.23),
    Element(77, 'Ir', 'Iridium', 192.22),
    Element(78, 'Pt', 'Platinum', 195.08),
    Element(79, 'Au', 'Gold', 196.97),
    Element(80, 'Hg', 'Mercury', 200.59),
    Element(81, 'Tl', 'Thallium', 204.38),
    Element(82, 'Pb', 'Lead', 207.2),
    Element(83, 'Bi', 'Bismuth', 208.98),
    Element(84, 'Po', 'Polonium', 209.0),
    Element(85, 'At', 'Astatine', 210.0),
    Element(86, 'Rn', 'Radon', 222.0),
    Element(87, 'Fr', 'Francium', 223.0),
    Element(88, 'Ra', 'Radium', 226.0),
    Element(89, 'Ac', 'Actinium', 227.0),
    Element(90, 'Th', 'Thorium', 232.04),
    Element(91, 'Pa', 'Protactinium', 231.04),
    Element(92, 'U', 'Uranium', 238.03),
    Element(93, 'Np', 'Neptunium', 237.0),
    Element(94, 'Pu', 'Plutonium', 244.0),
    Element(95, 'Am', 'Americium', 243.0),
    Element(96, 'Cm', 'Curium', 247.0),
    Element(97, 'Bk', 'Berkelium', 247.0),
    Element(98, 'Cf', 'Californium', 251.0),
    Element(99, 'Es', 'Einsteinium', 252.0),
    Element(100, 'Fm', 'Fermium', 257.0),
    Element(101, 'Md', 'Mendelevium', 258.0),
    Element(102, 'No', 'Nobelium', 259.0),
    Element(103, 'Lr', 'Lawrencium', 262.0),
    Element(104, 'Rf', 'Rutherfordium', 267.0),
    Element(105, 'Db', 'Dubnium', 268.0),
    Element(106, 'Sg', 'Seaborgium', 269.0),
    Element(107, 'Bh', 'Bohrium', 270.0),
    Element(108, 'Hs', 'Hassium', 269.0),
    Element(109, 'Mt', 'Meitnerium', 278.0),
    Element(110, 'Ds', 'Darmstadtium', 281.0),
    Element(111, 'Rg', 'Roentgenium', 282.0),
    Element(112, 'Cn', 'Copernicium', 285.0),
    Element(113, 'Nh', 'Nihonium', 286.0),
    Element(114, 'Fl', 'Flerovium', 289.0),
    Element(115, 'Mc', 'Moscovium', 290.0),
    Element(116, 'Lv', 'Livermorium', 293.0),
    Element(117, 'Ts', 'Tennessine', 294.0),
    Element(118, 'Og', 'Oganesson', 294.0),
)


class PeriodicTable(Mapping):
    """
    Read-only mapping from element symbol to atomic weight (g/mol).

    Symbols are case-sensitive and must match [A-Z][a-z]?; weights must
    be positive and finite. The table cannot be modified after
    construction, so one instance can be shared between threads.

    Example:
        >>> table = PeriodicTable({'H': 1.008, 'O': 15.999})
        >>> table['O']
        15.999
        >>> 'Xx' in table
        False
    """
    __slots__ = ('_weights',)

    def __init__(
        self,
        weights: Union[Mapping[str, float], Iterable[tuple[str, float]]],
    ):
        validated: dict[str, float] = {}
        for symbol, weight in dict(weights).items():
            if not isinstance(symbol, str) or not _SYMBOL_PATTERN.fullmatch(symbol):
                raise ValueError(f"Invalid element symbol: {symbol!r}")

            weight = float(weight)
            if not math.isfinite(weight) or weight <= 0.0:
                raise ValueError(
                    f"Atomic weight for '{symbol}' must be positive "
                    f"and finite, got {weight}"
                )
            validated[symbol] = weight

        self._weights = MappingProxyType(validated)

    def __getitem__(self, symbol: str) -> float:
        return self._weights[symbol]

    def __iter__(self) -> Iterator[str]:
        return iter(self._weights)

    def __len__(self) -> int:
        return len(self._weights)

    def __repr__(self) -> str:
        return f"PeriodicTable(n_elements={len(self)})"

    # ------------------------------------------------------------------
    # Alternative constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_elements(
        cls,
        elements: Iterable[Element] = ELEMENTS,
    ) -> 'PeriodicTable':
        return cls((element.symbol, element.mass) for element in elements)

    @classmethod
    def from_json(
        cls,
        path: Union[str, PathLike],
    ) -> 'PeriodicTable':
        """
        Load a table from a JSON file.

        The file may hold either an object mapping symbols to weights,
        e.g. {"H": 1.008, "O": 15.999}, or a list of objects with
        "symbol" and "mass" keys.

        Raises:
            ValueError: If the JSON has neither shape, or a symbol/weight
                is invalid
        """
        with open(path, encoding='utf-8') as f:
            data = json.load(f)

        if isinstance(data, dict):
            return cls(data)
        if isinstance(data, list):
            try:
                return cls((item['symbol'], item['mass']) for item in data)
            except (KeyError, TypeError):
                raise ValueError(
                    f"Each entry in {path} needs 'symbol' and 'mass' keys"
                )
        raise ValueError(
            f"Expected a JSON object or list in {path}, "
            f"got {type(data).__name__}"
        )

    @classmethod
    def from_molmass(cls) -> 'PeriodicTable':
        """
        Build a table from molmass's element data, if molmass is installed.

        Raises:
            ImportError: If molmass is not installed
        """
        try:
            from molmass.elements import ELEMENTS as MOLMASS_ELEMENTS
        except ImportError:
            raise ImportError(
                "molmass is required for from_molmass(). "
                "Install with: pip install molmass"
            )

        return cls(
            (element.symbol, element.mass)
            for element in MOLMASS_ELEMENTS
            if _SYMBOL_PATTERN.fullmatch(element.symbol)
            and math.isfinite(element.mass)
            and element.mass > 0.0
        )


@lru_cache(maxsize=1)
def default_periodic_table() -> PeriodicTable:
    """The built-in table, created on first use and shared afterwards."""
    return PeriodicTable.from_elements(ELEMENTS)


_BY_SYMBOL: dict[str, Element] = {element.symbol: element for element in ELEMENTS}


def get_element(symbol: str) -> Element:
    """
    Look up an element record by symbol.

    Raises:
        KeyError: If the symbol is not a known element
    """
    return _BY_SYMBOL[symbol]


def list_elements() -> list[str]:
    """All element symbols of the built-in table, sorted alphabetically."""
    return sorted(_BY_SYMBOL)
