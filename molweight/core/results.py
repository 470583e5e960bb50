"""
This module has the CalculationResult class, which contains
BreakdownEntry objects, and provides convenience methods for:
- lookup by element symbol
- display
- export
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Optional, overload, TYPE_CHECKING

if TYPE_CHECKING:
    import pandas as pd


@dataclass(frozen=True, slots=True)
class BreakdownEntry:
    """
    Contribution of one element to a formula's molar mass.

    Attributes:
        element: Element symbol
        atom_count: Total number of atoms of this element
        atomic_weight: Standard atomic weight used (g/mol)
        subtotal_mass: atom_count * atomic_weight (g/mol)
        percentage: subtotal_mass as a percentage of the total (0-100)
    """
    element: str
    atom_count: int
    atomic_weight: float
    subtotal_mass: float
    percentage: float


@dataclass(frozen=True)
class CalculationResult:
    """
    Molar mass of a formula with its per-element breakdown

    Entries are sorted alphabetically by element symbol. Values are kept
    at full float precision; rounding happens only in to_table().

    Attributes:
        total_weight: Molar mass in g/mol
        breakdown: One BreakdownEntry per element
        formula: The formula string this result was computed from

    Example:
        >>> result = calculate_molecular_weight("CuSO4.5H2O")
        >>> print(result)  # Summary plus breakdown table
        >>> result['Cu'].percentage
        25.45...
        >>> for entry in result:
        ...     print(entry.element, entry.atom_count)
    """
    total_weight: float
    breakdown: tuple[BreakdownEntry, ...]
    formula: str = ""

    def __len__(self) -> int:
        return len(self.breakdown)

    def __iter__(self):
        return iter(self.breakdown)

    def __contains__(self, symbol: object) -> bool:
        return any(entry.element == symbol for entry in self.breakdown)

    @overload
    def __getitem__(self, key: int) -> BreakdownEntry: ...

    @overload
    def __getitem__(self, key: str) -> BreakdownEntry: ...

    def __getitem__(self, key: int | str) -> BreakdownEntry:
        if isinstance(key, str):
            for entry in self.breakdown:
                if entry.element == key:
                    return entry
            raise KeyError(key)
        return self.breakdown[key]

    def get(
        self,
        symbol: str,
        default: Optional[BreakdownEntry] = None,
    ) -> Optional[BreakdownEntry]:
        try:
            return self[symbol]
        except KeyError:
            return default

    @property
    def element_counts(self) -> dict[str, int]:
        """Element symbol -> atom count."""
        return {entry.element: entry.atom_count for entry in self.breakdown}

    @property
    def elements(self) -> list[str]:
        return [entry.element for entry in self.breakdown]

    def __repr__(self) -> str:
        summary = (
            f"CalculationResult(formula='{self.formula}', "
            f"total_weight={self.total_weight:.4f}, "
            f"n_elements={len(self)})"
        )
        return "\n".join([summary, "", self.to_table()])

    # === FORMATTING METHODS ===
    def to_table(
        self,
        decimals: int = 4,
    ) -> str:
        """
        Return the breakdown as a formatted text table

        Args:
            decimals: Number of decimal places for masses. Percentages
                always use 2 decimals.

        Returns:
            Formatted string table, ending with a total row
        """
        header = (
            f"{'Element':<10} {'Count':>10} {'Atomic wt.':>14} "
            f"{'Subtotal':>16} {'Percent':>9}"
        )
        sep = "-" * len(header)
        lines: list[str] = [header, sep]

        for entry in self.breakdown:
            lines.append(
                f"{entry.element:<10} {entry.atom_count:>10} "
                f"{entry.atomic_weight:>14.{decimals}f} "
                f"{entry.subtotal_mass:>16.{decimals}f} "
                f"{entry.percentage:>8.2f}%"
            )

        lines.append(sep)
        lines.append(
            f"{'Total':<10} {'':>10} {'':>14} "
            f"{self.total_weight:>16.{decimals}f} {100.0:>8.2f}%"
        )
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        """
        JSON-serialisable representation

        Returns:
            Dict with 'formula', 'total_weight' and a 'breakdown' list of
            per-element dicts
        """
        return {
            'formula': self.formula,
            'total_weight': self.total_weight,
            'breakdown': [asdict(entry) for entry in self.breakdown],
        }

    def to_dataframe(self) -> 'pd.DataFrame':
        """
        Convert the breakdown to a pandas DataFrame, if pandas is installed.

        Returns:
            pandas.DataFrame with one row per element and columns
            element, atom_count, atomic_weight, subtotal_mass, percentage

        Raises:
            ImportError: If pandas is not installed
        """
        try:
            import pandas as pd
        except ImportError:
            raise ImportError(
                "pandas is required for to_dataframe(). "
                "Install with: pip install pandas"
            )

        columns = [
            'element', 'atom_count', 'atomic_weight',
            'subtotal_mass', 'percentage',
        ]
        return pd.DataFrame(
            [asdict(entry) for entry in self.breakdown],
            columns=columns,
        )
