"""
Element data: atomic weights and preset compounds
"""

from molweight.elements.periodic_table import (
    ELEMENTS,
    Element,
    PeriodicTable,
    default_periodic_table,
    get_element,
    list_elements,
)
from molweight.elements.compounds import COMMON_COMPOUNDS, get_compound_formula

__all__ = [
    "ELEMENTS",
    "Element",
    "PeriodicTable",
    "default_periodic_table",
    "get_element",
    "list_elements",
    "COMMON_COMPOUNDS",
    "get_compound_formula",
]
