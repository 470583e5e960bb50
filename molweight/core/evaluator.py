"""
Folds a parsed formula tree into a flat element -> atom count tally.
"""
from __future__ import annotations

from typing import Container

from .errors import EmptyFormulaError, UnknownElementError
from .parser import Atom, FormulaNode, ParsedFormula


def evaluate(
    tree: ParsedFormula,
    periodic_table: Container[str],
) -> dict[str, int]:
    """
    Count the atoms of every element in a parsed formula.

    Walks the tree depth-first, left to right, carrying the product of
    all enclosing group multipliers. The hydration term is just another
    top-level group, so its leading multiplier scales it the same way
    a ')3' scales a parenthesised group.

    Args:
        tree: Output of the parser
        periodic_table: Anything supporting `symbol in periodic_table`

    Returns:
        Dict mapping element symbols to total atom counts, in order of
        first appearance

    Raises:
        UnknownElementError: For the first (leftmost) symbol missing
            from the periodic table
        EmptyFormulaError: If the tree holds no atoms

    Example:
        >>> evaluate(parse_formula("Ca3(PO4)2"), default_periodic_table())
        {'Ca': 3, 'P': 2, 'O': 8}
    """
    tally: dict[str, int] = {}

    # Explicit stack so deep nesting can't hit the recursion limit
    stack: list[tuple[FormulaNode, int]] = [
        (group, 1) for group in reversed(tree.groups)
    ]
    while stack:
        node, factor = stack.pop()

        if isinstance(node, Atom):
            if node.element not in periodic_table:
                raise UnknownElementError(node.element, position=node.position)
            tally[node.element] = tally.get(node.element, 0) + node.count * factor
            continue

        scaled = factor * node.multiplier
        stack.extend((child, scaled) for child in reversed(node.children))

    if not tally:
        raise EmptyFormulaError()
    return tally
