"""
Recursive-descent parser turning a token list into a formula tree.

Grammar:
    formula    := group (DOT INTEGER? group)?
    group      := term+
    term       := atom | parenGroup
    atom       := SYMBOL INTEGER?
    parenGroup := LPAREN group RPAREN INTEGER?

The parser knows nothing about chemistry: element symbols are only
checked against the periodic table by the evaluator.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from .errors import (
    EmptyFormulaError,
    EmptyGroupError,
    FormulaError,
    MultipleHydrationClausesError,
    NestingTooDeepError,
    TrailingInputError,
    UnclosedGroupError,
    UnexpectedCloseParenError,
    UnexpectedEndOfInputError,
    UnexpectedTokenError,
)
from .tokenizer import Token, TokenKind, tokenize

MAX_NESTING_DEPTH = 100


@dataclass(frozen=True, slots=True)
class Atom:
    """An element symbol with its count (1 when no digits follow)."""
    element: str
    count: int = 1
    position: int = 0


@dataclass(frozen=True, slots=True)
class Group:
    """
    A sequence of atoms/groups repeated `multiplier` times.

    Attributes:
        children: Atoms and nested groups, in input order
        multiplier: Trailing integer after ')' or, for a hydration
            term, the integer right after the '.'
        position: Index of the opening '(' or '.' (0 for the main group)
    """
    children: tuple['FormulaNode', ...]
    multiplier: int = 1
    position: int = 0


FormulaNode = Union[Atom, Group]


@dataclass(frozen=True, slots=True)
class ParsedFormula:
    """
    Root of a parsed formula.

    `main` always has multiplier 1. `hydration` is the optional
    adduct term after the '.', e.g. for "CuSO4.5H2O" it is a Group
    holding H2O with multiplier 5.
    """
    main: Group
    hydration: Optional[Group] = None

    @property
    def groups(self) -> tuple[Group, ...]:
        """Top-level groups, main first."""
        if self.hydration is None:
            return (self.main,)
        return (self.main, self.hydration)


class FormulaParser:
    """
    Parses a single token list. Instances are not reused.

    Example:
        >>> tree = FormulaParser(tokenize("Ca3(PO4)2")).parse()
        >>> tree.main.children[1].multiplier
        2
    """

    def __init__(self, tokens: list[Token]):
        if not tokens or tokens[-1].kind is not TokenKind.END:
            raise ValueError("Token list must be terminated by an END token")
        self._tokens = tokens
        self._index = 0
        self._seen_dot = False

    def parse(self) -> ParsedFormula:
        if self._peek().kind is TokenKind.END:
            raise EmptyFormulaError()

        main = Group(
            children=self._parse_group(depth=0, open_paren=None),
            multiplier=1,
            position=0,
        )

        hydration = None
        if self._peek().kind is TokenKind.DOT:
            dot = self._advance()
            self._seen_dot = True
            multiplier = self._parse_count()
            hydration = Group(
                children=self._parse_group(depth=0, open_paren=None),
                multiplier=multiplier,
                position=dot.position,
            )

        self._expect_end()
        return ParsedFormula(main=main, hydration=hydration)

    # ------------------------------------------------------------------
    # Grammar rules
    # ------------------------------------------------------------------

    def _parse_group(
        self,
        depth: int,
        open_paren: Optional[Token],
    ) -> tuple[FormulaNode, ...]:
        children: list[FormulaNode] = []
        while self._peek().kind in (TokenKind.SYMBOL, TokenKind.LPAREN):
            children.append(self._parse_term(depth))

        if not children:
            raise self._missing_term_error(self._peek(), open_paren)
        return tuple(children)

    def _parse_term(self, depth: int) -> FormulaNode:
        token = self._advance()

        if token.kind is TokenKind.SYMBOL:
            return Atom(
                element=token.value,
                count=self._parse_count(),
                position=token.position,
            )

        # LPAREN
        if depth + 1 > MAX_NESTING_DEPTH:
            raise NestingTooDeepError(
                position=token.position,
                max_depth=MAX_NESTING_DEPTH,
            )
        children = self._parse_group(depth + 1, open_paren=token)

        closing = self._peek()
        if closing.kind is not TokenKind.RPAREN:
            if closing.kind is TokenKind.DOT and self._seen_dot:
                raise MultipleHydrationClausesError(position=closing.position)
            raise UnclosedGroupError(position=token.position)
        self._advance()

        return Group(
            children=children,
            multiplier=self._parse_count(),
            position=token.position,
        )

    def _parse_count(self) -> int:
        if self._peek().kind is TokenKind.INTEGER:
            return self._advance().value
        return 1

    def _expect_end(self) -> None:
        token = self._peek()
        if token.kind is TokenKind.END:
            return
        if token.kind is TokenKind.RPAREN:
            raise UnexpectedCloseParenError(position=token.position)
        if token.kind is TokenKind.DOT:
            raise MultipleHydrationClausesError(position=token.position)
        raise TrailingInputError(position=token.position)

    def _missing_term_error(
        self,
        token: Token,
        open_paren: Optional[Token],
    ) -> FormulaError:
        """Pick the error for a token found where a symbol or '(' belongs."""
        if token.kind is TokenKind.END:
            if open_paren is not None:
                return UnclosedGroupError(position=open_paren.position)
            return UnexpectedEndOfInputError(position=token.position)

        if token.kind is TokenKind.RPAREN:
            if open_paren is not None:
                return EmptyGroupError(position=open_paren.position)
            return UnexpectedCloseParenError(position=token.position)

        if token.kind is TokenKind.DOT and self._seen_dot:
            return MultipleHydrationClausesError(position=token.position)

        return UnexpectedTokenError(position=token.position, token=str(token))

    # ------------------------------------------------------------------
    # Token cursor
    # ------------------------------------------------------------------

    def _peek(self) -> Token:
        return self._tokens[self._index]

    def _advance(self) -> Token:
        token = self._tokens[self._index]
        if token.kind is not TokenKind.END:
            self._index += 1
        return token


def parse(tokens: list[Token]) -> ParsedFormula:
    """Parse a token list produced by tokenize()."""
    return FormulaParser(tokens).parse()


def parse_formula(formula: str) -> ParsedFormula:
    """Tokenize and parse a formula string."""
    return parse(tokenize(formula))
