"""
This module converts a raw formula string into a flat list of Tokens.

Recognised tokens:
- element symbols: an uppercase letter optionally followed by one lowercase letter
- integers: a run of ASCII digits (>= 1, no leading zero)
- '(' and ')'
- '.' (hydration separator)

Anything else, whitespace included, is rejected with the position of the
offending character. The token list always ends with an END token whose
position is the length of the input.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .errors import InvalidCharacterError, InvalidMultiplierError

# Counts and multipliers are unsigned 32-bit values
MAX_MULTIPLIER = 2**32 - 1


class TokenKind(Enum):
    SYMBOL = "symbol"
    INTEGER = "integer"
    LPAREN = "("
    RPAREN = ")"
    DOT = "."
    END = "end"


@dataclass(frozen=True, slots=True)
class Token:
    """
    A single lexical unit of a formula.

    Attributes:
        kind: Token category
        value: Element symbol (SYMBOL), parsed int (INTEGER), or the
            literal character for brackets/dot. Empty string for END.
        position: Index of the token's first character in the input
    """
    kind: TokenKind
    value: Union[str, int]
    position: int

    def __str__(self) -> str:
        if self.kind is TokenKind.END:
            return "end of input"
        return str(self.value)


_PUNCTUATION = {
    '(': TokenKind.LPAREN,
    ')': TokenKind.RPAREN,
    '.': TokenKind.DOT,
}


def _is_upper(char: str) -> bool:
    return 'A' <= char <= 'Z'


def _is_lower(char: str) -> bool:
    return 'a' <= char <= 'z'


def _is_digit(char: str) -> bool:
    # str.isdigit() would also accept non-ASCII digits such as '²'
    return '0' <= char <= '9'


def tokenize(formula: str) -> list[Token]:
    """
    Split a formula string into tokens.

    Args:
        formula: Formula string, e.g. "Fe2(SO4)3" or "CuSO4.5H2O"

    Returns:
        List of Token objects terminated by an END token

    Raises:
        TypeError: If formula is not a string
        InvalidCharacterError: On any character outside [A-Za-z0-9().]
            or a lowercase letter that does not follow an uppercase one
        InvalidMultiplierError: On an integer that is zero, has a leading
            zero, or exceeds MAX_MULTIPLIER

    Example:
        >>> [str(t) for t in tokenize("Ca(OH)2")]
        ['Ca', '(', 'O', 'H', ')', '2', 'end of input']
    """
    if not isinstance(formula, str):
        raise TypeError(
            f"Formula must be a string, not {type(formula).__name__}"
        )

    tokens: list[Token] = []
    i = 0
    n = len(formula)
    while i < n:
        char = formula[i]

        if _is_upper(char):
            if i + 1 < n and _is_lower(formula[i + 1]):
                tokens.append(Token(TokenKind.SYMBOL, formula[i:i + 2], i))
                i += 2
            else:
                tokens.append(Token(TokenKind.SYMBOL, char, i))
                i += 1

        elif _is_digit(char):
            start = i
            while i < n and _is_digit(formula[i]):
                i += 1
            text = formula[start:i]
            if text[0] == '0':
                raise InvalidMultiplierError(position=start, text=text)
            value = int(text)
            if value > MAX_MULTIPLIER:
                raise InvalidMultiplierError(position=start, text=text)
            tokens.append(Token(TokenKind.INTEGER, value, start))

        elif char in _PUNCTUATION:
            tokens.append(Token(_PUNCTUATION[char], char, i))
            i += 1

        else:
            raise InvalidCharacterError(position=i, char=char)

    tokens.append(Token(TokenKind.END, "", n))
    return tokens
