"""
Exception taxonomy for formula interpretation.

Every error a user can cause by typing a bad formula is a subclass of
FormulaError (itself a ValueError), and carries enough context
(position, offending character or symbol) for a caller to render a
precise message. The `code` attribute is a stable identifier suitable
for JSON responses.
"""
from __future__ import annotations

from typing import Any, Optional


class FormulaError(ValueError):
    """Base class for all formula errors."""

    code: str = "formula_error"

    def __init__(self, message: str, position: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.position = position

    def context(self) -> dict[str, Any]:
        """Extra fields describing where/what went wrong."""
        if self.position is None:
            return {}
        return {'position': self.position}

    def to_dict(self) -> dict[str, Any]:
        """
        JSON-ready representation

        Example:
            >>> InvalidCharacterError(position=1, char='!').to_dict()
            {'error': 'invalid_character', 'message': "...", 'position': 1, 'char': '!'}
        """
        return {
            'error': self.code,
            'message': self.message,
            **self.context(),
        }


# === TOKENIZER ERRORS ===
class InvalidCharacterError(FormulaError):
    code = "invalid_character"

    def __init__(self, position: int, char: str):
        super().__init__(
            f"Invalid character {char!r} at position {position}",
            position=position,
        )
        self.char = char

    def context(self) -> dict[str, Any]:
        return {'position': self.position, 'char': self.char}


class InvalidMultiplierError(FormulaError):
    """A zero, zero-padded or out-of-range count/multiplier."""
    code = "invalid_multiplier"

    def __init__(self, position: int, text: str = ""):
        detail = f" {text!r}" if text else ""
        super().__init__(
            f"Invalid count or multiplier{detail} at position {position}; "
            f"counts must be positive integers without leading zeros",
            position=position,
        )
        self.text = text


# === STRUCTURAL ERRORS ===
class UnclosedGroupError(FormulaError):
    code = "unclosed_group"

    def __init__(self, position: int):
        super().__init__(
            f"Group opened at position {position} is never closed",
            position=position,
        )


class UnexpectedCloseParenError(FormulaError):
    code = "unexpected_close_paren"

    def __init__(self, position: int):
        super().__init__(
            f"Unmatched ')' at position {position}",
            position=position,
        )


class EmptyGroupError(FormulaError):
    code = "empty_group"

    def __init__(self, position: int):
        super().__init__(
            f"Empty group '()' at position {position}",
            position=position,
        )


class NestingTooDeepError(FormulaError):
    code = "nesting_too_deep"

    def __init__(self, position: int, max_depth: int):
        super().__init__(
            f"Groups nested deeper than {max_depth} levels at position {position}",
            position=position,
        )
        self.max_depth = max_depth


class MultipleHydrationClausesError(FormulaError):
    code = "multiple_hydration_clauses"

    def __init__(self, position: Optional[int] = None):
        where = f" (second '.' at position {position})" if position is not None else ""
        super().__init__(
            f"Only one hydration clause is allowed{where}",
            position=position,
        )


# === GRAMMAR ERRORS ===
class TrailingInputError(FormulaError):
    code = "trailing_input"

    def __init__(self, position: int):
        super().__init__(
            f"Unexpected input after the end of the formula at position {position}",
            position=position,
        )


class UnexpectedEndOfInputError(FormulaError):
    code = "unexpected_end_of_input"

    def __init__(self, position: Optional[int] = None):
        super().__init__(
            "Formula ended where an element symbol or '(' was expected",
            position=position,
        )


class UnexpectedTokenError(FormulaError):
    code = "unexpected_token"

    def __init__(self, position: int, token: str):
        super().__init__(
            f"Unexpected {token!r} at position {position}; "
            f"expected an element symbol or '('",
            position=position,
        )
        self.token = token

    def context(self) -> dict[str, Any]:
        return {'position': self.position, 'token': self.token}


# === EVALUATION ERRORS ===
class UnknownElementError(FormulaError):
    code = "unknown_element"

    def __init__(self, symbol: str, position: Optional[int] = None):
        super().__init__(
            f"Unknown element symbol: '{symbol}'",
            position=position,
        )
        self.symbol = symbol

    def context(self) -> dict[str, Any]:
        ctx = {'symbol': self.symbol}
        if self.position is not None:
            ctx['position'] = self.position
        return ctx


class EmptyFormulaError(FormulaError):
    code = "empty_formula"

    def __init__(self):
        super().__init__("Formula contains no atoms")
