"""
Tests for the formula tokenizer
"""
import pytest

from molweight.core.errors import InvalidCharacterError, InvalidMultiplierError
from molweight.core.tokenizer import MAX_MULTIPLIER, Token, TokenKind, tokenize


def _kinds_and_values(formula: str) -> list[tuple[TokenKind, object]]:
    return [(t.kind, t.value) for t in tokenize(formula)]


class TestTokenize:

    def test_simple_formula(self):
        """
        Symbols and counts are split into separate tokens
        """
        assert _kinds_and_values("H2O") == [
            (TokenKind.SYMBOL, "H"),
            (TokenKind.INTEGER, 2),
            (TokenKind.SYMBOL, "O"),
            (TokenKind.END, ""),
        ]

    def test_two_letter_symbols(self):
        """
        An uppercase letter absorbs one following lowercase letter
        """
        assert _kinds_and_values("NaCl") == [
            (TokenKind.SYMBOL, "Na"),
            (TokenKind.SYMBOL, "Cl"),
            (TokenKind.END, ""),
        ]

    def test_case_distinguishes_symbols(self):
        """
        'CO' is carbon + oxygen, 'Co' is cobalt
        """
        assert [t.value for t in tokenize("CO")][:-1] == ["C", "O"]
        assert [t.value for t in tokenize("Co")][:-1] == ["Co"]

    def test_multi_digit_integer(self):
        assert _kinds_and_values("C12")[1] == (TokenKind.INTEGER, 12)

    def test_brackets_and_dot(self):
        kinds = [t.kind for t in tokenize("(OH)2.H2O")]
        assert kinds == [
            TokenKind.LPAREN,
            TokenKind.SYMBOL,
            TokenKind.SYMBOL,
            TokenKind.RPAREN,
            TokenKind.INTEGER,
            TokenKind.DOT,
            TokenKind.SYMBOL,
            TokenKind.INTEGER,
            TokenKind.SYMBOL,
            TokenKind.END,
        ]

    def test_positions(self):
        """
        Each token records the index of its first character
        """
        tokens = tokenize("Fe2(SO4)3")
        assert [t.position for t in tokens] == [0, 2, 3, 4, 5, 6, 7, 8, 9]

    def test_empty_string_gives_only_end(self):
        assert tokenize("") == [Token(TokenKind.END, "", 0)]

    def test_largest_multiplier_accepted(self):
        tokens = tokenize(f"H{MAX_MULTIPLIER}")
        assert tokens[1].value == MAX_MULTIPLIER


class TestTokenizeErrors:

    @pytest.mark.parametrize("formula,position,char", [
        ("H2 O", 2, " "),
        (" H2O", 0, " "),
        ("h2o", 0, "h"),
        ("H2O!", 3, "!"),
        ("Fe[CN]6", 2, "["),
        ("NaCl+", 4, "+"),
        ("Uuo", 2, "o"),        # 'Uu' then a dangling lowercase letter
        ("H₂O", 1, "₂"),        # non-ASCII digit
        ("Ça", 0, "Ç"),
    ])
    def test_invalid_character(self, formula, position, char):
        with pytest.raises(InvalidCharacterError) as exc_info:
            tokenize(formula)
        assert exc_info.value.position == position
        assert exc_info.value.char == char

    @pytest.mark.parametrize("formula,position", [
        ("H0", 1),
        ("H02", 1),
        ("(OH)0", 4),
        ("CuSO4.05H2O", 6),
        (f"H{MAX_MULTIPLIER + 1}", 1),
    ])
    def test_invalid_multiplier(self, formula, position):
        with pytest.raises(InvalidMultiplierError) as exc_info:
            tokenize(formula)
        assert exc_info.value.position == position

    def test_non_string_raises_type_error(self):
        with pytest.raises(TypeError, match="must be a string"):
            tokenize(None)

    def test_first_error_is_reported(self):
        """
        Scanning stops at the leftmost bad character
        """
        with pytest.raises(InvalidCharacterError) as exc_info:
            tokenize("H2$O#")
        assert exc_info.value.char == "$"
