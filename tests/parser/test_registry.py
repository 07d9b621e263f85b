"""Tests for the lexeme and operator registries."""

import pytest

from shunting.parser.registry import (
    LEXEMES,
    OPERATORS,
    LexemeRegistry,
    OperatorConfig,
    OperatorRegistry,
    Priority,
    is_digit_run,
)


class TestPriority:
    """Test the priority ordering."""

    def test_total_order(self):
        """Brackets sort below numbers, power sorts highest."""
        assert (
            Priority.OPEN_BRACKET
            < Priority.CLOSE_BRACKET
            < Priority.NUMBER
            < Priority.UNARY_FUNCTION
            < Priority.ADD_SUB
            < Priority.MUL_DIV
            < Priority.POWER
        )

    def test_sentinel_values(self):
        assert Priority.OPEN_BRACKET == -2
        assert Priority.CLOSE_BRACKET == -1
        assert Priority.NUMBER == 0


class TestOperatorRegistry:
    """Test the default operator table."""

    @pytest.mark.parametrize(
        "symbol, priority, left",
        [
            ("+", Priority.ADD_SUB, True),
            ("-", Priority.ADD_SUB, True),
            ("*", Priority.MUL_DIV, True),
            ("/", Priority.MUL_DIV, True),
            ("^", Priority.POWER, False),
            ("sin", Priority.UNARY_FUNCTION, False),
            ("cos", Priority.UNARY_FUNCTION, False),
            ("(", Priority.OPEN_BRACKET, True),
            (")", Priority.CLOSE_BRACKET, True),
        ],
    )
    def test_entries(self, symbol, priority, left):
        """Test each registered operator's priority and associativity."""
        entry = OPERATORS.lookup(symbol)
        assert entry == OperatorConfig(symbol, priority, left)

    def test_registration_order(self):
        assert OPERATORS.symbols == ("+", "-", "*", "/", "^", "sin", "cos", "(", ")")

    def test_unknown_symbol(self):
        assert OPERATORS.lookup("tan") is None
        assert "tan" not in OPERATORS
        assert "sin" in OPERATORS

    def test_first_entry_wins(self):
        """Test that lookup returns the first entry registered for a symbol."""
        registry = OperatorRegistry(
            [
                OperatorConfig("~", Priority.ADD_SUB, True),
                OperatorConfig("~", Priority.POWER, False),
            ]
        )
        assert registry.lookup("~").priority == Priority.ADD_SUB

    def test_entries_are_immutable(self):
        entry = OPERATORS.lookup("+")
        with pytest.raises(AttributeError):
            entry.priority = Priority.POWER


class TestLexemeRegistry:
    """Test exact and prefix matching."""

    def test_derived_from_operators(self):
        assert LEXEMES.lexemes == OPERATORS.symbols

    @pytest.mark.parametrize("candidate", ["+", "sin", "cos", "(", ")", "0", "42", "007"])
    def test_matches(self, candidate):
        assert LEXEMES.matches(candidate)

    @pytest.mark.parametrize("candidate", ["", "s", "si", "co", "sinx", "2+", "&", "1a"])
    def test_does_not_match(self, candidate):
        assert not LEXEMES.matches(candidate)

    def test_can_extend_prefixes(self):
        """Test that partial function names can still grow."""
        assert LEXEMES.can_extend("s")
        assert LEXEMES.can_extend("si")
        assert LEXEMES.can_extend("c")
        assert LEXEMES.can_extend("12")

    def test_cannot_extend(self):
        assert not LEXEMES.can_extend("x")
        assert not LEXEMES.can_extend("+1")
        assert not LEXEMES.can_extend("sa")

    def test_custom_lexemes(self):
        registry = LexemeRegistry(["**"])
        assert registry.can_extend("*")
        assert not registry.matches("*")
        assert registry.matches("**")


class TestDigitRun:
    """Test the digit-run rule."""

    def test_digit_runs(self):
        assert is_digit_run("0")
        assert is_digit_run("1234567890")

    def test_not_digit_runs(self):
        assert not is_digit_run("")
        assert not is_digit_run("1.5")
        assert not is_digit_run("²")
