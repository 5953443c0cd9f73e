"""
Tests for the tokenizer and interaction validator.

These tests verify:
1. Tokenization is one token per code point
2. Each structural rule fires (and only fires) where it should
3. Rule output order is fixed
4. Documented quirks are preserved (double bracket violation, asymmetric
   operand scans)
"""

import pytest

from glyphgate.events import OperatorClass
from glyphgate.interaction.tokenize import Token, TokenKind, tokenize
from glyphgate.interaction.validator import (
    ValidatorConfig,
    check_bracket_balance,
    check_colon_operands,
    validate_interactions,
)


def messages(events):
    return [e.message for e in events]


def with_symbol(events, symbol):
    return [e for e in events if e.symbol == symbol]


# =============================================================================
# TOKENIZER TESTS
# =============================================================================

class TestTokenize:
    """Test the lexical tokenizer."""

    def test_punctuation_kinds(self):
        """Each of the eight punctuation marks has its own kind."""
        kinds = [t.kind for t in tokenize("→+:/|[]=")]
        assert kinds == [
            TokenKind.ARROW,
            TokenKind.PLUS,
            TokenKind.COLON,
            TokenKind.SLASH,
            TokenKind.PIPE,
            TokenKind.LBRACKET,
            TokenKind.RBRACKET,
            TokenKind.EQUALS,
        ]

    def test_everything_else_is_symbol(self):
        """Letters, glyphs and whitespace are all symbols."""
        tokens = tokenize("aΔ \t")
        assert all(t.kind == TokenKind.SYMBOL for t in tokens)
        assert [t.char for t in tokens] == ["a", "Δ", " ", "\t"]

    def test_indices_are_code_point_positions(self):
        """Multi-byte characters advance the index by one."""
        tokens = tokenize("Δ→[a]")
        assert [t.index for t in tokens] == [0, 1, 2, 3, 4]
        assert tokens[1] == Token(TokenKind.ARROW, 1, "→")

    def test_combining_mark_is_its_own_token(self):
        """Γ̇ is two code points and therefore two tokens."""
        assert len(tokenize("Γ̇")) == 2

    def test_empty_content(self):
        assert tokenize("") == []


# =============================================================================
# BRACKET BALANCE
# =============================================================================

class TestBracketBalance:
    """Rule 1: '[' / ']' nesting."""

    def test_balanced_brackets_are_clean(self):
        assert validate_interactions("[a]") == []

    def test_nested_balanced(self):
        assert check_bracket_balance(tokenize("[[a][b]]")) == []

    def test_lone_close_emits_both_violations(self):
        """
        Documented quirk: a single stray ']' reports both the unmatched
        close and the unbalanced container.
        """
        events = validate_interactions("]")
        assert messages(events) == [
            "Unmatched ']' detected",
            "Unbalanced '[]' loop container",
        ]
        assert all(e.operator == OperatorClass.INTERACTION_VIOLATION for e in events)
        assert all(e.symbol == "[]" for e in events)

    def test_unclosed_open_emits_only_unbalanced(self):
        events = validate_interactions("[[]")
        assert messages(events) == ["Unbalanced '[]' loop container"]

    def test_scan_stops_at_first_negative(self):
        """Later brackets do not rescue the count once it went negative."""
        events = check_bracket_balance(tokenize("][]["))
        assert messages(events) == [
            "Unmatched ']' detected",
            "Unbalanced '[]' loop container",
        ]


# =============================================================================
# TERMINAL MARKERS
# =============================================================================

class TestTerminalMarkers:
    """Rules 2 and 8: nothing transforms after '=' or 'Ω'."""

    def test_transform_after_equals(self):
        events = validate_interactions("Φ = Δ")
        assert len(events) == 1
        assert events[0].symbol == "="
        assert events[0].message.startswith("Post '=' transform detected")

    def test_non_transform_after_equals_is_fine(self):
        assert validate_interactions("Φ = Φ") == []

    def test_transform_before_equals_is_fine(self):
        assert with_symbol(validate_interactions("Δ = Φ"), "=") == []

    def test_only_one_event_for_many_transforms(self):
        events = with_symbol(validate_interactions("Φ = Δ Ξ Π"), "=")
        assert len(events) == 1

    def test_transform_after_omega(self):
        events = with_symbol(validate_interactions("ΔΩ → Π"), "Ω")
        assert len(events) == 1
        assert events[0].operator == OperatorClass.INTERACTION_VIOLATION
        assert "Closure should be terminal" in events[0].message

    def test_omega_without_followers(self):
        assert validate_interactions("Δ Ω") == []


# =============================================================================
# COLON / PIPE SCOPE
# =============================================================================

class TestColonPipeScope:
    """Rule 3: '|' at the same nesting level as an earlier ':'."""

    def test_same_scope_notice(self):
        events = validate_interactions("Ψ : Φ | Γ")
        assert len(events) == 1
        assert events[0].operator == OperatorClass.INTERACTION_NOTICE
        assert events[0].message == "'|' orthogonality with ':' interaction at same scope"
        assert events[0].symbol == "|"

    def test_different_scope_is_fine(self):
        assert validate_interactions("[Ψ : Φ] | Γ") == []

    def test_at_most_one_notice(self):
        events = with_symbol(validate_interactions("Ψ : Φ | Γ | Λ"), "|")
        assert len(events) == 1

    def test_pipe_before_colon_is_fine(self):
        """Only colons seen before the pipe count."""
        assert with_symbol(validate_interactions("Φ | Ψ : Γ"), "|") == []


# =============================================================================
# ARROWS AND TRAILING MARKERS
# =============================================================================

class TestArrowsAndTrailing:
    """Rules 4, 5 and 6."""

    def test_single_arrow_is_fine(self):
        assert validate_interactions("Δ → Λ") == []

    def test_multiple_arrows_notice(self):
        events = validate_interactions("Δ → Λ → Ψ")
        assert len(events) == 1
        assert events[0].symbol == "→"
        assert events[0].operator == OperatorClass.INTERACTION_NOTICE

    def test_trailing_colon(self):
        """A trailing ':' also lacks a right operand."""
        events = validate_interactions("Ψ :")
        assert messages(events) == [
            ": at end of expression; interaction requires counterpart",
            ": requires operands on both sides",
        ]
        assert events[0].operator == OperatorClass.INTERACTION_NOTICE
        assert events[1].operator == OperatorClass.INTERACTION_VIOLATION

    def test_trailing_colon_ignores_whitespace(self):
        """Trailing whitespace is trimmed, and it counts as an operand."""
        events = validate_interactions("Ψ :   ")
        assert messages(events) == [
            ": at end of expression; interaction requires counterpart",
        ]

    def test_trailing_equals(self):
        events = validate_interactions("Ξ =")
        assert messages(events) == [
            "=: at end of expression; stabilization requires finalized form",
        ]
        assert events[0].operator == OperatorClass.INTERACTION_VIOLATION


# =============================================================================
# COLON OPERANDS
# =============================================================================

class TestColonOperands:
    """Rule 7: ':' needs operands on both sides."""

    def test_operands_on_both_sides(self):
        assert check_colon_operands(tokenize("a:b")) == []

    def test_operator_before_colon(self):
        assert len(check_colon_operands(tokenize("+:b"))) == 1

    def test_leading_colon(self):
        assert len(check_colon_operands(tokenize(":b"))) == 1

    def test_brackets_count_outward_only(self):
        """
        ']' is an operand only before the colon and '[' only after it.
        """
        assert check_colon_operands(tokenize("]:[")) == []
        assert len(check_colon_operands(tokenize("[:]"))) == 1

    def test_one_event_per_failing_colon(self):
        events = check_colon_operands(tokenize("::"))
        assert len(events) == 2
        assert all(e.symbol == ":" for e in events)


# =============================================================================
# VALIDATOR
# =============================================================================

class TestValidator:
    """Whole-validator behaviour."""

    def test_empty_content(self):
        assert validate_interactions("") == []

    def test_accepts_precomputed_tokens_and_config(self):
        content = "Ψ : Φ | Γ"
        assert validate_interactions(content, tokenize(content), ValidatorConfig()) == \
            validate_interactions(content)

    def test_rule_order(self):
        """Bracket events come before terminal '=' events, which come before Ω events."""
        events = validate_interactions("]Ω Δ = Π")
        assert [e.symbol for e in events] == ["[]", "[]", "=", "Ω"]

    def test_events_carry_no_section_ref(self):
        events = validate_interactions("] : Φ = Δ →→")
        assert events
        assert all(e.section_ref is None for e in events)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
