"""
Tests for content constraints.

These tests verify:
1. non_empty fails (Hard) on blank content
2. max_length fails (Soft) beyond 280 code units
3. Checks are independent and order-preserving
"""

import pytest

from glyphgate.constraints import (
    DEFAULT_CONSTRAINTS,
    MAX_CONTENT_LENGTH,
    MaxLength,
    NonEmpty,
    check_constraints,
    content_length,
)
from glyphgate.domain import Severity


def by_name(results):
    return {r.name: r for r in results}


# =============================================================================
# NON EMPTY
# =============================================================================

class TestNonEmpty:
    """Test the non_empty constraint."""

    def test_empty_fails_hard(self):
        result = NonEmpty().check("")
        assert result.passed is False
        assert result.severity == Severity.HARD
        assert result.message == "content must not be empty"

    def test_whitespace_only_fails(self):
        assert NonEmpty().check("  \n\t ").passed is False

    def test_text_passes(self):
        result = NonEmpty().check("ok")
        assert result.passed is True
        assert result.message is None


# =============================================================================
# MAX LENGTH
# =============================================================================

class TestMaxLength:
    """Test the max_length constraint."""

    def test_default_limit(self):
        assert MAX_CONTENT_LENGTH == 280

    def test_at_limit_passes(self):
        assert MaxLength().check("a" * 280).passed is True

    def test_over_limit_fails_soft(self):
        result = MaxLength().check("a" * 281)
        assert result.passed is False
        assert result.severity == Severity.SOFT
        assert result.name == "max_length"
        assert result.message == "length 281 exceeds 280"

    def test_length_counts_utf8_code_units(self):
        """141 two-byte glyphs are 282 code units."""
        content = "Φ" * 141
        assert content_length(content) == 282
        assert MaxLength().check(content).message == "length 282 exceeds 280"

    def test_custom_limit(self):
        result = MaxLength(limit=5).check("abcdef")
        assert result.message == "length 6 exceeds 5"


# =============================================================================
# CHECK CONSTRAINTS
# =============================================================================

class TestCheckConstraints:
    """Test running the constraint list."""

    def test_empty_content(self):
        results = by_name(check_constraints(""))
        assert results["non_empty"].passed is False
        assert results["non_empty"].severity == Severity.HARD
        assert results["max_length"].passed is True

    def test_default_order(self):
        names = [r.name for r in check_constraints("ok")]
        assert names == ["non_empty", "max_length"]
        assert len(DEFAULT_CONSTRAINTS) == 2

    def test_modality_does_not_change_results(self):
        assert check_constraints("Φ", modality="text") == check_constraints("Φ", modality="audio")

    def test_custom_constraint_list(self):
        results = check_constraints("abc", constraints=(MaxLength(limit=2),))
        assert len(results) == 1
        assert results[0].passed is False

    def test_results_serialize(self):
        data = check_constraints("")[0].to_dict()
        assert data == {
            "passed": False,
            "severity": "hard",
            "name": "non_empty",
            "message": "content must not be empty",
        }


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
