"""
Content Constraints for GlyphGate.

Each constraint is a total function of the raw content. Constraints do
not look at tokens, glyphs, or context. A failed constraint is reported
as a ConstraintResult with passed=False; nothing is raised and nothing
is blocked.

Default checks:
1. non_empty   — trimmed content must not be empty (Hard)
2. max_length  — content must fit in MAX_CONTENT_LENGTH code units (Soft)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol

from .domain import ConstraintResult, Severity


# =============================================================================
# CONFIGURATION CONSTANTS
# =============================================================================

MAX_CONTENT_LENGTH = 280


def content_length(content: str) -> int:
    """Length in UTF-8 code units."""
    return len(content.encode("utf-8"))


# =============================================================================
# CHECKS
# =============================================================================

class Constraint(Protocol):
    name: str

    def check(self, content: str) -> ConstraintResult: ...


@dataclass(frozen=True)
class NonEmpty:
    """Passes iff the trimmed content is non-empty."""
    name: str = "non_empty"

    def check(self, content: str) -> ConstraintResult:
        passed = bool(content.strip())
        return ConstraintResult(
            passed=passed,
            severity=Severity.HARD,
            name=self.name,
            message=None if passed else "content must not be empty",
        )


@dataclass(frozen=True)
class MaxLength:
    """Passes iff the content length does not exceed the limit."""
    limit: int = MAX_CONTENT_LENGTH
    name: str = "max_length"

    def check(self, content: str) -> ConstraintResult:
        length = content_length(content)
        passed = length <= self.limit
        return ConstraintResult(
            passed=passed,
            severity=Severity.SOFT,
            name=self.name,
            message=None if passed else f"length {length} exceeds {self.limit}",
        )


DEFAULT_CONSTRAINTS: tuple[Constraint, ...] = (
    NonEmpty(),
    MaxLength(),
)


def check_constraints(
    content: str,
    constraints: Optional[tuple[Constraint, ...]] = None,
    modality: Optional[str] = None,
) -> tuple[ConstraintResult, ...]:
    """
    Run every constraint against the content, in order.

    The modality is accepted for interface symmetry and does not change
    any result.
    """
    if constraints is None:
        constraints = DEFAULT_CONSTRAINTS

    return tuple(constraint.check(content) for constraint in constraints)
