"""
Core Domain Objects for GlyphGate.

Domain Objects:
    FieldContext      — Read-only contextual metadata for one evaluation
    Consent           — Outcome of the (external) consent check
    Severity          — Soft or Hard constraint severity
    ConstraintResult  — Pass/fail record of one content check

None of these objects persist beyond a single evaluation call.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


DEFAULT_PHASE = "alpha"


class GlyphGateError(Exception):
    """
    Base error for the layers around the engine.

    The engine itself never raises: failures there are data.
    """
    pass


# =============================================================================
# CONTEXT & CONSENT
# =============================================================================

@dataclass(frozen=True)
class FieldContext:
    """
    Contextual metadata passed into evaluation.

    The engine never alters it and never branches on it; it is carried
    through for notices and logging only.
    """
    phase: Optional[str] = DEFAULT_PHASE
    source: Optional[str] = None
    field_id: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "phase": self.phase,
            "source": self.source,
            "field_id": self.field_id,
        }


@dataclass(frozen=True)
class Consent:
    """
    Authorization outcome produced outside the core.

    The core reports it; callers decide whether to surface output.
    """
    granted: bool
    subject: Optional[str] = None
    reason: Optional[str] = None
    section_ref: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "granted": self.granted,
            "subject": self.subject,
            "reason": self.reason,
            "section_ref": self.section_ref,
        }


# =============================================================================
# CONSTRAINT RESULTS
# =============================================================================

class Severity(Enum):
    """
    Constraint severity.

    - SOFT: informational, callers may proceed
    - HARD: callers should block downstream actions
    """
    SOFT = "soft"
    HARD = "hard"


@dataclass(frozen=True)
class ConstraintResult:
    """Result of a single constraint check. Failure is data, not an error."""
    passed: bool
    severity: Severity
    name: str
    message: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "passed": self.passed,
            "severity": self.severity.value,
            "name": self.name,
            "message": self.message,
        }
