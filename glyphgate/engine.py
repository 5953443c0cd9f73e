"""
Meta Engine for GlyphGate.

Ties the core components together into a single evaluation:

    content → tokenize → validate_interactions → events₁
    content → evaluate_gates                  → events₂
    events₁ ++ events₂ → compute_influence    → snapshot + summary
    content → check_constraints               → constraint results

The engine holds only its immutable catalog, constraints and validator
config. Evaluation is stateless and reentrant: any instance may be
shared across threads.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from .catalog.gates import evaluate_gates
from .catalog.glyphs import DEFAULT_CATALOG, ConnectorGlyph, GlyphCatalog, OperatorGlyph
from .constraints import DEFAULT_CONSTRAINTS, Constraint, check_constraints
from .domain import Consent, ConstraintResult, FieldContext, Severity
from .events import ResonanceEvent
from .influence.aggregator import InfluenceSnapshot, compute_influence
from .interaction.tokenize import tokenize
from .interaction.validator import ValidatorConfig, validate_interactions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MetaEvaluation:
    """
    Everything produced by one evaluation call.

    The summary event accompanies the snapshot; it is not in `events`.
    """
    modality: str
    content: str
    context: FieldContext
    constraints: tuple[ConstraintResult, ...]
    events: tuple[ResonanceEvent, ...]
    snapshot: InfluenceSnapshot
    summary: ResonanceEvent

    @property
    def hard_failures(self) -> list[ConstraintResult]:
        """Failed Hard constraints. Whether they block anything is the caller's call."""
        return [
            r for r in self.constraints
            if not r.passed and r.severity == Severity.HARD
        ]

    def to_dict(self) -> dict[str, Any]:
        return {
            "modality": self.modality,
            "content": self.content,
            "context": self.context.to_dict(),
            "constraints": [r.to_dict() for r in self.constraints],
            "events": [e.to_dict() for e in self.events],
            "influence": self.snapshot.to_dict(),
            "summary": self.summary.to_dict(),
        }


@dataclass(frozen=True)
class MetaEngine:
    catalog: GlyphCatalog = DEFAULT_CATALOG
    constraints: tuple[Constraint, ...] = DEFAULT_CONSTRAINTS
    validator_config: ValidatorConfig = field(default_factory=ValidatorConfig)

    @property
    def operators(self) -> tuple[OperatorGlyph, ...]:
        return self.catalog.operators

    @property
    def connectors(self) -> tuple[ConnectorGlyph, ...]:
        return self.catalog.connectors

    def consent_check(self, context: FieldContext) -> Consent:
        """Default consent: always granted."""
        return Consent(granted=True, subject="default")

    def evaluate_meta(
        self,
        modality: str,
        content: str,
        context: Optional[FieldContext] = None,
    ) -> tuple[tuple[ConstraintResult, ...], tuple[ResonanceEvent, ...]]:
        """
        Evaluate content and return (constraint results, events).

        Validator events come first, then catalog events.
        """
        tokens = tokenize(content)
        events = validate_interactions(content, tokens, self.validator_config)
        events.extend(evaluate_gates(content, self.catalog))

        results = check_constraints(content, self.constraints, modality)

        logger.debug(
            "evaluated modality=%s length=%d events=%d failed_constraints=%d",
            modality,
            len(content),
            len(events),
            sum(1 for r in results if not r.passed),
        )
        return results, tuple(events)

    def evaluate_meta_with_snapshot(
        self,
        modality: str,
        content: str,
        context: Optional[FieldContext] = None,
    ) -> MetaEvaluation:
        """Evaluate content and aggregate the events into an influence snapshot."""
        if context is None:
            context = FieldContext()

        results, events = self.evaluate_meta(modality, content, context)
        snapshot, summary = compute_influence(list(events))

        return MetaEvaluation(
            modality=modality,
            content=content,
            context=context,
            constraints=results,
            events=events,
            snapshot=snapshot,
            summary=summary,
        )
