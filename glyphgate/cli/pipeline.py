"""
Generation Pipeline for GlyphGate.

Ties generation and evaluation together into a single execution flow.

Pipeline stages:
    1. Generate content with a registered modality
    2. Consent check (external to the core)
    3. Meta evaluation (constraints + events)
    4. Correlation-id notice injection
    5. Influence aggregation over the full event list

The engine decides nothing: when consent is denied the pipeline
suppresses the content but still reports everything it found.
"""

from __future__ import annotations

import logging
import time
import uuid
from dataclasses import dataclass, field
from typing import Any, Optional, Protocol

from ..domain import Consent, ConstraintResult, FieldContext, GlyphGateError
from ..engine import MetaEngine
from ..events import ResonanceEvent, notice
from ..influence.aggregator import InfluenceSnapshot, compute_influence

logger = logging.getLogger(__name__)


DEFAULT_MODALITY = "text"


class UnknownModalityError(GlyphGateError):
    """Raised when no modality is registered under the requested name."""

    def __init__(self, name: str, available: list[str]):
        self.name = name
        self.available = available
        super().__init__(
            f"Unknown modality '{name}' (available: {', '.join(available) or 'none'})"
        )


# =============================================================================
# MODALITIES
# =============================================================================

class Modality(Protocol):
    name: str

    def generate(self, prompt: str) -> str: ...


@dataclass(frozen=True)
class EchoTextModality:
    """Echo-style text producer."""
    name: str = "text"

    def generate(self, prompt: str) -> str:
        return f"TEXT: {prompt}"


class ModalityRegistry:
    """Maps modality names to generators."""

    def __init__(self) -> None:
        self._modalities: dict[str, Modality] = {}

    def register(self, modality: Modality) -> None:
        self._modalities[modality.name] = modality
        logger.info("registered modality=%s", modality.name)

    def names(self) -> list[str]:
        return sorted(self._modalities)

    def get(self, name: str) -> Modality:
        try:
            return self._modalities[name]
        except KeyError:
            logger.warning("unknown modality=%s", name)
            raise UnknownModalityError(name, self.names()) from None


def default_registry() -> ModalityRegistry:
    registry = ModalityRegistry()
    registry.register(EchoTextModality())
    return registry


# =============================================================================
# GENERATION RESULT
# =============================================================================

@dataclass
class GenerationResult:
    """
    Complete result of one generation run.

    `content` is None when consent was denied.
    """
    correlation_id: str
    modality: str
    content: Optional[str]
    consent: Consent
    constraints: tuple[ConstraintResult, ...]
    events: list[ResonanceEvent]
    influence: InfluenceSnapshot
    influence_summary: ResonanceEvent

    # Metadata
    timestamp_unix_s: int = field(default_factory=lambda: int(time.time()))

    @property
    def suppressed(self) -> bool:
        return self.content is None

    def to_envelope(self) -> dict[str, Any]:
        """JSON-ready envelope for log files."""
        return {
            "correlation_id": self.correlation_id,
            "modality": self.modality,
            "content": self.content,
            "constraints": [r.to_dict() for r in self.constraints],
            "events": [e.to_dict() for e in self.events],
            "timestamp_unix_s": self.timestamp_unix_s,
            "influence": self.influence.to_dict(),
        }


def correlation_notice(correlation_id: str) -> ResonanceEvent:
    return notice(f"correlation_id: {correlation_id}")


# =============================================================================
# PIPELINE EXECUTION
# =============================================================================

def run_generation(
    prompt: str,
    modality: str = DEFAULT_MODALITY,
    correlation_id: Optional[str] = None,
    context: Optional[FieldContext] = None,
    engine: Optional[MetaEngine] = None,
    registry: Optional[ModalityRegistry] = None,
) -> GenerationResult:
    """
    Generate content and evaluate it.

    Raises:
        UnknownModalityError: If the modality is not registered
    """
    if engine is None:
        engine = MetaEngine()
    if registry is None:
        registry = default_registry()
    if context is None:
        context = FieldContext()
    if correlation_id is None:
        correlation_id = str(uuid.uuid4())

    content = registry.get(modality).generate(prompt)

    consent = engine.consent_check(context)
    constraints, events = engine.evaluate_meta(modality, content, context)

    all_events = [correlation_notice(correlation_id), *events]
    influence, influence_summary = compute_influence(all_events)

    if not consent.granted:
        logger.warning(
            "content suppressed cid=%s reason=%s",
            correlation_id,
            consent.reason or "consent denied",
        )

    return GenerationResult(
        correlation_id=correlation_id,
        modality=modality,
        content=content if consent.granted else None,
        consent=consent,
        constraints=constraints,
        events=all_events,
        influence=influence,
        influence_summary=influence_summary,
    )
