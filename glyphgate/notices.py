"""
Meta notices for GlyphGate.

Informational interaction notices that describe an evaluation run
(consent, field protocol, ethics, counts). They are built by callers
around the core evaluation and are never part of the core event list.
"""

from __future__ import annotations

from typing import Iterable

from .domain import Consent, FieldContext
from .events import ResonanceEvent, notice


def consent_summary(consent: Consent) -> ResonanceEvent:
    parts = ["consent: " + ("granted" if consent.granted else "denied")]
    if consent.subject:
        parts.append(f"subject={consent.subject}")
    if consent.section_ref:
        parts.append(f"ref={consent.section_ref}")
    return notice(" ".join(parts))


def field_protocol_notice(modality: str, context: FieldContext) -> ResonanceEvent:
    phase = context.phase or "unknown"
    return notice(f"field_protocol: modality={modality} phase={phase}")


def ethical_protocol_notice() -> ResonanceEvent:
    return notice("ethical_protocol: non-harm, privacy, transparency (logging-only)")


def interaction_summary(events: Iterable[ResonanceEvent]) -> ResonanceEvent:
    """Count interaction notices and violations."""
    notices = violations = 0
    for event in events:
        if event.is_notice:
            notices += 1
        elif event.is_violation:
            violations += 1
    return notice(f"interaction_summary: notices={notices}, violations={violations}")


def meta_overview(
    consent_count: int,
    field_count: int,
    ethical_count: int,
    notice_count: int,
    violation_count: int,
) -> ResonanceEvent:
    return notice(
        f"meta_overview: consent={consent_count} field={field_count} "
        f"ethical={ethical_count} interaction_notices={notice_count} "
        f"interaction_violations={violation_count}"
    )
