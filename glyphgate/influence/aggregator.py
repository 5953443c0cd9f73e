"""
Influence Aggregator for GlyphGate.

Turns the combined event list of one evaluation into an InfluenceSnapshot
and a single summary event.

Core principle:
    The snapshot is derived from the events alone. Nothing is carried
    between calls, so identical events always give an identical snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from ..events import ResonanceEvent, notice
from .components import (
    InfluenceEdge,
    OperatorWeight,
    compute_negotiation,
    compute_operator_influence,
    compute_resonance_index,
    count_conflicts,
    count_cooperation,
    count_violations,
)


SUMMARY_TOP_N = 3


@dataclass(frozen=True)
class InfluenceSnapshot:
    """
    Aggregate view of one evaluation.

    - resonance_index: clamped to [0, 1]
    - operator_influence: shares summing to 1.0, descending
    - cooperation_count / conflict_count: raw counts
    - negotiation: presence-gated edges
    """
    resonance_index: float
    operator_influence: tuple[OperatorWeight, ...] = field(default_factory=tuple)
    cooperation_count: int = 0
    conflict_count: int = 0
    negotiation: tuple[InfluenceEdge, ...] = field(default_factory=tuple)
    notes: Optional[str] = None

    def top(self, n: int = SUMMARY_TOP_N) -> tuple[OperatorWeight, ...]:
        return self.operator_influence[:n]

    def to_dict(self) -> dict[str, Any]:
        return {
            "resonance_index": self.resonance_index,
            "operator_influence": [w.to_dict() for w in self.operator_influence],
            "cooperation_count": self.cooperation_count,
            "conflict_count": self.conflict_count,
            "negotiation": [e.to_dict() for e in self.negotiation],
            "notes": self.notes,
        }


def format_top_operators(snapshot: InfluenceSnapshot, n: int = SUMMARY_TOP_N) -> str:
    """e.g. "fusion:0.50, structural_illumination:0.50" """
    return ", ".join(
        f"{w.operator.value}:{w.weight:.2f}" for w in snapshot.top(n)
    )


def summarize(snapshot: InfluenceSnapshot) -> ResonanceEvent:
    """Build the influence summary notice for a snapshot."""
    return notice(
        f"influence_summary: resonance_index={snapshot.resonance_index:.2f} "
        f"top=[{format_top_operators(snapshot)}] "
        f"coop={snapshot.cooperation_count} conflict={snapshot.conflict_count}"
    )


def compute_influence(
    events: list[ResonanceEvent],
) -> tuple[InfluenceSnapshot, ResonanceEvent]:
    """
    Aggregate events into a snapshot plus one summary event.

    The summary event is returned alongside the snapshot; it is not
    part of the snapshot and is not counted in it.
    """
    events = list(events)
    present = {e.operator for e in events}

    conflicts = count_conflicts(events)
    snapshot = InfluenceSnapshot(
        resonance_index=compute_resonance_index(
            conflicts=conflicts,
            violations=count_violations(events),
            present=present,
        ),
        operator_influence=tuple(compute_operator_influence(events)),
        cooperation_count=count_cooperation(events),
        conflict_count=conflicts,
        negotiation=tuple(compute_negotiation(present)),
    )

    return snapshot, summarize(snapshot)
