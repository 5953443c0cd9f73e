"""
Influence Components for GlyphGate.

Each component is independently computable from the event list:
    - Operator Influence: normalized share per operator class
    - Cooperation / Conflict: counts over cooperative and conflicting classes
    - Negotiation: presence-gated edges between operator classes
    - Resonance Index: penalties and bonus over the counts, clamped to [0, 1]
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..events import OperatorClass, ResonanceEvent


# =============================================================================
# CONFIGURATION CONSTANTS
# =============================================================================

CONNECTOR_WEIGHT = 0.5
OPERATOR_WEIGHT = 1.0

COOPERATIVE_CLASSES = frozenset({
    OperatorClass.SIMULTANEITY,
    OperatorClass.HARMONIC_STABILIZATION,
    OperatorClass.COEXISTENCE,
})

CONFLICT_CLASSES = frozenset({
    OperatorClass.DISRUPTION,
    OperatorClass.ORTHOGONALITY,
    OperatorClass.INTERACTION_VIOLATION,
})

CONFLICT_PENALTY = 0.15
VIOLATION_PENALTY = 0.10
EXTRA_CONFLICT_PENALTY = 0.05
MAX_EXTRA_CONFLICTS = 4
LOOP_CLOSURE_BONUS = 0.05

REINFORCE = "reinforce"
COMPETE = "compete"

_CLASS_ORDER = {op: i for i, op in enumerate(OperatorClass)}


# =============================================================================
# OPERATOR INFLUENCE
# =============================================================================

@dataclass(frozen=True)
class OperatorWeight:
    operator: OperatorClass
    weight: float

    def to_dict(self) -> dict[str, Any]:
        return {"operator": self.operator.value, "weight": self.weight}


def event_weight(event: ResonanceEvent) -> float:
    """Connector events count half as much as everything else."""
    return CONNECTOR_WEIGHT if event.operator.is_connector else OPERATOR_WEIGHT


def compute_operator_influence(events: list[ResonanceEvent]) -> list[OperatorWeight]:
    """
    Normalize per-class weight sums into shares.

    Sorted by share descending; equal shares keep OperatorClass order.
    Empty when there are no events.
    """
    sums: dict[OperatorClass, float] = {}
    for event in events:
        sums[event.operator] = sums.get(event.operator, 0.0) + event_weight(event)

    total = sum(sums.values())
    weights = [
        OperatorWeight(operator=op, weight=(s / total) if total > 0 else 0.0)
        for op, s in sums.items()
    ]
    weights.sort(key=lambda w: (-w.weight, _CLASS_ORDER[w.operator]))
    return weights


# =============================================================================
# COOPERATION / CONFLICT
# =============================================================================

def count_cooperation(events: list[ResonanceEvent]) -> int:
    return sum(1 for e in events if e.operator in COOPERATIVE_CLASSES)


def count_conflicts(events: list[ResonanceEvent]) -> int:
    """Disruption, orthogonality and violation events each count once."""
    return sum(1 for e in events if e.operator in CONFLICT_CLASSES)


def count_violations(events: list[ResonanceEvent]) -> int:
    return sum(1 for e in events if e.is_violation)


# =============================================================================
# NEGOTIATION
# =============================================================================

@dataclass(frozen=True)
class InfluenceEdge:
    source: OperatorClass
    target: OperatorClass
    relation: str
    weight: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "from": self.source.value,
            "to": self.target.value,
            "relation": self.relation,
            "weight": self.weight,
        }


@dataclass(frozen=True)
class NegotiationRule:
    """
    Emit the edge when the source is present and at least one of
    `partners` is present. The edge always points at `target`.
    """
    source: OperatorClass
    partners: frozenset[OperatorClass]
    target: OperatorClass
    relation: str
    weight: float


NEGOTIATION_RULES: tuple[NegotiationRule, ...] = (
    NegotiationRule(
        source=OperatorClass.FUSION,
        partners=frozenset({OperatorClass.STRUCTURAL_ILLUMINATION}),
        target=OperatorClass.STRUCTURAL_ILLUMINATION,
        relation=REINFORCE,
        weight=0.6,
    ),
    NegotiationRule(
        source=OperatorClass.OSCILLATION,
        partners=frozenset({OperatorClass.STRUCTURAL_ILLUMINATION}),
        target=OperatorClass.STRUCTURAL_ILLUMINATION,
        relation=REINFORCE,
        weight=0.6,
    ),
    NegotiationRule(
        source=OperatorClass.ORTHOGONALITY,
        partners=frozenset({OperatorClass.INTERACTION_INTERFACE}),
        target=OperatorClass.INTERACTION_INTERFACE,
        relation=COMPETE,
        weight=0.3,
    ),
    NegotiationRule(
        source=OperatorClass.CLOSURE_INTEGRATION,
        partners=frozenset({OperatorClass.FUSION, OperatorClass.TRANSCENDENCE}),
        target=OperatorClass.FUSION,
        relation=COMPETE,
        weight=0.3,
    ),
)


def compute_negotiation(present: set[OperatorClass]) -> list[InfluenceEdge]:
    """Evaluate each rule once against the set of classes that fired."""
    return [
        InfluenceEdge(
            source=rule.source,
            target=rule.target,
            relation=rule.relation,
            weight=rule.weight,
        )
        for rule in NEGOTIATION_RULES
        if rule.source in present and rule.partners & present
    ]


# =============================================================================
# RESONANCE INDEX
# =============================================================================

def compute_resonance_index(
    conflicts: int,
    violations: int,
    present: set[OperatorClass],
) -> float:
    """
    Start at 1.0:
    - conflicts > 0:  -0.15
    - violations > 0: -0.10
    - conflicts > 1:  -0.05 per extra conflict, at most 4
    - loop_cycle and closure_integration both present: +0.05
    Clamped to [0, 1].
    """
    index = 1.0
    if conflicts > 0:
        index -= CONFLICT_PENALTY
    if violations > 0:
        index -= VIOLATION_PENALTY
    if conflicts > 1:
        index -= EXTRA_CONFLICT_PENALTY * min(conflicts - 1, MAX_EXTRA_CONFLICTS)
    if OperatorClass.LOOP_CYCLE in present and OperatorClass.CLOSURE_INTEGRATION in present:
        index += LOOP_CLOSURE_BONUS
    return max(0.0, min(1.0, index))
