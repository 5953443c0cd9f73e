"""
Resonance Events — The canonical diagnostic record for GlyphGate.

Every finding of the engine is expressed as a ResonanceEvent:
    - A detected operator glyph (with its section reference)
    - A detected connector glyph
    - A structural interaction notice or violation
    - An influence summary

Events carry no identity beyond their fields. Order in a returned list
is meaningful: validator events first, then catalog events in
declaration order.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class OperatorClass(Enum):
    """
    Operator-class tags.

    Declaration order doubles as the tie-break order when influence
    shares are equal: operator classes in catalog order, then the seven
    connector classes, then the two interaction classes.
    """
    # Operator glyph classes
    HARMONIC_STABILIZATION = "harmonic_stabilization"
    TRANSCENDENCE = "transcendence"
    IGNITION = "ignition"
    MICRO_IGNITION = "micro_ignition"
    FUSION = "fusion"
    MICRO_TRANSFORMATION = "micro_transformation"
    OSCILLATION = "oscillation"
    STRUCTURAL_ILLUMINATION = "structural_illumination"
    ENTANGLEMENT = "entanglement"
    RECURSIVE_GROWTH = "recursive_growth"
    CLOSURE_INTEGRATION = "closure_integration"
    WILL_FORCE = "will_force"
    COEXISTENCE = "coexistence"
    EMERGENT_SYSTEM = "emergent_system"
    RECURRENCE_ECHO = "recurrence_echo"
    SYNCHRONICITY = "synchronicity"
    PERCEPTION_MODULATION = "perception_modulation"
    INTENTION_VECTOR = "intention_vector"
    DEPTH_INDEX = "depth_index"
    MEASUREMENT_BRIDGE = "measurement_bridge"

    # Connector glyph classes
    FLOW_VECTOR = "flow_vector"
    SIMULTANEITY = "simultaneity"
    INTERACTION_INTERFACE = "interaction_interface"
    DISRUPTION = "disruption"
    ORTHOGONALITY = "orthogonality"
    LOOP_CYCLE = "loop_cycle"
    STABILIZATION_RESOLUTION = "stabilization_resolution"

    # Structural validation
    INTERACTION_NOTICE = "interaction_notice"
    INTERACTION_VIOLATION = "interaction_violation"

    @property
    def is_connector(self) -> bool:
        return self in CONNECTOR_CLASSES


CONNECTOR_CLASSES = frozenset({
    OperatorClass.FLOW_VECTOR,
    OperatorClass.SIMULTANEITY,
    OperatorClass.INTERACTION_INTERFACE,
    OperatorClass.DISRUPTION,
    OperatorClass.ORTHOGONALITY,
    OperatorClass.LOOP_CYCLE,
    OperatorClass.STABILIZATION_RESOLUTION,
})


@dataclass(frozen=True)
class ResonanceEvent:
    """
    A structured diagnostic record.

    Fields:
    - operator: the operator-class tag
    - message: free-text note
    - section_ref: fixed section reference for operator glyphs, else None
    - symbol: the glyph (or glyph pair) that produced the event
    """
    operator: OperatorClass
    message: str
    section_ref: Optional[str] = None
    symbol: Optional[str] = None

    @property
    def is_violation(self) -> bool:
        return self.operator == OperatorClass.INTERACTION_VIOLATION

    @property
    def is_notice(self) -> bool:
        return self.operator == OperatorClass.INTERACTION_NOTICE

    def to_dict(self) -> dict[str, Any]:
        return {
            "operator": self.operator.value,
            "message": self.message,
            "section_ref": self.section_ref,
            "symbol": self.symbol,
        }


# =============================================================================
# FACTORIES
# =============================================================================

def violation(message: str, symbol: Optional[str] = None) -> ResonanceEvent:
    """Create an interaction-violation event."""
    return ResonanceEvent(
        operator=OperatorClass.INTERACTION_VIOLATION,
        message=message,
        symbol=symbol,
    )


def notice(message: str, symbol: Optional[str] = None) -> ResonanceEvent:
    """Create an interaction-notice event."""
    return ResonanceEvent(
        operator=OperatorClass.INTERACTION_NOTICE,
        message=message,
        symbol=symbol,
    )
