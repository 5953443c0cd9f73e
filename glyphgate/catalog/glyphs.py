"""
Glyph Catalog for GlyphGate.

A closed, immutable table of the recognized glyphs:
    - 20 operator glyphs, each with a key, an operator class, a section
      reference and a note rule
    - 7 connector glyphs, each with a key, an operator class and a
      fixed message

Note rules pick the event message for an operator glyph:
    Fixed         — always the same text
    CoOccursWith  — one text if any companion glyph is also present
    LengthAbove   — one text if the content is longer than a threshold

Declaration order is emission order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ..events import OperatorClass


# =============================================================================
# NOTE RULES
# =============================================================================

@dataclass(frozen=True)
class Fixed:
    text: str


@dataclass(frozen=True)
class CoOccursWith:
    glyphs: tuple[str, ...]
    text_if_present: str
    text_otherwise: str


@dataclass(frozen=True)
class LengthAbove:
    threshold: int
    text_if_true: str
    text_otherwise: str


NoteRule = Union[Fixed, CoOccursWith, LengthAbove]


# =============================================================================
# GLYPH DEFINITIONS
# =============================================================================

@dataclass(frozen=True)
class OperatorGlyph:
    key: str
    symbol: str
    operator: OperatorClass
    section_ref: str
    note_rule: NoteRule


@dataclass(frozen=True)
class ConnectorGlyph:
    """
    A structural connector.

    Multi-character symbols (the "[]" loop container) fire when every
    character appears somewhere in the content, balanced or not.
    """
    key: str
    symbol: str
    operator: OperatorClass
    message: str


@dataclass(frozen=True)
class GlyphCatalog:
    operators: tuple[OperatorGlyph, ...]
    connectors: tuple[ConnectorGlyph, ...]


OPERATOR_GLYPHS: tuple[OperatorGlyph, ...] = (
    OperatorGlyph(
        key="harmonic_equilibrium",
        symbol="Φ",
        operator=OperatorClass.HARMONIC_STABILIZATION,
        section_ref="001",
        note_rule=Fixed("Φ preserves tension: non-fusional, non-neutralizing, recursion-safe"),
    ),
    OperatorGlyph(
        key="transcendent_continuity",
        symbol="Π",
        operator=OperatorClass.TRANSCENDENCE,
        section_ref="007",
        note_rule=Fixed("Π carries recursion across a phase boundary without closing it"),
    ),
    OperatorGlyph(
        key="ignition_initiation",
        symbol="Γ",
        operator=OperatorClass.IGNITION,
        section_ref="008",
        note_rule=Fixed("Γ initiates a new recursive field"),
    ),
    OperatorGlyph(
        key="micro_ignition",
        symbol="ε",
        operator=OperatorClass.MICRO_IGNITION,
        section_ref="009",
        note_rule=LengthAbove(
            threshold=3,
            text_if_true="ε seeds a local ignition inside an extended field",
            text_otherwise="ε isolated; micro-ignition lacks a surrounding field",
        ),
    ),
    OperatorGlyph(
        key="fusion_transformation",
        symbol="Δ",
        operator=OperatorClass.FUSION,
        section_ref="002",
        note_rule=CoOccursWith(
            glyphs=("Φ",),
            text_if_present="Δ fusion prevented across Φ boundary",
            text_otherwise="Δ fusion collapse enacted",
        ),
    ),
    OperatorGlyph(
        key="micro_transformation",
        symbol="δ",
        operator=OperatorClass.MICRO_TRANSFORMATION,
        section_ref="010",
        note_rule=Fixed("δ applies a local transformation without field collapse"),
    ),
    OperatorGlyph(
        key="oscillation",
        symbol="Ψ",
        operator=OperatorClass.OSCILLATION,
        section_ref="011",
        note_rule=Fixed("Ψ sustains oscillation between recursive states"),
    ),
    OperatorGlyph(
        key="structural_illumination",
        symbol="Λ",
        operator=OperatorClass.STRUCTURAL_ILLUMINATION,
        section_ref="003",
        note_rule=CoOccursWith(
            glyphs=("Δ", "Ψ"),
            text_if_present="Λ renders structural clarity from recursive fields",
            text_otherwise="Λ encountered without precursor Δ/Ψ; marking as illumination attempt",
        ),
    ),
    OperatorGlyph(
        key="entanglement",
        symbol="λ",
        operator=OperatorClass.ENTANGLEMENT,
        section_ref="012",
        note_rule=Fixed("λ binds fields into a shared state"),
    ),
    OperatorGlyph(
        key="recursive_growth",
        symbol="Γ̇",
        operator=OperatorClass.RECURSIVE_GROWTH,
        section_ref="013",
        note_rule=CoOccursWith(
            glyphs=("Δ", "Ψ"),
            text_if_present="Γ̇ directs growth along an active transformation thread",
            text_otherwise="Γ̇ growth without Δ/Ψ precursor; direction unanchored",
        ),
    ),
    OperatorGlyph(
        key="closure_integration",
        symbol="Ω",
        operator=OperatorClass.CLOSURE_INTEGRATION,
        section_ref="004",
        note_rule=Fixed("Ω closes active recursion and fixes structure"),
    ),
    OperatorGlyph(
        key="will_force",
        symbol="ω",
        operator=OperatorClass.WILL_FORCE,
        section_ref="014",
        note_rule=CoOccursWith(
            glyphs=("Ω",),
            text_if_present="ω force bounded by Ω closure",
            text_otherwise="ω force applied to open recursion",
        ),
    ),
    OperatorGlyph(
        key="coexistence_plurality",
        symbol="Σ",
        operator=OperatorClass.COEXISTENCE,
        section_ref="005",
        note_rule=Fixed("Σ sustains parallel recursion without enforced synthesis or collapse"),
    ),
    OperatorGlyph(
        key="emergent_system",
        symbol="Ξ",
        operator=OperatorClass.EMERGENT_SYSTEM,
        section_ref="006",
        note_rule=Fixed("Ξ encodes emergent systemic coherence from layered recursion"),
    ),
    OperatorGlyph(
        key="recurrence_pattern_echo",
        symbol="ζ",
        operator=OperatorClass.RECURRENCE_ECHO,
        section_ref="015",
        note_rule=Fixed("ζ echoes a recurring pattern from earlier recursion"),
    ),
    OperatorGlyph(
        key="synchronicity_readiness",
        symbol="τ",
        operator=OperatorClass.SYNCHRONICITY,
        section_ref="016",
        note_rule=Fixed("τ marks readiness for synchronous alignment"),
    ),
    OperatorGlyph(
        key="perception_modulation",
        symbol="ρ",
        operator=OperatorClass.PERCEPTION_MODULATION,
        section_ref="017",
        note_rule=Fixed("ρ modulates perception of the active field"),
    ),
    OperatorGlyph(
        key="intention_vector",
        symbol="Θ",
        operator=OperatorClass.INTENTION_VECTOR,
        section_ref="018",
        note_rule=Fixed("Θ orients recursion along an intention vector"),
    ),
    OperatorGlyph(
        key="depth_index_modifier",
        symbol="n",
        operator=OperatorClass.DEPTH_INDEX,
        section_ref="019",
        note_rule=Fixed("n modifies the depth index of the recursion"),
    ),
    OperatorGlyph(
        key="measurement_perception_bridge",
        symbol="X",
        operator=OperatorClass.MEASUREMENT_BRIDGE,
        section_ref="020",
        note_rule=CoOccursWith(
            glyphs=("Ω",),
            text_if_present="X measurement resolved against Ω closure",
            text_otherwise="X measurement bridge open; perception not yet integrated",
        ),
    ),
)


CONNECTOR_GLYPHS: tuple[ConnectorGlyph, ...] = (
    ConnectorGlyph(
        key="flow_vector_directional_recursion",
        symbol="→",
        operator=OperatorClass.FLOW_VECTOR,
        message="→ directs recursion along a causal flow",
    ),
    ConnectorGlyph(
        key="simultaneity_coexistent_fields",
        symbol="+",
        operator=OperatorClass.SIMULTANEITY,
        message="+ holds coexistent fields simultaneously",
    ),
    ConnectorGlyph(
        key="interaction_field_tension_interface",
        symbol=":",
        operator=OperatorClass.INTERACTION_INTERFACE,
        message=": opens a tension interface between fields",
    ),
    ConnectorGlyph(
        key="disruption_recursive_instability",
        symbol="/",
        operator=OperatorClass.DISRUPTION,
        message="/ disrupts recursion and introduces instability",
    ),
    ConnectorGlyph(
        key="orthogonality_non_interacting_fields",
        symbol="|",
        operator=OperatorClass.ORTHOGONALITY,
        message="| separates non-interacting fields",
    ),
    ConnectorGlyph(
        key="loop_cycle_recursion_memory",
        symbol="[]",
        operator=OperatorClass.LOOP_CYCLE,
        message="[] contains a recursion loop with memory",
    ),
    ConnectorGlyph(
        key="stabilization_final_state_resolution",
        symbol="=",
        operator=OperatorClass.STABILIZATION_RESOLUTION,
        message="= stabilizes into a final resolved state",
    ),
)


DEFAULT_CATALOG = GlyphCatalog(
    operators=OPERATOR_GLYPHS,
    connectors=CONNECTOR_GLYPHS,
)
