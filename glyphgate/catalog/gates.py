"""
Gate Evaluator for GlyphGate.

Scans the raw content for every catalog glyph by substring containment.
Each glyph fires at most once per call, however often it occurs, and
events are emitted in catalog declaration order rather than textual order.
"""

from __future__ import annotations

from typing import Optional

from ..events import ResonanceEvent
from .glyphs import (
    DEFAULT_CATALOG,
    CoOccursWith,
    ConnectorGlyph,
    Fixed,
    GlyphCatalog,
    LengthAbove,
    NoteRule,
)


def resolve_note(rule: NoteRule, content: str) -> str:
    """Pick the note text for a fired operator glyph."""
    if isinstance(rule, Fixed):
        return rule.text
    if isinstance(rule, CoOccursWith):
        if any(glyph in content for glyph in rule.glyphs):
            return rule.text_if_present
        return rule.text_otherwise
    if isinstance(rule, LengthAbove):
        if len(content) > rule.threshold:
            return rule.text_if_true
        return rule.text_otherwise
    raise TypeError(f"Unknown note rule: {type(rule).__name__}")


def connector_present(connector: ConnectorGlyph, content: str) -> bool:
    """Every character of the connector must appear somewhere in the content."""
    return all(char in content for char in connector.symbol)


def evaluate_gates(
    content: str,
    catalog: Optional[GlyphCatalog] = None,
) -> list[ResonanceEvent]:
    """
    Emit one event per operator glyph present, then one per connector.

    Returns:
        Events in catalog declaration order
    """
    if catalog is None:
        catalog = DEFAULT_CATALOG

    events = []

    for glyph in catalog.operators:
        if glyph.symbol in content:
            events.append(ResonanceEvent(
                operator=glyph.operator,
                message=resolve_note(glyph.note_rule, content),
                section_ref=glyph.section_ref,
                symbol=glyph.symbol,
            ))

    for connector in catalog.connectors:
        if connector_present(connector, content):
            events.append(ResonanceEvent(
                operator=connector.operator,
                message=connector.message,
                symbol=connector.symbol,
            ))

    return events
