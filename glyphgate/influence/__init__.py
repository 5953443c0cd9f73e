# Influence package for GlyphGate
"""
Influence aggregation over resonance events.

Every number in the snapshot is decomposable into the events
that produced it.
"""
