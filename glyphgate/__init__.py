# GlyphGate Engine
# Symbolic glyph classification for generated text

"""
Core invariant: evaluation is total. Every content string, empty or
malformed, yields constraint results, events and an influence snapshot.
Failure is reported as data and never raised.

This package implements the tokenizer, interaction validator, glyph
catalog, constraint checks and influence aggregation.
"""
