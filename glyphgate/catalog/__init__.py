# Catalog package for GlyphGate
"""
Operator and connector glyph catalog.

The catalog is a closed, immutable table; the gate evaluator is a
pure scan over it.
"""
