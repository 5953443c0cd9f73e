# Interaction package for GlyphGate
"""
Structural validation over the content's token stream.

Provides the tokenizer and the interaction rules that emit
notices and violations.
"""
