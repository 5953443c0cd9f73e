# CLI package for GlyphGate
"""
Presentation interface for running GlyphGate locally.

Commands:
    glyphgate gen text  — Generate and evaluate text
    glyphgate glyphs    — Show the glyph catalog
"""
