"""
Interaction Validator for GlyphGate.

Runs structural rules over the token stream and the raw content. Every
rule runs unconditionally and independently; each contributes zero or
more events. Rules never raise.

Rules (in emission order):
1. Bracket balance            — violations
2. Terminal '='               — violation
3. ':' vs '|' at same scope   — notice
4. Multiple '→' arcs          — notice
5. Trailing ':'               — notice
6. Trailing '='               — violation
7. ':' operand adjacency      — one violation per failing ':'
8. Terminal 'Ω'               — violation
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..events import ResonanceEvent, notice, violation
from .tokenize import Token, TokenKind, tokenize


# Glyphs that count as a transform after a terminal marker
TRANSFORM_GLYPHS = frozenset({"Δ", "Ξ", "Π"})

# Operand-like kinds for the ':' adjacency scans. The two sides differ.
BACKWARD_OPERANDS = frozenset({TokenKind.SYMBOL, TokenKind.RBRACKET})
FORWARD_OPERANDS = frozenset({TokenKind.SYMBOL, TokenKind.LBRACKET})


@dataclass(frozen=True)
class ValidatorConfig:
    """Reserved for future validator options. Currently empty."""


# =============================================================================
# RULES
# =============================================================================

def check_bracket_balance(tokens: list[Token]) -> list[ResonanceEvent]:
    """
    Track '[' / ']' nesting.

    A lone ']' produces both violations: the unmatched one at the moment
    the counter goes negative, and the unbalanced one because the counter
    is non-zero where the scan stopped.
    """
    events = []
    balance = 0

    for token in tokens:
        if token.kind == TokenKind.LBRACKET:
            balance += 1
        elif token.kind == TokenKind.RBRACKET:
            balance -= 1
        if balance < 0:
            events.append(violation("Unmatched ']' detected", "[]"))
            break

    if balance != 0:
        events.append(violation("Unbalanced '[]' loop container", "[]"))

    return events


def _check_terminal(
    content: str,
    marker: str,
    message: str,
) -> list[ResonanceEvent]:
    """Flag the first transform glyph that appears after the first marker."""
    seen_marker = False
    for char in content:
        if not seen_marker:
            seen_marker = char == marker
        elif char in TRANSFORM_GLYPHS:
            return [violation(message, marker)]
    return []


def check_terminal_equals(content: str) -> list[ResonanceEvent]:
    return _check_terminal(
        content,
        "=",
        "Post '=' transform detected (Δ/Ξ/Π). Stabilization should be terminal.",
    )


def check_colon_pipe_scope(content: str, tokens: list[Token]) -> list[ResonanceEvent]:
    """
    Notice when '|' appears at a nesting level where a ':' already occurred.

    At most one notice per call.
    """
    if "|" not in content or ":" not in content:
        return []

    level = 0
    colon_levels = set()
    for token in tokens:
        if token.kind == TokenKind.LBRACKET:
            level += 1
        elif token.kind == TokenKind.RBRACKET:
            level -= 1
        elif token.kind == TokenKind.COLON:
            colon_levels.add(level)
        elif token.kind == TokenKind.PIPE and level in colon_levels:
            return [notice("'|' orthogonality with ':' interaction at same scope", "|")]

    return []


def check_arrow_cycles(content: str) -> list[ResonanceEvent]:
    if content.count("→") > 1:
        return [notice(
            "Multiple '→' arcs; ensure no causal cycles (use '[]' for loops)",
            "→",
        )]
    return []


def check_trailing_colon(content: str) -> list[ResonanceEvent]:
    if content.rstrip().endswith(":"):
        return [notice(": at end of expression; interaction requires counterpart", ":")]
    return []


def check_trailing_equals(content: str) -> list[ResonanceEvent]:
    if content.rstrip().endswith("="):
        return [violation(
            "=: at end of expression; stabilization requires finalized form",
            "=",
        )]
    return []


def _neighbor_is_operand(
    tokens: list[Token],
    index: int,
    operands: frozenset[TokenKind],
) -> bool:
    """
    Every kind is either operand-like or operator-like, so the scan for
    the nearest operand ends at the adjacent token. Out of range fails.
    """
    if 0 <= index < len(tokens):
        return tokens[index].kind in operands
    return False


def check_colon_operands(tokens: list[Token]) -> list[ResonanceEvent]:
    """One violation per ':' lacking an operand on either side."""
    events = []
    for i, token in enumerate(tokens):
        if token.kind != TokenKind.COLON:
            continue
        before = _neighbor_is_operand(tokens, i - 1, BACKWARD_OPERANDS)
        after = _neighbor_is_operand(tokens, i + 1, FORWARD_OPERANDS)
        if not (before and after):
            events.append(violation(": requires operands on both sides", ":"))
    return events


def check_terminal_omega(content: str) -> list[ResonanceEvent]:
    return _check_terminal(
        content,
        "Ω",
        "Post 'Ω' transform detected (Δ/Ξ/Π). Closure should be terminal.",
    )


# =============================================================================
# VALIDATOR
# =============================================================================

def validate_interactions(
    content: str,
    tokens: Optional[list[Token]] = None,
    config: Optional[ValidatorConfig] = None,
) -> list[ResonanceEvent]:
    """
    Run every interaction rule and return their events in rule order.

    Args:
        content: Raw content string
        tokens: Tokens of the content (computed if None)
        config: Validator options (currently unused)
    """
    if tokens is None:
        tokens = tokenize(content)

    events: list[ResonanceEvent] = []
    events.extend(check_bracket_balance(tokens))
    events.extend(check_terminal_equals(content))
    events.extend(check_colon_pipe_scope(content, tokens))
    events.extend(check_arrow_cycles(content))
    events.extend(check_trailing_colon(content))
    events.extend(check_trailing_equals(content))
    events.extend(check_colon_operands(tokens))
    events.extend(check_terminal_omega(content))
    return events
