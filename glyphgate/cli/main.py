"""
GlyphGate CLI — Generate text and show how the engine classifies it.

Commands:
    glyphgate gen text --prompt P   — Generate, evaluate, print report
    glyphgate glyphs                — List the operator and connector catalog

Flags for `gen text`:
    --verbose     Print resonance events (and meta notices)
    --json        Print resonance events as JSON instead
    --influence   Add the influence block to verbose output
    --cid ID      Correlation id (uuid4 generated if omitted)
    --log-file F  Write the JSON envelope to F

This CLI only presents results. It cannot change thresholds, skip
rules or hide violations.
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import Optional

from ..catalog.glyphs import DEFAULT_CATALOG
from ..domain import ConstraintResult, FieldContext, GlyphGateError
from ..events import ResonanceEvent
from ..influence.aggregator import InfluenceSnapshot, format_top_operators
from ..notices import (
    consent_summary,
    ethical_protocol_notice,
    field_protocol_notice,
    interaction_summary,
    meta_overview,
)
from .pipeline import GenerationResult, run_generation


# =============================================================================
# CONFIGURATION CONSTANTS
# =============================================================================

LOG_LEVEL_ENV = "GLYPHGATE_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


# =============================================================================
# OUTPUT FORMATTING
# =============================================================================

def format_event(event: ResonanceEvent) -> str:
    """e.g. "Δ [002] fusion: Δ fusion collapse enacted" """
    symbol = event.symbol or "?"
    section = event.section_ref or "-"
    return f"{symbol} [{section}] {event.operator.value}: {event.message}"


def format_constraint(result: ConstraintResult) -> str:
    return f"{result.name} [{result.severity.value}]: {result.message or 'ok'}"


def format_influence(snapshot: InfluenceSnapshot) -> str:
    lines = [f"resonance_index = {snapshot.resonance_index:.2f}"]
    if snapshot.operator_influence:
        lines.append(f"top = {format_top_operators(snapshot)}")
    lines.append(
        f"cooperation = {snapshot.cooperation_count}  "
        f"conflict = {snapshot.conflict_count}"
    )
    for edge in snapshot.negotiation:
        lines.append(
            f"{edge.source.value} -> {edge.target.value}: "
            f"{edge.relation} ({edge.weight:.1f})"
        )
    return "\n".join(lines)


def build_meta_notices(result: GenerationResult, context: FieldContext) -> list[ResonanceEvent]:
    """Informational notices shown in verbose mode."""
    interaction = [e for e in result.events if e.is_notice or e.is_violation]
    notices = sum(1 for e in interaction if e.is_notice)
    violations = len(interaction) - notices
    return [
        consent_summary(result.consent),
        field_protocol_notice(result.modality, context),
        ethical_protocol_notice(),
        interaction_summary(result.events),
        meta_overview(1, 1, 1, notices, violations),
    ]


def format_report(
    result: GenerationResult,
    context: FieldContext,
    verbose: bool = False,
    as_json: bool = False,
    show_influence: bool = False,
) -> str:
    """Render a generation result the way `gen text` prints it."""
    lines = []

    if result.content is not None:
        lines.append(result.content)
    else:
        lines.append("(content suppressed: consent denied)")

    if as_json:
        if result.events:
            lines.append("--- resonance(json) ---")
            lines.append(json.dumps(
                [e.to_dict() for e in result.events],
                indent=2,
                ensure_ascii=False,
            ))
    elif verbose:
        if result.events:
            lines.append("--- resonance ---")
            lines.extend(format_event(e) for e in result.events)
        lines.append("--- meta ---")
        lines.extend(e.message for e in build_meta_notices(result, context))
        if show_influence:
            lines.append("--- influence ---")
            lines.append(format_influence(result.influence))

    if result.constraints:
        lines.append("--- constraints ---")
        lines.extend(format_constraint(r) for r in result.constraints)

    return "\n".join(lines)


def write_envelope(result: GenerationResult, path: str) -> None:
    with open(path, "w", encoding="utf-8") as fh:
        json.dump(result.to_envelope(), fh, indent=2, ensure_ascii=False)


# =============================================================================
# CLI COMMANDS
# =============================================================================

def cmd_gen_text(args: argparse.Namespace) -> int:
    """Generate text, evaluate it, and print the report."""
    context = FieldContext()

    try:
        result = run_generation(
            prompt=args.prompt,
            modality="text",
            correlation_id=args.cid,
            context=context,
        )
        if args.log_file:
            write_envelope(result, args.log_file)
    except (GlyphGateError, OSError) as e:
        print("ERROR: generation failed", file=sys.stderr)
        print(f"Reason: {e}", file=sys.stderr)
        return 1

    print(format_report(
        result,
        context,
        verbose=args.verbose,
        as_json=args.json,
        show_influence=args.influence,
    ))
    return 0


def cmd_glyphs(args: argparse.Namespace) -> int:
    """List the glyph catalog."""
    print("OPERATORS:")
    for glyph in DEFAULT_CATALOG.operators:
        print(f"  {glyph.symbol:<3} [{glyph.section_ref}] {glyph.key} ({glyph.operator.value})")

    print()
    print("CONNECTORS:")
    for connector in DEFAULT_CATALOG.connectors:
        print(f"  {connector.symbol:<3} {connector.key} ({connector.operator.value})")

    return 0


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def create_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="glyphgate",
        description="GlyphGate Engine — Symbolic Glyph Classification",
    )
    parser.add_argument(
        "--log-level",
        default=os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL),
        help=f"Logging level (default: ${LOG_LEVEL_ENV} or {DEFAULT_LOG_LEVEL})",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )

    # Gen command
    gen_parser = subparsers.add_parser(
        "gen",
        help="Generate content",
    )
    gen_subparsers = gen_parser.add_subparsers(
        title="modalities",
        dest="modality",
    )
    text_parser = gen_subparsers.add_parser(
        "text",
        help="Text generation",
    )
    text_parser.add_argument(
        "-p", "--prompt",
        required=True,
        help="Prompt string",
    )
    text_parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print resonance events",
    )
    text_parser.add_argument(
        "--json",
        action="store_true",
        help="Output resonance events as JSON",
    )
    text_parser.add_argument(
        "--influence",
        action="store_true",
        help="Show influence block in verbose output",
    )
    text_parser.add_argument(
        "--cid",
        default=None,
        help="Correlation id; generated per run if omitted",
    )
    text_parser.add_argument(
        "--log-file",
        default=None,
        help="Write a JSON envelope (cid, content, constraints, events) to file",
    )
    text_parser.set_defaults(func=cmd_gen_text)

    # Glyphs command
    glyphs_parser = subparsers.add_parser(
        "glyphs",
        help="List operator and connector glyphs",
    )
    glyphs_parser.set_defaults(func=cmd_glyphs)

    return parser


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    if not hasattr(args, "func"):
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
