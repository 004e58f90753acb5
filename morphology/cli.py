"""
morphology/cli.py

Command-line interface for the morphology engine.

Typical usage:

    morph-cli inflect \
        --input grammar.json \
        --word kat --pos noun --entry-id w42 \
        --dim number=plural --dim case=acc \
        --trace

    morph-cli paradigm --input grammar.json --word kat --pos noun

    morph-cli derive --input grammar.json --rule-id agent --word bake --word sing

The input is a JSON object (file, or stdin when omitted / '-'):

    {
      "grammar":   { ...GrammarConfig... },
      "phonology": { "consonants": [...], "vowels": [...] }
    }

Forms go to stdout; traces (with --trace) go to stderr. --json prints the
full result records instead. The exit status is 0 whenever the command ran;
an unchanged word is reported through `applied` and the trace.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from pydantic import ValidationError

from morphology.derivation import generate_derived_words
from morphology.models import GrammarConfig, PhonemeInventory
from morphology.paradigm import generate_paradigm
from morphology.typology import apply_inflection_typology_aware
from utils.logging_setup import init_logging


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def _add_common(sub: argparse.ArgumentParser) -> None:
    sub.add_argument(
        "--input",
        "-i",
        metavar="PATH",
        help="JSON file with 'grammar' and 'phonology'. If omitted or '-', read stdin.",
    )
    sub.add_argument("--json", action="store_true", help="Print full result records as JSON.")
    sub.add_argument("--trace", action="store_true", help="Print traces to stderr.")


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="morph-cli",
        description="Generate word forms from a declarative morphology.",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging.")

    subparsers = parser.add_subparsers(title="commands", dest="command", required=True)

    inflect = subparsers.add_parser("inflect", help="One form, typology-aware.")
    _add_common(inflect)
    inflect.add_argument("--word", required=True, help="Root form.")
    inflect.add_argument("--pos", required=True, help="Part-of-speech id.")
    inflect.add_argument("--entry-id", default="", help="Lexicon entry id (for irregular overrides).")
    inflect.add_argument(
        "--dim",
        action="append",
        default=[],
        metavar="DIM=VALUE",
        help="Requested dimension value; repeatable.",
    )

    paradigm = subparsers.add_parser("paradigm", help="Full paradigm table for one root.")
    _add_common(paradigm)
    paradigm.add_argument("--word", required=True, help="Root form.")
    paradigm.add_argument("--pos", required=True, help="Part-of-speech id.")

    derive = subparsers.add_parser("derive", help="Preview a derivation rule.")
    _add_common(derive)
    derive.add_argument("--rule-id", required=True, help="Derivation rule id.")
    derive.add_argument("--word", action="append", required=True, help="Source word; repeatable.")

    return parser


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _load_json(path: Optional[str]) -> Dict[str, Any]:
    if not path or path == "-":
        raw = sys.stdin.read()
    else:
        raw = Path(path).read_text(encoding="utf-8")

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Error: invalid JSON input ({exc}).") from exc

    if not isinstance(data, dict):
        raise SystemExit("Error: expected a JSON object at top level.")
    return data


def _load_models(path: Optional[str]) -> Tuple[GrammarConfig, PhonemeInventory]:
    data = _load_json(path)
    try:
        grammar = GrammarConfig.model_validate(data.get("grammar") or {})
        phonology = PhonemeInventory.model_validate(data.get("phonology") or {})
    except ValidationError as exc:
        raise SystemExit(f"Error: invalid grammar document.\n{exc}") from exc
    return grammar, phonology


def parse_dimensions(pairs: List[str]) -> Dict[str, str]:
    values: Dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip() or not value.strip():
            raise SystemExit(f"Error: --dim expects DIM=VALUE, got '{pair}'.")
        values[key.strip()] = value.strip()
    return values


def _dump(records: Any) -> None:
    print(json.dumps(records, indent=2, ensure_ascii=False))


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------


def _cmd_inflect(args: argparse.Namespace) -> int:
    grammar, phonology = _load_models(args.input)
    outcome = apply_inflection_typology_aware(
        args.word,
        args.entry_id,
        args.pos,
        parse_dimensions(args.dim),
        grammar,
        phonology,
    )
    if args.json:
        _dump(outcome.model_dump(mode="json"))
    else:
        print(outcome.result)
    if args.trace:
        print(outcome.trace, file=sys.stderr)
    return 0


def _cmd_paradigm(args: argparse.Namespace) -> int:
    grammar, phonology = _load_models(args.input)
    cells = generate_paradigm(args.word, args.pos, grammar.inflection_rules, phonology)
    if args.json:
        _dump([c.model_dump(mode="json") for c in cells])
        return 0
    for cell in cells:
        label = cell.tag or cell.rule_id
        print(f"{label}\t{cell.result}")
        if args.trace:
            print(f"{label}\t{cell.trace}", file=sys.stderr)
    return 0


def _cmd_derive(args: argparse.Namespace) -> int:
    grammar, phonology = _load_models(args.input)
    rule = next((r for r in grammar.derivation_rules if r.rule_id == args.rule_id), None)
    if rule is None:
        raise SystemExit(f"Error: no derivation rule '{args.rule_id}'.")

    previews = generate_derived_words(args.word, rule, phonology)
    if args.json:
        _dump([p.model_dump(mode="json") for p in previews])
        return 0
    for preview in previews:
        print(f"{preview.source}\t{preview.derived}")
        if args.trace:
            print(f"{preview.source}\t{preview.trace}", file=sys.stderr)
    return 0


_COMMANDS = {
    "inflect": _cmd_inflect,
    "paradigm": _cmd_paradigm,
    "derive": _cmd_derive,
}


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: Optional[List[str]] = None) -> None:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    init_logging(level=logging.DEBUG if args.verbose else None)

    handler = _COMMANDS.get(args.command)
    if handler is None:
        parser.error(f"Unknown command: {args.command}")
        return

    raise SystemExit(handler(args))


if __name__ == "__main__":
    main()
