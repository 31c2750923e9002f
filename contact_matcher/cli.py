"""Minimal CLI entrypoint for contact-matcher."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any
from typing import Sequence
from uuid import uuid4

from contact_matcher import __version__
from core.config import MatchingConfig
from core.structured_logging import emit_json_event
from matching import MatchStrategy, build_predicate, filter_records, levenshtein_distance, similarity
from storage import contact_to_dict, load_contacts


PROJECT_ROOT = Path(__file__).resolve().parent.parent
SCHEMAS_DIR = PROJECT_ROOT / "schemas"


def _resolve_command_run_id(args: argparse.Namespace) -> str:
    """Resolve run_id from CLI args or create one for command-level tracing."""
    explicit = getattr(args, "run_id", None)
    if explicit:
        return str(explicit)
    return str(uuid4())


def _emit_cli_event(
    event_type: str,
    *,
    run_id: str,
    command: str,
    **payload: Any,
) -> str:
    """Emit one structured CLI event line with standard fields."""
    return emit_json_event(
        event_type=event_type,
        run_id=run_id,
        command=command,
        **payload,
    )


def _validate_schema_file(path: Path) -> None:
    """Validate that a JSON schema file is well-formed and has required top-level keys."""
    data = json.loads(path.read_text(encoding="utf-8"))
    required_keys = {"$schema", "type", "properties", "required"}
    missing = required_keys.difference(data)
    if missing:
        missing_str = ", ".join(sorted(missing))
        raise ValueError(f"{path.name} missing required schema keys: {missing_str}")


def _cmd_validate_schemas(args: argparse.Namespace) -> int:
    """Validate schema files for basic structural correctness."""
    schema_files = sorted(SCHEMAS_DIR.glob("*.schema.json"))
    if not schema_files:
        raise FileNotFoundError(f"No schema files found in {SCHEMAS_DIR}")
    for path in schema_files:
        _validate_schema_file(path)
    _emit_cli_event(
        "cli_validate_schemas_completed",
        run_id=_resolve_command_run_id(args),
        command="validate-schemas",
        schema_files=[str(path) for path in schema_files],
    )
    return 0


def _cmd_find(args: argparse.Namespace) -> int:
    """List contacts matching a keyword query."""
    run_id = _resolve_command_run_id(args)
    contacts = load_contacts(args.contacts)
    predicate = build_predicate(args.query, args.strategy)
    matches = filter_records(
        contacts.records,
        predicate,
        deadline_seconds=args.deadline,
        run_id=run_id,
    )
    for contact in matches:
        emit_json_event(
            "contact_matched",
            run_id=run_id,
            contact=contact_to_dict(contact),
        )
    _emit_cli_event(
        "cli_find_completed",
        run_id=run_id,
        command="find",
        query=args.query,
        strategy=MatchStrategy(args.strategy).value,
        contacts=str(args.contacts),
        scanned=len(contacts),
        match_count=len(matches),
    )
    return 0


def _cmd_similarity(args: argparse.Namespace) -> int:
    """Report edit distance and similarity between two strings."""
    _emit_cli_event(
        "cli_similarity_completed",
        run_id=_resolve_command_run_id(args),
        command="similarity",
        left=args.left,
        right=args.right,
        distance=levenshtein_distance(args.left, args.right),
        similarity=round(similarity(args.left, args.right), 4),
        threshold=MatchingConfig.SIMILARITY_THRESHOLD,
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Create argument parser for the contact-matcher CLI."""
    parser = argparse.ArgumentParser(
        prog="contact-matcher",
        description="Fuzzy multi-field keyword search over a contact book",
    )
    parser.add_argument("--version", action="version", version=f"contact-matcher {__version__}")

    subparsers = parser.add_subparsers(dest="command")

    validate_parser = subparsers.add_parser(
        "validate-schemas",
        help="Validate JSON schemas used by the contact loader",
    )
    validate_parser.set_defaults(func=_cmd_validate_schemas)

    find_parser = subparsers.add_parser(
        "find",
        help="Print contacts matching a keyword query",
    )
    find_parser.add_argument("query", help="Keyword query (matched against every field)")
    find_parser.add_argument(
        "--contacts",
        default=MatchingConfig.DEFAULT_CONTACTS_PATH,
        help="Contact book JSON path",
    )
    find_parser.add_argument(
        "--strategy",
        choices=[item.value for item in MatchStrategy],
        default=MatchingConfig.DEFAULT_STRATEGY,
        help="fuzzy = word or similarity, exact = word only, similar = similarity only",
    )
    find_parser.add_argument(
        "--deadline",
        type=float,
        default=None,
        help="Stop scanning after this many seconds and report partial matches",
    )
    find_parser.add_argument("--run-id", help="Optional explicit run ID for logging")
    find_parser.set_defaults(func=_cmd_find)

    similarity_parser = subparsers.add_parser(
        "similarity",
        help="Show edit distance and similarity between two strings",
    )
    similarity_parser.add_argument("left")
    similarity_parser.add_argument("right")
    similarity_parser.add_argument("--run-id", help="Optional explicit run ID for logging")
    similarity_parser.set_defaults(func=_cmd_similarity)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Execute CLI and return process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        return 0

    try:
        return int(args.func(args))
    except Exception as exc:
        run_id = _resolve_command_run_id(args)
        _emit_cli_event(
            "cli_error",
            run_id=run_id,
            command=str(getattr(args, "command", "unknown")),
            level="error",
            error_type=type(exc).__name__,
            error=str(exc),
        )
        return 1


def cli() -> None:
    """Console-script entrypoint."""
    raise SystemExit(main())


if __name__ == "__main__":
    raise SystemExit(main())
