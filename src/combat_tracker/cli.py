#!/usr/bin/env python3
"""Command line tools for combat tracker export files."""
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from combat_tracker.api.schemas import PAYLOAD_SCHEMAS
from combat_tracker.config.settings import configure_logging, get_settings
from combat_tracker.infra.transfer import TransferError, create_export_string, import_library, import_session
from combat_tracker.models.combat.enums import ExportOrigin
from combat_tracker.models.combat.persistence import CombatSession
from combat_tracker.models.library import LibrarySnapshot

logger = logging.getLogger(__name__)


def _read_input(path: str) -> bytes:
    if path == "-":
        return sys.stdin.buffer.read()
    return Path(path).read_bytes()


def _print_session(session: CombatSession) -> None:
    summary = session.get_summary()
    status = f"round {summary['round']}" if summary["active"] else "not started"
    print(f"Combat session ({status}), {len(summary['turn_order'])} combatants")
    for position, entry in enumerate(summary["turn_order"], start=1):
        marker = ">" if entry["is_current"] else " "
        print(f" {marker} {position:>2}. {entry['name']} (HP {entry['hp']})")


def _print_library(snapshot: LibrarySnapshot) -> None:
    print(f"Template library: {len(snapshot.categories)} categories, "
          f"{len(snapshot.creatures)} creatures")
    names = {category.id: category.name for category in snapshot.categories}
    for creature in snapshot.creatures:
        labels = ", ".join(names.get(cid, cid) for cid in creature.category_ids)
        suffix = f" [{labels}]" if labels else ""
        print(f"   {creature.name} (HP {creature.hp}){suffix}")


def inspect_export(args) -> int:
    """Verify an export file and print what it contains."""
    try:
        raw = _read_input(args.path)
    except OSError as e:
        print(f"Error: cannot read {args.path}: {e}", file=sys.stderr)
        return 1

    try:
        if args.origin == ExportOrigin.SESSION.value:
            _print_session(import_session(raw))
        else:
            _print_library(import_library(raw))
    except TransferError as e:
        print(f"Error: {e.user_message}", file=sys.stderr)
        return 1
    return 0


def sign_payload(args) -> int:
    """Validate a plain JSON payload and write it as a signed export."""
    origin = ExportOrigin(args.origin)
    try:
        data = json.loads(_read_input(args.path).decode("utf-8"))
    except OSError as e:
        print(f"Error: cannot read {args.path}: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {args.path} is not valid JSON: {e}", file=sys.stderr)
        return 1

    try:
        payload = PAYLOAD_SCHEMAS[origin].model_validate(data)
    except ValidationError as e:
        print(f"Error: payload is not a valid {origin.value} export:", file=sys.stderr)
        for item in e.errors():
            location = ".".join(str(part) for part in item["loc"]) or "payload"
            print(f"  {location}: {item['msg']}", file=sys.stderr)
        return 1

    export = create_export_string(origin, payload.to_model())

    if args.output:
        output = Path(args.output)
        extension = get_settings().export_file_extension
        if not output.suffix:
            output = output.with_suffix(extension)
        output.write_text(export, encoding="utf-8")
        logger.info(f"Wrote signed {origin.value} export to {output}")
    else:
        print(export)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="combat-tracker",
        description="Combat tracker export tools",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  combat-tracker inspect encounter.ctdata --origin session
  combat-tracker inspect - --origin library < library.ctdata
  combat-tracker sign session.json --origin session --output encounter
        """
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")
    origins = [origin.value for origin in ExportOrigin]

    inspect_parser = subparsers.add_parser("inspect", help="Verify and summarize an export")
    inspect_parser.add_argument("path", help="Export file, or - for stdin")
    inspect_parser.add_argument(
        "--origin", "-o",
        choices=origins,
        required=True,
        help="Expected export type"
    )

    sign_parser = subparsers.add_parser("sign", help="Sign a plain JSON payload")
    sign_parser.add_argument("path", help="JSON payload file, or - for stdin")
    sign_parser.add_argument(
        "--origin", "-o",
        choices=origins,
        required=True,
        help="Export type of the payload"
    )
    sign_parser.add_argument(
        "--output",
        help="Output file (default: stdout)"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point with CLI argument parsing."""
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging("DEBUG" if args.verbose else None)

    if args.command == "inspect":
        return inspect_export(args)
    if args.command == "sign":
        return sign_payload(args)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
