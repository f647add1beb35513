"""Command-line runner applying actions to files through the in-memory host."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Optional, Sequence

from onewriter_actions.actions import ActionRegistry, load_default_actions
from onewriter_actions.buffer import BufferValidationError
from onewriter_actions.host import (
    Host,
    MemoryApp,
    MemoryEditor,
    MemoryHTTP,
    MemoryUI,
    MemoryWebBrowser,
)
from onewriter_actions.runtime import telemetry

EXIT_USAGE = 2


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="onewriter-actions",
        description="Run editor actions against plain text files.",
    )
    parser.add_argument(
        "--log-preset",
        choices=("development", "production"),
        default=None,
        help="Telemetry preset (default: configure from ONEWRITER_ACTIONS_* env)",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("list", help="List registered actions")

    run = commands.add_parser("run", help="Run an action on a file")
    run.add_argument("action", help="Action id or title, e.g. 'lines.move_up'")
    run.add_argument("path", type=Path, help="File to edit")
    run.add_argument(
        "--caret", type=int, default=0, help="Selection start offset (default: 0)"
    )
    run.add_argument(
        "--selection-end",
        type=int,
        default=None,
        help="Selection end offset (default: same as --caret)",
    )
    run.add_argument(
        "--in-place", action="store_true", help="Write the result back to the file"
    )
    run.add_argument(
        "--json",
        action="store_true",
        help="Print text, selection and status as JSON",
    )
    return parser.parse_args(argv)


def _list_actions(registry: ActionRegistry) -> int:
    for action in registry.iter_actions():
        print(f"{action.id}\t{action.title}\t{action.shortcut or '-'}")
    return 0


def _run_action(registry: ActionRegistry, args: argparse.Namespace) -> int:
    path: Path = args.path
    end = args.caret if args.selection_end is None else args.selection_end
    try:
        text = path.read_text(encoding="utf-8")
        editor = MemoryEditor(text, selection=(args.caret, end), path=str(path))
        host = Host(
            editor=editor,
            app=MemoryApp(),
            ui=MemoryUI(),
            http=MemoryHTTP(),
            web_browser=MemoryWebBrowser(),
        )
        result = registry.run(args.action, host)
    except (
        KeyError,
        FileNotFoundError,
        UnicodeDecodeError,
        BufferValidationError,
    ) as exc:
        # KeyError str() adds quotes around the missing id
        message = exc.args[0] if isinstance(exc, KeyError) and exc.args else exc
        print(f"error: {message}", file=sys.stderr)
        return EXIT_USAGE

    mirror = editor.mirror()
    if args.in_place and result.applied:
        path.write_text(mirror.text, encoding="utf-8")
    if args.json:
        payload = {
            **mirror.as_dict(),
            "applied": result.applied,
            "status": result.status,
            "message": result.message,
        }
        print(json.dumps(payload))
    elif not args.in_place:
        sys.stdout.write(mirror.text)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    if args.log_preset:
        telemetry.configure(preset=args.log_preset)
    registry = load_default_actions(ActionRegistry())
    if args.command == "list":
        return _list_actions(registry)
    return _run_action(registry, args)


if __name__ == "__main__":  # pragma: no cover - manual entry point
    raise SystemExit(main())
