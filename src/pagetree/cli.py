"""
CLI interface for pagetree.

Replays an editing script against a fresh builder session and prints the
resulting page outline. Handy for trying out drop resolution and tree edits
without a UI.

Script commands, one per line (an unquoted word starting with `#` begins a comment):

    add <kind> [into <ref>]
    update <ref> <text...>
    style <ref> key=value ...
    extra <ref> key=value ...
    remove <ref>
    select <ref>|none
    duplicate <ref>
    drag <kind>
    over [<ref>...]
    drop [<ref>...]
    cancel

A <ref> is `@N` (the Nth node created by the script), `@selected`, or a raw id.
"""

from __future__ import annotations

import argparse
import copy
import logging
import math
import shlex
import sys

from .config import get_config
from .dom import Patch, StyleValue
from .errors import DragStateError, ScriptError, UnknownElementKind
from .outline import outline_lines
from .session import BuilderSession

logger = logging.getLogger(__name__)


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="pagetree",
        description="Replay page-builder edits and print the component tree",
    )

    parser.add_argument(
        "script",
        nargs="?",
        help="Editing script (reads from stdin if not provided)",
    )

    parser.add_argument(
        "--sample",
        action="store_true",
        default=None,
        help="Start from the starter page instead of an empty canvas",
    )

    parser.add_argument(
        "--full-ids",
        action="store_true",
        help="Show full node ids instead of short prefixes",
    )

    parser.add_argument(
        "--no-style",
        action="store_false",
        dest="show_style",
        default=True,
        help="Hide style properties in the outline",
    )

    parser.add_argument(
        "--content-chars",
        type=int,
        help="Truncate node content to this many characters",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log tree operations to stderr",
    )

    return parser.parse_args(args)


def read_input(filepath: str | None) -> str:
    """Read the script from file or stdin."""
    if filepath:
        with open(filepath, encoding="utf-8") as f:
            return f.read()
    return sys.stdin.read()


def parse_value(raw: str) -> StyleValue:
    """Finite numbers stay numbers, everything else is kept as a string."""
    try:
        return int(raw)
    except ValueError:
        pass
    try:
        value = float(raw)
    except ValueError:
        return raw
    # float() also reads words like nan/inf/Infinity
    return value if math.isfinite(value) else raw


def strip_comment(line: str) -> str:
    """Cut the line at the first unquoted `#` that starts a word."""
    quote = None
    escaped = False
    for i, ch in enumerate(line):
        if escaped:
            escaped = False
        elif quote:
            if ch == quote:
                quote = None
            elif ch == "\\" and quote == '"':
                escaped = True
        elif ch == "\\":
            escaped = True
        elif ch in "'\"":
            quote = ch
        elif ch == "#" and (i == 0 or line[i - 1].isspace()):
            return line[:i]
    return line


def parse_assignments(tokens: list[str], line_no: int) -> dict[str, StyleValue]:
    """Parse key=value tokens into a dict."""
    if not tokens:
        raise ScriptError("expected at least one key=value", line_no)
    values: dict[str, StyleValue] = {}
    for token in tokens:
        key, sep, raw = token.partition("=")
        if not sep or not key:
            raise ScriptError(f"expected key=value, got {token!r}", line_no)
        values[key] = parse_value(raw)
    return values


class ScriptRunner:
    """Applies script lines to a BuilderSession."""

    def __init__(self, session: BuilderSession):
        self.session = session
        self.created: list[str | None] = []  # ids by creation order, None if the insert was absorbed

    def resolve_ref(self, ref: str, line_no: int) -> str:
        if ref == "@selected":
            if self.session.selected_id is None:
                raise ScriptError("nothing is selected", line_no)
            return self.session.selected_id
        if ref.startswith("@"):
            try:
                index = int(ref[1:])
            except ValueError as e:
                raise ScriptError(f"bad reference {ref!r}", line_no) from e
            if not 1 <= index <= len(self.created):
                raise ScriptError(f"reference {ref} out of range ({len(self.created)} nodes created)", line_no)
            node_id = self.created[index - 1]
            if node_id is None:
                raise ScriptError(f"node {ref} was never placed", line_no)
            return node_id
        return ref

    def _record(self, node_id: str | None) -> None:
        self.created.append(node_id)

    def run_line(self, line: str, line_no: int) -> None:
        try:
            tokens = shlex.split(strip_comment(line))
        except ValueError as e:
            raise ScriptError(str(e), line_no) from e
        if not tokens:
            return

        command, rest = tokens[0].lower(), tokens[1:]
        try:
            self._dispatch(command, rest, line_no)
        except (UnknownElementKind, DragStateError) as e:
            raise ScriptError(str(e), line_no) from e

    def _dispatch(self, command: str, rest: list[str], line_no: int) -> None:
        session = self.session

        if command == "add":
            if len(rest) == 1:
                parent_id = None
            elif len(rest) == 3 and rest[1].lower() == "into":
                parent_id = self.resolve_ref(rest[2], line_no)
            else:
                raise ScriptError("usage: add <kind> [into <ref>]", line_no)
            node = session.add_component(rest[0], parent_id)
            self._record(node.id if node else None)

        elif command == "update":
            if len(rest) < 2:
                raise ScriptError("usage: update <ref> <text...>", line_no)
            session.update_component(self.resolve_ref(rest[0], line_no), Patch(content=" ".join(rest[1:])))

        elif command in ("style", "extra"):
            if not rest:
                raise ScriptError(f"usage: {command} <ref> key=value ...", line_no)
            node_id = self.resolve_ref(rest[0], line_no)
            values = parse_assignments(rest[1:], line_no)
            patch = Patch(style=values) if command == "style" else Patch(extra=values)
            session.update_component(node_id, patch)

        elif command == "remove":
            if len(rest) != 1:
                raise ScriptError("usage: remove <ref>", line_no)
            session.remove_component(self.resolve_ref(rest[0], line_no))

        elif command == "select":
            if len(rest) != 1:
                raise ScriptError("usage: select <ref>|none", line_no)
            session.select_component(None if rest[0].lower() == "none" else self.resolve_ref(rest[0], line_no))

        elif command == "duplicate":
            if len(rest) != 1:
                raise ScriptError("usage: duplicate <ref>", line_no)
            clone = session.duplicate_component(self.resolve_ref(rest[0], line_no))
            self._record(clone.id if clone else None)

        elif command == "drag":
            if len(rest) != 1:
                raise ScriptError("usage: drag <kind>", line_no)
            session.begin_drag(rest[0])

        elif command == "over":
            target = session.drag_over([self.resolve_ref(r, line_no) for r in rest])
            logger.info("Drop target: %s", target or "root")

        elif command == "drop":
            candidates = [self.resolve_ref(r, line_no) for r in rest] if rest else None
            node = session.drop(candidates)
            self._record(node.id if node else None)

        elif command == "cancel":
            if rest:
                raise ScriptError("usage: cancel", line_no)
            session.cancel_drag()

        else:
            raise ScriptError(f"unknown command {command!r}", line_no)

    def run(self, script: str) -> None:
        for line_no, line in enumerate(script.splitlines(), start=1):
            self.run_line(line, line_no)


def format_session(session: BuilderSession, full_ids: bool = False,
                   content_chars: int | None = None, show_style: bool = True) -> str:
    """Outline of the session tree followed by the selection line."""
    lines = outline_lines(
        session.tree,
        selected_id=session.selected_id,
        content_chars=content_chars,
        id_chars=0 if full_ids else None,
        show_style=show_style,
    )
    if not lines:
        lines = ["(empty page)"]
    lines.append(f"selected: {session.selected_id or 'none'}")
    return "\n".join(lines)


def main(args: list[str] | None = None) -> int:
    """Main entry point."""
    parsed = parse_args(args)
    cfg = copy.deepcopy(get_config())

    level = cfg.logging.level if isinstance(logging.getLevelName(cfg.logging.level), int) else logging.WARNING
    logging.basicConfig(
        level=logging.DEBUG if parsed.verbose else level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if parsed.sample is not None:
        cfg.session.seed_sample = parsed.sample

    try:
        script = read_input(parsed.script)
    except FileNotFoundError:
        print(f"Error: File not found: {parsed.script}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error reading input: {e}", file=sys.stderr)
        return 1

    session = BuilderSession(config=cfg)
    runner = ScriptRunner(session)
    try:
        runner.run(script)
    except ScriptError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if session.dragging:
        logger.warning("Script ended with a drag in progress; nothing was dropped")

    print(format_session(session, parsed.full_ids, parsed.content_chars, parsed.show_style))
    return 0


if __name__ == "__main__":
    sys.exit(main())
