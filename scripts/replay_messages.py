#!/usr/bin/env python3
"""Replay decoded NMEA 2000 messages through the PGN 130316 mapping.

Reads canboat JSON lines (``analyzer -json`` / ``candump2analyzer`` output),
routes every PGN 130316 record through the plugin and prints the resulting
Signal K deltas.

Usage
-----
    analyzer -json < capture.log | python scripts/replay_messages.py
    python scripts/replay_messages.py --config plugin-config-data/pgn130316.json capture.jsonl
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, TextIO

from pgn130316 import ConfigurationError, Pgn130316Plugin, load_options, options_from_env
from pgn130316._constants import PGN

_LOG = logging.getLogger("replay_messages")


class ConsoleHost:
    """Minimal host that prints deltas and status lines."""

    def __init__(self, out: TextIO) -> None:
        self._out = out
        self.deltas = 0

    def set_plugin_status(self, message: str) -> None:
        print(f"[status] {message}", file=sys.stderr)

    def set_plugin_error(self, message: str) -> None:
        print(f"[error] {message}", file=sys.stderr)

    def handle_message(self, plugin_id: str, delta: dict[str, Any]) -> None:
        self.deltas += 1
        print(json.dumps(delta, sort_keys=True), file=self._out)

    def emit_property_value(self, name: str, value: Any) -> None:
        _LOG.debug("Registered %s for PGNs %s", name, sorted(value))


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Replay canboat JSON lines through the PGN 130316 mapping.")
    parser.add_argument(
        "input",
        nargs="?",
        help="canboat JSON lines file (default: stdin).",
    )
    parser.add_argument(
        "--config",
        help="Plugin options JSON file (default: $PGN130316_CONFIG_FILE or built-in table).",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logs.",
    )
    return parser.parse_args()


def _replay(plugin: Pgn130316Plugin, stream: TextIO) -> tuple[int, int]:
    seen = 0
    routed = 0
    for lineno, line in enumerate(stream, 1):
        line = line.strip()
        if not line:
            continue
        try:
            record = json.loads(line)
        except ValueError:
            _LOG.debug("Skipping non-JSON line %d", lineno)
            continue
        if not isinstance(record, dict) or record.get("pgn") != PGN:
            continue
        seen += 1
        if plugin.process(record):
            routed += 1
    return seen, routed


def _main() -> int:
    args = _parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        options = load_options(args.config) if args.config else options_from_env()
    except ConfigurationError as exc:
        print(f"[replay] {exc}", file=sys.stderr)
        return 2

    host = ConsoleHost(sys.stdout)
    plugin = Pgn130316Plugin(host)
    plugin.start(options)
    if not plugin.active:
        return 2

    if args.input:
        with open(args.input, encoding="utf-8") as stream:
            seen, routed = _replay(plugin, stream)
    else:
        seen, routed = _replay(plugin, sys.stdin)
    plugin.stop()

    print(f"[replay] {seen} PGN {PGN} messages, {routed} routed, {host.deltas} deltas", file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(_main())
