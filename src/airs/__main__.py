"""AIRS CLI entry point.

Runs a scripted history session and prints every value the history
emits.

Usage:
    python -m airs --seed homepage set:about set:clients undo values
    python -m airs --limit 2 set:a set:b set:c values     # ["b", "c"]
    python -m airs -c custom.yaml redo:3 previous:2
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any

import structlog

from airs.core.config import AirsConfig
from airs.history.config import HistoryConfig
from airs.state import HistoryState, history
from airs.utils.logging import session_context, setup_logging

logger = logging.getLogger("airs.cli")

COMMANDS = ("set", "undo", "redo", "limit", "values", "previous", "get")


class CommandError(ValueError):
    """Raised for malformed session commands."""


def parse_command(token: str) -> tuple[str, str | None]:
    """Split ``name[:arg]`` and check the command name."""
    name, sep, arg = token.partition(":")
    name = name.strip().lower()
    if name not in COMMANDS:
        raise CommandError(f"Unknown command: {token!r}")
    if name == "set" and not sep:
        raise CommandError("set requires a value, e.g. set:about")
    if name == "limit" and not sep:
        raise CommandError("limit requires a value, e.g. limit:5 or limit:none")
    return name, (arg if sep else None)


def _int_arg(arg: str | None, default: int) -> int:
    if arg is None or arg == "":
        return default
    try:
        return int(arg)
    except ValueError:
        raise CommandError(f"Expected an integer, got {arg!r}") from None


def _limit_arg(arg: str) -> Any:
    try:
        return int(arg)
    except ValueError:
        return arg


def run_command(h: HistoryState[Any], name: str, arg: str | None, out=None) -> None:
    """Apply one parsed command to *h*, writing query results to *out*."""
    out = out or sys.stdout
    if name == "set":
        h.set(arg)
    elif name == "undo":
        h.undo(_int_arg(arg, 1))
    elif name == "redo":
        h.redo(_int_arg(arg, 1))
    elif name == "limit":
        try:
            h.history_limit = _limit_arg(arg)
        except TypeError as e:
            raise CommandError(str(e)) from None
    elif name == "values":
        print(json.dumps(h.get_all_values()), file=out)
    elif name == "previous":
        limit = _int_arg(arg, 0)
        print(json.dumps(h.get_previous_values(limit)), file=out)
    elif name == "get":
        print(json.dumps(h()), file=out)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="airs",
        description="AIRS - run a scripted undo/redo history session",
    )
    parser.add_argument(
        "commands",
        nargs="*",
        metavar="COMMAND",
        help="set:VALUE, undo[:N], redo[:N], limit:N|none, values, previous[:N], get",
    )
    parser.add_argument(
        "--config",
        "-c",
        default="config/default.yaml",
        help="Path to configuration YAML file (default: config/default.yaml)",
    )
    parser.add_argument(
        "--seed",
        "-s",
        default=None,
        help="Override the initial history value",
    )
    parser.add_argument(
        "--limit",
        "-l",
        default=None,
        help="Override the history limit (integer, or 'none' for unbounded)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Set logging level",
    )
    parser.add_argument(
        "--validate-config",
        action="store_true",
        default=False,
        help="Validate config against Pydantic schema before starting",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Path to log file (default: no file logging)",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        default=False,
        help="Output logs as JSON instead of human-readable",
    )
    args = parser.parse_args(argv)

    # Load config
    config = AirsConfig(args.config)
    try:
        cfg = config.load(validate=args.validate_config)
    except FileNotFoundError:
        print(f"Error: Config file not found: {args.config}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Error: Config validation failed:\n{e}", file=sys.stderr)
        return 1

    # Apply CLI overrides
    if args.seed is not None:
        config.override("airs.history.seed", args.seed)
    if args.limit is not None:
        config.override("airs.history.limit", _limit_arg(args.limit))

    # Setup logging
    system = cfg.airs.get("system", {}) or {}
    log_level = args.log_level or system.get("log_level", "INFO")
    log_file = args.log_file or system.get("log_file", None)
    log_json = args.log_json or system.get("log_json", False)
    setup_logging(log_level, log_file=log_file, log_json=log_json)

    try:
        parsed = [parse_command(token) for token in args.commands]
        hist_cfg = HistoryConfig.from_omegaconf(cfg.airs.get("history"))
    except (CommandError, TypeError) as e:
        parser.error(str(e))

    h = history(hist_cfg.seed, hist_cfg.limit)
    sub = h.subscribe(lambda v: print(f"-> {v}"))

    with session_context(limit=repr(h.history_limit)):
        logger.info("Session started (%d command(s))", len(parsed))
        try:
            for step, (name, arg) in enumerate(parsed, start=1):
                with structlog.contextvars.bound_contextvars(step=step, command=name):
                    logger.debug("Running %s %s", name, arg if arg is not None else "")
                    run_command(h, name, arg)
        except CommandError as e:
            parser.error(str(e))
        finally:
            sub.unsubscribe()
        logger.info("Session finished at index %d of %d", h.engine.current_index, len(h.engine))

    return 0


if __name__ == "__main__":
    sys.exit(main())
