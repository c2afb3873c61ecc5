"""Command-line interface: classify inputs once or interactively."""

from __future__ import annotations

import argparse
import json
from typing import Any

from . import config
from .config import VERSION
from .logging_config import get_logger, setup_logging
from .router import is_command, resolve_engine_command, route, submit
from .types import Arithmetic, SearchEngine

logger = get_logger("cli")


def print_outcome(res: dict[str, Any], output_format: str = "human") -> None:
    """Print a classification in the given format.

    Args:
        res: Result dictionary (``to_dict()`` of an outcome, plus optional ``submit_url``)
        output_format: "json" for JSON output, "human" for human-readable
    """
    if output_format == "json":
        print(json.dumps(res, indent=2, ensure_ascii=False))
        return
    kind = res.get("kind")
    if kind == "arithmetic":
        print(f"= {res['value']}")
    elif kind == "address":
        print(f"-> {res['url']}")
    elif kind == "search":
        if res.get("query"):
            print(f"? {res['query']}")
    if res.get("submit_url"):
        print(res["submit_url"])


def handle_input(
    text: str, engine: SearchEngine, do_submit: bool = False
) -> dict[str, Any]:
    """Classify ``text`` and, when asked, resolve the URL a submit would open."""
    res = route(text).to_dict()
    if do_submit:
        res["submit_url"] = submit(text, engine)
    return res


def repl_loop(engine: SearchEngine, output_format: str = "human") -> None:
    """Interactive loop: classify each line, ``/key`` switches engine."""
    try:
        import readline  # noqa: F401
    except (ImportError, ModuleNotFoundError):
        # readline not available on Windows - that's fine
        pass

    print(f"searchbar {VERSION} - engine: {engine.name}. '/<key>' switches engine, 'quit' exits.")
    while True:
        try:
            line = input("> ")
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if line.strip().lower() in ("quit", "exit"):
            break
        if is_command(line):
            selected = resolve_engine_command(line)
            if selected is None:
                print(f"Unknown command: {line.strip()}")
            else:
                engine = selected
                logger.info("Switched engine", extra={"engine": engine.key})
                print(f"Engine: {engine.name}")
            continue
        outcome = route(line)
        res = outcome.to_dict()
        if not isinstance(outcome, Arithmetic):
            res["submit_url"] = submit(line, engine)
        print_outcome(res, output_format)


def main_entry(argv: list[str] | None = None) -> int:
    """
    Main entry point for the searchbar CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = argparse.ArgumentParser(prog="searchbar")
    parser.add_argument(
        "-e",
        "--eval",
        type=str,
        help="Classify one input and exit (non-interactive)",
        dest="eval_text",
    )
    parser.add_argument(
        "--submit",
        action="store_true",
        help="Also print the URL that submitting the input would open",
    )
    parser.add_argument(
        "--engine",
        type=str,
        choices=sorted(config.SEARCH_ENGINES),
        default=config.DEFAULT_ENGINE,
        help="Search engine key (default: %(default)s)",
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["json", "human"],
        default="human",
        help="Output format: json (machine-readable) or human (human-readable)",
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="Show program version"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Set logging level",
    )
    parser.add_argument("--log-file", type=str, help="Write logs to file")
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level, log_file=args.log_file)

    if args.version:
        print(VERSION)
        return 0

    engine = config.SEARCH_ENGINES[args.engine]

    if args.eval_text is not None:
        res = handle_input(args.eval_text, engine, do_submit=args.submit)
        print_outcome(res, output_format=args.format)
        return 0

    repl_loop(engine, output_format=args.format)
    return 0


if __name__ == "__main__":
    """Allow running the CLI module directly with python -m searchbar_pkg.cli"""
    import sys

    sys.exit(main_entry())
