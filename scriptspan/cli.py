from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from .analyzer import IdentifierAnalyzer
from .commands import blocks as cmd_blocks
from .commands import check as cmd_check
from .config import load_settings

LOG_FORMAT = "%(levelname).1s | %(name)s | %(message)s"

C_RESET = "\033[0m"
LEVEL_COLORS = {
    logging.DEBUG: "\033[36m",  # Cyan
    logging.INFO: "\033[37m",  # Light gray
    logging.WARNING: "\033[33m",  # Yellow
    logging.ERROR: "\033[31m",  # Red
    logging.CRITICAL: "\033[35m",  # Magenta
}


class ColorFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        color = LEVEL_COLORS.get(record.levelno)
        if not color:
            return message
        return f"{color}{message}{C_RESET}"


def configure_logging(level_name: str) -> None:
    log_level = getattr(logging, level_name.upper(), logging.WARNING)
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(log_level)
    handler = logging.StreamHandler()
    handler.setFormatter(ColorFormatter(LOG_FORMAT))
    root_logger.addHandler(handler)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Flag mixed-script identifiers (homograph spoofing)"
    )
    parser.add_argument("--config", type=Path, help="Path to scriptspan.yaml")
    parser.add_argument("--log-level", default="WARNING", help="Python logging level")

    subparsers = parser.add_subparsers(dest="command", required=True)
    check_parser = subparsers.add_parser(
        "check", help="Mark suspicious code points in local@domain/resource identifiers"
    )
    check_parser.add_argument("identifiers", nargs="+", help="Identifiers to check")
    check_parser.add_argument(
        "--json",
        action="store_true",
        help="Emit one JSON object per identifier",
    )
    check_parser.add_argument(
        "--plain",
        action="store_true",
        help="Mark spans with [[ ]] instead of terminal colours",
    )
    blocks_parser = subparsers.add_parser(
        "blocks", help="Show the Unicode block of every code point in TEXT"
    )
    blocks_parser.add_argument("text", nargs="?", default="", help="Text to classify")
    blocks_parser.add_argument(
        "--list",
        action="store_true",
        help="List every known Unicode block with its code point range",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    settings = load_settings(args.config)
    analyzer = IdentifierAnalyzer.create(settings)

    match args.command:
        case "check":
            report = cmd_check.run(
                analyzer,
                args.identifiers,
                display=settings.display,
                json_output=args.json,
                plain=args.plain,
            )
            for line in report.lines:
                print(line)
            return report.exit_code
        case "blocks":
            if args.list:
                lines = cmd_blocks.list_blocks()
            else:
                lines = cmd_blocks.run(analyzer, args.text)
            for line in lines:
                print(line)
            return 0
        case _:
            parser.error("Unknown command")
    return 2


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
