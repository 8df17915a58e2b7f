"""Application entry point for the minigrep command."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from art import text2art
from dotenv import find_dotenv, load_dotenv

from minigrep import settings
from minigrep.adapters.file_reader import FileContentReader, ReadError
from minigrep.adapters.stdout_writer import StreamLineWriter
from minigrep.core.config import ConfigurationError, SearchConfig
from minigrep.core.runner import SearchRunner

NAME = "minigrep"
FONT = "small"


def _banner() -> str:
    return text2art(NAME, font=FONT)


def _configure_logging(config: dict) -> None:
    if not config["enabled"]:
        return

    level = getattr(logging, config["level"], logging.INFO)
    formatter = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handlers: list[logging.Handler] = []

    if config["console"]:
        # stdout carries matched lines, so log records go to stderr.
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    file_cfg = config["file"]
    if file_cfg["enabled"]:
        path = file_cfg["path"]
        if not os.path.isabs(path):
            path = os.path.join(os.getcwd(), path)
        try:
            directory = os.path.dirname(path)
            if directory:
                os.makedirs(directory, exist_ok=True)

            file_handler = RotatingFileHandler(
                path,
                maxBytes=file_cfg["max_bytes"],
                backupCount=file_cfg["backup_count"],
                encoding="utf-8",
            )
        except OSError as exc:
            raise ConfigurationError(f"cannot open log file {path}: {exc}") from exc
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    if not handlers:
        return

    # Replace whatever handlers are already on the root logger.
    logging.basicConfig(level=level, handlers=handlers, force=True)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=NAME,
        description=_banner() + "Print the lines of FILE_PATH that contain QUERY.",
        epilog="Set IGNORE_CASE (any value) to match regardless of case.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    # Optional nargs so a missing positional surfaces as ConfigurationError
    # rather than argparse's own usage error.
    parser.add_argument("query", nargs="?", help="Substring to look for")
    parser.add_argument("file_path", nargs="?", help="File to search")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    # .env may supply IGNORE_CASE; variables already set take precedence.
    load_dotenv(find_dotenv(usecwd=True))

    try:
        _configure_logging(settings.logging_settings(settings.load_settings()))
    except ConfigurationError as exc:
        print(f"Problem loading settings: {exc}", file=sys.stderr)
        return 1

    try:
        config = SearchConfig.build([args.query, args.file_path], os.environ)
    except ConfigurationError as exc:
        logging.getLogger(__name__).error("Configuration failed: %s", exc)
        print(f"Problem parsing arguments: {exc}", file=sys.stderr)
        return 1

    runner = SearchRunner(FileContentReader(), StreamLineWriter())
    try:
        runner.run(config)
    except ReadError as exc:
        logging.getLogger(__name__).error("Search failed: %s", exc)
        print(f"Application error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
