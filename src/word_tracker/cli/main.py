# Command line entry point: index a text file and print or write a word report.
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from word_tracker.components.bstree import BSTree
from word_tracker.components.repository import load_repository, save_repository
from word_tracker.components.word import Word
from word_tracker.core.config import TrackerConfig, load_config
from word_tracker.core.errors import ConfigError, RepositoryError
from word_tracker.core.indexer import index_file
from word_tracker.core.types import ReportMode
from word_tracker.render.report import render_tree

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="word-tracker",
        description="Index the words of a text file and report where they occur",
    )
    p.add_argument("input", type=Path, help="Input text file")
    modes = p.add_mutually_exclusive_group()
    modes.add_argument(
        "-pf", dest="mode", action="store_const", const=ReportMode.FILES,
        help="Print each word with the files it occurs in",
    )
    modes.add_argument(
        "-pl", dest="mode", action="store_const", const=ReportMode.LINES,
        help="Print each word with the files and line numbers it occurs on",
    )
    modes.add_argument(
        "-po", dest="mode", action="store_const", const=ReportMode.FREQUENCY,
        help="As -pl, plus the total number of occurrences",
    )
    modes.add_argument(
        "--mode", dest="mode", type=ReportMode.parse,
        help="Report mode by name: files, lines or frequency",
    )
    p.add_argument("-f", dest="output", type=Path, help="Write the report to this file")
    p.add_argument("--config", type=Path, help="TOML configuration file")
    p.add_argument("--repository", type=Path, help="Repository snapshot path")
    p.add_argument(
        "--no-persist", action="store_true",
        help="Neither load nor save the repository",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return p


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()

    if len(argv) < 2:
        parser.print_usage()
        return 1

    args = parser.parse_args(argv)

    try:
        config = load_config(args.config) if args.config else TrackerConfig()
    except (OSError, ConfigError) as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 2

    configure_logging("DEBUG" if args.verbose else config.log_level)

    mode: ReportMode = args.mode or config.default_mode
    repository_path = args.repository or Path(config.repository_path)
    persist = config.persist and not args.no_persist

    tree: BSTree[Word] = load_repository(repository_path) if persist else BSTree()

    try:
        index_file(tree, args.input, encoding=config.encoding)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading {args.input}: {e}", file=sys.stderr)
        return 2

    if persist:
        try:
            save_repository(tree, repository_path)
        except RepositoryError as e:
            print(f"Error saving repository: {e}", file=sys.stderr)

    report = render_tree(tree, mode)

    if args.output:
        try:
            args.output.write_text(report, encoding="utf-8")
        except (OSError, UnicodeError) as e:
            print(f"Error writing report to {args.output}: {e}", file=sys.stderr)
            return 2
        print(f"Wrote report to {args.output}")
    else:
        sys.stdout.write(report)

    logger.debug(f"Reported {tree.size()} words in {mode.name.lower()} mode")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
