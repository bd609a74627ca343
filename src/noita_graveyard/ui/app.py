"""Terminal application bootstrap: config, logging, loading, curses session."""

from __future__ import annotations

import argparse
import curses
import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import NoReturn

from noita_graveyard.parser.bones_loader import (
    LoadResult,
    discover_bone_files,
    load_wands,
    resolve_bones_dir,
)
from noita_graveyard.parser.errors import MissingTranslationTableError
from noita_graveyard.parser.translations import (
    DEFAULT_LANGUAGE_INDEX,
    DEFAULT_TRANSLATION_FILE,
    TranslationTable,
    load_translations,
)
from noita_graveyard.ui.state import BrowserState
from noita_graveyard.ui.terminal import DEFAULT_POLL_MS, run_browser


logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(slots=True)
class BrowserConfig:
    """Resolved startup settings."""

    translations_path: Path = Path(DEFAULT_TRANSLATION_FILE)
    language: int | str = DEFAULT_LANGUAGE_INDEX
    bones_dir: Path | None = None   # None: search the default save locations
    strict: bool = False            # abort on the first unreadable bones file
    log_level: str = "WARNING"
    log_file: Path | None = None
    poll_ms: int = DEFAULT_POLL_MS


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Browse wands left behind in Noita bones files")
    parser.add_argument("--bones-dir", type=Path, default=None, help="Directory of bones *.xml files")
    parser.add_argument(
        "--translations",
        type=Path,
        default=None,
        help=f"Path to {DEFAULT_TRANSLATION_FILE} (default: $NOITA_TRANSLATIONS or ./{DEFAULT_TRANSLATION_FILE})",
    )
    parser.add_argument(
        "--language",
        default=None,
        help="Translation column index or language code (default: 1, English)",
    )
    parser.add_argument("--strict", action="store_true", help="Abort if any bones file fails to parse")
    parser.add_argument("--log-level", default=None, help="Logging level (default: WARNING)")
    parser.add_argument("--log-file", type=Path, default=None, help="Write logs to this file")
    return parser


def _parse_language(raw: str) -> int | str:
    return int(raw) if raw.strip().isdigit() else raw.strip()


def config_from_args(args: argparse.Namespace) -> BrowserConfig:
    """Merge CLI flags over environment variables over defaults."""
    config = BrowserConfig()
    translations = args.translations or os.environ.get("NOITA_TRANSLATIONS")
    if translations:
        config.translations_path = Path(translations).expanduser()
    language = args.language or os.environ.get("NOITA_LANGUAGE")
    if language:
        config.language = _parse_language(language)
    if args.bones_dir is not None:
        config.bones_dir = args.bones_dir.expanduser()
    config.strict = bool(args.strict)
    config.log_level = (args.log_level or os.environ.get("NOITA_LOG_LEVEL") or config.log_level).upper()
    config.log_file = args.log_file
    return config


def configure_logging(config: BrowserConfig) -> None:
    level = getattr(logging, config.log_level, logging.WARNING)
    if config.log_file is not None:
        logging.basicConfig(level=level, format=LOG_FORMAT, filename=str(config.log_file))
    else:
        # stderr shares the terminal with curses; keep it quiet during the session.
        logging.basicConfig(level=max(level, logging.WARNING), format=LOG_FORMAT)


def fatal(message: str) -> NoReturn:
    """Show ``message``, wait for acknowledgement, exit with status 1."""
    print(message)
    print("Press Enter to continue...")
    try:
        input()
    except EOFError:
        pass
    raise SystemExit(1)


def load_state(config: BrowserConfig, translations: TranslationTable) -> tuple[BrowserState, LoadResult]:
    bones_dir = resolve_bones_dir(config.bones_dir)
    logger.info("Reading bones from %s", bones_dir)
    result = load_wands(discover_bone_files(bones_dir), translations, strict=config.strict)
    return BrowserState(wands=result.wands), result


def main(argv: list[str] | None = None) -> None:
    """Run the terminal browser."""
    config = config_from_args(build_parser().parse_args(argv))
    configure_logging(config)

    try:
        translations = load_translations(config.translations_path, config.language)
    except MissingTranslationTableError as exc:
        fatal(str(exc))
    except ValueError as exc:
        fatal(f"Could not read {config.translations_path}: {exc}")

    try:
        state, result = load_state(config, translations)
    except FileNotFoundError as exc:
        fatal(str(exc))
    except ValueError as exc:
        fatal(f"Failed to load bones: {exc}")

    try:
        curses.wrapper(run_browser, state, config.poll_ms)
    except KeyboardInterrupt:
        # Allow Ctrl+C to terminate cleanly without a traceback.
        pass

    if result.failures:
        print(f"{len(result.failures)} bones file(s) could not be read:", file=sys.stderr)
        for failure in result.failures:
            print(f"  {failure.path.name}: {failure.reason}", file=sys.stderr)


if __name__ == "__main__":
    main()
