"""Locate the bones directory and load every wand in it."""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from noita_graveyard.models.wand import Wand
from noita_graveyard.parser.wand_parser import TranslationResolver, parse_wand_file


logger = logging.getLogger(__name__)

NOITA_APP_ID = "881100"
BONES_SUBPATH = Path("Nolla_Games_Noita/save00/persistent/bones_new")


@dataclass(slots=True)
class LoadFailure:
    path: Path
    reason: str


@dataclass(slots=True)
class LoadResult:
    """Wands that parsed, plus the files that were skipped."""

    wands: list[Wand] = field(default_factory=list)
    failures: list[LoadFailure] = field(default_factory=list)


def default_bones_dir_candidates() -> list[Path]:
    """Return likely bones directories, most specific first."""
    candidates: list[Path] = []
    env_path = os.environ.get("NOITA_BONES_DIR")
    if env_path:
        candidates.append(Path(env_path).expanduser())

    appdata = os.environ.get("APPDATA")
    if appdata:
        # %APPDATA% is .../AppData/Roaming; Noita saves under AppData/LocalLow.
        candidates.append(Path(appdata).parent / "LocalLow" / BONES_SUBPATH)

    if sys.platform != "win32":
        home = Path.home()
        for steam_root in (
            home / ".local/share/Steam",
            home / ".steam/steam",
            home / ".var/app/com.valvesoftware.Steam/.local/share/Steam",
        ):
            candidates.append(
                steam_root
                / "steamapps/compatdata"
                / NOITA_APP_ID
                / "pfx/drive_c/users/steamuser/AppData/LocalLow"
                / BONES_SUBPATH
            )
    return candidates


def resolve_bones_dir(explicit: Path | None = None) -> Path:
    """Pick the bones directory to browse.

    An explicit path must exist. Otherwise the first existing default
    candidate wins; FileNotFoundError if there is none.
    """
    if explicit is not None:
        if not explicit.is_dir():
            raise FileNotFoundError(f"Bones directory not found: {explicit}")
        return explicit
    for candidate in default_bones_dir_candidates():
        if candidate.is_dir():
            return candidate
    raise FileNotFoundError(
        "No Noita bones directory found. Pass --bones-dir or set NOITA_BONES_DIR."
    )


def discover_bone_files(directory: Path) -> list[Path]:
    return sorted(
        (p for p in directory.iterdir() if p.is_file() and p.suffix.lower() == ".xml"),
        key=lambda p: p.name,
    )


def load_wands(
    paths: Iterable[Path],
    resolver: TranslationResolver,
    *,
    strict: bool = False,
) -> LoadResult:
    """Parse every bones file.

    By default a file that fails to parse is logged and skipped so the rest
    of the graveyard stays browsable. With ``strict=True`` the first failure
    is re-raised.
    """
    result = LoadResult()
    for path in paths:
        try:
            wand = parse_wand_file(path, resolver)
        except (ValueError, OSError) as exc:
            if strict:
                raise
            logger.warning("Skipping %s: %s", path.name, exc)
            result.failures.append(LoadFailure(path=path, reason=str(exc)))
            continue
        result.wands.append(wand)
    logger.info("Loaded %d wands (%d skipped)", len(result.wands), len(result.failures))
    return result
