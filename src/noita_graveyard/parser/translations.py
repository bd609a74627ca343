"""Load Noita's translation table (common.csv).

The file is a CSV whose header row names the language columns:

    ,en,ru,pt-br,es-es,de,fr-fr,it-it,pl,zh-cn,jp,ko,,NOTES...
    action_bomb,Bomb,Бомба,...

Column 0 is the string key; column 1 is English.
"""

from __future__ import annotations

import csv
import io
import logging
from dataclasses import dataclass, field
from pathlib import Path

from noita_graveyard.parser.errors import MissingTranslationTableError


logger = logging.getLogger(__name__)

DEFAULT_TRANSLATION_FILE = "common.csv"
DEFAULT_LANGUAGE_INDEX = 1
UNKNOWN_SPELL_NAME = "???"


@dataclass(slots=True)
class TranslationTable:
    """Key -> display string mapping for a single language column."""

    entries: dict[str, str] = field(default_factory=dict)
    language: str = ""

    def lookup(self, key: str) -> str | None:
        return self.entries.get(key)

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, key: object) -> bool:
        return key in self.entries


def _language_column(header: list[str], language: int | str) -> int:
    if isinstance(language, int):
        if language < 1:
            raise ValueError(f"language column must be >= 1, got {language}")
        return language
    if language.isdigit():
        return _language_column(header, int(language))
    wanted = language.strip().lower()
    for idx, label in enumerate(header):
        if idx > 0 and label.strip().lower() == wanted:
            return idx
    raise ValueError(f"Unknown language {language!r} in translation header")


def parse_translations(text: str, language: int | str = DEFAULT_LANGUAGE_INDEX) -> TranslationTable:
    """Parse translation CSV text, keeping only the selected language column.

    ``language`` is either a column index or a header code such as ``"en"``.
    Rows too short to contain the column are skipped.
    """
    reader = csv.reader(io.StringIO(text))
    header = next(reader, [])
    column = _language_column(header, language)
    entries: dict[str, str] = {}
    skipped = 0
    for row in reader:
        if len(row) <= column or not row[0]:
            skipped += 1
            continue
        entries[row[0]] = row[column]
    if skipped:
        logger.debug("Skipped %d short translation rows", skipped)
    label = header[column] if column < len(header) else ""
    return TranslationTable(entries=entries, language=label)


def load_translations(path: Path, language: int | str = DEFAULT_LANGUAGE_INDEX) -> TranslationTable:
    path = Path(path)
    if not path.is_file():
        raise MissingTranslationTableError(path)
    table = parse_translations(path.read_text(encoding="utf-8-sig"), language)
    logger.info("Loaded %d translations (%s) from %s", len(table), table.language or "?", path)
    return table
