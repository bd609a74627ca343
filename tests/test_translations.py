import pytest

from noita_graveyard.parser.errors import MissingTranslationTableError
from noita_graveyard.parser.translations import (
    TranslationTable,
    load_translations,
    parse_translations,
)


COMMON_CSV = (
    ",en,ru,de,,NOTES\n"
    "action_bomb,Bomb,Бомба,Bombe,,\n"
    'action_light_bullet,Spark bolt,Искра,"Funkenblitz, klein",,\n'
    "short_row,Only English\n"
    ",orphan,,,,\n"
)


def test_default_column_is_english():
    table = parse_translations(COMMON_CSV)
    assert table.language == "en"
    assert table.lookup("action_bomb") == "Bomb"
    assert table.lookup("action_light_bullet") == "Spark bolt"


def test_header_row_is_not_an_entry():
    table = parse_translations(COMMON_CSV)
    assert "" not in table
    assert len(table) == 3


def test_missing_key_returns_none():
    assert parse_translations(COMMON_CSV).lookup("action_nope") is None


def test_select_column_by_index():
    table = parse_translations(COMMON_CSV, 2)
    assert table.language == "ru"
    assert table.lookup("action_bomb") == "Бомба"


def test_select_column_by_code_handles_quoted_commas():
    table = parse_translations(COMMON_CSV, "DE")
    assert table.lookup("action_light_bullet") == "Funkenblitz, klein"


def test_short_rows_are_skipped_for_later_columns():
    table = parse_translations(COMMON_CSV, "de")
    assert "short_row" not in table
    assert parse_translations(COMMON_CSV).lookup("short_row") == "Only English"


def test_unknown_language_code_raises():
    with pytest.raises(ValueError, match="klingon"):
        parse_translations(COMMON_CSV, "klingon")


def test_key_column_cannot_be_selected():
    with pytest.raises(ValueError):
        parse_translations(COMMON_CSV, 0)


def test_load_translations_reads_file(tmp_path):
    path = tmp_path / "common.csv"
    path.write_text(COMMON_CSV, encoding="utf-8")
    table = load_translations(path)
    assert isinstance(table, TranslationTable)
    assert table.lookup("action_bomb") == "Bomb"


def test_load_translations_strips_bom(tmp_path):
    path = tmp_path / "common.csv"
    path.write_bytes(b"\xef\xbb\xbf" + COMMON_CSV.encode("utf-8"))
    assert load_translations(path).language == "en"


def test_missing_file_raises_missing_translation_table(tmp_path):
    with pytest.raises(MissingTranslationTableError) as excinfo:
        load_translations(tmp_path / "common.csv")
    assert str(excinfo.value) == "common.csv missing"
    assert isinstance(excinfo.value, FileNotFoundError)
