import curses

from noita_graveyard.models.wand import Spell, Wand
from noita_graveyard.ui import presenter
from noita_graveyard.ui.keys import event_for_key
from noita_graveyard.ui.navigation import NavEvent
from noita_graveyard.ui.terminal import _window_top


def _wand(spells: list[Spell] | None = None, tier: int = 4) -> Wand:
    return Wand(
        display_name="Sceptre",
        source_filename="bone_3.xml",
        shuffle_enabled=True,
        actions_per_cast=3,
        cast_delay_seconds=0.25,
        recharge_time_seconds=1.0 / 3,
        mana_capacity=750,
        mana_regen_rate=220,
        action_capacity=12,
        spread_degrees=-1.5,
        projectile_speed_multiplier=1.0,
        tier=tier,
        spells=spells or [],
    )


def test_list_label_marks_always_cast_wands():
    plain = _wand([Spell("Bomb")])
    marked = _wand([Spell("Bomb"), Spell("Add mana", always_cast=True)], tier=0)
    assert presenter.list_label(plain) == "bone_3.xml (Tier 4)"
    assert presenter.list_label(marked) == "bone_3.xml (Tier 0) (A)"


def test_list_title_counts_bones():
    assert presenter.list_title(7) == "Noita Graveyard (7 bones)"


def test_attribute_rows_format_units():
    rows = dict(presenter.attribute_rows(_wand()))
    assert rows == {
        "Shuffle": "Yes",
        "Spells/Cast": "3",
        "Cast delay": "0.25 s",
        "Rechrg. Time": "0.33 s",
        "Mana max": "750",
        "Mana chg. Spd": "220",
        "Capacity": "12",
        "Spread": "-1.50 DEG",
        "Speed": "x1.00",
    }


def test_numbered_spells_start_at_one():
    spells = [Spell("Spark bolt"), Spell("???")]
    assert presenter.numbered_spells(spells) == ["1. Spark bolt", "2. ???"]


def test_window_top_keeps_selection_visible():
    assert _window_top(0, 10, 5) == 0
    assert _window_top(15, 10, 40) == 10
    assert _window_top(39, 10, 40) == 30


def test_key_bindings():
    assert event_for_key(curses.KEY_DOWN) is NavEvent.MOVE_DOWN
    assert event_for_key(curses.KEY_UP) is NavEvent.MOVE_UP
    assert event_for_key(ord("\n")) is NavEvent.SELECT
    assert event_for_key(curses.KEY_ENTER) is NavEvent.SELECT
    assert event_for_key(127) is NavEvent.BACK
    assert event_for_key(curses.KEY_BACKSPACE) is NavEvent.BACK
    assert event_for_key(ord("q")) is NavEvent.QUIT
    assert event_for_key(27) is NavEvent.QUIT
    assert event_for_key(ord("x")) is None
    assert event_for_key(-1) is None
