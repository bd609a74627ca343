"""Text shapes for the browser screens.

No curses code lives here, so everything the terminal draws can be tested
as plain strings.
"""

from __future__ import annotations

from noita_graveyard.models.wand import Spell, Wand


APP_TITLE = "Noita Graveyard"
ALWAYS_CAST_HEADING = "Always cast"
SPELLS_HEADING = "Spells"
HIGHLIGHT_SYMBOL = ">> "
LIST_HELP = "Up/Down select  Enter open  q quit"
DETAIL_HELP = "Up/Down select spell  Backspace/q back"


def list_title(count: int) -> str:
    return f"{APP_TITLE} ({count} bones)"


def list_label(wand: Wand) -> str:
    """List row: file name, tier, and an (A) marker for always-cast wands."""
    marker = " (A)" if wand.has_always_cast else ""
    return f"{wand.source_filename} (Tier {wand.tier}){marker}"


def attribute_rows(wand: Wand) -> list[tuple[str, str]]:
    return [
        ("Shuffle", "Yes" if wand.shuffle_enabled else "No"),
        ("Spells/Cast", f"{wand.actions_per_cast}"),
        ("Cast delay", f"{wand.cast_delay_seconds:.2f} s"),
        ("Rechrg. Time", f"{wand.recharge_time_seconds:.2f} s"),
        ("Mana max", f"{wand.mana_capacity}"),
        ("Mana chg. Spd", f"{wand.mana_regen_rate}"),
        ("Capacity", f"{wand.action_capacity}"),
        ("Spread", f"{wand.spread_degrees:.2f} DEG"),
        ("Speed", f"x{wand.projectile_speed_multiplier:.2f}"),
    ]


def numbered_spells(spells: list[Spell]) -> list[str]:
    return [f"{idx}. {spell.name}" for idx, spell in enumerate(spells, start=1)]
