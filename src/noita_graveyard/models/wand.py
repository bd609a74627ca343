"""Wand data models parsed from Noita bones files.

A bones file holds one wand entity left behind by a previous run. The wand
keeps its spells in source order; always-cast spells are mixed in with the
deck and told apart only by their flag.
"""

from dataclasses import dataclass, field


@dataclass(slots=True)
class Spell:
    """One card action attached to a wand."""
    name: str
    always_cast: bool = False
    action_id: str = ""         # lowercased ItemActionComponent action_id


@dataclass(slots=True)
class Wand:
    """A parsed bones wand."""
    display_name: str           # AbilityComponent ui_name, not translated
    source_filename: str
    shuffle_enabled: bool
    actions_per_cast: int
    cast_delay_seconds: float   # fire_rate_wait / 60
    recharge_time_seconds: float  # reload_time / 60
    mana_capacity: int
    mana_regen_rate: int
    action_capacity: int
    spread_degrees: float
    projectile_speed_multiplier: float
    tier: int = 0               # gun_level, 0 when absent
    spells: list[Spell] = field(default_factory=list)

    @property
    def always_cast_spells(self) -> list[Spell]:
        return [s for s in self.spells if s.always_cast]

    @property
    def deck_spells(self) -> list[Spell]:
        """Spells drawn from the deck, in cast order."""
        return [s for s in self.spells if not s.always_cast]

    @property
    def has_always_cast(self) -> bool:
        return any(s.always_cast for s in self.spells)
