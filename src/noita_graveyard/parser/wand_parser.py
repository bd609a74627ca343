"""Parse bones wand entities (XML) into Wand models.

A bones file is a single ``<Entity>`` whose ``AbilityComponent`` holds the
wand stats, split across two child sections:

  - gun_config:        shuffle, actions per round, reload time, capacity
  - gunaction_config:  cast delay, spread, speed multiplier

Spells are direct child entities tagged ``card_action``. Each one names its
action in ``ItemActionComponent@action_id`` and marks always-cast spells with
``ItemComponent@permanently_attached="1"``.

Times in the save are frames at 60 fps and are converted to seconds.
"""

from __future__ import annotations

import math
import re
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Protocol

from noita_graveyard.models.wand import Spell, Wand
from noita_graveyard.parser.errors import InvalidNumericFieldError, MalformedRecordError
from noita_graveyard.parser.translations import UNKNOWN_SPELL_NAME


FRAMES_PER_SECOND = 60.0
SPELL_TAG = "card_action"

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


class TranslationResolver(Protocol):
    def lookup(self, key: str) -> str | None: ...


def parse_int(raw: str, attribute: str = "value") -> int:
    """Parse a plain base-10 integer literal; anything else is an InvalidNumericFieldError."""
    if _INT_RE.fullmatch(raw) is None:
        raise InvalidNumericFieldError(attribute, raw, "integer")
    return int(raw)


def parse_float(raw: str, attribute: str = "value") -> float:
    """Parse a finite decimal literal. No inf, nan, underscores or padding."""
    if _FLOAT_RE.fullmatch(raw) is None:
        raise InvalidNumericFieldError(attribute, raw, "float")
    value = float(raw)
    if not math.isfinite(value):
        # Overflowing exponents such as "1e999".
        raise InvalidNumericFieldError(attribute, raw, "float")
    return value


def parse_bool(raw: str | None) -> bool:
    """Save booleans are integers: exactly 1 is true, anything else is false."""
    if raw is None:
        return False
    try:
        return parse_int(raw) == 1
    except InvalidNumericFieldError:
        return False


def is_spell_entity(element: ET.Element) -> bool:
    """True for child entities that are card actions rather than decoration."""
    return SPELL_TAG in element.get("tags", "")


def _child(element: ET.Element, tag: str, where: str) -> ET.Element:
    found = element.find(tag)
    if found is None:
        raise MalformedRecordError(f"{where}/{tag}")
    return found


def _attr(element: ET.Element, name: str, where: str) -> str:
    value = element.get(name)
    if value is None:
        raise MalformedRecordError(f"{where}@{name}")
    return value


def resolve_spell_name(action_id: str, resolver: TranslationResolver) -> str:
    name = resolver.lookup(f"action_{action_id}")
    return name if name is not None else UNKNOWN_SPELL_NAME


def parse_spell(element: ET.Element, resolver: TranslationResolver) -> Spell:
    where = element.get("name") or element.tag
    action = _child(element, "ItemActionComponent", where)
    item = _child(element, "ItemComponent", where)
    action_id = _attr(action, "action_id", f"{where}/ItemActionComponent").lower()
    always_cast = parse_bool(_attr(item, "permanently_attached", f"{where}/ItemComponent"))
    return Spell(
        name=resolve_spell_name(action_id, resolver),
        always_cast=always_cast,
        action_id=action_id,
    )


def parse_wand_element(
    root: ET.Element,
    resolver: TranslationResolver,
    source_filename: str = "",
) -> Wand:
    ability = _child(root, "AbilityComponent", root.tag)
    gun = _child(ability, "gun_config", "AbilityComponent")
    action = _child(ability, "gunaction_config", "AbilityComponent")

    def ability_attr(name: str) -> str:
        return _attr(ability, name, "AbilityComponent")

    def gun_attr(name: str) -> str:
        return _attr(gun, name, "AbilityComponent/gun_config")

    def action_attr(name: str) -> str:
        return _attr(action, name, "AbilityComponent/gunaction_config")

    spells = [parse_spell(child, resolver) for child in root if is_spell_entity(child)]

    # Mana values are written as decimals ("300.000") but shown as whole numbers.
    mana_max = int(parse_float(ability_attr("mana_max"), "mana_max"))
    mana_charge_speed = int(parse_float(ability_attr("mana_charge_speed"), "mana_charge_speed"))
    tier = parse_int(ability.get("gun_level", "0"), "gun_level")

    return Wand(
        display_name=ability_attr("ui_name"),
        source_filename=source_filename,
        shuffle_enabled=parse_bool(gun_attr("shuffle_deck_when_empty")),
        actions_per_cast=parse_int(gun_attr("actions_per_round"), "actions_per_round"),
        cast_delay_seconds=parse_float(action_attr("fire_rate_wait"), "fire_rate_wait") / FRAMES_PER_SECOND,
        recharge_time_seconds=parse_float(gun_attr("reload_time"), "reload_time") / FRAMES_PER_SECOND,
        mana_capacity=mana_max,
        mana_regen_rate=mana_charge_speed,
        action_capacity=parse_int(gun_attr("deck_capacity"), "deck_capacity"),
        spread_degrees=parse_float(action_attr("spread_degrees"), "spread_degrees"),
        projectile_speed_multiplier=parse_float(action_attr("speed_multiplier"), "speed_multiplier"),
        tier=max(tier, 0),
        spells=spells,
    )


def parse_wand(raw_markup: str, resolver: TranslationResolver, source_filename: str = "") -> Wand:
    """Parse one bones document into a Wand.

    Raises:
        MalformedRecordError: the XML is unreadable or a required node or
            attribute is missing.
        InvalidNumericFieldError: a numeric attribute does not parse.
    """
    try:
        root = ET.fromstring(raw_markup)
    except ET.ParseError as exc:
        raise MalformedRecordError("Entity", f"invalid XML: {exc}") from exc
    return parse_wand_element(root, resolver, source_filename)


def parse_wand_file(path: Path, resolver: TranslationResolver) -> Wand:
    path = Path(path)
    return parse_wand(path.read_text(encoding="utf-8"), resolver, source_filename=path.name)
