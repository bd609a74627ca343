"""Dump bones wands with their stats and resolved spell names.

Usage:
    python -m scripts.dump_wands [--bones-dir PATH] [--translations PATH]
                                 [--language CODE] [--always-cast-only]
                                 [--min-tier N] [--format text|json]
"""

import argparse
import json
from pathlib import Path

from noita_graveyard.models.wand import Wand
from noita_graveyard.parser.bones_loader import discover_bone_files, load_wands, resolve_bones_dir
from noita_graveyard.parser.translations import DEFAULT_TRANSLATION_FILE, load_translations
from noita_graveyard.ui.presenter import attribute_rows, list_label


def wand_to_dict(wand: Wand) -> dict:
    return {
        "file": wand.source_filename,
        "name": wand.display_name,
        "tier": wand.tier,
        "shuffle": wand.shuffle_enabled,
        "actions_per_cast": wand.actions_per_cast,
        "cast_delay_s": round(wand.cast_delay_seconds, 4),
        "recharge_time_s": round(wand.recharge_time_seconds, 4),
        "mana_max": wand.mana_capacity,
        "mana_charge_speed": wand.mana_regen_rate,
        "capacity": wand.action_capacity,
        "spread_deg": wand.spread_degrees,
        "speed_multiplier": wand.projectile_speed_multiplier,
        "always_cast": [s.name for s in wand.always_cast_spells],
        "spells": [s.name for s in wand.deck_spells],
    }


def format_wand(wand: Wand) -> str:
    """Multi-line text block: list label, name, stats, then spells."""
    lines = [list_label(wand), f"  {wand.display_name}"]
    lines.extend(f"  {label}: {value}" for label, value in attribute_rows(wand))
    if wand.always_cast_spells:
        lines.append("  Always cast: " + ", ".join(s.name for s in wand.always_cast_spells))
    deck = ", ".join(s.name for s in wand.deck_spells)
    lines.append(f"  Spells: {deck or '(none)'}")
    return "\n".join(lines)


def filter_wands(wands: list[Wand], always_cast_only: bool = False, min_tier: int = 0) -> list[Wand]:
    return [
        w for w in wands
        if w.tier >= min_tier and (w.has_always_cast or not always_cast_only)
    ]


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(description="Dump Noita bones wands")
    parser.add_argument("--bones-dir", type=Path, default=None,
                        help="Directory of bones *.xml files")
    parser.add_argument("--translations", type=Path, default=Path(DEFAULT_TRANSLATION_FILE),
                        help=f"Path to {DEFAULT_TRANSLATION_FILE}")
    parser.add_argument("--language", default="1",
                        help="Translation column index or language code")
    parser.add_argument("--always-cast-only", action="store_true",
                        help="Only show wands with always-cast spells")
    parser.add_argument("--min-tier", type=int, default=0, help="Minimum wand tier")
    parser.add_argument("--format", choices=("text", "json"), default="text",
                        help="Output format (default: text)")
    args = parser.parse_args(argv)

    language = int(args.language) if args.language.isdigit() else args.language
    try:
        translations = load_translations(args.translations, language)
        bones_dir = resolve_bones_dir(args.bones_dir)
    except (FileNotFoundError, ValueError) as exc:
        print(f"Error: {exc}")
        raise SystemExit(1)

    result = load_wands(discover_bone_files(bones_dir), translations)
    wands = filter_wands(result.wands, args.always_cast_only, args.min_tier)

    if args.format == "json":
        output = {
            "bones_dir": str(bones_dir),
            "total": len(wands),
            "skipped": [{"file": f.path.name, "reason": f.reason} for f in result.failures],
            "wands": [wand_to_dict(w) for w in wands],
        }
        print(json.dumps(output, indent=2, ensure_ascii=False))
        return

    print(f"=== BONES ({bones_dir}) ===")
    for wand in wands:
        print(format_wand(wand))
        print()
    print(f"Total: {len(wands)} wands")
    for failure in result.failures:
        print(f"Skipped {failure.path.name}: {failure.reason}")


if __name__ == "__main__":
    main()
