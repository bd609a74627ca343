"""Map curses key codes to navigation events."""

from __future__ import annotations

import curses

from noita_graveyard.ui.navigation import NavEvent


ESCAPE = 27

KEY_EVENTS: dict[int, NavEvent] = {
    curses.KEY_DOWN: NavEvent.MOVE_DOWN,
    curses.KEY_UP: NavEvent.MOVE_UP,
    curses.KEY_ENTER: NavEvent.SELECT,
    ord("\n"): NavEvent.SELECT,
    ord("\r"): NavEvent.SELECT,
    # Back leaves the browser from the list view, like q and Escape.
    curses.KEY_BACKSPACE: NavEvent.BACK,
    8: NavEvent.BACK,       # ^H
    127: NavEvent.BACK,     # DEL, what most terminals send for Backspace
    ord("q"): NavEvent.QUIT,
    ESCAPE: NavEvent.QUIT,
}


def event_for_key(key: int) -> NavEvent | None:
    """Return the event bound to ``key``, or None for unbound keys and timeouts."""
    return KEY_EVENTS.get(key)
