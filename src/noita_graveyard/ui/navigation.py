"""Keyboard navigation between the wand list and a wand's detail screen.

Transitions:

    list    down/up   move list cursor, clamped to [0, len(wands) - 1]
    list    select    open the wand under the cursor, spell cursor at 0
    list    back/quit leave the browser
    detail  down/up   move spell cursor, clamped to the open wand's deck spells
    detail  select    nothing
    detail  back/quit return to the list, list cursor unchanged

Cursors never wrap.
"""

from __future__ import annotations

from dataclasses import replace
from enum import Enum

from noita_graveyard.ui.state import BrowserState, DetailView, ListView


class NavEvent(Enum):
    MOVE_DOWN = "move_down"
    MOVE_UP = "move_up"
    SELECT = "select"
    BACK = "back"
    QUIT = "quit"


def _step(index: int, delta: int, count: int) -> int:
    if count <= 0:
        return 0
    return max(0, min(index + delta, count - 1))


def _apply_list(state: BrowserState, event: NavEvent) -> bool:
    count = len(state.wands)
    if event is NavEvent.MOVE_DOWN:
        state.list_cursor = _step(state.list_cursor, 1, count)
    elif event is NavEvent.MOVE_UP:
        state.list_cursor = _step(state.list_cursor, -1, count)
    elif event is NavEvent.SELECT:
        if count:
            state.view = DetailView(record_index=state.list_cursor)
    else:
        return True
    return False


def _apply_detail(state: BrowserState, view: DetailView, event: NavEvent) -> bool:
    if event in (NavEvent.BACK, NavEvent.QUIT):
        state.view = ListView()
        return False
    if event is NavEvent.SELECT:
        return False
    # Bounds come from the open wand every time; wands differ in spell count.
    count = len(state.wands[view.record_index].deck_spells)
    if count == 0:
        return False
    delta = 1 if event is NavEvent.MOVE_DOWN else -1
    state.view = replace(view, cursor=_step(view.cursor, delta, count))
    return False


def apply_event(state: BrowserState, event: NavEvent) -> bool:
    """Apply one event to ``state`` in place.

    Returns True when the browser should exit.
    """
    if isinstance(state.view, DetailView):
        return _apply_detail(state, state.view, event)
    return _apply_list(state, event)
