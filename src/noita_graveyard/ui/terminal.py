"""Curses rendering and the interactive event loop."""

from __future__ import annotations

import curses
import logging

from noita_graveyard.ui import presenter
from noita_graveyard.ui.keys import event_for_key
from noita_graveyard.ui.navigation import apply_event
from noita_graveyard.ui.state import BrowserState, DetailView


logger = logging.getLogger(__name__)

DEFAULT_POLL_MS = 50
LABEL_WIDTH = 15
HIGHLIGHT_PAIR = 1


def _put(win, y: int, x: int, text: str, attr: int = curses.A_NORMAL) -> None:
    h, w = win.getmaxyx()
    if y < 0 or y >= h or x >= w - 1:
        return
    try:
        win.addnstr(y, x, text, w - x - 1, attr)
    except curses.error:
        # Writing the bottom-right cell moves the cursor off-screen.
        pass


def _highlight_attr() -> int:
    if curses.has_colors():
        return curses.color_pair(HIGHLIGHT_PAIR) | curses.A_BOLD
    return curses.A_REVERSE


def _window_top(selected: int, visible: int, count: int) -> int:
    """First row to draw so ``selected`` stays on screen."""
    if visible <= 0 or count <= visible:
        return 0
    return max(0, min(selected - visible // 2, count - visible))


def _draw_box(win, title: str) -> None:
    win.box()
    _put(win, 0, 2, f" {title} ", curses.A_BOLD)


def _draw_selectable(win, top: int, left: int, height: int, lines: list[str], selected: int | None) -> None:
    first = _window_top(selected or 0, height, len(lines))
    pad = " " * len(presenter.HIGHLIGHT_SYMBOL)
    for row, idx in enumerate(range(first, min(first + height, len(lines)))):
        if idx == selected:
            _put(win, top + row, left, presenter.HIGHLIGHT_SYMBOL + lines[idx], _highlight_attr())
        else:
            _put(win, top + row, left, pad + lines[idx])


def draw_list(win, state: BrowserState) -> None:
    h, _ = win.getmaxyx()
    _draw_box(win, presenter.list_title(len(state.wands)))
    labels = [presenter.list_label(wand) for wand in state.wands]
    if not labels:
        _put(win, 1, 2, "No bones found.", curses.A_DIM)
    else:
        _draw_selectable(win, 1, 1, h - 3, labels, state.list_cursor)
    _put(win, h - 2, 2, presenter.LIST_HELP, curses.A_DIM)


def draw_detail(win, state: BrowserState, view: DetailView) -> None:
    h, _ = win.getmaxyx()
    wand = state.wands[view.record_index]
    _draw_box(win, wand.source_filename)
    _put(win, 1, 2, wand.display_name, curses.A_BOLD)

    y = 2
    for label, value in presenter.attribute_rows(wand):
        _put(win, y, 2, label.ljust(LABEL_WIDTH) + value)
        y += 1

    always_cast = wand.always_cast_spells
    if always_cast:
        y += 1
        _put(win, y, 2, presenter.ALWAYS_CAST_HEADING, curses.A_UNDERLINE)
        y += 1
        for line in presenter.numbered_spells(always_cast):
            _put(win, y, 2, line)
            y += 1

    y += 1
    _put(win, y, 2, presenter.SPELLS_HEADING, curses.A_UNDERLINE)
    y += 1
    deck = presenter.numbered_spells(wand.deck_spells)
    _draw_selectable(win, y, 1, max(0, h - 2 - y), deck, view.cursor if deck else None)
    _put(win, h - 2, 2, presenter.DETAIL_HELP, curses.A_DIM)


def render(win, state: BrowserState) -> None:
    win.erase()
    if isinstance(state.view, DetailView):
        draw_detail(win, state, state.view)
    else:
        draw_list(win, state)
    win.refresh()


def _init_screen(stdscr, poll_ms: int) -> None:
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    try:
        curses.set_escdelay(25)
    except AttributeError:
        pass
    if curses.has_colors():
        curses.start_color()
        try:
            curses.use_default_colors()
            background = -1
        except curses.error:
            background = curses.COLOR_BLACK
        curses.init_pair(HIGHLIGHT_PAIR, curses.COLOR_GREEN, background)
    stdscr.keypad(True)
    stdscr.timeout(poll_ms)


def run_browser(stdscr, state: BrowserState, poll_ms: int = DEFAULT_POLL_MS) -> None:
    """Draw, wait up to ``poll_ms`` for a key, apply it; repeat until exit."""
    _init_screen(stdscr, poll_ms)
    while True:
        render(stdscr, state)
        key = stdscr.getch()
        if key == -1:
            continue
        event = event_for_key(key)
        if event is None:
            continue
        logger.debug("key %d -> %s", key, event.name)
        if apply_event(state, event):
            return
