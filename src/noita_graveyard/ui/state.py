"""Browser state: the loaded wands plus which screen and row are selected."""

from dataclasses import dataclass, field

from noita_graveyard.models.wand import Wand


@dataclass(frozen=True, slots=True)
class ListView:
    """The wand list screen."""


@dataclass(frozen=True, slots=True)
class DetailView:
    """One wand's stats and spells; ``cursor`` indexes its deck spells."""

    record_index: int
    cursor: int = 0


View = ListView | DetailView


@dataclass(slots=True)
class BrowserState:
    """Top-level state owned by the event loop."""

    wands: list[Wand] = field(default_factory=list)
    list_cursor: int = 0
    view: View = field(default_factory=ListView)

    @property
    def detail_cursor(self) -> int | None:
        if isinstance(self.view, DetailView):
            return self.view.cursor
        return None

    @property
    def open_wand(self) -> Wand | None:
        if isinstance(self.view, DetailView):
            return self.wands[self.view.record_index]
        return None
