"""Selection state, styles and loading spinners shared by the list widgets."""

from __future__ import annotations

from dataclasses import dataclass, field

BRAILLE_SIX: tuple[str, ...] = ("⠷", "⠯", "⠟", "⠻", "⠽", "⠾")


@dataclass(frozen=True)
class Style:
    """Colours and emphasis applied to a rendered item."""

    fg: str | None = None
    bg: str | None = None
    bold: bool = False


CURRENT_LIST_ITEM_STYLE = Style(fg="yellow", bold=True)


@dataclass
class ListState:
    """Which item of a list is selected.

    ``length`` is the number of items in the list when it is known; a
    selection past the end is then clamped to the last item.
    """

    selected: int | None = None
    length: int | None = None

    def select(self, index: int | None) -> None:
        if index is None:
            self.selected = None
            return
        if index < 0:
            raise ValueError("a list index cannot be negative")
        if self.length is not None:
            if self.length == 0:
                self.selected = None
                return
            index = min(index, self.length - 1)
        self.selected = index

    def select_next(self) -> None:
        self.select(0 if self.selected is None else self.selected + 1)

    def select_previous(self) -> None:
        if self.selected is None:
            self.select_last()
        else:
            self.select(max(self.selected - 1, 0))

    def select_first(self) -> None:
        self.select(0)

    def select_last(self) -> None:
        if self.length is None:
            raise ValueError("the last item is unknown until the list length is set")
        self.select(self.length - 1 if self.length else None)


@dataclass
class Spinner:
    """A loading indicator that advances one frame per tick."""

    symbols: tuple[str, ...] = field(default=BRAILLE_SIX)
    index: int = 0

    def calc_next(self) -> None:
        self.index = (self.index + 1) % len(self.symbols)

    @property
    def symbol(self) -> str:
        return self.symbols[self.index]