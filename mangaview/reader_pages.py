"""Page list shown in the reader, with loading state and bookmark highlight."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from mangaview.selection import CURRENT_LIST_ITEM_STYLE, ListState, Spinner, Style

STYLE_PAGE_BOOKMARKED = Style(fg="black", bg="green")


class PageItemState(Enum):
    LOADING = "loading"
    FINISHED_LOAD = "finished_load"
    FAILED_LOAD = "failed_load"
    WAITING = "waiting"


@dataclass
class PagesItem:
    """One page of a chapter in the reader's page list."""

    number: int
    state: PageItemState = PageItemState.WAITING
    loading_state: Spinner = field(default_factory=Spinner)
    style: Style = field(default_factory=Style)

    @property
    def label(self) -> str:
        return f"Page {self.number}"

    def on_tick(self) -> None:
        if self.state is PageItemState.LOADING:
            self.loading_state.calc_next()

    def pre_render(self, is_selected: bool) -> int:
        """Apply the selection style and return the item height."""
        if is_selected:
            self.style = CURRENT_LIST_ITEM_STYLE
        return 2


@dataclass
class PagesList:
    pages: list[PagesItem] = field(default_factory=list)

    def on_tick(self) -> None:
        for page in self.pages:
            page.on_tick()

    def highlight_page_as_bookmarked(self, page_index: int) -> None:
        """Mark one page as bookmarked, clearing any earlier highlight."""
        for page in self.pages:
            page.style = Style()
        if 0 <= page_index < len(self.pages):
            self.pages[page_index].style = STYLE_PAGE_BOOKMARKED


@dataclass
class PagesListState:
    page_bookmarked: int | None = None
    list_state: ListState = field(default_factory=ListState)

    def set_page_bookmarked(self, page_bookmarked: int) -> None:
        self.page_bookmarked = page_bookmarked

    def apply_bookmark(self, pages: PagesList) -> None:
        """Select the bookmarked page if nothing is selected, and highlight it."""
        if self.page_bookmarked is None:
            return
        if self.list_state.selected is None:
            self.list_state.select(self.page_bookmarked)
        pages.highlight_page_as_bookmarked(self.page_bookmarked)