"""Reading history feed: mangas read and their latest chapters."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum

from mangaview.selection import CURRENT_LIST_ITEM_STYLE, ListState, Style

_ITEMS_PER_PAGE = 5


class FeedTabs(Enum):
    HISTORY = "history"
    PLAN_TO_READ = "plan_to_read"

    def cycle(self) -> FeedTabs:
        return FeedTabs.PLAN_TO_READ if self is FeedTabs.HISTORY else FeedTabs.HISTORY


@dataclass
class RecentChapter:
    id: str = ""
    title: str = ""
    number: str = ""
    translated_language: str = ""
    readable_at: str = ""

    def label(self) -> str:
        return (
            f"Ch. {self.number} {self.title} | {self.translated_language}"
            f" | {self.readable_at}"
        )


@dataclass
class MangasRead:
    id: str
    title: str
    style: Style = field(default_factory=Style)
    recent_chapters: list[RecentChapter] = field(default_factory=list)

    def pre_render(self, is_selected: bool) -> int:
        """Apply the selection style and return the item height."""
        if is_selected:
            self.style = CURRENT_LIST_ITEM_STYLE
        return 10


@dataclass
class HistoryWidget:
    page: int = 0
    total_results: int = 0
    mangas: list[MangasRead] = field(default_factory=list)
    state: ListState = field(default_factory=ListState)

    def select_next(self) -> None:
        self.state.length = len(self.mangas)
        self.state.select_next()

    def select_previous(self) -> None:
        self.state.length = len(self.mangas)
        self.state.select_previous()

    def get_current_manga_selected(self) -> MangasRead | None:
        index = self.state.selected
        if index is None or index >= len(self.mangas):
            return None
        return self.mangas[index]

    def next_page(self) -> None:
        self.page += 1

    def previous_page(self) -> None:
        if self.page == 0:
            raise ValueError("already at the first page")
        self.page -= 1

    def set_chapters(self, manga_id: str, chapters) -> None:
        """Append the given chapters to the manga with ``manga_id``, if present."""
        manga = next((m for m in self.mangas if m.id == manga_id), None)
        if manga is not None:
            manga.recent_chapters.extend(chapters)

    def can_search_next_page(self, total_items: float) -> bool:
        return self.page != math.ceil(self.total_results / total_items) and bool(self.mangas)

    def can_search_previous_page(self) -> bool:
        return bool(self.mangas) and self.page != 1

    def pagination_text(self) -> str:
        amount_pages = math.ceil(self.total_results / _ITEMS_PER_PAGE)
        return (
            f"Total results {self.total_results}"
            f" page : {self.page} of {amount_pages} "
            " Next page:  <w> "
            " Previous page:  <b> "
        )