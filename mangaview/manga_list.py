"""List of mangas found by a search."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from mangaview.selection import CURRENT_LIST_ITEM_STYLE, Style


@dataclass
class MangaItem:
    id: str
    title: str
    style: Style = field(default_factory=Style)

    def pre_render(self, is_selected: bool) -> int:
        """Apply the selection style and return the item height."""
        if is_selected:
            self.style = CURRENT_LIST_ITEM_STYLE
        return 1


@dataclass
class ListMangasFoundWidget:
    mangas: list[MangaItem] = field(default_factory=list)

    @classmethod
    def from_mangas(cls, mangas: Iterable[tuple[str, str]]) -> ListMangasFoundWidget:
        """Build the list from ``(id, title)`` pairs, keeping their order."""
        return cls([MangaItem(id=manga_id, title=title) for manga_id, title in mangas])

    def titles(self) -> list[str]:
        return [item.title for item in self.mangas]