"""Carrousels of popular and recently added mangas on the home page."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from mangaview.selection import Spinner

_ITEMS_PER_PAGE = 5


class CarrouselState(Enum):
    SEARCHING = "searching"
    DISPLAYING = "displaying"
    NOT_FOUND = "not_found"


@dataclass
class CarrouselItem:
    """A manga shown in a carrousel, with the spinner used while its cover loads."""

    manga: Any
    loader_state: Spinner = field(default_factory=Spinner)

    def tick(self) -> None:
        self.loader_state.calc_next()


@dataclass
class PopularMangaCarrousel:
    """Shows one popular manga at a time, cycling through them."""

    items: list[CarrouselItem] = field(default_factory=list)
    current_item_visible_index: int = 0
    state: CarrouselState = CarrouselState.SEARCHING
    can_display_images: bool = False

    @classmethod
    def from_items(cls, mangas: Iterable[Any], can_display_images: bool) -> PopularMangaCarrousel:
        """Build a carrousel that displays the given mangas in order."""
        return cls(
            items=[CarrouselItem(manga) for manga in mangas],
            current_item_visible_index=0,
            state=CarrouselState.DISPLAYING,
            can_display_images=can_display_images,
        )

    def next_item(self) -> None:
        if self.state is not CarrouselState.DISPLAYING:
            return
        if self.current_item_visible_index + 1 >= len(self.items):
            self.current_item_visible_index = 0
        else:
            self.current_item_visible_index += 1

    def previous_item(self) -> None:
        if self.state is not CarrouselState.DISPLAYING:
            return
        if self.current_item_visible_index == 0:
            if not self.items:
                raise IndexError("the carrousel has no items")
            self.current_item_visible_index = len(self.items) - 1
        else:
            self.current_item_visible_index -= 1

    def get_current_item(self) -> CarrouselItem | None:
        if self.state is not CarrouselState.DISPLAYING:
            return None
        index = self.current_item_visible_index
        return self.items[index] if index < len(self.items) else None

    def tick(self) -> None:
        for item in self.items:
            item.tick()


@dataclass
class RecentlyAddedCarrousel:
    """Shows a page of recently added mangas, one of which is selected."""

    can_display_images: bool = False
    items: list[CarrouselItem] = field(default_factory=list)
    selected_item_index: int = 0
    amount_items_per_page: int = _ITEMS_PER_PAGE
    state: CarrouselState = CarrouselState.SEARCHING

    @classmethod
    def from_items(cls, mangas: Iterable[Any], can_display_images: bool) -> RecentlyAddedCarrousel:
        """Build a carrousel that displays the given mangas in order."""
        return cls(
            can_display_images=can_display_images,
            items=[CarrouselItem(manga) for manga in mangas],
            state=CarrouselState.DISPLAYING,
        )

    def select_next(self) -> None:
        if (
            self.state is CarrouselState.DISPLAYING
            and self.selected_item_index + 1 < self.amount_items_per_page
        ):
            self.selected_item_index += 1

    def select_previous(self) -> None:
        if self.state is CarrouselState.DISPLAYING:
            self.selected_item_index = max(self.selected_item_index - 1, 0)

    def get_current_selected_manga(self) -> CarrouselItem | None:
        if self.state is not CarrouselState.DISPLAYING:
            return None
        index = self.selected_item_index
        return self.items[index] if index < len(self.items) else None

    def tick(self) -> None:
        for item in self.items:
            item.tick()