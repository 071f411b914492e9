"""Tag filter: tags that can be included in or excluded from a search."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from mangaview.selection import ListState


class TagListItemState(Enum):
    INCLUDED = "included"
    EXCLUDED = "excluded"
    NOT_SELECTED = "not_selected"


@dataclass
class TagListItem:
    id: str = ""
    name: str = ""
    state: TagListItemState = TagListItemState.NOT_SELECTED

    def toggle_include(self) -> None:
        if self.state is TagListItemState.INCLUDED:
            self.state = TagListItemState.NOT_SELECTED
        else:
            self.state = TagListItemState.INCLUDED

    def toggle_exclude(self) -> None:
        if self.state is TagListItemState.EXCLUDED:
            self.state = TagListItemState.NOT_SELECTED
        else:
            self.state = TagListItemState.EXCLUDED


@dataclass
class TagsState:
    """The loaded tags, the highlighted one and the text used to narrow them."""

    tags: list[TagListItem] | None = None
    state: ListState = field(default_factory=ListState)
    filter_input: str = ""

    def num_filters_active(self) -> int:
        if self.tags is None:
            return 0
        return sum(1 for tag in self.tags if tag.state is not TagListItemState.NOT_SELECTED)

    def is_filter_empty(self) -> bool:
        return not self.filter_input.strip()

    def get_selected_tag(self) -> TagListItem | None:
        if self.tags is None:
            return None
        index = self.state.selected
        if index is None or index >= len(self.tags):
            return None
        return self.tags[index]

    def get_filtered_tags(self) -> list[TagListItem]:
        """Tags whose name contains the filter text, ignoring case."""
        if self.tags is None:
            raise ValueError("no tags have been loaded")
        query = self.filter_input.lower()
        return [tag for tag in self.tags if query in tag.name.lower()]

    def visible_tags(self) -> list[TagListItem]:
        """The tags shown in the list: all of them, or those matching the filter."""
        if self.tags is None:
            return []
        return list(self.tags) if self.is_filter_empty() else self.get_filtered_tags()

    def _highlighted(self) -> TagListItem | None:
        if self.is_filter_empty():
            return self.get_selected_tag()
        if self.tags is None:
            return None
        index = self.state.selected
        filtered = self.get_filtered_tags()
        if index is None or index >= len(filtered):
            return None
        return filtered[index]

    def include_tag(self) -> None:
        tag = self._highlighted()
        if tag is not None:
            tag.toggle_include()

    def exclude_tag(self) -> None:
        tag = self._highlighted()
        if tag is not None:
            tag.toggle_exclude()