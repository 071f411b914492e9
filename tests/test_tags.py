import pytest

from mangaview.tags import TagListItem, TagListItemState, TagsState


def _states(tag_state):
    return [tag.state for tag in tag_state.tags]


def test_tag_state_works():
    tag_state = TagsState(tags=[TagListItem(), TagListItem()])
    tag_state.state.select_next()

    tag_state.include_tag()
    assert any(state is TagListItemState.INCLUDED for state in _states(tag_state))

    tag_state.exclude_tag()
    assert any(state is TagListItemState.EXCLUDED for state in _states(tag_state))


def test_toggle_include_cycles():
    tag = TagListItem(id="1", name="Action")
    tag.toggle_include()
    assert tag.state is TagListItemState.INCLUDED
    tag.toggle_include()
    assert tag.state is TagListItemState.NOT_SELECTED


def test_toggle_include_replaces_exclude():
    tag = TagListItem(state=TagListItemState.EXCLUDED)
    tag.toggle_include()
    assert tag.state is TagListItemState.INCLUDED


def test_toggle_exclude_cycles():
    tag = TagListItem(state=TagListItemState.INCLUDED)
    tag.toggle_exclude()
    assert tag.state is TagListItemState.EXCLUDED
    tag.toggle_exclude()
    assert tag.state is TagListItemState.NOT_SELECTED


def test_num_filters_active_counts_included_and_excluded():
    tag_state = TagsState(
        tags=[
            TagListItem(state=TagListItemState.INCLUDED),
            TagListItem(state=TagListItemState.EXCLUDED),
            TagListItem(),
        ]
    )
    assert tag_state.num_filters_active() == 2
    assert TagsState().num_filters_active() == 0


def test_is_filter_empty_ignores_whitespace():
    assert TagsState(filter_input="   ").is_filter_empty() is True
    assert TagsState(filter_input=" a ").is_filter_empty() is False


def test_get_selected_tag():
    tag_state = TagsState(tags=[TagListItem(name="a"), TagListItem(name="b")])
    assert tag_state.get_selected_tag() is None
    tag_state.state.select(1)
    assert tag_state.get_selected_tag().name == "b"


def test_get_filtered_tags_ignores_case():
    tag_state = TagsState(
        tags=[TagListItem(name="Action"), TagListItem(name="Romance"), TagListItem(name="Slice of ACTION")],
        filter_input="action",
    )
    assert [tag.name for tag in tag_state.get_filtered_tags()] == ["Action", "Slice of ACTION"]


def test_get_filtered_tags_without_tags_raises():
    with pytest.raises(ValueError):
        TagsState(filter_input="x").get_filtered_tags()


def test_include_tag_uses_filtered_position():
    tag_state = TagsState(
        tags=[TagListItem(name="Action"), TagListItem(name="Romance"), TagListItem(name="Drama")],
        filter_input="rom",
    )
    tag_state.state.select(0)
    tag_state.include_tag()
    assert _states(tag_state) == [
        TagListItemState.NOT_SELECTED,
        TagListItemState.INCLUDED,
        TagListItemState.NOT_SELECTED,
    ]


def test_exclude_tag_without_selection_changes_nothing():
    tag_state = TagsState(tags=[TagListItem(), TagListItem()])
    tag_state.exclude_tag()
    assert _states(tag_state) == [TagListItemState.NOT_SELECTED] * 2


def test_visible_tags_follow_filter():
    tag_state = TagsState(tags=[TagListItem(name="Action"), TagListItem(name="Drama")])
    assert len(tag_state.visible_tags()) == 2
    tag_state.filter_input = "dra"
    assert [tag.name for tag in tag_state.visible_tags()] == ["Drama"]