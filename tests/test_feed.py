import pytest

from mangaview.feed import FeedTabs, HistoryWidget, MangasRead, RecentChapter
from mangaview.selection import CURRENT_LIST_ITEM_STYLE


def _widget(count=3, page=1, total=0):
    return HistoryWidget(
        page=page,
        total_results=total,
        mangas=[MangasRead(id=f"id{n}", title=f"title{n}") for n in range(count)],
    )


def test_tabs_cycle_back():
    assert FeedTabs.HISTORY.cycle() is FeedTabs.PLAN_TO_READ
    assert FeedTabs.HISTORY.cycle().cycle() is FeedTabs.HISTORY


def test_recent_chapter_label_contains_fields():
    chapter = RecentChapter(id="c", title="Start", number="7", translated_language="English", readable_at="today")
    label = chapter.label()
    assert label.startswith("Ch. 7 Start")
    assert "English" in label and label.endswith("today")


def test_selection_walks_mangas():
    widget = _widget()
    assert widget.get_current_manga_selected() is None
    widget.select_next()
    widget.select_next()
    assert widget.get_current_manga_selected() is widget.mangas[1]
    widget.select_previous()
    assert widget.get_current_manga_selected() is widget.mangas[0]


def test_selection_stays_inside_list():
    widget = _widget(count=2)
    for _ in range(5):
        widget.select_next()
    assert widget.get_current_manga_selected() is widget.mangas[-1]


def test_pages_move():
    widget = _widget(page=2)
    widget.next_page()
    widget.previous_page()
    widget.previous_page()
    assert widget.page == 1


def test_previous_page_at_zero_raises():
    with pytest.raises(ValueError):
        HistoryWidget().previous_page()


def test_set_chapters_on_matching_manga_only():
    widget = _widget()
    chapter = RecentChapter(id="x")
    widget.set_chapters("id1", [chapter])
    assert widget.mangas[1].recent_chapters == [chapter]
    assert widget.mangas[0].recent_chapters == []
    widget.set_chapters("missing", [chapter])
    assert sum(len(m.recent_chapters) for m in widget.mangas) == 1


def test_can_search_next_page():
    widget = _widget(page=1, total=10)
    assert widget.can_search_next_page(5.0)
    widget.page = 2
    assert not widget.can_search_next_page(5.0)
    assert not HistoryWidget(page=1, total_results=10).can_search_next_page(5.0)


def test_can_search_previous_page():
    assert not _widget(page=1).can_search_previous_page()
    assert _widget(page=2).can_search_previous_page()
    assert not HistoryWidget(page=2).can_search_previous_page()


def test_pagination_text():
    text = _widget(page=2, total=11).pagination_text()
    assert "Total results 11" in text
    assert "page : 2 of 3" in text
    assert "<w>" in text and "<b>" in text


def test_pre_render():
    manga = MangasRead(id="a", title="b")
    assert manga.pre_render(True) == 10
    assert manga.style == CURRENT_LIST_ITEM_STYLE