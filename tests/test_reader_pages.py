from mangaview.reader_pages import (
    STYLE_PAGE_BOOKMARKED,
    PageItemState,
    PagesItem,
    PagesList,
    PagesListState,
)
from mangaview.selection import CURRENT_LIST_ITEM_STYLE, Style


def test_it_highlights_page_item_which_is_bookmarked():
    page_list = PagesList([PagesItem(0), PagesItem(1)])
    page_list.highlight_page_as_bookmarked(1)
    assert page_list.pages[1].style == STYLE_PAGE_BOOKMARKED


def test_it_keeps_only_one_item_bookmarked_at_a_time():
    page1 = PagesItem(0)
    page1.style = STYLE_PAGE_BOOKMARKED
    page_list = PagesList([page1, PagesItem(1)])
    page_list.highlight_page_as_bookmarked(1)
    assert page_list.pages[1].style == STYLE_PAGE_BOOKMARKED
    assert page_list.pages[0].style == Style()


def test_out_of_range_bookmark_only_clears():
    page = PagesItem(0, style=STYLE_PAGE_BOOKMARKED)
    page_list = PagesList([page])
    page_list.highlight_page_as_bookmarked(5)
    assert page_list.pages[0].style == Style()


def test_new_page_waits():
    page = PagesItem(3)
    assert page.state is PageItemState.WAITING
    assert page.label == "Page 3"


def test_only_loading_pages_advance_spinner():
    loading = PagesItem(0, state=PageItemState.LOADING)
    waiting = PagesItem(1)
    PagesList([loading, waiting]).on_tick()
    assert loading.loading_state.index == 1
    assert waiting.loading_state.index == 0


def test_pre_render_selected_style():
    page = PagesItem(0)
    assert page.pre_render(True) == 2
    assert page.style == CURRENT_LIST_ITEM_STYLE


def test_pre_render_unselected_keeps_style():
    page = PagesItem(0)
    page.pre_render(False)
    assert page.style == Style()


def test_apply_bookmark_selects_and_highlights():
    pages = PagesList([PagesItem(0), PagesItem(1), PagesItem(2)])
    state = PagesListState()
    state.set_page_bookmarked(2)
    state.apply_bookmark(pages)
    assert state.list_state.selected == 2
    assert pages.pages[2].style == STYLE_PAGE_BOOKMARKED


def test_apply_bookmark_keeps_existing_selection():
    pages = PagesList([PagesItem(0), PagesItem(1)])
    state = PagesListState(page_bookmarked=1)
    state.list_state.select(0)
    state.apply_bookmark(pages)
    assert state.list_state.selected == 0
    assert pages.pages[1].style == STYLE_PAGE_BOOKMARKED