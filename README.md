# mangaview

The state and behaviour behind the screens of a terminal manga browser,
kept apart from any drawing code. Every piece is a plain dataclass or enum
that you update from key presses, ticks and fetched data, then read back to
decide what to show.

## Modules

- `mangaview.selection`: shared building blocks. `ListState` tracks the
  selected index of a list (`select`, `select_next`, `select_previous`,
  `select_first`, `select_last`). When its `length` is set, a selection
  past the end is clamped to the last item. `Style` holds colours and bold.
  `Spinner` is a loading indicator that advances one frame with `calc_next`.
- `mangaview.reader_pages`: the reader's page list. `PagesItem` holds a
  page's `PageItemState` (loading, finished, failed or waiting).
  `PagesList.highlight_page_as_bookmarked` keeps exactly one page
  highlighted. `PagesListState.apply_bookmark` selects the bookmarked page
  when nothing is selected yet.
- `mangaview.feed`: the reading history feed. `HistoryWidget` handles paging
  (`next_page`, `previous_page`, `can_search_next_page`,
  `can_search_previous_page`, `pagination_text`) and selection. It also
  attaches `RecentChapter`s to a `MangasRead` through `set_chapters`.
  `FeedTabs.cycle` switches between the history and plan-to-read tabs.
- `mangaview.manga_list`: search results. `ListMangasFoundWidget.from_mangas`
  builds a list of `MangaItem`s from `(id, title)` pairs.
- `mangaview.chapters`: `ChapterItem` is one entry in a manga's chapter list,
  with download and read error states. `DownloadAllChaptersState` is the state
  machine for downloading every chapter of a manga. Its `DownloadPhase` values
  are: not started, asking, fetching data, downloading, asking to abort, and
  error.
- `mangaview.download_tasks`: `download_chapter` writes a chapter's pages as
  a directory of raw images, a CBZ archive or an EPUB book (`DownloadType`).
  It can report progress through a callback. `download_delay_seconds` gives
  the pause between chapters for a given number of chapters.
  `page_file_name` and `progress_ratio` are the naming and progress rules it
  uses.
- `mangaview.tags`: the tag filter. `TagsState` holds the loaded
  `TagListItem`s, the highlighted one and a text filter.
  `include_tag` and `exclude_tag` toggle the highlighted tag among those
  that match the filter.
- `mangaview.home`: the home page carousels. `PopularMangaCarrousel` cycles
  through one manga at a time. `RecentlyAddedCarrousel` selects within a
  page of five.

## Installation

```
pip install .
```

The package has no runtime dependencies.

## Examples

Downloading all chapters:

```python
from mangaview.chapters import DownloadAllChaptersState, DownloadPhase

finished = []
state = DownloadAllChaptersState(on_finished=lambda: finished.append(True))
state.ask_for_confirmation()
state.fetch_chapters_data()
state.start_download()
state.set_total_chapters(3.0)
for _ in range(3):
    state.set_download_progress()

assert state.phase is DownloadPhase.DOWNLOADING_CHAPTERS
assert state.notify_if_finished()
assert finished == [True]
```

Writing a chapter as a CBZ archive. You supply the function that fetches
each page. It gets `"{endpoint}/{file_name}"` and returns the bytes, or
`None` to skip the page:

```python
from mangaview.download_tasks import DownloadType, download_chapter

def fetch_page(url):
    return b"image bytes for " + url.encode()

path = download_chapter(
    fetch_page,
    "https://images.example.com/data/hash",
    ["a1.png", "a2.png"],
    "downloads",
    DownloadType.CBZ,
    "chapter-1",
    on_progress=lambda ratio, chapter_id: print(chapter_id, ratio),
)
print(path)  # downloads/chapter-1.cbz, holding 1.png and 2.png
```

Including a tag through the text filter:

```python
from mangaview.tags import TagListItem, TagListItemState, TagsState

tags = TagsState(tags=[TagListItem("1", "Action"), TagListItem("2", "Romance")])
tags.filter_input = "rom"
tags.state.select(0)
tags.include_tag()
assert tags.tags[1].state is TagListItemState.INCLUDED
assert tags.num_filters_active() == 1
```

## What this package does not do

- It draws nothing. There is no terminal screen, layout or widget rendering,
  and no command to start a browser.
- It has no API client. Nothing here searches for mangas, fetches chapter
  lists or downloads covers. `download_chapter` only calls the `fetch_page`
  function you give it.
- It stores nothing. Reading history, bookmarks and download status are not
  saved anywhere.
- For search filters it provides only the tag filter state. There is no
  filter popup that handles content rating, language, sort order,
  publication status, demographic, author or artist.

## Running the tests

```
pip install .[test]
pytest
```