"""Chapter list items and the state of a "download all chapters" process."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from mangaview.selection import CURRENT_LIST_ITEM_STYLE, Spinner, Style


class ChapterItemState(Enum):
    NORMAL = "normal"
    DOWNLOAD_ERROR = "download_error"
    """The user tried to download the chapter and it failed."""
    READ_ERROR = "read_error"
    """The user tried to read the chapter and it failed."""


@dataclass
class ChapterItem:
    """One chapter in a manga's chapter list."""

    id: str
    title: str
    chapter_number: str
    volume_number: str | None
    readable_at: str
    scanlator: str
    translated_language: str
    is_read: bool = False
    is_downloaded: bool = False
    is_bookmarked: bool = False
    state: ChapterItemState = ChapterItemState.NORMAL
    download_loading_state: float | None = None
    style: Style = field(default_factory=Style)

    def set_download_error(self) -> None:
        self.download_loading_state = None
        self.state = ChapterItemState.DOWNLOAD_ERROR

    def set_read_error(self) -> None:
        self.state = ChapterItemState.READ_ERROR

    def set_normal_state(self) -> None:
        self.state = ChapterItemState.NORMAL

    def information(self) -> str:
        """The text shown before the chapter title."""
        if self.is_bookmarked:
            return "Bookmarked | "
        return f"Vol. {self.volume_number or ''} Ch. {self.chapter_number} | "

    def pre_render(self, is_selected: bool) -> int:
        """Apply the selection style and return the item height."""
        if is_selected:
            self.style = CURRENT_LIST_ITEM_STYLE
        return 3 if self.download_loading_state is not None else 1


class DownloadPhase(Enum):
    PROCESS_NOT_STARTED = "process_not_started"
    ASKING = "asking"
    FETCHING_CHAPTERS_DATA = "fetching_chapters_data"
    DOWNLOADING_CHAPTERS = "downloading_chapters"
    ASK_ABORT_PROCESS = "ask_abort_process"
    ERROR_CHAPTERS_DATA = "error_chapters_data"


def _ignore() -> None:
    return None


@dataclass
class DownloadAllChaptersState:
    """Progress of downloading every chapter of a manga.

    ``on_finished`` is called when the download is found to be complete.
    """

    on_finished: Callable[[], None] = _ignore
    phase: DownloadPhase = DownloadPhase.PROCESS_NOT_STARTED
    total_chapters: float = 0.0
    download_progress: float = 0.0
    download_location: Path = field(default_factory=Path)
    loader_state: Spinner = field(default_factory=Spinner)

    def is_downloading(self) -> bool:
        return self.phase in (DownloadPhase.DOWNLOADING_CHAPTERS, DownloadPhase.ASK_ABORT_PROCESS)

    def process_started(self) -> bool:
        return self.phase is not DownloadPhase.PROCESS_NOT_STARTED

    def is_ready_to_fetch_data(self) -> bool:
        """Either phase can start the download."""
        return self.phase in (DownloadPhase.ASKING, DownloadPhase.ERROR_CHAPTERS_DATA)

    def set_download_progress(self) -> None:
        self.download_progress += 1.0

    def ask_for_confirmation(self) -> None:
        if not self.is_downloading():
            self.phase = DownloadPhase.ASKING

    def fetch_chapters_data(self) -> None:
        if not self.is_downloading():
            self.phase = DownloadPhase.FETCHING_CHAPTERS_DATA

    def start_download(self) -> None:
        if not self.is_downloading():
            self.phase = DownloadPhase.DOWNLOADING_CHAPTERS
            self.total_chapters = 0.0
            self.download_progress = 0.0

    def cancel(self) -> None:
        if not self.is_downloading():
            self.phase = DownloadPhase.PROCESS_NOT_STARTED

    def reset(self) -> None:
        if self.is_downloading():
            self.phase = DownloadPhase.PROCESS_NOT_STARTED
            self.total_chapters = 0.0
            self.download_progress = 0.0

    def ask_abort_process(self) -> None:
        if self.is_downloading():
            self.phase = DownloadPhase.ASK_ABORT_PROCESS

    def abort_process(self) -> None:
        self.reset()

    def continue_download(self) -> None:
        if self.phase is DownloadPhase.ASK_ABORT_PROCESS:
            self.phase = DownloadPhase.DOWNLOADING_CHAPTERS

    def set_total_chapters(self, total_chapters: float) -> None:
        self.total_chapters = total_chapters

    def finished_downloading(self) -> bool:
        return self.download_progress == self.total_chapters

    def set_download_error(self) -> None:
        self.phase = DownloadPhase.ERROR_CHAPTERS_DATA

    def set_download_location(self, location: Path) -> None:
        self.download_location = Path(location)

    def tick(self) -> None:
        self.loader_state.calc_next()

    def progress_ratio(self) -> float:
        if not self.total_chapters:
            return 0.0
        return self.download_progress / self.total_chapters

    def notify_if_finished(self) -> bool:
        """Call ``on_finished`` if chapters are downloading and all are done."""
        if self.phase is DownloadPhase.DOWNLOADING_CHAPTERS and self.finished_downloading():
            self.on_finished()
            return True
        return False