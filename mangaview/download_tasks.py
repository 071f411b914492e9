"""Downloading the pages of a chapter as raw images, a CBZ archive or an EPUB book."""

from __future__ import annotations

import zipfile
from collections.abc import Callable, Iterable
from enum import Enum
from pathlib import Path
from xml.sax.saxutils import escape

FetchPage = Callable[[str], "bytes | None"]
ProgressCallback = Callable[[float, str], None]

_MEDIA_TYPES = {
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "png": "image/png",
    "gif": "image/gif",
    "webp": "image/webp",
}

_CONTAINER_XML = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<container version="1.0" xmlns="urn:oasis:names:tc:opendocument:xmlns:container">\n'
    "  <rootfiles>\n"
    '    <rootfile full-path="OEBPS/content.opf" media-type="application/oebps-package+xml"/>\n'
    "  </rootfiles>\n"
    "</container>\n"
)


class DownloadType(Enum):
    CBZ = "cbz"
    RAW = "raw"
    EPUB = "epub"


def download_delay_seconds(total_chapters: int) -> int:
    """Seconds to wait between starting chapter downloads, by chapter count."""
    if total_chapters < 40:
        return 1
    if total_chapters < 100:
        return 3
    if total_chapters < 200:
        return 6
    return 8


def progress_ratio(index: int, total_pages: int) -> float:
    """Fraction of the chapter done when page ``index`` has been handled."""
    if total_pages <= 0:
        raise ValueError("a chapter must have at least one page")
    return index / total_pages


def _extension(file_name: str) -> str:
    suffix = Path(file_name).suffix
    if not suffix or suffix == ".":
        raise ValueError(f"page file has no extension: {file_name!r}")
    return suffix[1:]


def page_file_name(index: int, file_name: str) -> str:
    """Name a downloaded page by its one-based position, keeping its extension."""
    return f"{index + 1}.{_extension(file_name)}"


def _fetch_pages(
    fetch_page: FetchPage,
    endpoint: str,
    files: list[str],
    chapter_id: str,
    on_progress: ProgressCallback | None,
) -> Iterable[tuple[int, str, bytes | None]]:
    """Yield ``(index, stored name, bytes or None)`` for each page, reporting progress."""
    total = len(files)
    for index, file_name in enumerate(files):
        name = page_file_name(index, file_name)
        try:
            content = fetch_page(f"{endpoint}/{file_name}")
        except OSError:
            content = None
        yield index, name, content
        if on_progress is not None:
            on_progress(progress_ratio(index, total), chapter_id)


def _download_raw(pages, target: Path) -> Path:
    target.mkdir(parents=True, exist_ok=True)
    for _index, name, content in pages:
        if content is not None:
            (target / name).write_bytes(content)
    return target


def _download_cbz(pages, target: Path) -> Path:
    with zipfile.ZipFile(target, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        for _index, name, content in pages:
            if content is not None:
                archive.writestr(name, content)
    return target


def _page_xhtml(title: str, image_name: str) -> str:
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<html xmlns="http://www.w3.org/1999/xhtml">\n'
        f"<head><title>{escape(title)}</title></head>\n"
        f'<body><img src="images/{escape(image_name)}" alt="{escape(title)}"/></body>\n'
        "</html>\n"
    )


def _content_opf(title: str, chapter_id: str, entries: list[tuple[int, str]]) -> str:
    manifest = ['    <item id="nav" href="nav.xhtml" media-type="application/xhtml+xml" properties="nav"/>']
    spine = []
    for index, image_name in entries:
        media_type = _MEDIA_TYPES.get(_extension(image_name).lower(), "application/octet-stream")
        manifest.append(
            f'    <item id="image_{index}" href="images/{escape(image_name)}" media-type="{media_type}"/>'
        )
        manifest.append(
            f'    <item id="page_{index}" href="page_{index}.xhtml" media-type="application/xhtml+xml"/>'
        )
        spine.append(f'    <itemref idref="page_{index}"/>')
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<package xmlns="http://www.idpf.org/2007/opf" version="3.0" unique-identifier="book-id">\n'
        '  <metadata xmlns:dc="http://purl.org/dc/elements/1.1/">\n'
        f'    <dc:identifier id="book-id">{escape(chapter_id)}</dc:identifier>\n'
        f"    <dc:title>{escape(title)}</dc:title>\n"
        "    <dc:language>en</dc:language>\n"
        "  </metadata>\n"
        "  <manifest>\n" + "\n".join(manifest) + "\n  </manifest>\n"
        "  <spine>\n" + "\n".join(spine) + "\n  </spine>\n"
        "</package>\n"
    )


def _nav_xhtml(entries: list[tuple[int, str]]) -> str:
    items = "\n".join(
        f'      <li><a href="page_{index}.xhtml">Page {index + 1}</a></li>' for index, _ in entries
    )
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<html xmlns="http://www.w3.org/1999/xhtml" xmlns:epub="http://www.idpf.org/2007/ops">\n'
        "<head><title>Contents</title></head>\n"
        '<body><nav epub:type="toc"><ol>\n' + items + "\n    </ol></nav></body>\n"
        "</html>\n"
    )


def _download_epub(pages, target: Path, chapter_id: str) -> Path:
    entries: list[tuple[int, str]] = []
    with zipfile.ZipFile(target, "w", compression=zipfile.ZIP_DEFLATED) as book:
        book.writestr(zipfile.ZipInfo("mimetype"), "application/epub+zip", compress_type=zipfile.ZIP_STORED)
        book.writestr("META-INF/container.xml", _CONTAINER_XML)
        for index, name, content in pages:
            if content is None:
                continue
            book.writestr(f"OEBPS/images/{name}", content)
            book.writestr(f"OEBPS/page_{index}.xhtml", _page_xhtml(f"Page {index + 1}", name))
            entries.append((index, name))
        book.writestr("OEBPS/nav.xhtml", _nav_xhtml(entries))
        book.writestr("OEBPS/content.opf", _content_opf(chapter_id, chapter_id, entries))
    return target


def download_chapter(
    fetch_page: FetchPage,
    endpoint: str,
    files: list[str],
    directory: str | Path,
    file_format: DownloadType,
    chapter_id: str,
    on_progress: ProgressCallback | None = None,
) -> Path:
    """Download every page of a chapter into ``directory`` and return what was created.

    ``fetch_page`` receives ``"{endpoint}/{file_name}"`` and returns the page bytes,
    or ``None`` (or raises ``OSError``) when the page cannot be fetched; such pages
    are skipped. ``on_progress`` is called after every page with the fraction done
    before that page and the chapter id.
    """
    files = list(files)
    for file_name in files:
        _extension(file_name)
    base = Path(directory)
    base.mkdir(parents=True, exist_ok=True)
    pages = _fetch_pages(fetch_page, endpoint, files, chapter_id, on_progress)

    if file_format is DownloadType.RAW:
        return _download_raw(pages, base / chapter_id)
    if file_format is DownloadType.CBZ:
        return _download_cbz(pages, base / f"{chapter_id}.cbz")
    if file_format is DownloadType.EPUB:
        return _download_epub(pages, base / f"{chapter_id}.epub", chapter_id)
    raise ValueError(f"unknown download type: {file_format!r}")