"""
courseware/navigation/chapter_navigation.py

Previous/next resolution over a section's chapters.

A null link means "no such chapter" and resolves to None. A non-null link
that is not in the index is a content fault and raises.
"""

from __future__ import annotations

from courseware.chapters.chapter import Chapter
from courseware.errors import (
    ChapterChainError,
    DanglingChapterLinkError,
    DuplicateChapterIdError,
)


def build_chapter_index(chapters) -> dict[str, Chapter]:
    """Return a chapter_id -> Chapter mapping.

    Raises:
        DuplicateChapterIdError: If two chapters share an id.
    """
    index: dict[str, Chapter] = {}
    for chapter in chapters:
        if chapter.id in index:
            raise DuplicateChapterIdError(
                f"[{chapter.section_id}] duplicate chapter id {chapter.id!r}"
            )
        index[chapter.id] = chapter
    return index


def get_next_chapter(index: dict[str, Chapter], chapter: Chapter) -> Chapter | None:
    """Return the chapter after *chapter*, or None at the tail."""
    return _resolve(index, chapter, "next_chapter_id")


def get_previous_chapter(index: dict[str, Chapter], chapter: Chapter) -> Chapter | None:
    """Return the chapter before *chapter*, or None at the head."""
    return _resolve(index, chapter, "previous_chapter_id")


def order_chapters(chapters) -> list[Chapter]:
    """Return *chapters* in reading order by following next links from the head.

    Discovery order is irrelevant; only the links are used.

    Raises:
        ChapterChainError: If there is not exactly one head, the walk loops,
                           or some chapters are never reached.
    """
    index = build_chapter_index(chapters)
    if not index:
        return []

    heads = [c for c in index.values() if c.previous_chapter_id is None]
    if len(heads) != 1:
        raise ChapterChainError(
            f"expected exactly one head chapter, found {[c.id for c in heads]}"
        )

    ordered: list[Chapter] = []
    seen: set[str] = set()
    current: Chapter | None = heads[0]
    while current is not None:
        if current.id in seen:
            raise ChapterChainError(f"cycle detected at chapter {current.id!r}")
        seen.add(current.id)
        ordered.append(current)
        current = get_next_chapter(index, current)

    if len(ordered) != len(index):
        missing = sorted(set(index) - seen)
        raise ChapterChainError(f"chapters not reachable from head: {missing}")
    return ordered


def is_chapter_accessible(chapter: Chapter, *, authenticated: bool) -> bool:
    """True when the reader may open *chapter*."""
    return authenticated or not chapter.requires_auth


def _resolve(index: dict[str, Chapter], chapter: Chapter, field: str) -> Chapter | None:
    target = getattr(chapter, field)
    if target is None:
        return None
    try:
        return index[target]
    except KeyError:
        raise DanglingChapterLinkError(
            f"[{chapter.section_id}] chapter {chapter.id!r}: "
            f"'{field}' references unknown chapter id {target!r}"
        ) from None
