"""
courseware/sections/validate_chapter_links.py

Checks that a section's previous/next links form one well-formed list.

Checks run in this order and stop at the first failure:
  1. the section has at least one chapter
  2. chapter ids are unique
  3. every non-null link names another chapter of the same section
  4. exactly one head and exactly one tail
  5. links are symmetric (B.previous == A  <=>  A.next == B)
  6. walking next links from the head visits every chapter once and
     finishes on the tail
"""

from __future__ import annotations

from courseware.chapters.chapter import Chapter
from courseware.errors import (
    ChapterChainError,
    DanglingChapterLinkError,
    DuplicateChapterIdError,
)


def validate_chapter_links(section_id: str, chapters) -> None:
    """Raise a CourseStructureError subclass if the chapter list is broken.

    Args:
        section_id: Used in error messages only.
        chapters:   Sequence of Chapter belonging to the section.

    Raises:
        DuplicateChapterIdError:  Two chapters share an id.
        DanglingChapterLinkError: A link names a missing chapter.
        ChapterChainError:        Any other head/tail, symmetry or chain fault.
    """
    chapters = list(chapters)
    if not chapters:
        raise ChapterChainError(f"[{section_id}] section has no chapters")

    by_id: dict[str, Chapter] = {}
    for chapter in chapters:
        if chapter.id in by_id:
            raise DuplicateChapterIdError(
                f"[{section_id}] duplicate chapter id {chapter.id!r}"
            )
        by_id[chapter.id] = chapter

    for chapter in chapters:
        for field in ("previous_chapter_id", "next_chapter_id"):
            target = getattr(chapter, field)
            if target is None:
                continue
            if target == chapter.id:
                raise ChapterChainError(
                    f"[{section_id}] chapter {chapter.id!r}: "
                    f"'{field}' points at itself"
                )
            if target not in by_id:
                raise DanglingChapterLinkError(
                    f"[{section_id}] chapter {chapter.id!r}: "
                    f"'{field}' references unknown chapter id {target!r}"
                )

    heads = [c.id for c in chapters if c.previous_chapter_id is None]
    tails = [c.id for c in chapters if c.next_chapter_id is None]
    if len(heads) != 1:
        raise ChapterChainError(
            f"[{section_id}] expected exactly one head chapter "
            f"(previous_chapter_id null), found {len(heads)}: {heads}"
        )
    if len(tails) != 1:
        raise ChapterChainError(
            f"[{section_id}] expected exactly one tail chapter "
            f"(next_chapter_id null), found {len(tails)}: {tails}"
        )

    for chapter in chapters:
        if chapter.previous_chapter_id is not None:
            previous = by_id[chapter.previous_chapter_id]
            if previous.next_chapter_id != chapter.id:
                raise ChapterChainError(
                    f"[{section_id}] chapter {chapter.id!r} has previous "
                    f"{previous.id!r}, but {previous.id!r} has next "
                    f"{previous.next_chapter_id!r}"
                )
        if chapter.next_chapter_id is not None:
            following = by_id[chapter.next_chapter_id]
            if following.previous_chapter_id != chapter.id:
                raise ChapterChainError(
                    f"[{section_id}] chapter {chapter.id!r} has next "
                    f"{following.id!r}, but {following.id!r} has previous "
                    f"{following.previous_chapter_id!r}"
                )

    # With unique head/tail and symmetric links the walk can only end on the
    # tail; anything it misses sits on a detached cycle.
    seen: set[str] = set()
    current: Chapter | None = by_id[heads[0]]
    while current is not None:
        if current.id in seen:
            raise ChapterChainError(
                f"[{section_id}] cycle detected at chapter {current.id!r}"
            )
        seen.add(current.id)
        current = by_id[current.next_chapter_id] if current.next_chapter_id else None

    orphans = sorted(set(by_id) - seen)
    if orphans:
        raise ChapterChainError(
            f"[{section_id}] chapters not reachable from head {heads[0]!r}: {orphans}"
        )
