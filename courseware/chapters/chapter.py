"""
courseware/chapters/chapter.py

The Chapter record and validation of a single parsed chapter definition.

No file I/O here. discover_chapters reads chapter.json / index.md and hands
the parsed values to chapter_from_dict.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Mapping

from courseware.errors import ChapterStructureError

# Keys a chapter.json must carry (values may be null where noted in the
# field checks below).
_REQUIRED_FIELDS: tuple[str, ...] = (
    "id",
    "title",
    "previous_chapter_id",
    "next_chapter_id",
    "requires_auth",
)
_OPTIONAL_FIELDS: tuple[str, ...] = ("exercise",)


@dataclass(frozen=True)
class Chapter:
    """One learning unit. Immutable once constructed."""

    id: str
    title: str
    previous_chapter_id: str | None
    next_chapter_id: str | None
    requires_auth: bool
    content: str
    # Read-only view; excluded from the hash since mappings are unhashable.
    exercise: Mapping | None = field(default=None, hash=False)
    section_id: str | None = None

    @property
    def is_head(self) -> bool:
        return self.previous_chapter_id is None

    @property
    def is_tail(self) -> bool:
        return self.next_chapter_id is None


def chapter_from_dict(
    raw: object,
    *,
    source: str,
    content: str,
    section_id: str | None = None,
) -> Chapter:
    """Validate a parsed chapter definition and build a Chapter from it.

    Args:
        raw:        Parsed JSON value from chapter.json.
        source:     Path or label used in error messages.
        content:    Raw markdown for the chapter, passed through verbatim.
        section_id: Owning section id, when already known.

    Returns:
        A new Chapter.

    Raises:
        ChapterStructureError: If any field is missing, unknown or mistyped.
    """
    if not isinstance(raw, dict):
        raise ChapterStructureError(
            f"[{source}] chapter definition must be a dict, "
            f"got {type(raw).__name__}"
        )

    missing = [name for name in _REQUIRED_FIELDS if name not in raw]
    if missing:
        raise ChapterStructureError(
            f"[{source}] chapter definition missing required field(s): {missing}"
        )

    unknown = sorted(set(raw) - set(_REQUIRED_FIELDS) - set(_OPTIONAL_FIELDS))
    if unknown:
        raise ChapterStructureError(
            f"[{source}] chapter definition has unknown field(s): {unknown}"
        )

    chapter_id = raw["id"]
    if not isinstance(chapter_id, str) or not chapter_id:
        raise ChapterStructureError(
            f"[{source}] 'id' must be a non-empty string, got {chapter_id!r}"
        )

    title = raw["title"]
    if not isinstance(title, str) or not title:
        raise ChapterStructureError(
            f"[{source}] chapter {chapter_id!r}: "
            f"'title' must be a non-empty string, got {title!r}"
        )

    for link_field in ("previous_chapter_id", "next_chapter_id"):
        _validate_link(raw[link_field], link_field, source, chapter_id)

    requires_auth = raw["requires_auth"]
    if not isinstance(requires_auth, bool):
        raise ChapterStructureError(
            f"[{source}] chapter {chapter_id!r}: "
            f"'requires_auth' must be a bool, got {type(requires_auth).__name__}"
        )

    # Exercise payloads are opaque; only the container type is checked.
    exercise = raw.get("exercise")
    if exercise is not None and not isinstance(exercise, dict):
        raise ChapterStructureError(
            f"[{source}] chapter {chapter_id!r}: "
            f"'exercise' must be a dict or null, got {type(exercise).__name__}"
        )

    if not isinstance(content, str):
        raise ChapterStructureError(
            f"[{source}] chapter {chapter_id!r}: content must be a string, "
            f"got {type(content).__name__}"
        )

    return Chapter(
        id=chapter_id,
        title=title,
        previous_chapter_id=raw["previous_chapter_id"],
        next_chapter_id=raw["next_chapter_id"],
        requires_auth=requires_auth,
        content=content,
        exercise=MappingProxyType(dict(exercise)) if exercise is not None else None,
        section_id=section_id,
    )


def stamp_section_id(chapters, section_id: str) -> list[Chapter]:
    """Return copies of *chapters* carrying *section_id*.

    The input records are left untouched.
    """
    return [replace(chapter, section_id=section_id) for chapter in chapters]


def _validate_link(value: object, field: str, source: str, chapter_id: str) -> None:
    """Raise ChapterStructureError unless value is None or a non-empty string."""
    if value is None:
        return
    if not isinstance(value, str) or not value:
        raise ChapterStructureError(
            f"[{source}] chapter {chapter_id!r}: "
            f"'{field}' must be a non-empty string or null, got {value!r}"
        )
