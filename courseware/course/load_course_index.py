"""
courseware/course/load_course_index.py

Builds the full course index from course_content/sections/.

Each immediate subdirectory of sections/ that holds a section.json is one
section. Sections are loaded, validated, and sorted by (order, id). Chapter
ids must be unique across the whole course, not only within a section.

Run from the repository root to check the content tree:
    python -m courseware.course.load_course_index
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from courseware.chapters.chapter import Chapter
from courseware.course.course_registry import SECTION_IDS
from courseware.errors import (
    DuplicateChapterIdError,
    DuplicateSectionIdError,
    SectionStructureError,
)
from courseware.navigation.chapter_navigation import order_chapters
from courseware.sections.assemble_section import load_section
from courseware.sections.load_section_config import SECTION_FILE
from courseware.sections.section import Section

logger = logging.getLogger(__name__)

# Repo root: courseware/course/ -> courseware/ -> repo root
_REPO_ROOT: Path = Path(__file__).resolve().parents[2]
COURSE_CONTENT_DIR: Path = _REPO_ROOT / "course_content"

SECTIONS_DIRNAME: str = "sections"


@dataclass(frozen=True)
class CourseIndex:
    """All sections of the course, in display order."""

    sections: tuple[Section, ...]

    @property
    def section_ids(self) -> list[str]:
        return [section.id for section in self.sections]

    def get_section(self, section_id: str) -> Section | None:
        for section in self.sections:
            if section.id == section_id:
                return section
        return None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def load_course_index(
    content_root: Path | str | None = None,
    *,
    section_ids: frozenset[str] | None = SECTION_IDS,
) -> CourseIndex:
    """Load every section under <content_root>/sections/ into a CourseIndex.

    Args:
        content_root: Directory holding sections/. Defaults to
                      COURSE_CONTENT_DIR.
        section_ids:  Canonical section ids the tree must match exactly.
                      Defaults to course_registry.SECTION_IDS; pass None to
                      accept any ids (e.g. a synthetic test tree).

    Raises:
        FileNotFoundError:    If the sections directory is missing.
        CourseStructureError: If any section or chapter is malformed, or ids
                              collide across the course. Also raised when
                              no section is found or the ids do not match
                              section_ids.
    """
    if content_root is None:
        content_root = COURSE_CONTENT_DIR
    sections_dir = Path(content_root) / SECTIONS_DIRNAME
    if not sections_dir.is_dir():
        raise FileNotFoundError(f"Sections directory not found: {sections_dir}")

    sections: list[Section] = []
    for section_dir in sorted(p for p in sections_dir.iterdir() if p.is_dir()):
        if not (section_dir / SECTION_FILE).is_file():
            logger.debug("Skipping %s: no %s", section_dir, SECTION_FILE)
            continue
        sections.append(load_section(section_dir))

    course = build_course_index(sections, section_ids=section_ids)
    logger.info(
        "Loaded course index: %d section(s), %d chapter(s)",
        len(course.sections),
        sum(len(s.chapters) for s in course.sections),
    )
    return course


def build_course_index(sections, section_ids: frozenset[str] | None = None) -> CourseIndex:
    """Check course-wide id uniqueness and sort sections by (order, id).

    When section_ids is given, the loaded section ids must equal it exactly.

    Raises:
        SectionStructureError:   If there are no sections, or the ids do not
                                 match section_ids.
        DuplicateSectionIdError: If two sections share an id.
        DuplicateChapterIdError: If a chapter id appears in two sections.
    """
    sections = list(sections)
    if not sections:
        raise SectionStructureError("Course has no sections")

    seen_sections: set[str] = set()
    chapter_owner: dict[str, str] = {}
    for section in sections:
        if section.id in seen_sections:
            raise DuplicateSectionIdError(f"Duplicate section id {section.id!r}")
        seen_sections.add(section.id)

        for chapter in section.chapters:
            owner = chapter_owner.get(chapter.id)
            if owner is not None:
                raise DuplicateChapterIdError(
                    f"[{section.id}] chapter id {chapter.id!r} is already "
                    f"used in section {owner!r}"
                )
            chapter_owner[chapter.id] = section.id

    if section_ids is not None:
        unknown = sorted(seen_sections - section_ids)
        if unknown:
            raise SectionStructureError(
                f"Section id(s) not in the course registry: {unknown}"
            )
        missing = sorted(section_ids - seen_sections)
        if missing:
            raise SectionStructureError(
                f"Registered section id(s) with no section on disk: {missing}"
            )

    return CourseIndex(sections=tuple(sorted(sections, key=lambda s: (s.order, s.id))))


def find_chapter(course: CourseIndex, chapter_id: str) -> tuple[Section, Chapter] | None:
    """Return (section, chapter) for chapter_id, or None if unknown."""
    for section in course.sections:
        for chapter in section.chapters:
            if chapter.id == chapter_id:
                return section, chapter
    return None


def get_next_section(course: CourseIndex, section_id: str) -> Section | None:
    """Return the section after section_id in display order, or None."""
    return _neighbour(course, section_id, +1)


def get_previous_section(course: CourseIndex, section_id: str) -> Section | None:
    """Return the section before section_id in display order, or None."""
    return _neighbour(course, section_id, -1)


def course_outline(course: CourseIndex) -> list[tuple[Section, list[Chapter]]]:
    """Return each section paired with its chapters in reading order."""
    return [(section, order_chapters(section.chapters)) for section in course.sections]


def summarize_course(course: CourseIndex) -> str:
    """Return a plain-text outline of the course, one line per entry."""
    lines: list[str] = []
    for section, chapters in course_outline(course):
        lines.append(f"{section.order}. {section.title} [{section.id}]")
        for position, chapter in enumerate(chapters, start=1):
            lock = " (auth)" if chapter.requires_auth else ""
            lines.append(f"   {section.order}.{position} {chapter.title} [{chapter.id}]{lock}")
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _neighbour(course: CourseIndex, section_id: str, step: int) -> Section | None:
    ids = course.section_ids
    if section_id not in ids:
        raise KeyError(f"Unknown section id {section_id!r}")
    position = ids.index(section_id) + step
    if 0 <= position < len(ids):
        return course.sections[position]
    return None


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    print(summarize_course(load_course_index()))
