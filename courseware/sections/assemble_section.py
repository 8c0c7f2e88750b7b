"""
courseware/sections/assemble_section.py

Binds a SectionConfig to its discovered chapters.

Link validation happens here, once, before anything is served. A section
that assembles without error satisfies every invariant checked by
validate_chapter_links.
"""

from __future__ import annotations

from pathlib import Path

from courseware.chapters.chapter import stamp_section_id
from courseware.chapters.discover_chapters import discover_chapters
from courseware.errors import SectionStructureError
from courseware.sections.load_section_config import load_section_config
from courseware.sections.section import Section, SectionConfig
from courseware.sections.validate_chapter_links import validate_chapter_links


def assemble_section(config: SectionConfig, chapters) -> Section:
    """Return a validated Section owning *chapters*.

    Chapters with no section_id are stamped with config.id. The inputs are
    never modified.

    Raises:
        SectionStructureError: If a chapter is already owned by another section.
        CourseStructureError:  Any link fault reported by validate_chapter_links.
    """
    chapters = list(chapters)
    for chapter in chapters:
        if chapter.section_id is not None and chapter.section_id != config.id:
            raise SectionStructureError(
                f"[{config.id}] chapter {chapter.id!r} belongs to "
                f"section {chapter.section_id!r}"
            )

    owned = stamp_section_id(chapters, config.id)
    validate_chapter_links(config.id, owned)
    return Section(config=config, chapters=tuple(owned))


def load_section(section_dir: Path | str) -> Section:
    """Load section.json, discover its chapters and assemble the Section."""
    config = load_section_config(section_dir)
    chapters = discover_chapters(section_dir, config.id)
    return assemble_section(config, chapters)
