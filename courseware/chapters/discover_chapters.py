"""
courseware/chapters/discover_chapters.py

Finds every chapter module inside one section directory.

A chapter module is an immediate subdirectory holding chapter.json (the
definition) and index.md (the raw markdown content). Directories without a
chapter.json are not chapter modules and are skipped.

Results come back in directory-name order. That is traversal order, not
reading order; use courseware.navigation.chapter_navigation.order_chapters
for the previous/next order.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from courseware.chapters.chapter import Chapter, chapter_from_dict
from courseware.errors import ChapterStructureError

logger = logging.getLogger(__name__)

CHAPTER_FILE: str = "chapter.json"
CONTENT_FILE: str = "index.md"


def discover_chapters(section_dir: Path | str, section_id: str) -> list[Chapter]:
    """Load all chapter modules under section_dir, stamped with section_id.

    Args:
        section_dir: Directory of one section.
        section_id:  Id of the owning section; copied onto every chapter.

    Returns:
        list of Chapter in directory-name order.

    Raises:
        FileNotFoundError:     If section_dir does not exist.
        ChapterStructureError: If any chapter module is malformed. One bad
                               chapter fails the whole section.
    """
    section_dir = Path(section_dir)
    if not section_dir.is_dir():
        raise FileNotFoundError(
            f"Section directory not found for section {section_id!r}: {section_dir}"
        )

    chapters: list[Chapter] = []
    for chapter_dir in sorted(p for p in section_dir.iterdir() if p.is_dir()):
        definition_path = chapter_dir / CHAPTER_FILE
        if not definition_path.is_file():
            logger.debug("Skipping %s: no %s", chapter_dir, CHAPTER_FILE)
            continue

        chapter = load_chapter(chapter_dir, section_id=section_id)
        logger.debug("Discovered chapter %r in %s", chapter.id, chapter_dir.name)
        chapters.append(chapter)

    logger.info(
        "Discovered %d chapter(s) for section %r in %s",
        len(chapters), section_id, section_dir,
    )
    return chapters


def load_chapter(chapter_dir: Path | str, section_id: str | None = None) -> Chapter:
    """Read one chapter module (chapter.json + index.md) into a Chapter.

    Raises:
        ChapterStructureError: If either file is missing or the definition
                               is invalid.
    """
    chapter_dir = Path(chapter_dir)
    definition_path = chapter_dir / CHAPTER_FILE
    content_path = chapter_dir / CONTENT_FILE

    if not definition_path.is_file():
        raise ChapterStructureError(f"[{definition_path}] chapter definition not found")
    if not content_path.is_file():
        raise ChapterStructureError(f"[{content_path}] chapter content not found")

    try:
        with definition_path.open(encoding="utf-8") as fh:
            raw = json.load(fh)
    except UnicodeDecodeError as exc:
        raise ChapterStructureError(
            f"[{definition_path}] chapter definition is not valid UTF-8: {exc}"
        ) from exc
    except json.JSONDecodeError as exc:
        raise ChapterStructureError(
            f"[{definition_path}] chapter definition is not valid JSON: {exc}"
        ) from exc

    try:
        content = content_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ChapterStructureError(
            f"[{content_path}] chapter content is not valid UTF-8: {exc}"
        ) from exc

    return chapter_from_dict(
        raw,
        source=str(definition_path),
        content=content,
        section_id=section_id,
    )
