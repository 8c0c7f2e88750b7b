"""
tests/test_chapter.py

Unit tests for courseware/chapters/chapter.py.

Two test groups:
  1. chapter_from_dict: valid definitions build a Chapter; bad fields raise
     ChapterStructureError naming the field.
  2. stamp_section_id: returns new records, leaves inputs untouched.

No file I/O.
"""

import sys
import unittest
from dataclasses import FrozenInstanceError
from pathlib import Path

# ---------------------------------------------------------------------------
# PYTHONPATH bootstrap
# ---------------------------------------------------------------------------
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from courseware.chapters.chapter import (  # noqa: E402
    Chapter,
    chapter_from_dict,
    stamp_section_id,
)
from courseware.errors import ChapterStructureError, CourseStructureError  # noqa: E402


def _make_raw(**overrides) -> dict:
    """Return a minimal valid chapter definition, with optional overrides."""
    base = {
        "id": "intro",
        "title": "Introduction",
        "previous_chapter_id": None,
        "next_chapter_id": "setup",
        "requires_auth": False,
        "exercise": None,
    }
    base.update(overrides)
    return base


def _build(raw, section_id=None) -> Chapter:
    return chapter_from_dict(raw, source="test.json", content="# Intro\n", section_id=section_id)


# ---------------------------------------------------------------------------
# 1. chapter_from_dict
# ---------------------------------------------------------------------------

class TestChapterFromDict(unittest.TestCase):

    def test_valid_definition_builds_chapter(self):
        chapter = _build(_make_raw())
        self.assertEqual(chapter.id, "intro")
        self.assertEqual(chapter.title, "Introduction")
        self.assertIsNone(chapter.previous_chapter_id)
        self.assertEqual(chapter.next_chapter_id, "setup")
        self.assertFalse(chapter.requires_auth)
        self.assertIsNone(chapter.exercise)
        self.assertEqual(chapter.content, "# Intro\n")
        self.assertIsNone(chapter.section_id)

    def test_head_and_tail_flags(self):
        chapter = _build(_make_raw(next_chapter_id=None))
        self.assertTrue(chapter.is_head)
        self.assertTrue(chapter.is_tail)

    def test_section_id_is_carried(self):
        chapter = _build(_make_raw(), section_id="basics")
        self.assertEqual(chapter.section_id, "basics")

    def test_exercise_is_optional(self):
        raw = _make_raw()
        del raw["exercise"]
        self.assertIsNone(_build(raw).exercise)

    def test_exercise_dict_passes_through(self):
        chapter = _build(_make_raw(exercise={"kind": "quiz", "items": [1, 2]}))
        self.assertEqual(chapter.exercise, {"kind": "quiz", "items": [1, 2]})

    def test_exercise_is_read_only(self):
        raw_exercise = {"kind": "quiz"}
        chapter = _build(_make_raw(exercise=raw_exercise))
        with self.assertRaises(TypeError):
            chapter.exercise["kind"] = "essay"
        raw_exercise["kind"] = "essay"
        self.assertEqual(chapter.exercise["kind"], "quiz")

    def test_chapter_with_exercise_is_hashable(self):
        first = _build(_make_raw(exercise={"kind": "quiz"}))
        second = _build(_make_raw(exercise={"kind": "quiz"}))
        self.assertEqual(first, second)
        self.assertEqual(hash(first), hash(second))
        self.assertEqual(len({first, second}), 1)

    def test_chapter_is_immutable(self):
        chapter = _build(_make_raw())
        with self.assertRaises(FrozenInstanceError):
            chapter.title = "Changed"

    def test_not_a_dict_raises(self):
        with self.assertRaises(ChapterStructureError) as ctx:
            _build(["not", "a", "dict"])
        self.assertIn("must be a dict", str(ctx.exception))

    def test_missing_link_field_raises(self):
        raw = _make_raw()
        del raw["previous_chapter_id"]
        with self.assertRaises(ChapterStructureError) as ctx:
            _build(raw)
        self.assertIn("previous_chapter_id", str(ctx.exception))

    def test_unknown_field_raises(self):
        with self.assertRaises(ChapterStructureError) as ctx:
            _build(_make_raw(sectionId="basics"))
        self.assertIn("sectionId", str(ctx.exception))

    def test_empty_id_raises(self):
        with self.assertRaises(ChapterStructureError) as ctx:
            _build(_make_raw(id=""))
        self.assertIn("'id'", str(ctx.exception))

    def test_non_string_title_raises(self):
        with self.assertRaises(ChapterStructureError) as ctx:
            _build(_make_raw(title=7))
        self.assertIn("title", str(ctx.exception))

    def test_empty_string_link_raises(self):
        with self.assertRaises(ChapterStructureError) as ctx:
            _build(_make_raw(next_chapter_id=""))
        self.assertIn("next_chapter_id", str(ctx.exception))

    def test_requires_auth_must_be_bool(self):
        with self.assertRaises(ChapterStructureError) as ctx:
            _build(_make_raw(requires_auth="yes"))
        self.assertIn("requires_auth", str(ctx.exception))

    def test_exercise_list_raises(self):
        with self.assertRaises(ChapterStructureError) as ctx:
            _build(_make_raw(exercise=["a"]))
        self.assertIn("exercise", str(ctx.exception))

    def test_error_is_a_value_error(self):
        with self.assertRaises(ValueError):
            _build(None)
        self.assertTrue(issubclass(ChapterStructureError, CourseStructureError))


# ---------------------------------------------------------------------------
# 2. stamp_section_id
# ---------------------------------------------------------------------------

class TestStampSectionId(unittest.TestCase):

    def test_returns_new_records_with_section_id(self):
        original = _build(_make_raw())
        stamped = stamp_section_id([original], "basics")
        self.assertEqual(len(stamped), 1)
        self.assertEqual(stamped[0].section_id, "basics")
        self.assertIsNot(stamped[0], original)

    def test_input_is_not_mutated(self):
        original = _build(_make_raw())
        stamp_section_id([original], "basics")
        self.assertIsNone(original.section_id)

    def test_other_fields_preserved(self):
        original = _build(_make_raw())
        stamped = stamp_section_id([original], "basics")[0]
        self.assertEqual(stamped.id, original.id)
        self.assertEqual(stamped.next_chapter_id, original.next_chapter_id)
        self.assertEqual(stamped.content, original.content)


if __name__ == "__main__":
    unittest.main()
