"""
courseware/errors.py

Structural errors raised while loading course content.

All of them subclass ValueError so callers that only care about
"the content on disk is invalid" can catch a single type.
"""


class CourseStructureError(ValueError):
    """Base class for any malformed course content."""


class ChapterStructureError(CourseStructureError):
    """A chapter definition is missing, unreadable or has invalid fields."""


class SectionStructureError(CourseStructureError):
    """A section definition is unreadable or has invalid fields."""


class DuplicateChapterIdError(CourseStructureError):
    """Two chapters share the same id."""


class DuplicateSectionIdError(CourseStructureError):
    """Two sections share the same id."""


class DanglingChapterLinkError(CourseStructureError):
    """A previous/next link names a chapter that does not exist in the section."""


class ChapterChainError(CourseStructureError):
    """The previous/next links do not form a single list over the section."""
