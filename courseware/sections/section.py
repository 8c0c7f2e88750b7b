"""
courseware/sections/section.py

Section records and validation of a parsed section.json.
"""

from __future__ import annotations

from dataclasses import dataclass

from courseware.chapters.chapter import Chapter
from courseware.errors import SectionStructureError

_STRING_FIELDS: tuple[str, ...] = ("id", "title", "description")


@dataclass(frozen=True)
class SectionConfig:
    """Static section metadata as authored in section.json."""

    id: str
    title: str
    description: str
    order: int


@dataclass(frozen=True)
class Section:
    """A section config bound to the chapters it owns."""

    config: SectionConfig
    chapters: tuple[Chapter, ...]

    @property
    def id(self) -> str:
        return self.config.id

    @property
    def title(self) -> str:
        return self.config.title

    @property
    def description(self) -> str:
        return self.config.description

    @property
    def order(self) -> int:
        return self.config.order


def section_config_from_dict(raw: object, source: str) -> SectionConfig:
    """Validate a parsed section.json and return a SectionConfig.

    Raises:
        SectionStructureError: On a missing, unknown or mistyped field.
    """
    if not isinstance(raw, dict):
        raise SectionStructureError(
            f"[{source}] section definition must be a dict, "
            f"got {type(raw).__name__}"
        )

    unknown = sorted(set(raw) - set(_STRING_FIELDS) - {"order"})
    if unknown:
        raise SectionStructureError(
            f"[{source}] section definition has unknown field(s): {unknown}"
        )

    for field in _STRING_FIELDS:
        value = raw.get(field)
        if not isinstance(value, str) or not value:
            raise SectionStructureError(
                f"[{source}] '{field}' must be a non-empty string, got {value!r}"
            )

    order = raw.get("order")
    # bool is a subclass of int, reject it explicitly
    if isinstance(order, bool) or not isinstance(order, int):
        raise SectionStructureError(
            f"[{source}] section {raw['id']!r}: "
            f"'order' must be an int, got {type(order).__name__}"
        )

    return SectionConfig(
        id=raw["id"],
        title=raw["title"],
        description=raw["description"],
        order=order,
    )
