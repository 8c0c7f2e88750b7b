"""
courseware/sections/load_section_config.py

Reads section.json from a section directory.
"""

from __future__ import annotations

import json
from pathlib import Path

from courseware.errors import SectionStructureError
from courseware.sections.section import SectionConfig, section_config_from_dict

SECTION_FILE: str = "section.json"


def load_section_config(section_dir: Path | str) -> SectionConfig:
    """Load and validate <section_dir>/section.json.

    Raises:
        FileNotFoundError:     If section.json does not exist.
        SectionStructureError: If it is not valid JSON or fails validation.
    """
    config_path = Path(section_dir) / SECTION_FILE
    if not config_path.is_file():
        raise FileNotFoundError(f"{SECTION_FILE} not found: {config_path}")

    try:
        with config_path.open(encoding="utf-8") as fh:
            raw = json.load(fh)
    except UnicodeDecodeError as exc:
        raise SectionStructureError(
            f"[{config_path}] section definition is not valid UTF-8: {exc}"
        ) from exc
    except json.JSONDecodeError as exc:
        raise SectionStructureError(
            f"[{config_path}] section definition is not valid JSON: {exc}"
        ) from exc

    return section_config_from_dict(raw, source=str(config_path))
