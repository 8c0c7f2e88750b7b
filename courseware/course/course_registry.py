"""
courseware/course/course_registry.py

Canonical course definition for AI_CODING_AGENTS_V0.

load_course_index checks the loaded section directories against SECTION_IDS.
No file I/O. Pure constants only.
"""

COURSE_ID: str = "AI_CODING_AGENTS_V0"

# Immutable set of all valid section IDs. Keep in step with the section
# directories under course_content/sections/.
SECTION_IDS: frozenset[str] = frozenset({
    "ai-coding-fundamentals",
    "effective-ai-development",
    "extending-capabilities",
    "brownfield-development",
    "capstone",
})

TOTAL_SECTIONS: int = len(SECTION_IDS)
