"""
ui/course_reader/pages/1_Course_Reader.py

Course Reader: sidebar outline plus previous/next navigation across chapters.

Run from the repository root:
    streamlit run ui/course_reader/reader_app.py
"""

import logging
import sys
from pathlib import Path

import streamlit as st

# ---------------------------------------------------------------------------
# sys.path bootstrap: this file lives three levels below repo root
# (ui/course_reader/pages/).
# ---------------------------------------------------------------------------
REPO_ROOT = Path(__file__).resolve().parents[3]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from courseware.course.course_registry import TOTAL_SECTIONS                 # noqa: E402
from courseware.course.load_course_index import (                       # noqa: E402
    course_outline,
    find_chapter,
    get_next_section,
    get_previous_section,
    load_course_index,
)
from courseware.errors import CourseStructureError                       # noqa: E402
from courseware.navigation.chapter_navigation import (                   # noqa: E402
    build_chapter_index,
    get_next_chapter,
    get_previous_chapter,
    is_chapter_accessible,
)
from ui.theme import apply_course_theme, render_section_caption         # noqa: E402

EM_DASH = "\u2014"


# ---------------------------------------------------------------------------
# Cached course data: the content tree is read once per server process.
# ---------------------------------------------------------------------------
@st.cache_resource
def _cached_course():
    return load_course_index()


def _go_to(chapter_id: str) -> None:
    st.session_state["reader_chapter_id"] = chapter_id
    st.rerun()


# ---------------------------------------------------------------------------
# Page config: must be the first Streamlit call in the file.
# ---------------------------------------------------------------------------
st.set_page_config(page_title="Course Reader", layout="wide")
apply_course_theme("Course Reader", "AI Coding Agents")

try:
    course = _cached_course()
except (CourseStructureError, FileNotFoundError) as exc:
    logging.exception("Failed to load course content")
    st.error(f"Course content is invalid: {exc}")
    st.stop()

outline = course_outline(course)
# Section id -> chapters in reading order; [0] is the head, [-1] the tail.
reading_order = {section.id: chapters for section, chapters in outline}
first_section, first_chapters = outline[0]

# ---------------------------------------------------------------------------
# Session state initialisation
# ---------------------------------------------------------------------------
if "reader_chapter_id" not in st.session_state:
    st.session_state["reader_chapter_id"] = first_chapters[0].id
if "reader_authenticated" not in st.session_state:
    st.session_state["reader_authenticated"] = False

located = find_chapter(course, st.session_state["reader_chapter_id"])
if located is None:
    # Stale id from an earlier content tree; restart at the beginning.
    located = (first_section, first_chapters[0])
    st.session_state["reader_chapter_id"] = located[1].id
active_section, active_chapter = located

# ---------------------------------------------------------------------------
# Sidebar: outline
# ---------------------------------------------------------------------------
with st.sidebar:
    st.title("Contents")
    st.session_state["reader_authenticated"] = st.toggle(
        "Signed in",
        value=st.session_state["reader_authenticated"],
        help="Preview chapters that require a signed-in reader.",
    )

    for section, chapters in outline:
        with st.expander(f"{section.order}. {section.title}", expanded=section.id == active_section.id):
            for chapter in chapters:
                label = chapter.title
                if chapter.requires_auth:
                    label = f"\U0001F512 {label}"
                if chapter.id == active_chapter.id:
                    st.markdown(f"**▸ {label}**")
                elif st.button(label, key=f"nav_{chapter.id}", use_container_width=True):
                    _go_to(chapter.id)

# ---------------------------------------------------------------------------
# Main content area
# ---------------------------------------------------------------------------
st.title(f"{active_section.title} {EM_DASH} {active_chapter.title}")
render_section_caption(active_section.order, TOTAL_SECTIONS, active_section.description)
st.divider()

if is_chapter_accessible(active_chapter, authenticated=st.session_state["reader_authenticated"]):
    st.markdown(active_chapter.content)
    if active_chapter.exercise is not None:
        with st.expander("Exercise"):
            st.json(dict(active_chapter.exercise))
else:
    st.warning("Sign in to read this chapter.")

st.divider()

# Previous/next: stay inside the section while links exist, then fall
# through to the neighbouring section's tail or head.
index = build_chapter_index(active_section.chapters)
previous_chapter = get_previous_chapter(index, active_chapter)
next_chapter = get_next_chapter(index, active_chapter)

if previous_chapter is None:
    previous_section = get_previous_section(course, active_section.id)
    if previous_section is not None:
        previous_chapter = reading_order[previous_section.id][-1]
if next_chapter is None:
    next_section = get_next_section(course, active_section.id)
    if next_section is not None:
        next_chapter = reading_order[next_section.id][0]

col_back, col_fwd = st.columns(2)
with col_back:
    if previous_chapter is not None:
        if st.button(f"← {previous_chapter.title}", use_container_width=True):
            _go_to(previous_chapter.id)
with col_fwd:
    if next_chapter is not None:
        if st.button(f"{next_chapter.title} →", type="primary", use_container_width=True):
            _go_to(next_chapter.id)
    else:
        st.success("You've reached the end of the course.")
