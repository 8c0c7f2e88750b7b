"""
ui/theme.py

Shared theme helper for the course reader.
Call apply_course_theme() immediately after st.set_page_config() in any
page to inject styling and render the header bar.

Tokens:
    accent:      #D97757
    ink:         #141413
    paper:       #F5F4EE
    muted text:  #6B6A65
"""

from __future__ import annotations

import streamlit as st

# ---------------------------------------------------------------------------
# Tokens
# ---------------------------------------------------------------------------
_ACCENT = "#D97757"
_INK    = "#141413"
_PAPER  = "#F5F4EE"
_MUTED  = "#6B6A65"

# ---------------------------------------------------------------------------
# CSS, injected once per page render.
# Double braces {{ }} produce literal CSS braces in the f-string.
# ---------------------------------------------------------------------------
_CSS = f"""
<style>
.block-container {{
    padding-top: 0.75rem !important;
    padding-bottom: 2rem !important;
    max-width: 960px;
}}

#MainMenu {{ visibility: hidden; }}
footer {{ visibility: hidden; }}

section[data-testid="stSidebar"] > div:first-child {{
    background-color: {_PAPER};
    padding-top: 0.75rem;
}}
section[data-testid="stSidebar"] .stRadio > div {{
    gap: 0.2rem;
}}

.stButton > button[kind="primary"] {{
    background-color: {_ACCENT} !important;
    color: white !important;
    border: none !important;
    border-radius: 10px !important;
}}
.stButton > button {{
    border-radius: 10px !important;
}}

hr {{
    border: none !important;
    border-top: 1px solid #E7E7E7 !important;
    margin: 1rem 0 !important;
}}
</style>
"""


def apply_course_theme(title: str, subtitle: str | None = None) -> None:
    """Inject the reader CSS and render the top bar."""
    st.markdown(_CSS, unsafe_allow_html=True)

    subtitle_html = (
        f"<div style='color:{_PAPER}; font-size:0.85rem; margin-top:0.15rem;'>{subtitle}</div>"
        if subtitle else
        ""
    )

    st.markdown(
        f"""
        <div style="
            background: {_INK};
            border-bottom: 3px solid {_ACCENT};
            padding: 0.65rem 1.25rem;
            margin: -0.75rem -1rem 1.0rem -1rem;
            display: flex;
            flex-direction: column;
            line-height: 1.1;
        ">
            <div style="color:white; font-size:1.25rem; font-weight:650;">{title}</div>
            {subtitle_html}
        </div>
        """,
        unsafe_allow_html=True,
    )


def render_section_caption(order: int, total: int, description: str) -> None:
    """Small muted line under a section heading."""
    st.markdown(
        f"<div style='color:{_MUTED}; font-size:0.9rem;'>Section {order} of {total} &middot; {description}</div>",
        unsafe_allow_html=True,
    )
