"""
ui/course_reader/reader_app.py

Course Reader entry point.
Pages are discovered automatically from the sibling pages/ directory.

Run from the repository root:
    streamlit run ui/course_reader/reader_app.py
"""

import streamlit as st

st.set_page_config(
    page_title="Course Reader",
    page_icon="📘",
    layout="wide",
)

st.switch_page("pages/1_Course_Reader.py")
st.info("Redirecting… If you are not redirected, use the sidebar.")
