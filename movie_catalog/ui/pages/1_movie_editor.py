"""
Movie editor page - create a movie or edit the selected one.
"""

import streamlit as st
import sys
from pathlib import Path

# Ensure project root in path
sys.path.insert(0, str(Path(__file__).resolve().parents[3]))

from movie_catalog.ui.utils.api_client import ApiError, create_movie, get_genres_or_empty, get_movie, update_movie
from movie_catalog.ui.utils.movie_fields import build_create_payload, diff_movie_fields
from movie_catalog.ui.utils.session_state import flash, get_editing_movie_id, init_session_state, start_editing
from movie_catalog.ui.components.movie_form import render_movie_form

init_session_state()

movie_id = get_editing_movie_id()
movie = None
if movie_id is not None:
    try:
        movie = get_movie(movie_id)
    except ApiError as e:
        st.error(f"Failed to load movie: {e.message}")
        start_editing(None)
        st.stop()

st.title("✏️ Edit Movie" if movie else "➕ New Movie")

form_data = render_movie_form(initial_data=movie, genres=get_genres_or_empty())
if form_data:
    try:
        if movie:
            changes = diff_movie_fields(movie, form_data)
            update_movie(movie["id"], changes)
            flash("Movie updated successfully")
        else:
            create_movie(build_create_payload(form_data))
            flash("Movie created successfully")
    except ApiError as e:
        st.error(f"Failed to save movie: {e.message}")
    else:
        start_editing(None)
        st.switch_page("app.py")

if st.button("Back to catalog"):
    start_editing(None)
    st.switch_page("app.py")
