"""
Streamlit main app for the Movie Catalog.

Run: streamlit run movie_catalog/ui/app.py --server.port 8501
"""

import sys
from pathlib import Path

import streamlit as st

# Ensure project root in path
sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from movie_catalog.ui.utils.api_client import ApiError, delete_movie, get_genres_or_empty, get_movies
from movie_catalog.ui.utils.session_state import (
    PAGE_SIZE,
    flash,
    init_session_state,
    pop_flash,
    reset_to_first_page,
    set_page,
    start_editing,
)
from movie_catalog.ui.components.movie_card import render_movie_card

st.set_page_config(
    page_title="Movie Catalog",
    page_icon="🎬",
    layout="wide",
)

init_session_state()


def handle_edit(movie_id: int) -> None:
    """Open the editor for an existing movie."""
    start_editing(movie_id)
    st.switch_page("pages/1_movie_editor.py")


def handle_delete(movie_id: int) -> None:
    """Delete a movie and reload the current page."""
    try:
        delete_movie(movie_id)
        flash("Movie deleted")
    except ApiError as e:
        st.error(f"Failed to delete movie: {e.message}")
        return
    st.rerun()


header_col, add_col = st.columns([4, 1])
with header_col:
    st.title("🎬 Movie Catalog")
with add_col:
    if st.button("➕ Add movie", use_container_width=True):
        start_editing(None)
        st.switch_page("pages/1_movie_editor.py")

message = pop_flash()
if message:
    st.success(message)

# Filters
genres = get_genres_or_empty()
search_col, genre_col = st.columns([3, 1])
with search_col:
    st.text_input(
        "Search",
        key="search",
        placeholder="Search by title, director, or genre...",
        on_change=reset_to_first_page,
    )
with genre_col:
    genre_options = [None] + genres
    st.selectbox(
        "Genre",
        options=genre_options,
        key="genre",
        format_func=lambda g: "All genres" if g is None else g,
        on_change=reset_to_first_page,
    )

try:
    result = get_movies(
        search=st.session_state["search"] or None,
        genre=st.session_state["genre"],
        page=st.session_state["page"],
        page_size=PAGE_SIZE,
    )
except Exception as e:
    st.error(f"Failed to load movies: {e}")
    st.stop()

movies = result["movies"]
pagination = result["pagination"]

if not movies:
    st.info(
        "No movies found. Try adjusting your search or filter criteria."
        if st.session_state["search"] or st.session_state["genre"]
        else "No movies yet. Add the first one!"
    )
else:
    st.caption(f"{pagination['totalCount']} movies")
    columns = st.columns(3)
    for i, movie in enumerate(movies):
        with columns[i % 3]:
            render_movie_card(movie, on_edit=handle_edit, on_delete=handle_delete)

# Pagination controls
if pagination["totalPages"] > 1:
    nav = st.columns(pagination["totalPages"] + 2)
    with nav[0]:
        if st.button("‹ Previous", disabled=not pagination["hasPreviousPage"]):
            set_page(pagination["page"] - 1)
            st.rerun()
    for page_num in range(1, pagination["totalPages"] + 1):
        with nav[page_num]:
            if st.button(
                str(page_num),
                key=f"page_{page_num}",
                type="primary" if page_num == pagination["page"] else "secondary",
            ):
                set_page(page_num)
                st.rerun()
    with nav[-1]:
        if st.button("Next ›", disabled=not pagination["hasNextPage"]):
            set_page(pagination["page"] + 1)
            st.rerun()
