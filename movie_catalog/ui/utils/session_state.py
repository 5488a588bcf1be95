"""
Session state helpers for Streamlit.
"""

import streamlit as st

PAGE_SIZE = 12


def init_session_state() -> None:
    """Initialize session state keys if not present."""
    defaults = {
        "page": 1,
        "search": "",
        "genre": None,
        "editing_movie_id": None,
        "flash": None,
    }
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value


def reset_to_first_page() -> None:
    """Go back to page 1 after the search or genre filter changes."""
    st.session_state["page"] = 1


def set_page(page: int) -> None:
    """Set the current catalog page."""
    st.session_state["page"] = page


def start_editing(movie_id: int | None) -> None:
    """Open the editor for a movie, or for a new movie when movie_id is None."""
    st.session_state["editing_movie_id"] = movie_id


def get_editing_movie_id() -> int | None:
    """Get the id of the movie being edited, if any."""
    return st.session_state.get("editing_movie_id")


def flash(message: str) -> None:
    """Queue a success message to show after the next rerun."""
    st.session_state["flash"] = message


def pop_flash() -> str | None:
    """Take the queued success message, if any."""
    message = st.session_state.get("flash")
    st.session_state["flash"] = None
    return message
