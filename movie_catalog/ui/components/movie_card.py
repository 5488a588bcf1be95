"""
Movie display card component.
"""

import streamlit as st
from typing import Callable


def render_movie_card(
    movie: dict,
    on_edit: Callable[[int], None] | None = None,
    on_delete: Callable[[int], None] | None = None,
) -> None:
    """
    Render a movie card with edit and delete actions.

    Args:
        movie: Movie as returned by the API
        on_edit: Callback(movie_id) when the user clicks Edit
        on_delete: Callback(movie_id) when the user confirms Delete
    """
    movie_id = movie["id"]
    with st.container(border=True):
        if movie.get("posterUrl"):
            st.image(movie["posterUrl"], use_container_width=True)
        st.markdown(f"**{movie['title']}**")
        meta = [movie["director"], movie["genre"], movie["releaseDate"][:4]]
        if movie.get("duration"):
            meta.append(f"{movie['duration']} min")
        st.caption(" | ".join(meta))
        if movie.get("rating") is not None:
            st.caption(f"Rating: {movie['rating']:.1f} / 10")
        if movie.get("description"):
            st.write(movie["description"])

        col1, col2 = st.columns(2)
        with col1:
            if on_edit and st.button("Edit", key=f"edit_{movie_id}", use_container_width=True):
                on_edit(movie_id)
        with col2:
            confirm_key = f"confirm_delete_{movie_id}"
            if st.session_state.get(confirm_key):
                st.warning("Delete this movie?")
                if st.button("Yes, delete", key=f"yes_delete_{movie_id}", type="primary"):
                    st.session_state[confirm_key] = False
                    if on_delete:
                        on_delete(movie_id)
                if st.button("Cancel", key=f"no_delete_{movie_id}"):
                    st.session_state[confirm_key] = False
                    st.rerun()
            elif st.button("Delete", key=f"delete_{movie_id}", use_container_width=True):
                st.session_state[confirm_key] = True
                st.rerun()
