"""
Movie create/edit form component.
"""

from datetime import date

import streamlit as st


def render_movie_form(initial_data: dict | None = None, genres: list[str] | None = None) -> dict | None:
    """
    Render the movie form.

    Args:
        initial_data: Movie to pre-fill (camelCase keys); None for a new movie
        genres: Known genres, shown as a hint

    Returns:
        Form data dict (camelCase keys) if submitted, else None.
    """
    data = initial_data or {}
    is_edit = bool(initial_data)
    default_date = date.fromisoformat(data["releaseDate"]) if data.get("releaseDate") else date.today()

    with st.form("movie_form"):
        st.subheader("Edit movie" if is_edit else "Add a movie")
        title = st.text_input("Title", value=data.get("title", ""), max_chars=200)
        director = st.text_input("Director", value=data.get("director", ""), max_chars=100)
        genre = st.text_input(
            "Genre",
            value=data.get("genre", ""),
            max_chars=50,
            help=f"Existing genres: {', '.join(genres)}" if genres else None,
        )
        release_date = st.date_input(
            "Release date",
            value=default_date,
            min_value=date(1888, 1, 1),
        )
        col1, col2 = st.columns(2)
        with col1:
            duration = st.number_input(
                "Duration (minutes)",
                min_value=0,
                value=data.get("duration"),
                step=1,
            )
        with col2:
            rating = st.number_input(
                "Rating",
                min_value=0.0,
                max_value=10.0,
                value=data.get("rating"),
                step=0.1,
                format="%.1f",
            )
        description = st.text_area("Description", value=data.get("description") or "")
        poster_url = st.text_input("Poster URL", value=data.get("posterUrl") or "", placeholder="https://...")
        submitted = st.form_submit_button("Save changes" if is_edit else "Create movie")
        if submitted:
            return {
                "title": title,
                "director": director,
                "genre": genre,
                "releaseDate": release_date.isoformat(),
                "duration": int(duration) if duration is not None else None,
                "rating": round(float(rating), 1) if rating is not None else None,
                "description": description,
                "posterUrl": poster_url.strip(),
            }
    return None
