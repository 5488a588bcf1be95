"""
Helpers that turn movie form input into API payloads.
"""

REQUIRED_TEXT_FIELDS = ("title", "director", "genre")
CLEARABLE_FIELDS = ("description", "posterUrl")
EDITABLE_FIELDS = REQUIRED_TEXT_FIELDS + ("releaseDate", "duration", "rating") + CLEARABLE_FIELDS


def build_create_payload(form_data: dict) -> dict:
    """Trim required text and drop empty optional fields."""
    payload = {}
    for key in EDITABLE_FIELDS:
        value = form_data.get(key)
        if key in REQUIRED_TEXT_FIELDS:
            value = (value or "").strip()
        elif key in CLEARABLE_FIELDS and not value:
            continue
        if value is None:
            continue
        payload[key] = value
    return payload


def diff_movie_fields(movie: dict, form_data: dict) -> dict:
    """
    Return only the fields of form_data that differ from the loaded movie.

    Args:
        movie: Movie as returned by the API (camelCase keys)
        form_data: Values collected from the edit form

    Returns:
        Partial update payload; an empty description or posterUrl is kept
        so the server clears it
    """
    changes = {}
    for key in EDITABLE_FIELDS:
        new = form_data.get(key)
        old = movie.get(key)
        if key in REQUIRED_TEXT_FIELDS:
            new = (new or "").strip()
            if not new:
                continue
        elif key in CLEARABLE_FIELDS:
            new = new or ""
            old = old or ""
        elif new is None:
            continue
        if new != old:
            changes[key] = new
    return changes
