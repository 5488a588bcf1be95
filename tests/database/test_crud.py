"""
Unit tests for database CRUD operations.

Tests for Movie CRUD operations using an in-memory SQLite database for
fast, isolated testing.
"""

import pytest
from datetime import date
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from movie_catalog.database.models import Base, Movie
from movie_catalog.database import crud
from movie_catalog.database.connection import DatabaseManager
from movie_catalog.database.errors import ValidationError, NotFoundError, ConflictError
from movie_catalog.database.init_db import init_database, verify_schema, SAMPLE_MOVIES


FIELDS = ("title", "director", "genre", "release_date", "duration", "rating",
          "description", "poster_url", "created_at", "updated_at")


@pytest.fixture
def engine():
    """Create an in-memory SQLite engine for testing."""
    engine = create_engine("sqlite:///:memory:")
    Base.metadata.create_all(engine)
    return engine


@pytest.fixture
def session(engine):
    """Create a new database session for testing."""
    Session = sessionmaker(bind=engine)
    session = Session()
    yield session
    session.close()


def make_movie(session, title="Inception", director="Christopher Nolan", genre="Sci-Fi", **kwargs):
    """Create a movie with sensible defaults."""
    kwargs.setdefault("release_date", date(2010, 7, 16))
    return crud.create_movie(session, title=title, director=director, genre=genre, **kwargs)


def snapshot(movie: Movie) -> dict:
    return {field: getattr(movie, field) for field in FIELDS}


class TestCreateMovie:
    """Tests for crud.create_movie."""

    def test_create_movie(self, session):
        """Test creating a new movie assigns id and timestamps."""
        movie = make_movie(
            session,
            duration=148,
            rating=8.8,
            description="Dreams within dreams.",
            poster_url="https://example.com/inception.jpg",
        )

        assert movie.id is not None
        assert movie.title == "Inception"
        assert movie.director == "Christopher Nolan"
        assert movie.genre == "Sci-Fi"
        assert movie.release_date == date(2010, 7, 16)
        assert movie.duration == 148
        assert movie.rating == pytest.approx(8.8)
        assert movie.created_at is not None
        assert movie.created_at == movie.updated_at

    def test_create_movie_optional_fields_empty(self, session):
        """Test that optional fields default to None and empty strings are stored as None."""
        movie = make_movie(session, description="", poster_url="")

        assert movie.duration is None
        assert movie.rating is None
        assert movie.description is None
        assert movie.poster_url is None

    def test_ids_are_unique(self, session):
        """Test that every created movie gets a previously unseen id."""
        ids = {make_movie(session, title=f"Movie {i}").id for i in range(10)}
        assert len(ids) == 10

    def test_create_duplicate_case_insensitive(self, session):
        """Test that same title and director in any case raises ConflictError."""
        make_movie(session)

        with pytest.raises(ConflictError):
            make_movie(session, title="INCEPTION", director="christopher nolan")

        assert crud.get_movie_count(session) == 1

    def test_create_duplicate_non_ascii_case(self, session):
        """Test that the duplicate check folds case beyond ASCII."""
        make_movie(session, title="ÉTÉ", director="Jean-Pierre Jeunet", genre="Drama")

        with pytest.raises(ConflictError):
            make_movie(session, title="été", director="jean-pierre jeunet", genre="Drama")

        make_movie(session, title="STRASSE", director="Wim Wenders")
        with pytest.raises(ConflictError):
            make_movie(session, title="Straße", director="WIM WENDERS")
        assert crud.get_movie_count(session) == 2

    def test_create_same_title_different_director(self, session):
        """Test that only the (title, director) pair must be unique."""
        make_movie(session)
        make_movie(session, director="Someone Else")
        make_movie(session, title="Interstellar")

        assert crud.get_movie_count(session) == 3

    @pytest.mark.parametrize("rating", [-0.1, 10.1, 42.0])
    def test_create_rating_out_of_range(self, session, rating):
        """Test that a rating outside [0, 10] raises ValidationError."""
        with pytest.raises(ValidationError):
            make_movie(session, rating=rating)

    @pytest.mark.parametrize("rating", [0.0, 10.0])
    def test_create_rating_bounds_inclusive(self, session, rating):
        """Test that 0.0 and 10.0 are accepted."""
        movie = make_movie(session, rating=rating)
        assert movie.rating == rating

    def test_create_blank_required_field(self, session):
        """Test that blank title raises ValidationError."""
        with pytest.raises(ValidationError):
            make_movie(session, title="   ")

    def test_create_title_too_long(self, session):
        """Test that titles over 200 characters are rejected."""
        with pytest.raises(ValidationError):
            make_movie(session, title="x" * 201)


class TestGetMovie:
    """Tests for crud.get_movie and get_movie_or_raise."""

    def test_get_movie(self, session):
        """Test retrieving a movie by ID."""
        movie = make_movie(session)

        retrieved = crud.get_movie(session, movie.id)
        assert retrieved is not None
        assert retrieved.title == "Inception"

    def test_get_movie_not_found(self, session):
        """Test that getting a non-existent movie returns None."""
        assert crud.get_movie(session, 999) is None

    def test_get_movie_or_raise_not_found(self, session):
        """Test that get_movie_or_raise raises NotFoundError."""
        with pytest.raises(NotFoundError) as exc_info:
            crud.get_movie_or_raise(session, 999)
        assert "999" in str(exc_info.value)


class TestListMovies:
    """Tests for crud.list_movies and crud.list_genres."""

    @pytest.fixture
    def catalog(self, session):
        make_movie(session, title="The Dark Knight", director="Christopher Nolan", genre="Action")
        make_movie(session, title="Heat", director="Michael Mann", genre="Crime")
        make_movie(session, title="Alien", director="Ridley Scott", genre="Sci-Fi")
        make_movie(session, title="Dark City", director="Alex Proyas", genre="Sci-Fi")
        make_movie(session, title="Zodiac", director="David Fincher", genre="Crime")
        make_movie(session, title="Brazil", director="Terry Gilliam", genre="Dark Comedy")
        return session

    def test_sorted_by_title(self, catalog):
        """Test that results are ordered by title ascending."""
        movies, total = crud.list_movies(catalog)
        titles = [m.title for m in movies]
        assert titles == sorted(titles)
        assert total == 6

    def test_search_matches_title_director_or_genre(self, catalog):
        """Test that search is a case-insensitive substring over three fields."""
        movies, total = crud.list_movies(catalog, search="dark")
        assert {m.title for m in movies} == {"The Dark Knight", "Dark City", "Brazil"}
        assert total == 3

        movies, _ = crud.list_movies(catalog, search="NOLAN")
        assert [m.title for m in movies] == ["The Dark Knight"]

        make_movie(catalog, title="ÉTÉ", director="Jean-Pierre Jeunet", genre="Drama")
        movies, total = crud.list_movies(catalog, search="été")
        assert [m.title for m in movies] == ["ÉTÉ"]
        assert total == 1
        _, total = crud.list_movies(catalog, search="JEAN-PIERRE")
        assert total == 1

    def test_search_no_match(self, catalog):
        """Test that an unmatched search returns nothing."""
        movies, total = crud.list_movies(catalog, search="xyz123")
        assert movies == []
        assert total == 0

    def test_search_wildcards_are_literal(self, catalog):
        """Test that % and _ in the search term are not treated as wildcards."""
        movies, total = crud.list_movies(catalog, search="%")
        assert total == 0

    def test_genre_exact_case_sensitive(self, catalog):
        """Test that genre filter is an exact, case-sensitive match."""
        movies, total = crud.list_movies(catalog, genre="Crime")
        assert [m.title for m in movies] == ["Heat", "Zodiac"]
        assert total == 2

        _, total = crud.list_movies(catalog, genre="crime")
        assert total == 0

        _, total = crud.list_movies(catalog, genre="Sci")
        assert total == 0

    def test_search_and_genre_combined(self, catalog):
        """Test that search and genre filters combine with AND."""
        movies, total = crud.list_movies(catalog, search="dark", genre="Sci-Fi")
        assert [m.title for m in movies] == ["Dark City"]
        assert total == 1

    def test_pagination_covers_all_results(self, catalog):
        """Test that concatenating all pages reproduces the full sorted result set."""
        all_movies, total = crud.list_movies(catalog, page_size=100)
        for page_size in (1, 2, 4, 5):
            collected = []
            page = 1
            while True:
                movies, count = crud.list_movies(catalog, page=page, page_size=page_size)
                assert count == total
                assert len(movies) <= page_size
                if not movies:
                    break
                collected.extend(m.id for m in movies)
                page += 1
            assert collected == [m.id for m in all_movies]

    def test_huge_page_size_returns_everything(self, catalog):
        """Test that a page size beyond the 64-bit range still returns all rows."""
        movies, total = crud.list_movies(catalog, page_size=10 ** 19)
        assert len(movies) == total == 6

    def test_huge_page_number_is_empty(self, catalog):
        """Test that a page number whose offset overflows 64 bits is just empty."""
        movies, total = crud.list_movies(catalog, page=10 ** 19, page_size=10)
        assert movies == []
        assert total == 6

    def test_page_beyond_end(self, catalog):
        """Test that a page past the end is empty but still reports the total."""
        movies, total = crud.list_movies(catalog, page=10, page_size=5)
        assert movies == []
        assert total == 6

    def test_list_genres(self, catalog):
        """Test that genres are distinct and sorted."""
        assert crud.list_genres(catalog) == ["Action", "Crime", "Dark Comedy", "Sci-Fi"]

    def test_list_genres_empty(self, session):
        """Test genres on an empty catalog."""
        assert crud.list_genres(session) == []


class TestUpdateMovie:
    """Tests for crud.update_movie."""

    def test_update_movie(self, session):
        """Test updating some fields leaves the others unchanged."""
        movie = make_movie(session, rating=8.0, duration=148)

        updated = crud.update_movie(session, movie.id, rating=8.8, genre="Thriller")

        assert updated.rating == pytest.approx(8.8)
        assert updated.genre == "Thriller"
        assert updated.title == "Inception"
        assert updated.duration == 148

    def test_update_nothing_only_touches_updated_at(self, session):
        """Test that an empty update changes only updated_at."""
        movie = make_movie(session, rating=8.8, description="Dreams.", poster_url="https://example.com/p.jpg")
        before = snapshot(movie)

        updated = crud.update_movie(session, movie.id)
        after = snapshot(updated)

        assert after["updated_at"] >= before["updated_at"]
        before.pop("updated_at")
        after.pop("updated_at")
        assert after == before

    def test_update_empty_required_strings_are_ignored(self, session):
        """Test that empty title/director/genre mean no change."""
        movie = make_movie(session)

        updated = crud.update_movie(session, movie.id, title="", director="", genre="")

        assert updated.title == "Inception"
        assert updated.director == "Christopher Nolan"
        assert updated.genre == "Sci-Fi"

    @pytest.mark.parametrize("field", ["title", "director", "genre"])
    def test_update_whitespace_required_text_rejected(self, session, field):
        """Test that whitespace-only required text is rejected rather than stored."""
        movie = make_movie(session)

        with pytest.raises(ValidationError):
            crud.update_movie(session, movie.id, **{field: "   "})

    def test_update_clears_description_and_poster(self, session):
        """Test that empty description/poster_url clear the stored values."""
        movie = make_movie(session, description="Dreams.", poster_url="https://example.com/p.jpg")

        updated = crud.update_movie(session, movie.id, description="", poster_url="")

        assert updated.description is None
        assert updated.poster_url is None

    def test_update_does_not_check_duplicates(self, session):
        """Test that updating into an existing (title, director) pair is allowed."""
        make_movie(session, title="Memento")
        other = make_movie(session, title="Tenet")

        updated = crud.update_movie(session, other.id, title="memento")
        assert updated.title == "memento"

    def test_update_rating_out_of_range(self, session):
        """Test that an out-of-range rating is rejected on update."""
        movie = make_movie(session)
        with pytest.raises(ValidationError):
            crud.update_movie(session, movie.id, rating=11.0)

    def test_update_not_found(self, session):
        """Test that updating a missing movie raises NotFoundError."""
        with pytest.raises(NotFoundError):
            crud.update_movie(session, 999, title="Nope")


class TestDeleteMovie:
    """Tests for crud.delete_movie."""

    def test_delete_movie(self, session):
        """Test deleting a movie."""
        movie = make_movie(session)

        crud.delete_movie(session, movie.id)

        assert crud.get_movie(session, movie.id) is None
        assert crud.get_movie_count(session) == 0

    def test_delete_twice(self, session):
        """Test that the second delete of the same id raises NotFoundError."""
        movie = make_movie(session)
        crud.delete_movie(session, movie.id)

        with pytest.raises(NotFoundError):
            crud.delete_movie(session, movie.id)

    def test_delete_not_found(self, session):
        """Test that deleting a non-existent movie raises NotFoundError."""
        with pytest.raises(NotFoundError):
            crud.delete_movie(session, 999)


class TestInitDatabase:
    """Tests for schema creation and seeding."""

    def test_init_database_seeds_sample_movies(self):
        """Test that an empty database is seeded once."""
        db_manager = DatabaseManager.in_memory()
        init_database(db_manager)
        init_database(db_manager)

        assert verify_schema(db_manager)
        with db_manager.session_scope() as session:
            assert crud.get_movie_count(session) == len(SAMPLE_MOVIES)
            movies, _ = crud.list_movies(session, search="knight")
            assert [(m.title, m.director, m.genre) for m in movies] == [
                ("The Dark Knight", "Christopher Nolan", "Action")
            ]

    def test_init_database_without_seed(self):
        """Test that seeding can be skipped."""
        db_manager = DatabaseManager.in_memory()
        init_database(db_manager, seed=False)

        with db_manager.session_scope() as session:
            assert crud.get_movie_count(session) == 0

    def test_reset_database(self):
        """Test that reset drops existing rows before reseeding."""
        db_manager = DatabaseManager.in_memory()
        init_database(db_manager)
        with db_manager.session_scope() as session:
            make_movie(session)

        init_database(db_manager, reset=True)
        with db_manager.session_scope() as session:
            assert crud.get_movie_count(session) == len(SAMPLE_MOVIES)
