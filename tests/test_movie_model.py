from datetime import datetime

import pytest

from movie_catalog.domain.exceptions import ValidationError
from movie_catalog.domain.models.movie import Movie

from factories import movie_factory


class TestNewMovie:
    def test_new_movie_success(self):
        movie = Movie.new(1, "Test Movie", "2023")

        assert movie.id == 1
        assert movie.title == "Test Movie"
        assert movie.year == "2023"

    @pytest.mark.parametrize(
        "title, year, message",
        [
            ("", "2023", "title cannot be empty"),
            ("Test Movie", "", "year cannot be empty"),
            ("Test Movie", "23", "invalid year format"),
            ("Test Movie", "20233", "invalid year format"),
            ("Test Movie", "abcd", "invalid year format"),
            ("Test Movie", "-999", "invalid year format"),
            ("Test Movie", "1700", "year must be between"),
            ("Test Movie", "1799", "year must be between"),
        ],
    )
    def test_new_movie_rejects_invalid_data(self, title, year, message):
        with pytest.raises(ValidationError, match=message):
            Movie.new(1, title, year)

    def test_year_range_bounds(self):
        max_year = datetime.now().year + 10

        assert Movie.new(1, "Oldest", "1800").year == "1800"
        assert Movie.new(2, "Future", str(max_year)).year == str(max_year)

        with pytest.raises(ValidationError):
            Movie.new(3, "Too far", str(max_year + 1))

    def test_non_ascii_digits_rejected(self):
        """Unicode digits are not a 4-digit ASCII year"""
        with pytest.raises(ValidationError, match="invalid year format"):
            Movie.new(1, "Test Movie", "２０２３")


class TestEnsureValid:
    def test_valid_movie_passes(self):
        movie_factory.create_movie().ensure_valid()

    def test_movie_built_without_checks_is_rejected(self):
        movie = Movie.model_construct(id=1, title="Old", year="1700")

        with pytest.raises(ValidationError):
            movie.ensure_valid()

    def test_empty_title_rejected(self):
        movie = Movie(id=1, title="", year="2000")

        with pytest.raises(ValidationError, match="title cannot be empty"):
            movie.ensure_valid()


class TestEqualityAndCopy:
    def test_equality_is_field_wise(self):
        assert movie_factory.create_movie() == movie_factory.create_movie()
        assert movie_factory.create_movie(id=1) != movie_factory.create_movie(id=2)
        assert movie_factory.create_movie(title="A") != movie_factory.create_movie(title="B")

    def test_copy_does_not_alias_original(self):
        original = movie_factory.create_movie()
        copy = original.model_copy()

        copy.title = "Changed"

        assert original.title == "Test Movie"
        assert copy != original


class TestUpdate:
    def test_update_both_fields(self):
        movie = movie_factory.create_movie()

        movie.update("New Title", "1999")

        assert movie.title == "New Title"
        assert movie.year == "1999"

    def test_empty_values_keep_current_fields(self):
        movie = movie_factory.create_movie()

        movie.update("", "")

        assert movie.title == "Test Movie"
        assert movie.year == "2023"

    def test_invalid_year_leaves_movie_unchanged(self):
        movie = movie_factory.create_movie()

        with pytest.raises(ValidationError, match="invalid year format"):
            movie.update("New Title", "19x9")

        assert movie.title == "Test Movie"
        assert movie.year == "2023"

    def test_out_of_range_year_leaves_movie_unchanged(self):
        movie = movie_factory.create_movie()

        with pytest.raises(ValidationError):
            movie.update(year="1500")

        assert movie.year == "2023"
