import pytest

from movie_catalog.domain.models.movie import INT32_MAX
from movie_catalog.domain.models.movie_filter import MovieFilter


class TestMovieFilter:
    @pytest.mark.parametrize(
        "page, limit, expected_page, expected_limit",
        [
            (1, 10, 1, 10),
            (0, 10, 1, 10),
            (-5, 10, 1, 10),
            (3, 0, 3, 10),
            (3, 101, 3, 10),
            (3, -1, 3, 10),
            (2, 1, 2, 1),
            (2, 100, 2, 100),
            (INT32_MAX + 1, 10, INT32_MAX, 10),
            (10**20, 10**20, INT32_MAX, 10),
        ],
    )
    def test_normalized(self, page, limit, expected_page, expected_limit):
        normalized = MovieFilter(page=page, limit=limit).normalized()

        assert normalized.page == expected_page
        assert normalized.limit == expected_limit

    def test_skip(self):
        assert MovieFilter(page=1, limit=10).skip == 0
        assert MovieFilter(page=3, limit=25).skip == 50

    def test_normalized_returns_new_filter(self):
        original = MovieFilter(page=0, limit=0)

        original.normalized()

        assert original.page == 0
        assert original.limit == 0

    def test_skip_of_largest_page_fits_in_64_bits(self):
        normalized = MovieFilter(page=10**20, limit=100).normalized()

        assert normalized.skip < 2**63
