import pytest

from modules.posts.pagination import PageWindow, paginate, parse_page


class TestPaginate:
    def test_second_page(self):
        assert paginate(total_count=5, page=2, per_page=2) == PageWindow(offset=2, limit=2)

    def test_empty_collection(self):
        assert paginate(total_count=0, page=1, per_page=2) == PageWindow(offset=0, limit=2)

    @pytest.mark.parametrize("page", [0, -3])
    def test_page_below_one_starts_at_zero(self, page):
        assert paginate(10, page, 2).offset == 0

    def test_past_the_end(self):
        window = paginate(total_count=3, page=5, per_page=2)
        assert window.offset == 8
        assert window.offset >= 3


class TestParsePage:
    @pytest.mark.parametrize(
        "raw,expected",
        [(None, 1), ("", 1), ("abc", 1), ("0", 1), ("-2", 1), ("3", 3), (4, 4)],
    )
    def test_parse(self, raw, expected):
        assert parse_page(raw) == expected
