"""Tests for pagination metadata."""

import math

import pytest

from backend.shared.query import paginate


class TestPaginate:
    """Tests for paginate."""

    def test_scenario_from_listing(self):
        assert paginate(25, 2, 10).to_dict() == {"page": 2, "limit": 10, "total": 25, "pages": 3}

    def test_empty_result_has_no_pages(self):
        result = paginate(0, 1, 10)

        assert result.pages == 0
        assert result.total == 0

    def test_page_past_the_end_is_not_clamped(self):
        result = paginate(5, 7, 10)

        assert result.page == 7
        assert result.pages == 1

    @pytest.mark.parametrize("total,page_size", [
        (1, 1), (1, 100), (9, 10), (10, 10), (11, 10), (99, 100), (100, 100), (101, 100), (1234, 7),
    ])
    def test_pages_is_ceiling_of_total_over_page_size(self, total, page_size):
        assert paginate(total, 1, page_size).pages == math.ceil(total / page_size)
