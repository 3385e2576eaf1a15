import datetime
from decimal import Decimal

import pytest

from app.core import search
from app.crud.crud_tank import build_search_filters


class TestNormalizeSearch:

    @pytest.mark.parametrize("value", [None, "", "   ", "\t\n"])
    def test_blank_is_none(self, value):
        assert search.normalize_search(value) is None

    def test_strips_surrounding_whitespace(self):
        assert search.normalize_search("  Round ") == "Round"


class TestParseDecimal:

    @pytest.mark.parametrize("term, expected", [("100", Decimal("100")), ("75.5", Decimal("75.5")), ("-1", Decimal("-1"))])
    def test_numbers(self, term, expected):
        assert search.parse_decimal(term) == expected

    @pytest.mark.parametrize("term", ["notanumber", "2025-01-01", "Round", "NaN", "Infinity"])
    def test_not_a_size(self, term):
        assert search.parse_decimal(term) is None


class TestParseDate:

    def test_iso_date_is_midnight(self):
        assert search.parse_date("2025-01-01") == datetime.datetime(2025, 1, 1)

    def test_iso_datetime(self):
        assert search.parse_date("2025-02-15T10:30:00") == datetime.datetime(2025, 2, 15, 10, 30)

    def test_extra_formats(self):
        assert search.parse_date("15/02/2025", ["%d/%m/%Y"]) == datetime.datetime(2025, 2, 15)

    @pytest.mark.parametrize("term", ["notadate", "100", "2025-13-45", "15/02/2025"])
    def test_unparsable_returns_none(self, term):
        assert search.parse_date(term) is None


class TestBuildSearchFilters:

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_blank_search_has_no_filters(self, value):
        assert build_search_filters(value) == []

    def test_plain_text_only_matches_text_fields(self):
        assert len(build_search_filters("Round")) == 2

    def test_number_adds_size_filter(self):
        assert len(build_search_filters("100")) == 3

    def test_date_adds_created_date_filter(self):
        assert len(build_search_filters("2025-01-01")) == 3


def test_parse_date_with_offset_is_naive_utc():
    assert search.parse_date("2025-01-01T02:00:00+02:00") == datetime.datetime(2025, 1, 1)
