"""
test_validators.py
------------------
Unit tests for moodcal.core.validators.

Tests the DataValidator parsing of date keys and month text and the
normalization of record fields.
"""
import pytest
from datetime import date, datetime

from moodcal.core.exceptions import DateKeyError, ValidationError
from moodcal.core.validators import DataValidator


class TestParseDateKey:
    """Test parse_date_key and is_date_key."""

    def test_valid_key(self):
        assert DataValidator.parse_date_key("2024-02-29") == date(2024, 2, 29)

    @pytest.mark.parametrize(
        "key", ["2023-02-29", "2024-13-01", "2024-3-1", "20240301", "", "today"]
    )
    def test_invalid_keys_raise(self, key):
        with pytest.raises(DateKeyError):
            DataValidator.parse_date_key(key)

    def test_date_key_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            DataValidator.parse_date_key("nope")

    def test_is_date_key(self):
        assert DataValidator.is_date_key("2024-03-10")
        assert not DataValidator.is_date_key("2024-03-32")
        assert not DataValidator.is_date_key(None)


class TestNormalizeDate:
    """Test normalize_date."""

    def test_datetime_becomes_date(self):
        assert DataValidator.normalize_date(datetime(2024, 3, 10, 22, 5)) == date(2024, 3, 10)

    def test_date_passes_through(self):
        assert DataValidator.normalize_date(date(2024, 3, 10)) == date(2024, 3, 10)

    def test_string_is_parsed(self):
        assert DataValidator.normalize_date("2024-03-10") == date(2024, 3, 10)

    def test_other_values_return_none(self):
        assert DataValidator.normalize_date(None) is None
        assert DataValidator.normalize_date(20240310) is None


class TestParseMonth:
    """Test parse_month."""

    def test_padded_and_unpadded(self):
        assert DataValidator.parse_month("2024-03") == (2024, 3)
        assert DataValidator.parse_month(" 2024-3 ") == (2024, 3)

    @pytest.mark.parametrize("text", ["2024-13", "2024-0", "0000-01", "2024", "24-03"])
    def test_invalid_month_raises(self, text):
        with pytest.raises(ValidationError):
            DataValidator.parse_month(text)


class TestFieldNormalization:
    """Test normalize_string and normalize_tags."""

    def test_empty_string_is_absent(self):
        assert DataValidator.normalize_string("") is None
        assert DataValidator.normalize_string(None) is None

    def test_whitespace_is_kept(self):
        assert DataValidator.normalize_string("  ") == "  "

    def test_non_string_is_stringified(self):
        assert DataValidator.normalize_string(3) == "3"

    def test_tags_deduplicated_in_order(self):
        assert DataValidator.normalize_tags(["b", "a", "b"]) == ["b", "a"]

    def test_single_tag_string(self):
        assert DataValidator.normalize_tags("운동") == ["운동"]

    def test_none_tags(self):
        assert DataValidator.normalize_tags(None) == []

    def test_non_iterable_tags_raise(self):
        with pytest.raises(ValidationError):
            DataValidator.normalize_tags(42)
