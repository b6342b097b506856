"""Tests for field-based record comparison"""

from dataclasses import dataclass
from typing import Any
from unittest.mock import Mock

import pytest

from array_helpers.errors import MissingFieldError
from array_helpers.records.comparison import (
    active_record_in_array,
    diff_object_array_by_field,
    object_in_array_by_field,
)


@dataclass
class Record:
    id: Any
    label: str = ""


class TestDiffObjectArrayByField:
    """Test diff_object_array_by_field function"""

    def test_diff_both_empty(self):
        """Test empty inputs return an empty list"""
        assert diff_object_array_by_field([], [], "id") == []

    def test_diff_both_empty_skips_field_access(self):
        """Test no field is read when both inputs are empty"""
        assert diff_object_array_by_field([], [], "missing") == []

    def test_diff_basic(self):
        """Test records absent from the second list are returned"""
        first = [Record(1), Record(2)]

        result = diff_object_array_by_field(first, [Record(2)], "id")
        assert result == [Record(1)]

    def test_diff_preserves_order(self, sample_items):
        """Test result keeps the order of the first list"""
        result = diff_object_array_by_field(sample_items, [Record(2)], "id")
        assert [item.id for item in result] == [1, 3]

    def test_diff_second_empty(self, sample_items):
        """Test every record is returned against an empty list"""
        result = diff_object_array_by_field(sample_items, [], "id")
        assert result == sample_items

    def test_diff_first_empty(self, sample_items):
        """Test empty first list"""
        assert diff_object_array_by_field([], sample_items, "id") == []

    def test_diff_all_matching(self, sample_items):
        """Test identical lists have no difference"""
        assert diff_object_array_by_field(sample_items, list(sample_items), "id") == []

    def test_diff_keeps_duplicates(self):
        """Test repeated values in the first list are all returned"""
        first = [Record(1, "a"), Record(2), Record(1, "b")]

        result = diff_object_array_by_field(first, [Record(2)], "id")
        assert result == [Record(1, "a"), Record(1, "b")]

    def test_diff_compares_string_form(self):
        """Test values are compared as strings"""
        result = diff_object_array_by_field([Record(1), Record(2)], [{"id": "1"}], "id")
        assert result == [Record(2)]

    def test_diff_mappings(self):
        """Test mapping records are read by key"""
        first = [{"id": "a"}, {"id": "b"}]

        result = diff_object_array_by_field(first, [{"id": "b"}], "id")
        assert result == [{"id": "a"}]

    def test_diff_missing_field(self):
        """Test a record without the field raises"""
        with pytest.raises(MissingFieldError) as exc_info:
            diff_object_array_by_field([Record(1)], [Record(2)], "uuid")

        assert exc_info.value.field == "uuid"
        assert exc_info.value.record_type == "Record"


class TestObjectInArrayByField:
    """Test object_in_array_by_field function"""

    def test_object_in_empty_array(self):
        """Test empty array"""
        assert object_in_array_by_field(Record(1), [], "id") is False

    def test_object_none(self, sample_items):
        """Test missing object"""
        assert object_in_array_by_field(None, sample_items, "id") is False

    def test_object_empty_field(self, sample_items):
        """Test empty field name"""
        assert object_in_array_by_field(Record(1), sample_items, "") is False

    def test_object_found_by_field(self, sample_items):
        """Test a distinct record with the same field value is contained"""
        assert object_in_array_by_field(Record(2, "other"), sample_items, "id") is True

    def test_object_not_found(self, sample_items):
        """Test no record shares the field value"""
        assert object_in_array_by_field(Record(7), sample_items, "id") is False

    def test_object_ignores_type(self, sample_items):
        """Test record types are not compared"""
        assert object_in_array_by_field({"id": "3"}, sample_items, "id") is True


class TestActiveRecordInArray:
    """Test active_record_in_array function"""

    def test_record_empty_array(self):
        """Test empty array"""
        record = Mock()

        assert active_record_in_array(record, []) is False
        record.equals.assert_not_called()

    def test_record_none(self):
        """Test missing record"""
        assert active_record_in_array(None, [Mock()]) is False

    @pytest.mark.parametrize("equal", [True, False])
    def test_record_delegates_to_equals(self, equal):
        """Test the result comes from record.equals"""
        record = Mock()
        other = Mock()
        record.equals.return_value = equal

        assert active_record_in_array(record, [other]) is equal
        record.equals.assert_called_once_with(other)

    def test_record_short_circuits(self):
        """Test scanning stops at the first match"""
        first, match, last = Mock(), Mock(), Mock()
        record = Mock()
        record.equals.side_effect = lambda other: other is match

        assert active_record_in_array(record, [first, match, last]) is True
        assert record.equals.call_count == 2
