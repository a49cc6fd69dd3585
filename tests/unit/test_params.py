"""
Unit tests for request parameter normalization.
"""

import pytest

from canvas_client import CanvasClient
from canvas_client.errors import ValidationError
from canvas_client.utils.params import normalize_params


class TestNormalizeParams:
    """Test cases for normalize_params."""

    def test_plain_keys_pass_through(self):
        """Test that keys without brackets are returned unchanged."""
        data = {"recipients": ["2", "3"], "subject": "Test Message", "force_new": True}

        assert normalize_params(data) == data

    def test_plain_list_value(self):
        """Test that a list under a plain key is kept as-is."""
        assert normalize_params({"foo": [1, 2]}) == {"foo": [1, 2]}

    def test_array_suffix_is_stripped(self):
        """Test that 'foo[]' with a list value becomes 'foo'."""
        assert normalize_params({"foo[]": [1, 2]}) == {"foo": [1, 2]}

    def test_bracket_key_becomes_nested_object(self):
        """Test that 'assignment[name]' becomes a nested object."""
        assert normalize_params({"assignment[name]": "myname"}) == {
            "assignment": {"name": "myname"}
        }

    def test_bracket_keys_accumulate(self):
        """Test that several properties of one object are merged."""
        result = normalize_params(
            {
                "assignment[name]": "Essay",
                "published": True,
                "assignment[points_possible]": 10,
            }
        )

        assert result == {
            "assignment": {"name": "Essay", "points_possible": 10},
            "published": True,
        }

    def test_bracket_key_merges_into_existing_object(self):
        """Test that bracket keys extend an object given in JSON style."""
        data = {"assignment": {"name": "Essay"}, "assignment[description]": "Write it"}

        result = normalize_params(data)

        assert result == {"assignment": {"name": "Essay", "description": "Write it"}}

    def test_input_is_not_mutated(self):
        """Test that neither the input nor its nested objects are modified."""
        nested = {"name": "Essay"}
        data = {"assignment": nested, "assignment[description]": "Write it"}

        normalize_params(data)

        assert nested == {"name": "Essay"}
        assert data == {"assignment": nested, "assignment[description]": "Write it"}

    def test_preserves_key_order(self):
        """Test that output keys follow input order."""
        result = normalize_params({"b": 1, "a[x]": 2, "c[]": [3]})

        assert list(result) == ["b", "a", "c"]

    def test_array_suffix_with_scalar_value(self):
        """Test that 'foo[]' with a non-list value is treated as an object property."""
        assert normalize_params({"foo[]": "bar"}) == {"foo": {"": "bar"}}

    def test_empty_and_none(self):
        """Test normalizing empty input."""
        assert normalize_params({}) == {}
        assert normalize_params(None) == {}

    def test_missing_closing_bracket_raises(self):
        """Test that a key without ']' is rejected."""
        with pytest.raises(ValidationError):
            normalize_params({"assignment[name": "myname"})

    def test_reversed_brackets_raise(self):
        """Test that ']' before '[' is rejected."""
        with pytest.raises(ValidationError):
            normalize_params({"assignment]name[": "myname"})

    def test_conflict_with_scalar_raises(self):
        """Test that a bracket key cannot extend a scalar value."""
        with pytest.raises(ValidationError) as exc_info:
            normalize_params({"assignment": "x", "assignment[name]": "myname"})

        assert "assignment" in str(exc_info.value)

    def test_exposed_on_client(self):
        """Test that the normalizer is available as CanvasClient.normalize_params."""
        assert CanvasClient.normalize_params({"foo[]": [1, 2]}) == {"foo": [1, 2]}
