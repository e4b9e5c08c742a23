"""
Module: test_sanitizer.py
Description: Unit tests for null pruning of outgoing payloads.
"""

import copy

import pytest

from event_sink.utils.sanitizer import prune


def _contains_none(value):
    if value is None:
        return True
    if isinstance(value, dict):
        return any(_contains_none(item) for item in value.values())
    if isinstance(value, list):
        return any(_contains_none(item) for item in value)
    return False


NESTED_SAMPLES = [
    {"a": 1, "b": None, "c": {"d": None, "e": 2}, "f": [1, None, 3]},
    [None, {"a": None}, [None, [None, {"b": [None]}]]],
    {"items": [{"id": "1", "price": {"amount": None, "currency": "USD"}}, None]},
    {"deep": {"deeper": {"deepest": [{"x": None, "y": [None, 0, False, ""]}]}}},
    {},
    [],
]


class TestPrune:
    """Test cases for prune()."""

    def test_none_returns_none(self):
        """Test None input yields None."""
        assert prune(None) is None

    @pytest.mark.parametrize("scalar", ["text", "", 0, 1.5, True, False])
    def test_scalars_unchanged(self, scalar):
        """Test scalars pass through unchanged."""
        assert prune(scalar) == scalar

    def test_mapping(self):
        """Test nulls are dropped from mappings at every level."""
        data = {"a": 1, "b": None, "c": {"d": None, "e": 2}, "f": [1, None, 3]}

        assert prune(data) == {"a": 1, "c": {"e": 2}, "f": [1, 3]}

    def test_sequence_preserves_order(self):
        """Test surviving sequence elements keep their relative order."""
        assert prune([3, None, 1, None, 2]) == [3, 1, 2]

    def test_tuple_becomes_list(self):
        """Test tuples are pruned into lists."""
        assert prune((1, None, (None, 2))) == [1, [2]]

    def test_falsy_values_kept(self):
        """Test empty strings, zeros, False and empty containers survive."""
        data = {"s": "", "n": 0, "b": False, "l": [], "d": {}}

        assert prune(data) == data

    def test_empty_containers_left_after_pruning(self):
        """Test containers emptied by pruning are kept, not removed."""
        assert prune({"a": {"b": None}, "c": [None]}) == {"a": {}, "c": []}

    def test_deep_nesting(self):
        """Test pruning recurses through mixed nesting."""
        data = {"a": [{"b": [{"c": None, "d": [None, {"e": None, "f": 1}]}]}]}

        assert prune(data) == {"a": [{"b": [{"d": [{"f": 1}]}]}]}

    def test_input_not_modified(self):
        """Test prune returns a copy and leaves the input untouched."""
        data = {"a": None, "b": [None, {"c": None}]}
        original = copy.deepcopy(data)

        result = prune(data)

        assert data == original
        assert result is not data
        assert result["b"] is not data["b"]

    @pytest.mark.parametrize("data", NESTED_SAMPLES)
    def test_idempotent(self, data):
        """Test pruning twice equals pruning once."""
        assert prune(prune(data)) == prune(data)

    @pytest.mark.parametrize("data", NESTED_SAMPLES)
    def test_no_none_anywhere(self, data):
        """Test no None remains at any depth."""
        assert not _contains_none(prune(data))

    def test_null_free_payload_unchanged(self, purchase_event):
        """Test a payload without nulls comes back structurally equal."""
        clean = prune(purchase_event)

        assert prune(clean) == clean
        assert clean == {
            "id": "88ec57bb-bd54-4391-b296-c7de36c45728",
            "timestamp": 1617870506121,
            "channel_type": "SITE",
            "user_id": "a9d220010dc9d8f0b998fa45e5f538d4176958da",
            "items": [{
                "id": "2031646",
                "price": {"amount": 50, "currency": "USD"},
                "quantity": 25
            }],
            "revenue": {"amount": 1250, "currency": "USD"},
            "event_type": "PURCHASE",
            "shipping_charge": {"amount": 0, "currency": "USD"}
        }
