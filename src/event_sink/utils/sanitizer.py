"""
Module: sanitizer.py
Description: Null pruning for outgoing event payloads.

The ingestion endpoint treats an explicit null differently from an absent
field, so every None is removed before the payload is serialized.
"""

from collections.abc import Mapping
from typing import Any, Dict, List, Optional


def prune(value: Any) -> Optional[Any]:
    """
    Recursively remove None values from a JSON-like structure.

    Mappings lose keys whose value is None, sequences lose None elements,
    and surviving nested containers are pruned the same way. Scalars are
    returned unchanged. The input is never modified.

    Args:
        value: Mapping, sequence, scalar or None

    Returns:
        A pruned copy of value, or None if value is None

    Examples:
        >>> prune({"a": 1, "b": None, "c": {"d": None, "e": 2}, "f": [1, None, 3]})
        {'a': 1, 'c': {'e': 2}, 'f': [1, 3]}
    """
    if value is None:
        return None
    if isinstance(value, Mapping):
        return _prune_mapping(value)
    if isinstance(value, (list, tuple)):
        return _prune_sequence(value)
    return value


def _prune_mapping(mapping: Mapping) -> Dict[Any, Any]:
    return {key: prune(item) for key, item in mapping.items() if item is not None}


def _prune_sequence(sequence) -> List[Any]:
    return [prune(item) for item in sequence if item is not None]
