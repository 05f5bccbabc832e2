"""Recursive merge for nested declaration mappings."""

import copy
from collections.abc import Mapping
from typing import Any


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Merge ``override`` into ``base`` and return a new dict.

    Mappings present on both sides merge key-wise; any other value (rule
    lists, booleans) from ``override`` replaces the one in ``base``. Neither
    argument is modified.

    Examples:
        >>> deep_merge({"person": {"name": True}}, {"person": {"email": True}})
        {'person': {'name': True, 'email': True}}
        >>> deep_merge({"tags": ["alpha", "lowercase"]}, {"tags": ["alnum"]})
        {'tags': ['alnum']}
        >>> deep_merge({"person": {"name": True}}, {"person": False})
        {'person': False}
    """
    merged = copy.deepcopy(dict(base))

    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = copy.deepcopy(value)

    return merged
