"""Application layer - Deep merge of configuration mappings."""

import copy
from typing import Any, Mapping, MutableMapping


def deep_merge(target: MutableMapping[Any, Any], source: Mapping[Any, Any]) -> MutableMapping[Any, Any]:
    """Merge ``source`` into ``target`` in place.

    Nested mappings present on both sides are merged recursively and their keys
    unioned. Any other value from ``source`` replaces the one in ``target``.
    Values taken from ``source`` are deep-copied, so later changes to
    ``source`` do not leak into ``target``.

    Args:
        target: Mapping to update.
        source: Mapping whose entries take precedence.

    Returns:
        The updated ``target``.

    Example:
        >>> target = {"a": {"type": "x.A", "params": {"1": {"value": 1}}}}
        >>> deep_merge(target, {"a": {"params": {"2": {"value": 2}}}})
        {'a': {'type': 'x.A', 'params': {'1': {'value': 1}, '2': {'value': 2}}}}
    """
    for key, value in source.items():
        existing = target.get(key)
        if isinstance(existing, MutableMapping) and isinstance(value, Mapping):
            deep_merge(existing, value)
        else:
            target[key] = copy.deepcopy(value)
    return target
