import copy
from typing import Any, Callable, Dict, List, Mapping, MutableMapping, Optional

from pydantic import ValidationError

from dotti_factory.application.merging import deep_merge
from dotti_factory.domain import IConfigStore, InvalidConfigurationError, ObjectDescriptor


def _normalise(config: Mapping[str, Any]) -> Dict[str, Any]:
    """Deep-copy a registry document, turning parameter slot keys into strings.

    Without this, ``{1: ...}`` and ``{"1": ...}`` would not collide on merge.
    """
    normalised: Dict[str, Any] = {}
    for name, entry in config.items():
        entry = copy.deepcopy(entry)
        if isinstance(entry, MutableMapping) and isinstance(entry.get("params"), Mapping):
            entry["params"] = {str(slot): spec for slot, spec in entry["params"].items()}
        normalised[name] = entry
    return normalised


class ConfigStore(IConfigStore):
    """Holds the registry of object descriptors in document form.

    The raw document is kept so that merges operate on the same shape users
    write. Descriptors are validated when they are read.

    Attributes:
        _registry: Object name to raw descriptor mapping.
        _merger: Deep-merge utility used by ``merge``.
    """

    def __init__(
        self,
        config: Optional[Mapping[str, Any]] = None,
        merger: Callable[[MutableMapping[Any, Any], Mapping[Any, Any]], Any] = deep_merge,
    ) -> None:
        """Initialize the store.

        Args:
            config: Initial registry document. It is copied, never mutated.
            merger: Utility merging a source mapping into a target in place.
        """
        self._registry: Dict[str, Any] = _normalise(config or {})
        self._merger = merger

    def get(self, name: str) -> Optional[ObjectDescriptor]:
        """Return the validated descriptor for a name.

        Args:
            name: The object name.

        Returns:
            The descriptor, or None when the name is not configured.

        Raises:
            InvalidConfigurationError: If the stored entry is malformed.
        """
        entry = self._registry.get(name)
        if entry is None:
            return None
        try:
            return ObjectDescriptor.model_validate(entry)
        except ValidationError as e:
            raise InvalidConfigurationError(name, str(e)) from e

    def merge(self, partial: Mapping[str, Any]) -> None:
        """Deep-merge a partial registry into the stored one.

        Nested mappings are merged key by key; leaf values are replaced.

        Example:
            >>> store.merge({"db": {"params": {"2": {"value": "replica"}}}})
        """
        self._merger(self._registry, _normalise(partial))

    def names(self) -> List[str]:
        """Return the configured names."""
        return list(self._registry)

    def to_dict(self) -> Dict[str, Any]:
        """Return a deep copy of the raw registry document."""
        return copy.deepcopy(self._registry)

    def __contains__(self, name: object) -> bool:
        return name in self._registry
