from typing import Any, Dict, List

from dotti_factory.domain import IInstanceCache


class InstanceCache(IInstanceCache):
    """Stores already-built instances by name.

    Entries never expire; they live until overwritten with ``set`` or until the
    cache is cleared. ``None`` is a valid instance, so ``has`` is the only
    reliable presence check.

    Attributes:
        _instances: Dictionary mapping object names to instances.
    """

    def __init__(self) -> None:
        """Initialize an empty cache."""
        self._instances: Dict[str, Any] = {}

    def has(self, name: str) -> bool:
        """Return whether an instance is stored under the name."""
        return name in self._instances

    def get(self, name: str, default: Any = None) -> Any:
        """Return the instance stored under the name, or ``default`` when absent."""
        return self._instances.get(name, default)

    def set(self, name: str, instance: Any) -> Any:
        """Store an instance unconditionally.

        Args:
            name: The object name.
            instance: The instance to store.

        Returns:
            The instance previously stored under the name, or None.

        Example:
            >>> cache = InstanceCache()
            >>> cache.set("db", first)
            >>> cache.set("db", second) is first
            True
        """
        previous = self._instances.get(name)
        self._instances[name] = instance
        return previous

    def names(self) -> List[str]:
        """Return the cached names in insertion order."""
        return list(self._instances)

    def clear(self) -> None:
        """Remove every cached instance.

        Useful for testing or resetting factory state.
        """
        self._instances.clear()

    def __contains__(self, name: object) -> bool:
        return name in self._instances

    def __len__(self) -> int:
        return len(self._instances)
