from abc import ABC, abstractmethod
from typing import Any, Callable, List, Mapping, Optional, Sequence

from dotti_factory.domain.models import ObjectDescriptor


class ITypeResolver(ABC):
    """Abstract interface mapping a type path string to a constructor."""

    @abstractmethod
    def resolve(self, type_path: str) -> Any:
        """Return the value found at the given type path.

        Args:
            type_path: Dotted type path from a descriptor.

        Raises:
            TypeResolutionError: If nothing is found at the path.
        """


class IInstanceCache(ABC):
    """Abstract interface for the store of already-built instances."""

    @abstractmethod
    def has(self, name: str) -> bool:
        """Return whether an instance is stored under the name."""

    @abstractmethod
    def get(self, name: str, default: Any = None) -> Any:
        """Return the stored instance, or ``default`` when absent."""

    @abstractmethod
    def set(self, name: str, instance: Any) -> Any:
        """Store an instance unconditionally and return the previous one (or None)."""


class IConfigStore(ABC):
    """Abstract interface for the registry of object descriptors."""

    @abstractmethod
    def get(self, name: str) -> Optional[ObjectDescriptor]:
        """Return the descriptor for the name, or None when not configured."""

    @abstractmethod
    def merge(self, partial: Mapping[str, Any]) -> None:
        """Deep-merge a partial registry into the stored one."""


class IDependencyResolver(ABC):
    """Abstract interface for computing build orders."""

    @abstractmethod
    def resolve_order(
        self,
        root: str,
        dependencies_of: Callable[[str], Optional[Sequence[str]]],
        already_built: Callable[[str], bool],
    ) -> List[str]:
        """Return the names to build for ``root``, dependencies first.

        Args:
            root: The requested name.
            dependencies_of: Returns the referenced names of a descriptor, or None
                when the name is not configured.
            already_built: Returns whether a name is already cached.

        Raises:
            MissingConfigurationError: If a reachable name is neither configured nor built.
            DependencyCycleError: If the reachable graph contains a cycle.
        """


class IObjectBuilder(ABC):
    """Abstract interface for constructing one object from its descriptor."""

    @abstractmethod
    def build(self, name: str, descriptor: ObjectDescriptor, cache: IInstanceCache) -> Any:
        """Construct the object, store it in the cache and return it."""


class IObjectFactory(ABC):
    """Abstract interface for the object factory operations."""

    @abstractmethod
    def get(self, name: str) -> Any:
        """Return the named instance, building it and its dependencies if needed."""

    @abstractmethod
    def set(self, name: str, instance: Any) -> Any:
        """Store an instance under the name and return the previous one (or None)."""

    @abstractmethod
    def configure(self, config: Mapping[str, Any]) -> None:
        """Merge additional configuration without touching built instances."""
