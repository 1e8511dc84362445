import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from pydantic import TypeAdapter, ValidationError

from dotti_factory.application.builder import ObjectBuilder
from dotti_factory.application.config_store import ConfigStore
from dotti_factory.application.instance_cache import InstanceCache
from dotti_factory.application.resolver import DependencyResolver
from dotti_factory.application.type_resolvers import ImportTypeResolver
from dotti_factory.domain import (
    IConfigStore,
    IDependencyResolver,
    IInstanceCache,
    InvalidConfigurationError,
    IObjectBuilder,
    IObjectFactory,
    ITypeResolver,
    ObjectDescriptor,
)

logger = logging.getLogger(__name__)

_REGISTRY_ADAPTER = TypeAdapter(Dict[str, ObjectDescriptor])


class ObjectFactory(IObjectFactory):
    """Builds named objects from a declarative registry on demand.

    Orchestrates the config store, the dependency resolver, the object builder
    and the instance cache. Every built object is cached for the lifetime of the
    factory; the cache always wins over the registry for names already built.

    The factory is not thread-safe and not reentrant: callers sharing it across
    threads must serialise ``get``, ``set`` and ``configure`` themselves.

    Attributes:
        _config: Registry of object descriptors.
        _cache: Already-built instances.
        _resolver: Computes build orders.
        _builder: Constructs single objects.

    Example:
        >>> factory = ObjectFactory({
        ...     "settings": {"type": "myapp.Settings", "params": {"1": {"value": "prod"}}},
        ...     "db": {"type": "myapp.Database", "params": {"1": {"reference": "settings"}}},
        ... })
        >>> db = factory.get("db")
        >>> db is factory.get("db")
        True
    """

    def __init__(
        self,
        config: Optional[Mapping[str, Any]] = None,
        type_resolver: Optional[ITypeResolver] = None,
        *,
        cache: Optional[IInstanceCache] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        """Initialize the factory.

        Args:
            config: Registry document mapping names to ``{"type": ..., "params": {...}}``.
            type_resolver: Maps type paths to constructors. Defaults to importing them.
            cache: Instance cache to use. Defaults to an empty InstanceCache.
            logger: Logger for fatal construction errors.
        """
        self._config: IConfigStore = ConfigStore(config)
        self._cache: IInstanceCache = cache if cache is not None else InstanceCache()
        self._resolver: IDependencyResolver = DependencyResolver()
        self._builder: IObjectBuilder = ObjectBuilder(type_resolver or ImportTypeResolver(), logger)

    @classmethod
    def from_json(
        cls,
        document: Union[str, bytes],
        type_resolver: Optional[ITypeResolver] = None,
        **kwargs: Any,
    ) -> "ObjectFactory":
        """Create a factory from a JSON registry document.

        The document shape is validated up front.

        Raises:
            InvalidConfigurationError: If the document is not a valid registry.
        """
        try:
            registry = _REGISTRY_ADAPTER.validate_json(document)
        except ValidationError as e:
            raise InvalidConfigurationError("<document>", str(e)) from e

        config = {
            name: descriptor.model_dump(by_alias=True, exclude_unset=True) for name, descriptor in registry.items()
        }
        return cls(config, type_resolver, **kwargs)

    @classmethod
    def from_file(
        cls,
        path: Union[str, Path],
        type_resolver: Optional[ITypeResolver] = None,
        **kwargs: Any,
    ) -> "ObjectFactory":
        """Create a factory from a JSON registry file."""
        return cls.from_json(Path(path).read_text(encoding="utf-8"), type_resolver, **kwargs)

    def _references_of(self, name: str) -> Optional[Sequence[str]]:
        descriptor = self._config.get(name)
        if descriptor is None:
            return None
        return descriptor.references()

    def build_order(self, name: str) -> List[str]:
        """Return the names ``get(name)`` would build, in order, without building them.

        Raises:
            MissingConfigurationError: If a reachable name is neither configured nor built.
            DependencyCycleError: If the reachable graph contains a cycle.
        """
        return self._resolver.resolve_order(name, self._references_of, self._cache.has)

    def get(self, name: str) -> Any:
        """Return the named instance, building it and its dependencies if needed.

        Objects built before a failure stay cached; the failing object and the
        ones after it in the build order are not.

        Args:
            name: The object name.

        Returns:
            The cached instance.

        Raises:
            MissingConfigurationError: If the object or a dependency is not configured.
            DependencyCycleError: If the dependency graph contains a cycle.
            FactoryException: Any other construction failure.
        """
        if self._cache.has(name):
            return self._cache.get(name)

        order = self.build_order(name)
        logger.debug("Build order for %s: %s", name, order)

        for entry in order:
            if not self._cache.has(entry):
                self._builder.build(entry, self._config.get(entry), self._cache)

        return self._cache.get(name)

    def set(self, name: str, instance: Any) -> Any:
        """Store an instance under the name, replacing any previous one.

        Useful for objects the factory cannot construct, or to override one.

        Returns:
            The instance previously stored under the name, or None.
        """
        return self._cache.set(name, instance)

    def configure(self, config: Mapping[str, Any]) -> None:
        """Merge additional configuration into the registry.

        Objects that are already built are not affected, even if their descriptor changes.
        """
        self._config.merge(config)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._cache.has(name)
