"""Application layer - Lookup of constructors by type path."""

import builtins
from importlib import import_module
from types import ModuleType
from typing import Any, Dict, List, Mapping, Optional

from dotti_factory.domain import ITypeResolver, TypeResolutionError


class ImportTypeResolver(ITypeResolver):
    """Resolves dotted type paths by importing the owning module.

    Accepted forms:
    - ``"package.module.Name"``: the longest importable prefix is the module,
      the rest is walked as attributes (so ``"package.module.Outer.Inner"`` works).
    - ``"package.module:Name"``: explicit module / attribute split.
    - ``"Name"``: looked up in :mod:`builtins`.

    Attributes:
        _modules: Cache of imported modules by name.
    """

    def __init__(self) -> None:
        self._modules: Dict[str, ModuleType] = {}

    def _try_import(self, module_name: str) -> ModuleType:
        if module_name not in self._modules:
            self._modules[module_name] = import_module(module_name)
        return self._modules[module_name]

    @staticmethod
    def _is_missing(error: ModuleNotFoundError, module_name: str) -> bool:
        """Whether the error is about ``module_name`` itself rather than one of its imports."""
        missing = error.name or ""
        return module_name == missing or module_name.startswith(missing + ".")

    @staticmethod
    def _walk(owner: Any, attributes: List[str], type_path: str) -> Any:
        value = owner
        for attribute in attributes:
            try:
                value = getattr(value, attribute)
            except AttributeError as e:
                raise TypeResolutionError(type_path, f"'{attribute}' not found on {value!r}") from e
        return value

    def _import(self, module_name: str, type_path: str) -> Optional[ModuleType]:
        try:
            return self._try_import(module_name)
        except ModuleNotFoundError as e:
            if self._is_missing(e, module_name):
                return None
            raise TypeResolutionError(type_path, f"Failed to import module '{module_name}': {e}") from e
        except Exception as e:
            raise TypeResolutionError(type_path, f"Failed to import module '{module_name}': {e}") from e

    def resolve(self, type_path: str) -> Any:
        """Return the value found at the type path.

        Args:
            type_path: Dotted type path, optionally with a ``:`` module separator.

        Returns:
            The resolved value. Callers decide whether it is constructible.

        Raises:
            TypeResolutionError: If no module or attribute matches the path.

        Example:
            >>> resolver = ImportTypeResolver()
            >>> resolver.resolve("collections.OrderedDict")
            <class 'collections.OrderedDict'>
        """
        if not type_path:
            raise TypeResolutionError(type_path, "Type path is empty")

        if ":" in type_path:
            module_name, _, attribute_path = type_path.partition(":")
            module = self._import(module_name, type_path)
            if module is None:
                raise TypeResolutionError(type_path, f"Module '{module_name}' not found")
            return self._walk(module, attribute_path.split("."), type_path)

        parts = type_path.split(".")
        if len(parts) == 1:
            return self._walk(builtins, parts, type_path)

        # Longest importable prefix is the module
        for index in range(len(parts) - 1, 0, -1):
            module = self._import(".".join(parts[:index]), type_path)
            if module is not None:
                return self._walk(module, parts[index:], type_path)

        raise TypeResolutionError(type_path, f"Module '{parts[0]}' not found")


class MappingTypeResolver(ITypeResolver):
    """Resolves type paths from an explicit name to constructor table.

    Example:
        >>> resolver = MappingTypeResolver({"Greeter": Greeter})
        >>> resolver.resolve("Greeter")
        <class 'Greeter'>
    """

    def __init__(self, types: Optional[Mapping[str, Any]] = None) -> None:
        self._types: Dict[str, Any] = dict(types or {})

    def register(self, type_path: str, constructor: Any) -> None:
        """Add or replace the constructor for a type path."""
        self._types[type_path] = constructor

    def resolve(self, type_path: str) -> Any:
        try:
            return self._types[type_path]
        except KeyError:
            raise TypeResolutionError(type_path, "Type path is not registered") from None


class ChainedTypeResolver(ITypeResolver):
    """Tries several resolvers in order; the first one that succeeds wins."""

    def __init__(self, *resolvers: ITypeResolver) -> None:
        self._resolvers = list(resolvers)

    def resolve(self, type_path: str) -> Any:
        reasons = []
        for resolver in self._resolvers:
            try:
                return resolver.resolve(type_path)
            except TypeResolutionError as e:
                reasons.append(e.reason or str(e))
        raise TypeResolutionError(type_path, "; ".join(reasons) or "No resolvers configured")
