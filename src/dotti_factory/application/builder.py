import logging
import re
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Any, List, Optional

from pydantic import TypeAdapter, ValidationError

from dotti_factory.domain import (
    BuildOrderError,
    ConstructionError,
    ConstructionTypeError,
    IInstanceCache,
    InvalidParameterError,
    IObjectBuilder,
    ITypeResolver,
    ObjectDescriptor,
    ParamKind,
    ParamSpec,
    TypeResolutionError,
)

_DATETIME_ADAPTER = TypeAdapter(datetime)

# "Tue Mar 26 2013 15:29:32 GMT+0800 (CST)": trailing zone comment, prefix on the offset
_ZONE_COMMENT = re.compile(r"\s*\([^)]*\)\s*$")
_ZONE_PREFIX = re.compile(r"\b(?:GMT|UTC)(?=[+-]\d{4}\b)")


class ObjectBuilder(IObjectBuilder):
    """Constructs a single object from its descriptor.

    Assumes every referenced object is already in the cache; the factory
    guarantees this by building in dependency order.

    Attributes:
        _type_resolver: Maps the descriptor's type path to a constructor.
        _logger: Receives fatal construction errors.
    """

    def __init__(self, type_resolver: ITypeResolver, logger: Optional[logging.Logger] = None) -> None:
        self._type_resolver = type_resolver
        self._logger = logger or logging.getLogger(__name__)

    def build(self, name: str, descriptor: ObjectDescriptor, cache: IInstanceCache) -> Any:
        """Construct the object and store it in the cache.

        Args:
            name: The object name.
            descriptor: How to build it.
            cache: Read for references, written with the result on success.

        Returns:
            The new instance.

        Raises:
            TypeResolutionError: If the type path cannot be resolved.
            ConstructionTypeError: If the type path resolves to a non-callable.
            InvalidParameterError: If a typed literal cannot be converted.
            BuildOrderError: If a referenced object is not cached.
            ConstructionError: If the constructor raises.
        """
        try:
            constructor = self._type_resolver.resolve(descriptor.type_path)
        except TypeResolutionError as e:
            self._logger.critical(str(e))
            raise

        if not callable(constructor):
            error = ConstructionTypeError(name, descriptor.type_path, type(constructor).__name__)
            self._logger.critical(str(error))
            raise error

        args = self._bind_arguments(name, descriptor, cache)

        try:
            instance = constructor(*args)
        except Exception as e:
            self._logger.critical("Constructor %s of object %s failed: %s", descriptor.type_path, name, e)
            raise ConstructionError(name, f"{type(e).__name__}: {e}") from e

        cache.set(name, instance)
        return instance

    def _bind_arguments(self, name: str, descriptor: ObjectDescriptor, cache: IInstanceCache) -> List[Any]:
        """Resolve the parameters into positional arguments, in numeric slot order."""
        return [self._bind(name, slot, spec, cache) for slot, spec in descriptor.ordered_params()]

    def _bind(self, name: str, slot: str, spec: Optional[ParamSpec], cache: IInstanceCache) -> Any:
        if spec is None:
            return None

        kind = spec.kind
        if kind is ParamKind.REFERENCE:
            if not cache.has(spec.reference):
                raise BuildOrderError(name, spec.reference)
            return cache.get(spec.reference)
        if kind is ParamKind.TYPED_LITERAL:
            return self._parse_date(name, slot, spec.value)
        if kind is ParamKind.VALUE:
            return spec.value
        return None

    @staticmethod
    def _parse_text_date(raw: str) -> Optional[datetime]:
        """Parse RFC 2822 or ``Date.toString`` style text, or return None."""
        text = _ZONE_PREFIX.sub("", _ZONE_COMMENT.sub("", raw.strip()))
        try:
            return parsedate_to_datetime(text)
        except (IndexError, TypeError, ValueError):
            return None

    @classmethod
    def _parse_date(cls, name: str, slot: str, raw: Any) -> datetime:
        """Parse ISO-8601 text, RFC 2822 text or an epoch number; naive results are taken as UTC."""
        if raw is None:
            raise InvalidParameterError(name, slot, "Date literal has no value")
        try:
            value = _DATETIME_ADAPTER.validate_python(raw)
        except ValidationError as e:
            value = cls._parse_text_date(raw) if isinstance(raw, str) else None
            if value is None:
                raise InvalidParameterError(name, slot, f"Cannot parse {raw!r} as a date") from e
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value
