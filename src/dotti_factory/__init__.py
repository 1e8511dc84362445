"""
dotti-factory: Configuration-driven object factory with dependency ordering.

Public API exports for the dotti-factory package.
"""

# Application exports
from dotti_factory.application.factory import ObjectFactory
from dotti_factory.application.type_resolvers import (
    ChainedTypeResolver,
    ImportTypeResolver,
    MappingTypeResolver,
)

# Domain exports
from dotti_factory.domain.exceptions import (
    BuildOrderError,
    ConstructionError,
    ConstructionTypeError,
    DependencyCycleError,
    FactoryException,
    InvalidConfigurationError,
    InvalidParameterError,
    MissingConfigurationError,
    TypeResolutionError,
)

__version__ = "0.1.0"

__all__ = [
    # Factory
    "ObjectFactory",
    # Type resolvers
    "ImportTypeResolver",
    "MappingTypeResolver",
    "ChainedTypeResolver",
    # Exceptions
    "FactoryException",
    "MissingConfigurationError",
    "InvalidConfigurationError",
    "DependencyCycleError",
    "TypeResolutionError",
    "ConstructionTypeError",
    "InvalidParameterError",
    "ConstructionError",
    "BuildOrderError",
]
