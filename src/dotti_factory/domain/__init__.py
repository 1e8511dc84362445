"""
Domain layer - Core models, errors and contracts.

This layer contains the descriptor models and the abstract interfaces of the
object factory. It has no dependencies on other layers.
"""

from .enums import LiteralType, ParamKind
from .exceptions import (
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
from .interfaces import (
    IConfigStore,
    IDependencyResolver,
    IInstanceCache,
    IObjectBuilder,
    IObjectFactory,
    ITypeResolver,
)
from .models import ObjectDescriptor, ParamSpec, ResolutionContext

__all__ = [
    # Enums
    "ParamKind",
    "LiteralType",
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
    # Interfaces
    "ITypeResolver",
    "IInstanceCache",
    "IConfigStore",
    "IDependencyResolver",
    "IObjectBuilder",
    "IObjectFactory",
    # Models
    "ObjectDescriptor",
    "ParamSpec",
    "ResolutionContext",
]
