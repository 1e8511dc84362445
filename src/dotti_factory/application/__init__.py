"""
Application layer - Use cases and orchestration.

This layer contains the factory and the components it orchestrates.
It depends only on the Domain layer.
"""

from .builder import ObjectBuilder
from .config_store import ConfigStore
from .factory import ObjectFactory
from .instance_cache import InstanceCache
from .merging import deep_merge
from .resolver import DependencyResolver
from .type_resolvers import ChainedTypeResolver, ImportTypeResolver, MappingTypeResolver

__all__ = [
    "ObjectFactory",
    "ConfigStore",
    "InstanceCache",
    "DependencyResolver",
    "ObjectBuilder",
    "ImportTypeResolver",
    "MappingTypeResolver",
    "ChainedTypeResolver",
    "deep_merge",
]
