"""
Testing utilities module.

Provides helpers for testing applications that build their objects with dotti-factory.
"""

from .utilities import TestFactory, create_mock_factory

__all__ = [
    "TestFactory",
    "create_mock_factory",
]
