"""
FastAPI integration module.

Provides helpers for serving objects built by dotti-factory to FastAPI endpoints.
"""

from .integration import (
    create_app_dependency,
    create_fastapi_dependency,
    get_factory,
    install_factory,
)

__all__ = [
    "create_fastapi_dependency",
    "create_app_dependency",
    "install_factory",
    "get_factory",
]
