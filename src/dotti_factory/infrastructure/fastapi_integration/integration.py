from typing import Any, Callable

from fastapi import FastAPI, Request

from dotti_factory.domain import IObjectFactory

FACTORY_STATE_ATTRIBUTE = "object_factory"


def create_fastapi_dependency(factory: IObjectFactory, name: str) -> Callable[[], Any]:
    """Create a FastAPI Depends() callable that returns a named object from the factory.

    The object is built on first use and cached by the factory, so every
    request receives the same instance.

    Args:
        factory: The object factory to get the object from.
        name: Name of the object in the factory's registry.

    Returns:
        A callable that FastAPI can use with Depends().

    Example:
        >>> factory = ObjectFactory({"repo": {"type": "myapp.UserRepository"}})
        >>> get_repo = create_fastapi_dependency(factory, "repo")
        >>>
        >>> @app.get("/users")
        >>> async def list_users(repo: UserRepository = Depends(get_repo)):
        ...     return await repo.get_all()
    """

    def dependency() -> Any:
        """Get the object from the factory."""
        return factory.get(name)

    return dependency


def install_factory(app: FastAPI, factory: IObjectFactory) -> None:
    """Attach a factory to the application state.

    Endpoints can then use dependencies created by ``create_app_dependency``.

    Example:
        >>> app = FastAPI()
        >>> install_factory(app, ObjectFactory.from_file("objects.json"))
    """
    setattr(app.state, FACTORY_STATE_ATTRIBUTE, factory)


def get_factory(request: Request) -> IObjectFactory:
    """Return the factory installed on the request's application.

    Raises:
        RuntimeError: If no factory was installed.
    """
    factory = getattr(request.app.state, FACTORY_STATE_ATTRIBUTE, None)
    if factory is None:
        raise RuntimeError("Application does not have an object factory. Did you forget to call install_factory?")
    return factory


def create_app_dependency(name: str) -> Callable[[Request], Any]:
    """Create a FastAPI dependency that gets a named object from the installed factory.

    Requires ``install_factory`` to have been called on the application.

    Example:
        >>> get_mailer = create_app_dependency("mailer")
        >>>
        >>> @app.post("/invite")
        >>> async def invite(mailer: Mailer = Depends(get_mailer)):
        ...     return mailer.send()
    """

    def app_dependency(request: Request) -> Any:
        """Get the object from the application's factory."""
        return get_factory(request).get(name)

    return app_dependency
