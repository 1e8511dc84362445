from typing import List, Optional


class FactoryException(Exception):
    """Base exception for object factory errors."""


class MissingConfigurationError(FactoryException):
    """Raised when a requested or referenced name has no descriptor.

    Attributes:
        name: The name without configuration.
        required_by: The object that referenced it, if any.
    """

    def __init__(self, name: str, required_by: Optional[str] = None) -> None:
        self.name = name
        self.required_by = required_by
        message = f"Configuration for object '{name}' does not exist"
        if required_by:
            message += f" (required by '{required_by}')"
        super().__init__(message)


class InvalidConfigurationError(FactoryException):
    """Raised when a descriptor is present but malformed.

    Attributes:
        name: The object whose descriptor is invalid.
        reason: Description of the problem.
    """

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"Invalid configuration for object '{name}': {reason}")


class DependencyCycleError(FactoryException):
    """Raised when the dependency graph of a requested object contains a cycle.

    Attributes:
        dependency_chain: Names along the cycle, starting and ending with the repeated name.
    """

    def __init__(self, dependency_chain: List[str]) -> None:
        self.dependency_chain = dependency_chain
        message = f"Dependency cycle detected: {' -> '.join(dependency_chain)}"
        super().__init__(message)


class TypeResolutionError(FactoryException):
    """Raised when a type path cannot be resolved to a value.

    Attributes:
        type_path: The configured dotted type path.
        reason: Optional reason for the failure.
    """

    def __init__(self, type_path: str, reason: Optional[str] = None) -> None:
        self.type_path = type_path
        self.reason = reason
        message = f"Cannot resolve type path: {type_path}"
        if reason:
            message += f". Reason: {reason}"
        super().__init__(message)


class ConstructionTypeError(FactoryException, TypeError):
    """Raised when a type path resolves to something that cannot be called.

    Attributes:
        name: The object being built.
        type_path: The configured dotted type path.
        found_kind: Name of the type actually found at that path.
    """

    def __init__(self, name: str, type_path: str, found_kind: str) -> None:
        self.name = name
        self.type_path = type_path
        self.found_kind = found_kind
        super().__init__(
            f"Constructor of the type {type_path} of the required object {name} "
            f"is expected to be callable, but {found_kind} is found."
        )


class InvalidParameterError(FactoryException):
    """Raised when a literal parameter cannot be converted.

    Attributes:
        name: The object being built.
        slot: The positional slot key of the parameter.
        reason: Description of the problem.
    """

    def __init__(self, name: str, slot: str, reason: str) -> None:
        self.name = name
        self.slot = slot
        self.reason = reason
        super().__init__(f"Invalid parameter {slot} of object '{name}': {reason}")


class ConstructionError(FactoryException):
    """Raised when a constructor fails while building an object.

    Attributes:
        name: The object being built.
        reason: Description of the underlying failure.
    """

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"Failed to construct object '{name}': {reason}")


class BuildOrderError(FactoryException, RuntimeError):
    """Raised when a reference is not cached at the time its dependent is built.

    This means the build order was wrong; it is a programming error rather than
    a configuration problem.

    Attributes:
        name: The object being built.
        reference: The referenced name that was not available.
    """

    def __init__(self, name: str, reference: str) -> None:
        self.name = name
        self.reference = reference
        super().__init__(f"Object '{name}' references '{reference}', which has not been built")
