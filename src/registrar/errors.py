"""
Error types raised by resolvers
"""

from typing import Any


class RegistrarError(RuntimeError):
    """Base class for errors reported to GraphQL clients."""

    code = "INTERNAL"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        # graphql-core copies this onto the formatted error entry
        self.extensions: dict[str, Any] = {"code": self.code}


class NotFoundError(RegistrarError):
    """A lookup that a mutation depends on matched no record."""

    code = "NOT_FOUND"

    def __init__(self, entity: str, key: str, value: Any, expose_value: bool = True) -> None:
        super().__init__(f"{entity} not found")
        self.entity = entity
        self.key = key
        self.value = value
        self.extensions.update({"entity": entity, "key": key})
        # Personal data such as emails stays out of client-visible errors
        if expose_value:
            self.extensions[key] = str(value)
