"""Collaborator protocols consumed by controllers.

Structural protocols, so any object with the right methods qualifies;
no registration or inheritance required. All are ``@runtime_checkable``
which lets ``isinstance()`` serve as a capability check for services
pulled out of a string-keyed container.

Runtime checks only verify that the methods exist, not their signatures.
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ContainerInterface(Protocol):
    """A read-only registry of services keyed by string identifier.

    ``get`` raises ``ServiceNotFound`` (or another ``LookupError``)
    for identifiers that are not registered.
    """

    def get(self, id: str) -> Any: ...  # noqa: A002
    def has(self, id: str) -> bool: ...  # noqa: A002


@runtime_checkable
class ContainerAwareInterface(Protocol):
    """An object that receives the container after construction."""

    def set_container(self, container: ContainerInterface | None) -> None: ...
    def get_container(self) -> ContainerInterface | None: ...


@runtime_checkable
class UriGeneratorInterface(Protocol):
    """Builds URIs for named routes.

    ``generate`` raises ``RouteNotFound`` for unknown route names.
    """

    def generate(self, name: str, params: Any = None) -> str: ...


@runtime_checkable
class ViewInterface(Protocol):
    """Renders a template identifier plus data into a string."""

    def render(self, template: str, data: Any = None) -> str: ...


def qualified_name(cls: type) -> str:
    """Return the dotted import path of *cls* for error messages."""
    return f"{cls.__module__}.{cls.__qualname__}"
