"""Errors raised by bitty and by the collaborators it delegates to.

``InternalServerError`` is the only one controllers raise themselves,
for a misconfigured view service. Containers raise ``ServiceNotFound``
and URI generators raise ``RouteNotFound``; controllers let both through.
"""

from dataclasses import dataclass


class BittyError(Exception):
    """Root of the bitty exception tree."""


class ConfigurationError(BittyError):
    """A configuration object was built with an invalid value."""


@dataclass(frozen=True, slots=True)
class HTTPError(BittyError):
    """Error carrying the HTTP status the dispatcher should answer with."""

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        return f"{self.status}: {self.detail}" if self.detail else str(self.status)


class InternalServerError(HTTPError):
    """500 — the application cannot serve the request as configured."""

    def __init__(self, detail: str = "Internal Server Error") -> None:
        super().__init__(status=500, detail=detail)


class ContainerError(BittyError):
    """Base for errors raised by service containers."""


class ServiceNotFound(ContainerError, LookupError):  # noqa: N818
    """No service is registered under the requested identifier."""

    def __init__(self, id: str, detail: str = "") -> None:  # noqa: A002
        self.id = id
        super().__init__(detail or f'Service "{id}" not found in container')


class RouteNotFound(BittyError, LookupError):  # noqa: N818
    """A URI generator has no route with the requested name."""

    def __init__(self, name: str, detail: str = "") -> None:
        self.name = name
        super().__init__(detail or f'No route named "{name}"')
