"""Base class for HTTP controllers.

A controller holds a reference to the application's service container
and nothing else. Every operation resolves its collaborator from the
container at call time, so one instance can serve any number of
requests (or be built per request) without carrying state between them.
"""

import logging
from abc import ABC
from collections.abc import Mapping, Sequence
from typing import Any

from bitty.config import DEFAULT_CONTROLLER_CONFIG, ControllerConfig
from bitty.errors import InternalServerError
from bitty.http.response import Response, redirect
from bitty.interfaces import ContainerInterface, ViewInterface, qualified_name

logger = logging.getLogger("bitty.controller")

# Marks an omitted render payload; an explicit None is forwarded as-is.
_NO_DATA: Any = object()


class AbstractController(ABC):
    """Base for application controllers.

    Usage::

        class HomeController(AbstractController):
            def index(self) -> Response:
                return self.render("home.html", {"user": self.get("auth").user})

    Container errors (``ServiceNotFound``) and URI generator errors
    (``RouteNotFound``) propagate unchanged; only a misconfigured
    ``"view"`` service is reported by the controller itself.
    """

    __slots__ = ("_config", "container")

    def __init__(
        self,
        container: ContainerInterface,
        *,
        config: ControllerConfig = DEFAULT_CONTROLLER_CONFIG,
    ) -> None:
        self.container = container
        self._config = config

    def get(self, id: str) -> Any:  # noqa: A002
        """Return the container entry registered under *id*."""
        return self.container.get(id)

    def redirect_to_route(
        self,
        name: str,
        params: Mapping[str, Any] | Sequence[Any] | None = None,
    ) -> Response:
        """Redirect (302) to the route *name* built with *params*."""
        if params is None:
            params = {}
        generator = self.container.get(self._config.uri_generator_id)
        uri = generator.generate(name, params)
        logger.debug("Redirecting to route %r: %s", name, uri)
        return redirect(uri)

    def render(self, template: str, data: Any = _NO_DATA) -> Response:
        """Render *template* with *data* into a 200 HTML response.

        Raises ``InternalServerError`` if the container's view service
        does not provide ``render(template, data)``.
        """
        if data is _NO_DATA:
            data = {}
        view_id = self._config.view_id
        view = self.container.get(view_id)
        if not isinstance(view, ViewInterface):
            detail = (
                f'Container service "{view_id}" must be an instance of '
                f"{qualified_name(ViewInterface)}"
            )
            logger.error("%s (got %s)", detail, type(view).__name__)
            raise InternalServerError(detail)

        html = view.render(template, data)
        return Response(html)
