"""Bitty — controller base class for small web applications.

Controllers reach their collaborators through a service container and
turn the result into an HTTP response: a redirect to a named route or
a rendered template.

Basic usage::

    from bitty import AbstractController

    class PostController(AbstractController):
        def show(self, post_id: int):
            post = self.get("posts").find(post_id)
            return self.render("post.html", {"post": post})

        def create(self, title: str):
            post = self.get("posts").add(title)
            return self.redirect_to_route("post.show", {"post_id": post.id})

Templates (Jinja2-backed view service)::

    from bitty import TemplateView, ViewConfig

    container.set("view", TemplateView.from_config(ViewConfig(template_dir="templates")))
"""

__version__ = "0.1.0.dev0"
__all__ = [
    "AbstractController",
    "BittyError",
    "ConfigurationError",
    "ContainerAwareInterface",
    "ContainerError",
    "ContainerInterface",
    "ControllerConfig",
    "HTTPError",
    "InternalServerError",
    "Response",
    "RouteNotFound",
    "ServiceNotFound",
    "TemplateView",
    "UriGeneratorInterface",
    "ViewConfig",
    "ViewInterface",
    "redirect",
]

# name -> module that defines it
_LAZY_IMPORTS: dict[str, str] = {
    "AbstractController": "bitty.controller",
    "BittyError": "bitty.errors",
    "ConfigurationError": "bitty.errors",
    "ContainerAwareInterface": "bitty.interfaces",
    "ContainerError": "bitty.errors",
    "ContainerInterface": "bitty.interfaces",
    "ControllerConfig": "bitty.config",
    "HTTPError": "bitty.errors",
    "InternalServerError": "bitty.errors",
    "Response": "bitty.http.response",
    "RouteNotFound": "bitty.errors",
    "ServiceNotFound": "bitty.errors",
    "TemplateView": "bitty.templating",
    "UriGeneratorInterface": "bitty.interfaces",
    "ViewConfig": "bitty.config",
    "ViewInterface": "bitty.interfaces",
    "redirect": "bitty.http.response",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import bitty`` from loading Jinja2 until ``TemplateView``
    is requested.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    from importlib import import_module

    return getattr(import_module(module_name), name)
