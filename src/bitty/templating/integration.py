"""Jinja2 environment setup and the template-backed view service.

Creates a Jinja2 Environment from a ``ViewConfig`` and wraps it in
``TemplateView``, an implementation of ``ViewInterface`` that
applications register in their container under ``"view"``.
"""

import logging
from collections.abc import Callable, Mapping
from typing import Any

from jinja2 import ChoiceLoader, Environment, FileSystemLoader

from bitty.config import ViewConfig

logger = logging.getLogger("bitty.templating")


def create_environment(
    config: ViewConfig,
    filters: Mapping[str, Callable[..., Any]] | None = None,
    globals_: Mapping[str, Any] | None = None,
) -> Environment:
    """Create a Jinja2 Environment from view configuration.

    Templates are looked up in ``config.template_dir`` first, then in
    each of ``config.extra_dirs`` (components, partials, shared layouts).
    """
    loaders = [FileSystemLoader(str(config.template_dir))]
    loaders.extend(FileSystemLoader(str(d)) for d in config.extra_dirs)

    env = Environment(
        loader=ChoiceLoader(loaders),
        autoescape=config.autoescape,
        auto_reload=config.auto_reload,
        trim_blocks=config.trim_blocks,
        lstrip_blocks=config.lstrip_blocks,
    )

    if filters:
        env.filters.update(filters)
    if globals_:
        env.globals.update(globals_)

    return env


def _context(data: Any) -> dict[str, Any]:
    """Turn a render payload into a template context.

    Mappings become the context; ``None`` is an empty context; anything
    else is exposed to the template as ``data``.
    """
    if data is None:
        return {}
    if isinstance(data, Mapping):
        return dict(data)
    return {"data": data}


class TemplateView:
    """View service rendering Jinja2 templates by name.

    Usage::

        view = TemplateView.from_config(ViewConfig(template_dir="templates"))
        html = view.render("page.html", {"title": "Home"})

    Missing templates raise ``jinja2.TemplateNotFound``.
    """

    __slots__ = ("env",)

    def __init__(self, env: Environment) -> None:
        self.env = env

    @classmethod
    def from_config(
        cls,
        config: ViewConfig,
        filters: Mapping[str, Callable[..., Any]] | None = None,
        globals_: Mapping[str, Any] | None = None,
    ) -> "TemplateView":
        return cls(create_environment(config, filters, globals_))

    def render(self, template: str, data: Any = None) -> str:
        """Render a full template to string."""
        logger.debug("Rendering template %r", template)
        return self.env.get_template(template).render(_context(data))

    def render_block(self, template: str, block: str, data: Any = None) -> str:
        """Render a single named block from *template* to string.

        Raises ``KeyError`` if the template defines no such block.
        """
        tpl = self.env.get_template(template)
        try:
            block_func = tpl.blocks[block]
        except KeyError:
            msg = f"Template {template!r} has no block {block!r}"
            raise KeyError(msg) from None
        ctx = tpl.new_context(_context(data))
        return "".join(block_func(ctx))
