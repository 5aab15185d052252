"""Controller and view configuration.

Frozen dataclasses — immutable after creation, validated on construction.
"""

from dataclasses import dataclass
from pathlib import Path

from bitty.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class ControllerConfig:
    """Container identifiers controllers resolve their collaborators under.

    The defaults are the well-known keys applications register::

        container.set("uri.generator", router)
        container.set("view", view)
    """

    uri_generator_id: str = "uri.generator"
    view_id: str = "view"

    def __post_init__(self) -> None:
        for field_name in ("uri_generator_id", "view_id"):
            if not getattr(self, field_name):
                msg = f"ControllerConfig.{field_name} must be a non-empty string"
                raise ConfigurationError(msg)


DEFAULT_CONTROLLER_CONFIG = ControllerConfig()


@dataclass(frozen=True, slots=True)
class ViewConfig:
    """Template loading options for ``bitty.templating.TemplateView``.

    Override what you need::

        config = ViewConfig(template_dir="app/templates", auto_reload=True)
    """

    template_dir: str | Path = "templates"
    extra_dirs: tuple[str | Path, ...] = ()  # Searched after template_dir, in order
    autoescape: bool = True
    trim_blocks: bool = True
    lstrip_blocks: bool = True
    auto_reload: bool = False

    def __post_init__(self) -> None:
        # Path("") collapses to "."; spell the working directory as Path.cwd()
        if not str(self.template_dir) or self.template_dir == Path(""):
            msg = "ViewConfig.template_dir must not be empty"
            raise ConfigurationError(msg)
