"""Template-backed view service (Jinja2)."""

from bitty.templating.integration import TemplateView, create_environment

__all__ = ["TemplateView", "create_environment"]
