"""Tests for bitty.templating — Jinja2-backed view service."""

from pathlib import Path

import pytest
from jinja2 import TemplateNotFound

from bitty.config import ViewConfig
from bitty.controller import AbstractController
from bitty.templating import TemplateView, create_environment


@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    (tmp_path / "page.html").write_text("<h1>{{ title }}</h1>")
    (tmp_path / "list.html").write_text(
        "{% for item in data %}<li>{{ item }}</li>{% endfor %}"
    )
    (tmp_path / "layout.html").write_text(
        "<main>{% block content %}default{% endblock %}</main>"
        "<aside>{% block sidebar %}{{ note }}{% endblock %}</aside>"
    )
    return tmp_path


@pytest.fixture
def view(template_dir: Path) -> TemplateView:
    return TemplateView.from_config(ViewConfig(template_dir=template_dir))


class TestCreateEnvironment:
    def test_options_from_config(self, template_dir: Path) -> None:
        env = create_environment(
            ViewConfig(template_dir=template_dir, trim_blocks=False, auto_reload=True)
        )
        assert env.trim_blocks is False
        assert env.auto_reload is True

    def test_extra_dirs_searched_after_template_dir(
        self, template_dir: Path, tmp_path_factory: pytest.TempPathFactory
    ) -> None:
        shared = tmp_path_factory.mktemp("shared")
        (shared / "page.html").write_text("shadowed")
        (shared / "footer.html").write_text("<footer>shared</footer>")
        env = create_environment(ViewConfig(template_dir=template_dir, extra_dirs=(shared,)))

        assert env.get_template("footer.html").render() == "<footer>shared</footer>"
        assert env.get_template("page.html").render(title="x") == "<h1>x</h1>"

    def test_filters_and_globals(self, template_dir: Path) -> None:
        (template_dir / "custom.html").write_text("{{ site }}|{{ 'abc' | shout }}")
        env = create_environment(
            ViewConfig(template_dir=template_dir),
            filters={"shout": lambda s: s.upper()},
            globals_={"site": "Bitty"},
        )
        assert env.get_template("custom.html").render() == "Bitty|ABC"


class TestTemplateView:
    def test_render_mapping(self, view: TemplateView) -> None:
        assert view.render("page.html", {"title": "Home"}) == "<h1>Home</h1>"

    def test_autoescape(self, view: TemplateView) -> None:
        html = view.render("page.html", {"title": "<b>x</b>"})
        assert html == "<h1>&lt;b&gt;x&lt;/b&gt;</h1>"

    def test_render_sequence_as_data(self, view: TemplateView) -> None:
        assert view.render("list.html", ["a", "b"]) == "<li>a</li><li>b</li>"

    def test_render_none_is_empty_context(self, view: TemplateView) -> None:
        assert view.render("page.html") == "<h1></h1>"

    def test_missing_template(self, view: TemplateView) -> None:
        with pytest.raises(TemplateNotFound):
            view.render("nope.html")

    def test_render_block(self, view: TemplateView) -> None:
        assert view.render_block("layout.html", "sidebar", {"note": "hi"}) == "hi"

    def test_render_unknown_block(self, view: TemplateView) -> None:
        with pytest.raises(KeyError, match="footer"):
            view.render_block("layout.html", "footer")


class _Container:
    def __init__(self, **services: object) -> None:
        self._services = {k.replace("_", "."): v for k, v in services.items()}

    def get(self, id: str) -> object:  # noqa: A002
        return self._services[id]

    def has(self, id: str) -> bool:  # noqa: A002
        return id in self._services


class _Pages(AbstractController):
    def home(self):
        return self.render("page.html", {"title": "Welcome"})


def test_controller_renders_through_template_view(view: TemplateView) -> None:
    response = _Pages(_Container(view=view)).home()
    assert response.status == 200
    assert response.text == "<h1>Welcome</h1>"
