# tests/core/test_view.py
"""
Testes da View como contexto de renderização.

Os testes asseguram que:
- eventos de log são estruturados e carregam o nome do helper
- warnings são agrupados por helper
- a seção `helpers.<nome>` chega à configuração efetiva do helper
- `helper()` cria e reaproveita instâncias por nome
- `url.base` configura o UrlBuilder
"""

from pathlib import Path

import pytest

from bootstrap_ui.core.view import View
from bootstrap_ui.helpers.nav import NavHelper
from bootstrap_ui.helpers.table import TableHelper


def test_log_appends_structured_event(view):
    view.log(helper="nav", level="DEBUG", message="render", tabs=2)

    assert len(view.events) == 1
    event = view.events[0]
    assert event["helper"] == "nav"
    assert event["level"] == "DEBUG"
    assert event["message"] == "render"
    assert event["tabs"] == 2
    assert "timestamp" in event


def test_warnings_grouped_by_helper(view):
    view.add_warning(helper="table", message="a")
    view.add_warning(helper="table", message="b")
    view.add_warning(helper="nav", message="c")

    assert view.warnings == {"table": ["a", "b"], "nav": ["c"]}


def test_render_records_debug_event(view, table):
    table.row([1, "Ann"])
    table.render()

    assert view.events[-1]["helper"] == "table"
    assert view.events[-1]["message"] == "render"
    assert view.events[-1]["rows"] == 1


def test_helper_section_reaches_helper_config():
    view = View(config={"helpers": {"nav": {"type": "pills"}}})
    nav = NavHelper(view)

    assert nav.get_config("type") == "pills"
    assert nav.get_config("fade") is True


def test_constructor_config_wins_over_view_section():
    view = View(config={"helpers": {"nav": {"type": "pills", "fill": True}}})
    nav = NavHelper(view, {"type": "tabs"})

    assert nav.get_config("type") == "tabs"
    assert nav.get_config("fill") is True


def test_helper_is_created_once_per_name(view):
    nav = view.helper("nav")

    assert isinstance(nav, NavHelper)
    assert view.helper("nav") is nav
    assert isinstance(view.helper("table"), TableHelper)


def test_unknown_helper_raises(view):
    with pytest.raises(KeyError):
        view.helper("carousel")


def test_from_files_uses_url_base(tmp_path: Path, ui_defaults_yaml, ui_local_yaml):
    defaults = tmp_path / "ui.defaults.yaml"
    local = tmp_path / "ui.local.yaml"
    defaults.write_text(ui_defaults_yaml, encoding="utf-8")
    local.write_text(ui_local_yaml, encoding="utf-8")

    view = View.from_files(defaults_path=str(defaults), local_path=str(local))

    assert view.url.build({"controller": "Articles", "action": "index"}) == "/app/articles/index"
    assert view.helper("nav").get_config("type") == "pills"
