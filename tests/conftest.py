# tests/conftest.py
"""
Fixtures compartilhados para testes dos helpers.

Este módulo define fixtures reutilizáveis que fornecem:
- uma View isolada por teste (eventos e warnings limpos)
- helpers já ligados a essa View
- conteúdos YAML de configuração semelhantes ao uso real

Invariantes:
    - Nenhuma fixture realiza I/O (arquivos são escritos pelos testes em tmp_path)
    - Cada teste recebe instâncias novas; nada é compartilhado entre testes
"""

import pytest


@pytest.fixture
def view():
    from bootstrap_ui.core.view import View

    return View()


@pytest.fixture
def card(view):
    from bootstrap_ui.helpers.card import CardHelper

    return CardHelper(view)


@pytest.fixture
def description(view):
    from bootstrap_ui.helpers.description import DescriptionHelper

    return DescriptionHelper(view)


@pytest.fixture
def nav(view):
    from bootstrap_ui.helpers.nav import NavHelper

    return NavHelper(view)


@pytest.fixture
def table(view):
    from bootstrap_ui.helpers.table import TableHelper

    return TableHelper(view)


@pytest.fixture
def ui_defaults_yaml() -> str:
    """
    YAML de defaults semelhante a um `ui.defaults.yaml` real.

    Usado para validar leitura de YAML, seções por helper e `url.base`.
    """
    return (
        "helpers:\n"
        "  nav:\n"
        "    type: tabs\n"
        "    fade: true\n"
        "  table:\n"
        "    templates:\n"
        "      wrapper: '<div{{attrs}}>{{content}}</div>'\n"
        "url:\n"
        "  base: ''\n"
    )


@pytest.fixture
def ui_local_yaml() -> str:
    """YAML local que sobrescreve parte dos defaults."""
    return (
        "helpers:\n"
        "  nav:\n"
        "    type: pills\n"
        "url:\n"
        "  base: /app\n"
    )
