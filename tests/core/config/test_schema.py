# tests/core/config/test_schema.py
"""
Testes da validação de forma da configuração.

Os testes asseguram que:
- `helpers` e cada `helpers.<nome>` precisam ser dict
- `helpers.<nome>.templates` precisa ser dict de strings
- `url` precisa ser dict e `url.base` precisa ser string
- o loader rejeita arquivos com forma inválida (inclusive após o merge)
- a View rejeita config inválida na construção
"""

from pathlib import Path

import pytest

try:
    from bootstrap_ui.core.config.schema import validate_ui_config
    from bootstrap_ui.core.config.loader import load_config
    from bootstrap_ui.core.config.errors import ConfigError, InvalidConfigRootTypeError
    from bootstrap_ui.core.view import View
except Exception as e:  # noqa: BLE001
    validate_ui_config = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing schema module. Implement:\n"
            "- src/bootstrap_ui/core/config/schema.py (validate_ui_config)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_valid_config_is_returned_unchanged():
    _require_imports()
    cfg = {
        "helpers": {"nav": {"type": "pills"}, "table": {"templates": {"wrapper": "<div>{{content}}</div>"}}},
        "url": {"base": "/app"},
    }

    assert validate_ui_config(cfg) is cfg
    assert validate_ui_config({}) == {}


@pytest.mark.parametrize(
    "cfg, path",
    [
        ({"helpers": ["nav"]}, "'helpers'"),
        ({"helpers": None}, "'helpers'"),
        ({"helpers": {"nav": "pills"}}, "'helpers.nav'"),
        ({"helpers": {"nav": None}}, "'helpers.nav'"),
        ({"helpers": {"card": {"templates": ["x"]}}}, "'helpers.card.templates'"),
        ({"helpers": {"card": {"templates": {"wrapper": 1}}}}, "'helpers.card.templates.wrapper'"),
        ({"url": "/app"}, "'url'"),
        ({"url": {"base": None}}, "'url.base'"),
    ],
)
def test_invalid_shape_raises_with_key_path(cfg, path):
    _require_imports()
    with pytest.raises(InvalidConfigRootTypeError) as exc:
        validate_ui_config(cfg)

    assert isinstance(exc.value, ConfigError)
    assert path in str(exc.value)


def test_loader_rejects_non_dict_helper_section(tmp_path: Path):
    _require_imports()
    defaults = tmp_path / "ui.defaults.yaml"
    defaults.write_text("helpers:\n  nav: pills\n", encoding="utf-8")

    with pytest.raises(InvalidConfigRootTypeError, match="helpers.nav"):
        load_config(defaults_path=str(defaults))


def test_loader_rejects_non_dict_url(tmp_path: Path):
    _require_imports()
    defaults = tmp_path / "ui.defaults.yaml"
    defaults.write_text("url: /app\n", encoding="utf-8")

    with pytest.raises(InvalidConfigRootTypeError, match="'url'"):
        load_config(defaults_path=str(defaults))


def test_loader_rejects_local_that_nulls_a_section(tmp_path: Path, ui_defaults_yaml):
    """
    `helpers.nav: null` no arquivo local não pode apagar a seção dos defaults.
    """
    _require_imports()
    defaults = tmp_path / "ui.defaults.yaml"
    local = tmp_path / "ui.local.yaml"
    defaults.write_text(ui_defaults_yaml, encoding="utf-8")
    local.write_text("helpers:\n  nav:\n", encoding="utf-8")

    with pytest.raises(InvalidConfigRootTypeError, match="helpers.nav"):
        load_config(defaults_path=str(defaults), local_path=str(local))


def test_view_rejects_invalid_config():
    _require_imports()
    with pytest.raises(InvalidConfigRootTypeError, match="helpers.nav"):
        View(config={"helpers": {"nav": ["pills"]}})

    with pytest.raises(InvalidConfigRootTypeError, match="'helpers'"):
        View(config={"helpers": "nav"})
