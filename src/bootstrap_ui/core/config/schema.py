# src/bootstrap_ui/core/config/schema.py
"""
Validação estrutural da configuração dos helpers.

Formato aceito:

    helpers:            # opcional, dict
      <nome>:           # dict por helper (card, description, html, nav, table)
        templates:      # opcional, dict nome -> string de template
          <template>: '<div{{attrs}}>{{content}}</div>'
        <chave>: <valor>
    url:                # opcional, dict
      base: /app        # opcional, string

Qualquer forma diferente é falha fatal (`InvalidConfigRootTypeError`),
com o caminho da chave na mensagem. Não há coerção nem valores implícitos.
"""

from __future__ import annotations

from typing import Any, Dict

from .errors import InvalidConfigRootTypeError


def _expect(cond: bool, msg: str) -> None:
    if not cond:
        raise InvalidConfigRootTypeError(msg)


def _type_name(value: Any) -> str:
    return type(value).__name__


def validate_ui_config(data: Any) -> Dict[str, Any]:
    """
    Valida a forma da configuração e a devolve sem alterações.

    Raises:
        InvalidConfigRootTypeError: Se a raiz, `helpers`, `helpers.<nome>`,
            `helpers.<nome>.templates`, `url` ou `url.base` tiverem tipo inválido.
    """
    _expect(isinstance(data, dict), f"Config root deve ser dict, recebido: {_type_name(data)}")

    if "helpers" in data:
        helpers = data["helpers"]
        _expect(isinstance(helpers, dict), f"'helpers' deve ser dict, recebido: {_type_name(helpers)}")

        for name, section in helpers.items():
            _expect(
                isinstance(section, dict),
                f"'helpers.{name}' deve ser dict, recebido: {_type_name(section)}",
            )
            if "templates" not in section:
                continue

            templates = section["templates"]
            _expect(
                isinstance(templates, dict),
                f"'helpers.{name}.templates' deve ser dict, recebido: {_type_name(templates)}",
            )
            for template, value in templates.items():
                _expect(
                    isinstance(value, str),
                    f"'helpers.{name}.templates.{template}' deve ser str, recebido: {_type_name(value)}",
                )

    if "url" in data:
        url = data["url"]
        _expect(isinstance(url, dict), f"'url' deve ser dict, recebido: {_type_name(url)}")
        if "base" in url:
            _expect(
                isinstance(url["base"], str),
                f"'url.base' deve ser str, recebido: {_type_name(url['base'])}",
            )

    return data
