# src/bootstrap_ui/templating/string_template.py
"""
StringTemplate — formatador de templates nomeados.

Templates são strings com marcadores `{{nome}}`:

    '<div{{attrs}}>{{content}}</div>'

`format(name, data)` substitui cada marcador por `data[nome]`.
`format_attributes(attrs)` produz a string de atributos HTML que vai
no marcador `{{attrs}}`.

Política de atributos (v1):
    - ordem de inserção preservada
    - cada atributo vira ` chave="valor"` (espaço à esquerda)
    - True → ` chave="chave"`; False/None → omitido
    - list/tuple → tokens unidos por um espaço
    - valores escapados com `html.escape` (inclui aspas)

Limites explícitos:
    - O conteúdo (`{{content}}`) NÃO é escapado; é responsabilidade do chamador
    - Não há lógica condicional nem laços dentro do template
"""

from __future__ import annotations

import html
import re
from typing import Any, Dict, Iterable, Mapping, Optional

from ..core.errors import template_not_found
from .attributes import is_blank_token

_PLACEHOLDER = re.compile(r"\{\{([\w.-]+)\}\}")


def _stringify(value: Any) -> str:
    return "" if value is None else str(value)


class StringTemplate:
    """Conjunto mutável de templates nomeados."""

    def __init__(self, templates: Optional[Mapping[str, str]] = None) -> None:
        self._templates: Dict[str, str] = dict(templates or {})

    def add(self, templates: Mapping[str, str]) -> "StringTemplate":
        """Adiciona/sobrescreve templates. Retorna `self`."""
        self._templates.update(templates)
        return self

    def get(self, name: Optional[str] = None):
        """Retorna o template `name` (ou uma cópia de todos quando `name` é None)."""
        if name is None:
            return dict(self._templates)
        return self._templates.get(name)

    def format(self, name: str, data: Optional[Mapping[str, Any]] = None) -> str:
        """
        Renderiza o template `name` com os valores de `data`.

        Marcadores ausentes em `data` (ou com valor None) viram string vazia.

        Raises:
            TemplateNotFoundError: Se `name` não estiver registrado.
        """
        if name not in self._templates:
            raise template_not_found(name=name, available=list(self._templates))

        values = data or {}
        return _PLACEHOLDER.sub(
            lambda m: _stringify(values.get(m.group(1))),
            self._templates[name],
        )

    def format_attributes(
        self,
        attrs: Optional[Mapping[str, Any]],
        exclude: Iterable[str] = (),
    ) -> str:
        """Formata um mapa de atributos HTML (ver política no módulo)."""
        if not isinstance(attrs, Mapping):
            return ""

        skip = set(exclude)
        parts = []
        for key, value in attrs.items():
            if key in skip or value is None or value is False:
                continue

            if value is True:
                value = key
            elif isinstance(value, (list, tuple)):
                value = " ".join(_stringify(v) for v in value if not is_blank_token(v))

            parts.append(f' {html.escape(str(key))}="{html.escape(_stringify(value))}"')

        return "".join(parts)
