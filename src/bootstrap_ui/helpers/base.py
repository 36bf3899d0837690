# src/bootstrap_ui/helpers/base.py
"""
Helper — base comum dos helpers de apresentação.

Cada helper declara:
    - `name`: chave da seção `helpers.<name>` na config da View
    - `_default_config`: configuração padrão (inclui `templates`)
    - `_default_attributes`: atributos padrão por tipo de elemento

A configuração efetiva é resolvida uma única vez, no construtor:

    deep_merge(deep_merge(_default_config, view.helper_config(name)), config)

Invariantes:
    - `_default_config` e `_default_attributes` da classe nunca são mutados
    - Atributos do chamador sempre vencem os defaults do elemento
"""

from __future__ import annotations

from copy import deepcopy
from typing import Any, Dict, Mapping, Optional

from ..core.config.merge import deep_merge
from ..core.view import View
from ..templating.attributes import merge_attributes
from ..templating.string_template import StringTemplate


class Helper:
    name: str = "helper"

    _default_config: Dict[str, Any] = {"templates": {}}

    _default_attributes: Dict[str, Dict[str, Any]] = {}

    def __init__(self, view: Optional[View] = None, config: Optional[Mapping[str, Any]] = None) -> None:
        self.view = view if view is not None else View()

        effective = deep_merge(self._default_config, self.view.helper_config(self.name))
        if config:
            effective = deep_merge(effective, config)

        self._config: Dict[str, Any] = effective
        self._templater: Optional[StringTemplate] = None

    # -----------------------------
    # Config
    # -----------------------------
    def get_config(self, key: Optional[str] = None, default: Any = None) -> Any:
        if key is None:
            return deepcopy(self._config)
        return self._config.get(key, default)

    def set_config(self, key: str, value: Any) -> "Helper":
        self._config[key] = value
        if key == "templates":
            self._templater = None
        return self

    # -----------------------------
    # Templates
    # -----------------------------
    def templater(self) -> StringTemplate:
        if self._templater is None:
            self._templater = StringTemplate(self._config.get("templates") or {})
        return self._templater

    def templates(self, overrides: Optional[Mapping[str, str]] = None):
        """
        Sem argumentos, retorna os templates atuais. Com um mapa, sobrescreve
        os templates informados e retorna `self`.
        """
        if overrides is None:
            return self.templater().get()

        self._config["templates"] = {**(self._config.get("templates") or {}), **overrides}
        self.templater().add(overrides)
        return self

    def merge_attributes(self, template: str, attrs: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        return merge_attributes(attrs, self._default_attributes.get(template))

    def _attrs(self, value: Any, *, where: str) -> Dict[str, Any]:
        """Normaliza um mapa de atributos; valores que não são mapa viram `{}` com warning."""
        if value is None:
            return {}
        if isinstance(value, Mapping):
            return dict(value)
        self.warn(f"{where}: atributos ignorados (esperado mapa, recebido {type(value).__name__})")
        return {}

    # -----------------------------
    # Logging & warnings
    # -----------------------------
    def log(self, level: str, message: str, **extra: Any) -> None:
        self.view.log(helper=self.name, level=level, message=message, **extra)

    def warn(self, message: str) -> None:
        self.view.add_warning(helper=self.name, message=message)
