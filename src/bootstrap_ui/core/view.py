# src/bootstrap_ui/core/view.py
"""
View — contexto de uma passada de renderização.

A View é o ponto compartilhado pelos helpers durante a renderização de
uma página:
- configuração efetiva (seções `helpers.<nome>` e `url`)
- colaboradores externos: `UrlBuilder` (rotas) e `HtmlHelper` (ícones)
- registro de eventos estruturados de renderização
- coleta de warnings não fatais por helper

Princípios fundamentais:
- Isolamento por passada (cada renderização de página possui sua própria View)
- Helpers não acessam estado global
- Uma View não deve ser compartilhada entre renderizações concorrentes
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from .config.loader import load_config
from .config.schema import validate_ui_config


@dataclass
class View:
    """
    Contexto de renderização compartilhado pelos helpers.

    Campos canônicos:
    - config: configuração efetiva (ex.: resultado de `load_config`)
    - warnings: warnings por helper
    - events: log estruturado de eventos
    - _helpers: instâncias de helpers criadas via `helper()`
    """

    config: Dict[str, Any] = field(default_factory=dict)

    warnings: Dict[str, List[str]] = field(default_factory=dict)
    events: List[Dict[str, Any]] = field(default_factory=list)

    _helpers: Dict[str, Any] = field(default_factory=dict, repr=False)
    _url_builder: Any = field(default=None, repr=False)

    def __post_init__(self) -> None:
        validate_ui_config(self.config)

    @classmethod
    def from_files(cls, *, defaults_path: str, local_path: Optional[str] = None) -> "View":
        """Cria uma View a partir de arquivos de configuração (YAML/JSON)."""
        return cls(config=load_config(defaults_path=defaults_path, local_path=local_path))

    # -----------------------------
    # Configuração
    # -----------------------------
    def helper_config(self, name: str) -> Dict[str, Any]:
        """Retorna a seção `helpers.<name>` da config (vazia quando ausente)."""
        return (self.config.get("helpers") or {}).get(name, {})

    # -----------------------------
    # Colaboradores
    # -----------------------------
    @property
    def url(self):
        if self._url_builder is None:
            from ..helpers.url import UrlBuilder

            url_config = self.config.get("url") or {}
            self._url_builder = UrlBuilder(base=url_config.get("base", ""))
        return self._url_builder

    @property
    def html(self):
        return self.helper("html")

    def helper(self, name: str):
        """Retorna (criando na primeira chamada) o helper registrado com `name`.

        Nomes conhecidos: `card`, `description`, `html`, `nav`, `table`.
        """
        if name not in self._helpers:
            from ..helpers import HELPERS

            if name not in HELPERS:
                raise KeyError(name)
            self._helpers[name] = HELPERS[name](self)
        return self._helpers[name]

    # -----------------------------
    # Logging & warnings
    # -----------------------------
    def log(self, *, helper: str, level: str, message: str, **extra: Any) -> None:
        event = {
            "helper": helper,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def add_warning(self, *, helper: str, message: str) -> None:
        if helper not in self.warnings:
            self.warnings[helper] = []
        self.warnings[helper].append(message)
