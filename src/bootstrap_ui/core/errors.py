"""
Bootstrap UI — Exceções tipadas da camada de templates.

Regras:
- Dados de entrada malformados (atributos, células) nunca levantam exceção
  durante `render()`; viram warning na View e caem no default.
- Exceções aqui representam erro de programação ou de configuração
  (ex.: template inexistente).
- Exceções carregam apenas dados estruturados em `details`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class BootstrapUIError(Exception):
    """Base class para exceções dos helpers.

    - `message`: mensagem curta e humana
    - `details`: dados estruturados para diagnóstico
    - `hint`: ação sugerida (onde corrigir)
    """

    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    hint: Optional[str] = None

    def __str__(self) -> str:  # pragma: no cover
        return self.message


@dataclass(frozen=True)
class TemplateNotFoundError(BootstrapUIError):
    """Template nomeado não existe no StringTemplate."""


def template_not_found(*, name: str, available: list) -> TemplateNotFoundError:
    return TemplateNotFoundError(
        message=f"Template não encontrado: {name}",
        details={"name": name, "available": sorted(available)},
        hint="Declare o template em `templates` na config do helper ou via `helper.templates({...})`.",
    )
