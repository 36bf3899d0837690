# src/bootstrap_ui/templating/attributes.py
"""
Merge de atributos HTML com defaults por elemento.

Política (v1):
    - chaves do chamador sempre vencem os defaults
    - ordem resultante: chaves do chamador (na ordem dele), depois as
      chaves de default que o chamador não informou
    - `class` não é mesclado aqui; composição de classes usa `compose_class`
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping, Optional


def merge_attributes(
    attrs: Optional[Mapping[str, Any]],
    defaults: Optional[Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    """Retorna um novo dict com `attrs` sobre `defaults`. Nenhum input é mutado."""
    result: Dict[str, Any] = dict(attrs) if isinstance(attrs, Mapping) else {}
    for key, value in (defaults or {}).items():
        if key not in result:
            result[key] = value
    return result


def is_blank_token(value: Any) -> bool:
    """Token descartado em listas de atributos: None, False ou string vazia (0 é mantido)."""
    return value is None or value is False or value == ""


def class_tokens(value: Any) -> list:
    """Normaliza um valor de `class` (str, list/tuple ou None) em lista de tokens."""
    if value is None or value is False:
        return []
    if isinstance(value, (list, tuple)):
        return [str(v) for v in value if not is_blank_token(v)]
    return [str(value)] if str(value) else []


def compose_class(computed: Iterable[Any], extra: Any = None) -> str:
    """
    Monta o valor final de `class`.

    A lista calculada vem primeiro; a classe extra do chamador é anexada
    ao final, nunca substituindo a lista calculada.
    """
    tokens = [str(t) for t in computed if not is_blank_token(t)]
    tokens.extend(class_tokens(extra))
    return " ".join(tokens)
