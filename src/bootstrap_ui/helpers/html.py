# src/bootstrap_ui/helpers/html.py
"""HtmlHelper — ícones (Bootstrap Icons por padrão)."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from ..templating.attributes import compose_class
from .base import Helper


class HtmlHelper(Helper):
    name = "html"

    _default_config = {
        "icon_set": "bi",
        "tag": "i",
        "templates": {
            "icon": "<{{tag}}{{attrs}}></{{tag}}>",
        },
    }

    def icon(self, name: str, options: Optional[Mapping[str, Any]] = None) -> str:
        """
        Renderiza um ícone: `icon("house")` → `<i class="bi bi-house"></i>`.

        Options:
        - `icon_set`: prefixo do conjunto de ícones (default da config; `bi` se vazio)
        - `tag`: tag HTML (default da config; `i` se vazio)
        - `class`: classes extras, anexadas depois das classes do ícone
        - demais chaves viram atributos do elemento
        """
        attrs = self._attrs(options, where="icon")
        icon_set = attrs.pop("icon_set", None) or self.get_config("icon_set") or "bi"
        tag = attrs.pop("tag", None) or self.get_config("tag") or "i"
        extra_class = attrs.pop("class", None)

        icon_attrs = {"class": compose_class([icon_set, f"{icon_set}-{name}"], extra_class)}
        icon_attrs.update(attrs)

        templater = self.templater()
        return templater.format("icon", {
            "tag": tag,
            "attrs": templater.format_attributes(icon_attrs),
        })
