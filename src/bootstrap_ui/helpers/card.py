# src/bootstrap_ui/helpers/card.py
"""
CardHelper — card do Bootstrap (header, body, footer).

Renderização de passada única: o estado é apenas o argumento da chamada,
nada é acumulado entre chamadas.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from .base import Helper


class CardHelper(Helper):
    name = "card"

    _default_config = {
        "templates": {
            "card": "<div{{attrs}}>{{content}}</div>",
            "header": "<div{{attrs}}>{{content}}</div>",
            "body": "<div{{attrs}}>{{content}}</div>",
            "footer": "<div{{attrs}}>{{content}}</div>",
        },
    }

    _default_attributes = {
        "card": {"class": "card"},
        "header": {"class": "card-header"},
        "body": {"class": "card-body"},
        "footer": {"class": "card-footer"},
    }

    def render(self, body: Any, options: Optional[Mapping[str, Any]] = None) -> str:
        """
        Renderiza um card.

        Options:
        - `header`: conteúdo do header (omitido quando None)
        - `footer`: conteúdo do footer (omitido quando None)
        - `header_attrs`, `body_attrs`, `footer_attrs`: atributos das seções
        - demais chaves viram atributos do elemento card
        """
        card_attrs = self._attrs(options, where="render")
        header = card_attrs.pop("header", None)
        footer = card_attrs.pop("footer", None)
        section_attrs = {
            section: self._attrs(card_attrs.pop(f"{section}_attrs", None), where=f"{section}_attrs")
            for section in ("header", "body", "footer")
        }

        templater = self.templater()
        sections = [("header", header), ("body", body), ("footer", footer)]

        content = ""
        for section, section_content in sections:
            if section != "body" and section_content is None:
                continue
            content += templater.format(section, {
                "attrs": templater.format_attributes(
                    self.merge_attributes(section, section_attrs[section])
                ),
                "content": section_content,
            })

        self.log("DEBUG", "render", header=header is not None, footer=footer is not None)

        return templater.format("card", {
            "attrs": templater.format_attributes(self.merge_attributes("card", card_attrs)),
            "content": content,
        })
