# src/bootstrap_ui/helpers/description.py
"""DescriptionHelper — lista de descrição (`<dl>`) acumulada par a par."""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Tuple

from .base import Helper


class DescriptionHelper(Helper):
    name = "description"

    _default_config = {
        "templates": {
            "list": "<dl{{attrs}}>{{content}}</dl>",
            "term": "<dt{{attrs}}>{{content}}</dt>",
            "definition": "<dd{{attrs}}>{{content}}</dd>",
        },
    }

    def __init__(self, view=None, config=None) -> None:
        super().__init__(view, config)
        self._rows: List[Tuple[Any, Any]] = []

    def add(self, term: Any, definition: Any) -> "DescriptionHelper":
        self._rows.append((term, definition))
        return self

    def render(self, options: Optional[Mapping[str, Any]] = None) -> str:
        """
        Renderiza a lista e descarta os pares acumulados.

        Options:
        - `list`: atributos do elemento `<dl>`
        - `term`: atributos aplicados a todo `<dt>`
        - `definition`: atributos aplicados a todo `<dd>`
        """
        rows, self._rows = self._rows, []

        opts = options if isinstance(options, Mapping) else {}
        list_attrs = self._attrs(opts.get("list"), where="list")

        templater = self.templater()
        term_attrs = templater.format_attributes(self._attrs(opts.get("term"), where="term"))
        definition_attrs = templater.format_attributes(
            self._attrs(opts.get("definition"), where="definition")
        )

        content = ""
        for term, definition in rows:
            content += templater.format("term", {"attrs": term_attrs, "content": term})
            content += templater.format("definition", {"attrs": definition_attrs, "content": definition})

        self.log("DEBUG", "render", rows=len(rows))

        return templater.format("list", {
            "attrs": templater.format_attributes(list_attrs),
            "content": content,
        })
