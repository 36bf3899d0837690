# src/bootstrap_ui/helpers/table.py
"""
TableHelper — tabela responsiva do Bootstrap.

Formatos de célula aceitos (header e linhas):
    - valor simples:            'Nome'
    - par (conteúdo, atributos): ('Nome', {'class': 'col-name'})
    - mapa de uma entrada:      {'Nome': {'class': 'col-name'}}

Separadores: células de uma linha e linhas do corpo são unidas por um
único espaço.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from ..templating.attributes import merge_attributes
from .base import Helper


def _cell_list(cells: Any) -> List[Any]:
    """list/tuple são sequências de células; qualquer outro valor (str, número, mapa) é uma célula só."""
    if cells is None:
        return []
    if isinstance(cells, (list, tuple)):
        return list(cells)
    return [cells]


@dataclass
class TableState:
    """Acumulador de uma passada de renderização."""

    header: List[Any] = field(default_factory=list)
    header_options: Dict[str, Any] = field(default_factory=dict)
    rows: List[Tuple[List[Any], Dict[str, Any]]] = field(default_factory=list)
    body_options: Dict[str, Any] = field(default_factory=dict)


class TableHelper(Helper):
    name = "table"

    _default_config = {
        "templates": {
            "wrapper": "<div{{attrs}}>{{content}}</div>",
            "table": "<table{{attrs}}>{{content}}</table>",
            "header": "<thead{{attrs}}>{{content}}</thead>",
            "body": "<tbody{{attrs}}>{{content}}</tbody>",
            "row": "<tr{{attrs}}>{{content}}</tr>",
            "headerCell": "<th{{attrs}}>{{content}}</th>",
            "bodyCell": "<td{{attrs}}>{{content}}</td>",
        },
    }

    _default_attributes = {
        "wrapper": {"class": "table-responsive"},
        "table": {"class": "table"},
    }

    def __init__(self, view=None, config=None) -> None:
        super().__init__(view, config)
        self._state = TableState()

    def header(self, cells: Sequence[Any], options: Optional[Mapping[str, Any]] = None) -> "TableHelper":
        """Define (substitui) a linha de header. `options` são atributos do `<thead>`."""
        self._state.header = _cell_list(cells)
        self._state.header_options = self._attrs(options, where="header")
        return self

    def row(self, cells: Sequence[Any], options: Optional[Mapping[str, Any]] = None) -> "TableHelper":
        """Adiciona uma linha ao corpo. `options` são atributos do `<tr>`."""
        self._state.rows.append((_cell_list(cells), self._attrs(options, where="row")))
        return self

    def body(self, options: Optional[Mapping[str, Any]]) -> "TableHelper":
        """Define os atributos do `<tbody>`."""
        self._state.body_options = self._attrs(options, where="body")
        return self

    def render(self, options: Optional[Mapping[str, Any]] = None) -> str:
        """
        Renderiza a tabela e descarta header, linhas e atributos do corpo.

        Options:
        - `wrapper`: atributos da div externa (sobre `class: table-responsive`)
        - `table`: atributos do `<table>` (sobre `class: table`)
        - `body`: atributos do `<tbody>`; chaves informadas aqui vencem as
          definidas via `body()`, as demais de `body()` são mantidas
        """
        state, self._state = self._state, TableState()

        opts = options if isinstance(options, Mapping) else {}
        wrapper_attrs = self.merge_attributes("wrapper", self._attrs(opts.get("wrapper"), where="wrapper"))
        table_attrs = self.merge_attributes("table", self._attrs(opts.get("table"), where="table"))
        body_attrs = merge_attributes(self._attrs(opts.get("body"), where="body"), state.body_options)

        content = self._render_header(state) + self._render_body(state, body_attrs)

        self.log("DEBUG", "render", header=bool(state.header), rows=len(state.rows))

        templater = self.templater()
        return templater.format("wrapper", {
            "attrs": templater.format_attributes(wrapper_attrs),
            "content": templater.format("table", {
                "attrs": templater.format_attributes(table_attrs),
                "content": content,
            }),
        })

    def _render_header(self, state: TableState) -> str:
        if not state.header:
            return ""

        templater = self.templater()
        cells = [self._render_cell("headerCell", cell) for cell in state.header]

        return templater.format("header", {
            "attrs": templater.format_attributes(state.header_options),
            "content": templater.format("row", {"content": " ".join(cells)}),
        })

    def _render_body(self, state: TableState, body_attrs: Dict[str, Any]) -> str:
        if not state.rows:
            return ""

        templater = self.templater()
        rows = []
        for cells, row_attrs in state.rows:
            rendered = [self._render_cell("bodyCell", cell) for cell in cells]
            rows.append(templater.format("row", {
                "attrs": templater.format_attributes(row_attrs),
                "content": " ".join(rendered),
            }))

        return templater.format("body", {
            "attrs": templater.format_attributes(body_attrs),
            "content": " ".join(rows),
        })

    def _render_cell(self, template: str, cell: Any) -> str:
        content, attrs = self._split_cell(cell)
        templater = self.templater()
        return templater.format(template, {
            "attrs": templater.format_attributes(self._attrs(attrs, where="cell")),
            "content": content,
        })

    def _split_cell(self, cell: Any) -> Tuple[Any, Any]:
        if isinstance(cell, (list, tuple)):
            if not cell:
                return "", None
            return cell[0], (cell[1] if len(cell) > 1 else None)

        if isinstance(cell, Mapping):
            if len(cell) != 1:
                self.warn(f"cell: mapa com {len(cell)} entradas, usando a primeira")
            if not cell:
                return "", None
            return next(iter(cell.items()))

        return cell, None
