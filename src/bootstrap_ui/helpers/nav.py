# src/bootstrap_ui/helpers/nav.py
"""
NavHelper — navs do Bootstrap 5 (tabs ou pills) com troca de painéis via JS.

Duas coleções independentes:
- tabs: botões ligados a painéis (`add`)
- links: navegação pura, sem painel (`add_link`)

Política de ativação:
- uma tab é ativa quando `active` é informado como verdadeiro, ou quando
  `active` não é informado e ela é a primeira tab (links não contam)
- links só são ativos com `active` explícito
- um `active` explícito em outro item não desativa a primeira tab

`render()` e `render_nav()` sempre descartam tabs e links acumulados.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

from ..templating.attributes import compose_class, merge_attributes
from .base import Helper

NAV_TYPES = ("tabs", "pills")


@dataclass(frozen=True)
class Tab:
    id: str
    title: Any
    content: Any
    options: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Link:
    title: Any
    target: Any
    options: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class NavSettings:
    type: str
    fade: bool
    fill: bool
    justified: bool
    vertical: bool
    nav_attrs: Dict[str, Any]
    content_attrs: Dict[str, Any]


def _active(options: Mapping[str, Any], default: bool) -> bool:
    value = options.get("active")
    return default if value is None else bool(value)


class NavHelper(Helper):
    name = "nav"

    _default_config = {
        "type": "tabs",
        "fade": True,
        "fill": False,
        "justified": False,
        "vertical": False,
        "templates": {
            "nav": "<ul{{attrs}}>{{content}}</ul>",
            "navItem": "<li{{attrs}}>{{content}}</li>",
            "navButton": "<button{{attrs}}>{{content}}</button>",
            "navLink": "<a{{attrs}}>{{content}}</a>",
            "tabContent": "<div{{attrs}}>{{content}}</div>",
            "tabPane": "<div{{attrs}}>{{content}}</div>",
            "verticalWrapper": "<div{{attrs}}>{{content}}</div>",
        },
    }

    _default_attributes = {
        "nav": {"class": "nav", "role": "tablist"},
        "navItem": {"class": "nav-item", "role": "presentation"},
        "navButton": {"class": "nav-link", "type": "button", "role": "tab"},
        "navLink": {"class": "nav-link"},
        "tabContent": {"class": "tab-content"},
        "tabPane": {"class": "tab-pane", "role": "tabpanel", "tabindex": "0"},
        "verticalWrapper": {"class": "d-flex align-items-start"},
    }

    def __init__(self, view=None, config=None) -> None:
        super().__init__(view, config)
        self._tabs: List[Tab] = []
        self._links: List[Link] = []

    def add(self, tab_id: str, title: Any, content: Any, options: Optional[Mapping[str, Any]] = None) -> "NavHelper":
        """
        Adiciona uma tab com painel.

        Options:
        - `icon`: nome do ícone exibido antes do título
        - `active`: força a tab como ativa (default: só a primeira tab)
        - `disabled`: desabilita a tab
        - demais chaves viram atributos do `<button>`
        """
        self._tabs.append(Tab(id=str(tab_id), title=title, content=content,
                              options=self._attrs(options, where=f"tab {tab_id}")))
        return self

    def add_link(self, title: Any, target: Any, options: Optional[Mapping[str, Any]] = None) -> "NavHelper":
        """
        Adiciona um link de navegação (sem painel).

        `target` é uma URL literal ou um descritor de rota resolvido pelo
        `UrlBuilder` da View. Options iguais às de `add`, exceto que o link
        nunca é ativo por default.
        """
        self._links.append(Link(title=title, target=target,
                                options=self._attrs(options, where="link")))
        return self

    # -----------------------------
    # Render
    # -----------------------------
    def render(self, options: Optional[Mapping[str, Any]] = None) -> str:
        """
        Renderiza o nav e, havendo tabs, o container de painéis.

        Options:
        - `type`: 'tabs' ou 'pills'
        - `fade`, `fill`, `justified`, `vertical`: sobrescrevem a config
        - `nav_attrs`: atributos do `<ul>`; `class` é anexado às classes calculadas
        - `content_attrs`: atributos do container `tab-content`
        """
        tabs, links = self._take()
        settings = self._settings(options)

        nav = self._render_nav_element(tabs, links, settings)
        content = self._render_tab_content(tabs, settings) if tabs else ""

        self.log("DEBUG", "render", tabs=len(tabs), links=len(links), type=settings.type)

        if settings.vertical and content:
            templater = self.templater()
            return templater.format("verticalWrapper", {
                "attrs": templater.format_attributes(self.merge_attributes("verticalWrapper", {})),
                "content": nav + content,
            })

        return nav + content

    def render_nav(self, options: Optional[Mapping[str, Any]] = None) -> str:
        """Renderiza apenas o nav (sem painéis, sem fade)."""
        tabs, links = self._take()
        settings = self._settings(options, fade=False)

        self.log("DEBUG", "render_nav", tabs=len(tabs), links=len(links), type=settings.type)

        return self._render_nav_element(tabs, links, settings)

    def _take(self) -> Tuple[List[Tab], List[Link]]:
        tabs, links = self._tabs, self._links
        self._tabs, self._links = [], []
        return tabs, links

    def _settings(self, options: Optional[Mapping[str, Any]], **forced: Any) -> NavSettings:
        opts = dict(options) if isinstance(options, Mapping) else {}
        opts.update(forced)

        def pick(key: str) -> Any:
            value = opts.get(key)
            return self.get_config(key) if value is None else value

        nav_type = pick("type")
        if nav_type not in NAV_TYPES:
            self.warn(f"type desconhecido: {nav_type!r}, usando 'tabs'")
            nav_type = "tabs"

        return NavSettings(
            type=nav_type,
            fade=bool(pick("fade")),
            fill=bool(pick("fill")),
            justified=bool(pick("justified")),
            vertical=bool(pick("vertical")),
            nav_attrs=self._attrs(opts.get("nav_attrs"), where="nav_attrs"),
            content_attrs=self._attrs(opts.get("content_attrs"), where="content_attrs"),
        )

    def _render_nav_element(self, tabs: List[Tab], links: List[Link], settings: NavSettings) -> str:
        nav_classes = [
            "nav",
            "nav-pills" if settings.type == "pills" else "nav-tabs",
            "nav-fill" if settings.fill else None,
            "nav-justified" if settings.justified else None,
            "flex-column" if settings.vertical else None,
        ]
        nav_attrs = self.merge_attributes("nav", settings.nav_attrs)
        nav_attrs["class"] = compose_class(nav_classes, settings.nav_attrs.get("class"))

        items = [self._render_tab_item(tab, index) for index, tab in enumerate(tabs)]
        items.extend(self._render_link_item(link) for link in links)

        templater = self.templater()
        return templater.format("nav", {
            "attrs": templater.format_attributes(nav_attrs),
            "content": "\n".join(items),
        })

    def _render_tab_item(self, tab: Tab, index: int) -> str:
        options = dict(tab.options)
        icon = options.pop("icon", None)
        active = _active(options, index == 0)
        disabled = bool(options.pop("disabled", False))
        options.pop("active", None)
        extra_class = options.pop("class", None)

        button_attrs = merge_attributes(
            options,
            {"id": f"{tab.id}-tab", **self._default_attributes["navButton"]},
        )
        button_attrs["data-bs-toggle"] = "tab"
        button_attrs["data-bs-target"] = f"#{tab.id}"
        button_attrs["aria-controls"] = tab.id
        button_attrs["aria-selected"] = "true" if active else "false"

        if disabled:
            button_attrs["disabled"] = True
            button_attrs["tabindex"] = "-1"
            button_attrs["aria-disabled"] = "true"

        button_attrs["class"] = compose_class(
            ["nav-link", "active" if active else None, "disabled" if disabled else None],
            extra_class,
        )

        templater = self.templater()
        button = templater.format("navButton", {
            "attrs": templater.format_attributes(button_attrs),
            "content": self._title(tab.title, icon),
        })
        return templater.format("navItem", {
            "attrs": templater.format_attributes(self.merge_attributes("navItem", {})),
            "content": button,
        })

    def _render_link_item(self, link: Link) -> str:
        options = dict(link.options)
        icon = options.pop("icon", None)
        active = _active(options, False)
        disabled = bool(options.pop("disabled", False))
        options.pop("active", None)
        extra_class = options.pop("class", None)

        link_attrs = self.merge_attributes("navLink", options)
        link_attrs["href"] = self.view.url.build(link.target)

        if active:
            link_attrs["aria-current"] = "page"
        if disabled:
            link_attrs["tabindex"] = "-1"
            link_attrs["aria-disabled"] = "true"

        link_attrs["class"] = compose_class(
            ["nav-link", "active" if active else None, "disabled" if disabled else None],
            extra_class,
        )

        # itens de link não têm role
        item_attrs = self.merge_attributes("navItem", {})
        item_attrs.pop("role", None)

        templater = self.templater()
        anchor = templater.format("navLink", {
            "attrs": templater.format_attributes(link_attrs),
            "content": self._title(link.title, icon),
        })
        return templater.format("navItem", {
            "attrs": templater.format_attributes(item_attrs),
            "content": anchor,
        })

    def _render_tab_content(self, tabs: List[Tab], settings: NavSettings) -> str:
        templater = self.templater()
        panes = []

        for index, tab in enumerate(tabs):
            active = _active(tab.options, index == 0)

            pane_attrs = self.merge_attributes("tabPane", {})
            pane_attrs["id"] = tab.id
            pane_attrs["aria-labelledby"] = f"{tab.id}-tab"
            pane_attrs["class"] = compose_class([
                "tab-pane",
                "fade" if settings.fade else None,
                "show" if active else None,
                "active" if active else None,
            ])

            panes.append(templater.format("tabPane", {
                "attrs": templater.format_attributes(pane_attrs),
                "content": tab.content,
            }))

        wrapper_attrs = self.merge_attributes("tabContent", settings.content_attrs)
        return templater.format("tabContent", {
            "attrs": templater.format_attributes(wrapper_attrs),
            "content": "\n".join(panes),
        })

    def _title(self, title: Any, icon: Optional[str]) -> str:
        if icon is None:
            return "" if title is None else str(title)
        return f"{self.view.html.icon(icon)} {'' if title is None else title}"
