# src/bootstrap_ui/helpers/url.py
"""
UrlBuilder — resolve alvos de links em URLs literais.

Um alvo é:
    - uma string: devolvida sem alteração
    - um descritor de rota (mapa):

        {"controller": "Articles", "action": "view", "pass": [5],
         "?": {"page": 2}, "#": "comments"}
        → /articles/view/5?page=2#comments

        {"path": "/docs/intro", "?": {"lang": "pt"}}
        → /docs/intro?lang=pt

Controller e action são convertidos para dash-case
(`UserProfiles` → `user-profiles`, `editAll` → `edit-all`).
"""

from __future__ import annotations

import re
from typing import Any, Mapping
from urllib.parse import quote, urlencode

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def dasherize(value: str) -> str:
    return _CAMEL_BOUNDARY.sub("-", str(value)).replace("_", "-").lower()


class UrlBuilder:
    def __init__(self, base: str = "") -> None:
        self.base = (base or "").rstrip("/")

    def build(self, target: Any) -> str:
        if isinstance(target, str):
            return target
        if not isinstance(target, Mapping):
            return "" if target is None else str(target)

        if "path" in target:
            path = "/" + str(target["path"]).lstrip("/")
        else:
            segments = []
            for key in ("prefix", "controller", "action"):
                if target.get(key):
                    segments.append(dasherize(target[key]))
            segments.extend(str(p) for p in target.get("pass") or [])
            path = "/" + "/".join(quote(s, safe="") for s in segments)

        url = self.base + path

        query = target.get("?")
        if query:
            url += "?" + urlencode(query, doseq=True)

        fragment = target.get("#")
        if fragment:
            url += "#" + quote(str(fragment), safe="")

        return url
