"""
Helpers de apresentação (Bootstrap 5).

- `CardHelper`: card com header/body/footer
- `DescriptionHelper`: lista de descrição acumulada
- `NavHelper`: tabs/pills com painéis e links
- `TableHelper`: tabela responsiva acumulada
- `HtmlHelper`: ícones
"""

from .base import Helper
from .card import CardHelper
from .description import DescriptionHelper
from .html import HtmlHelper
from .nav import Link, NavHelper, Tab
from .table import TableHelper
from .url import UrlBuilder

HELPERS = {
    CardHelper.name: CardHelper,
    DescriptionHelper.name: DescriptionHelper,
    HtmlHelper.name: HtmlHelper,
    NavHelper.name: NavHelper,
    TableHelper.name: TableHelper,
}

__all__ = [
    "Helper",
    "CardHelper",
    "DescriptionHelper",
    "HtmlHelper",
    "NavHelper",
    "Tab",
    "Link",
    "TableHelper",
    "UrlBuilder",
    "HELPERS",
]
