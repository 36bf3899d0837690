from .core import BootstrapUIError, TemplateNotFoundError, View
from .helpers import (
    CardHelper,
    DescriptionHelper,
    HtmlHelper,
    NavHelper,
    TableHelper,
    UrlBuilder,
)

__all__ = [
    "View",
    "BootstrapUIError",
    "TemplateNotFoundError",
    "CardHelper",
    "DescriptionHelper",
    "HtmlHelper",
    "NavHelper",
    "TableHelper",
    "UrlBuilder",
]
