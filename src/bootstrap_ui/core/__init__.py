"""
Core dos helpers: configuração, exceções tipadas e View.
"""

from .errors import BootstrapUIError, TemplateNotFoundError
from .view import View

__all__ = [
    "BootstrapUIError",
    "TemplateNotFoundError",
    "View",
]
