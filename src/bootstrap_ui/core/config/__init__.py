# src/bootstrap_ui/core/config/__init__.py

"""
Camada de configuração dos helpers.

Responsabilidades do pacote:
    - Carregamento de arquivos de configuração (defaults + overrides locais)
    - Resolução de configuração final via deep-merge determinístico
    - Validação da forma das seções `helpers` e `url`
    - Exceções tipadas para falhas estruturais

A mesma entrada sempre produz a mesma configuração final.
"""

from .errors import (
    ConfigError,
    ConfigTypeConflictError,
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)
from .loader import load_config
from .merge import deep_merge
from .schema import validate_ui_config

__all__ = [
    "ConfigError",
    "ConfigTypeConflictError",
    "DefaultsNotFoundError",
    "InvalidConfigRootTypeError",
    "UnsupportedConfigFormatError",
    "load_config",
    "deep_merge",
    "validate_ui_config",
]
