# src/bootstrap_ui/core/config/errors.py
"""
Exceções da camada de configuração dos helpers.

Hierarquia:
    - `ConfigError` (base)
        - `DefaultsNotFoundError`
        - `UnsupportedConfigFormatError`
        - `InvalidConfigRootTypeError`
        - `ConfigTypeConflictError`

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Nenhuma exceção aqui representa erro de renderização

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não depende dos helpers nem da View
"""


class ConfigError(Exception):
    """
    Exceção base para erros de configuração.

    Permite captura genérica de falhas de carregamento e merge,
    separando-as de erros de template (`BootstrapUIError`).
    """


class DefaultsNotFoundError(ConfigError):
    """
    Levantada quando o arquivo de defaults não existe no caminho informado.

    O arquivo de defaults é obrigatório para `load_config`; o arquivo
    local, não.
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Levantada quando a extensão do arquivo não é suportada.

    Formatos suportados:
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """
    Levantada quando o conteúdo raiz do arquivo não é um dicionário.
    """


class ConfigTypeConflictError(ConfigError):
    """
    Levantada quando uma mesma chave possui tipos incompatíveis
    entre a configuração base e o override durante o deep-merge.

    Exemplo de conflito:
        - base:     {"fade": true}
        - override: {"fade": "yes"}

    Invariantes:
        - Nenhum merge parcial é produzido em caso de conflito
    """
