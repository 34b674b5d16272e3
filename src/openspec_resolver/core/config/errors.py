# src/openspec_resolver/core/config/errors.py
"""
Exceções canônicas da camada de configuração de projeto.

A configuração de projeto (`openspec/config.yaml`) é opcional e lida de
forma resiliente: YAML inválido, tipos errados, contexto grande demais e
regras inválidas viram warnings e nunca exceções.

A única falha propagada é de I/O sobre um arquivo que existe (permissão
negada, erro de disco). Ela nunca é silenciada pelo loader; cabe ao
chamador decidir se aquela fonte é opcional para a sua operação.

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Toda exceção carrega o caminho do arquivo envolvido
"""

from ..exceptions import OpenSpecError


class ConfigError(OpenSpecError):
    """
    Exceção base para erros relacionados à configuração de projeto.

    Limites explícitos:
        - Não representa conteúdo malformado (isso é warning)
    """


class ConfigReadError(ConfigError):
    """
    Exceção levantada quando o arquivo de configuração existe mas não pode
    ser lido do disco.

    Decisões arquiteturais:
        - Falhas de I/O são propagadas com o caminho do arquivo
        - A exceção original fica disponível em `cause`
    """
