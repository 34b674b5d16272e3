# src/openspec_resolver/core/__init__.py
"""
Core do OpenSpec Resolver.

Este pacote contém a implementação canônica do motor de resolução,
reunindo as responsabilidades de localizar, validar e compor schemas de
workflow com a configuração do projeto.

O core é projetado para ser:
    - determinístico
    - síncrono e sem estado global mutável
    - tolerante a falhas parciais de configuração

Princípios fundamentais:
    - Precedência explícita entre fontes de verdade
    - Degradação não fatal: config inválida vira warning, nunca exceção
    - Erros estruturais de schema são fatais apenas para a operação que
      precisa do schema

Limites explícitos:
    - Não depende de CLI, terminal UI ou serviços externos
    - Não mantém cache entre chamadas

Este pacote existe como a fonte de verdade operacional do resolver.
"""
