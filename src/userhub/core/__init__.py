"""
Core Domain Layer - Entities e Use Cases.

Este pacote contém a lógica de negócio pura, sem dependências de frameworks.
Características:
- Zero dependências externas (Django, Celery, dependency-injector)
- 100% testável sem banco de dados
- Agnóstico a infraestrutura
"""
