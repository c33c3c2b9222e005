"""
Core domain models, configuration, errors and pure math primitives.

Независимы от внешних систем (блокчейн-клиент, HTTP, хранилище).
"""
