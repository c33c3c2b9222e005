"""
Ошибки движка.

- InvalidInputError: некорректный хэш / транзакция / параметр. Фатальна для
  вызывающей операции, никогда не ретраится.
- NetworkError: поднимается только внешними коллабораторами (клиент блокчейна)
  и пробрасывается через движок без изменений.

Пустой розыгрыш (нет участников) — НЕ ошибка, а валидный пустой результат.
"""


class InvalidInputError(ValueError):
    """Некорректные входные данные (пустой хэш, отсутствующие поля транзакции)."""

    pass


class NetworkError(Exception):
    """Ошибка сети на стороне внешнего клиента блокчейна."""

    pass
