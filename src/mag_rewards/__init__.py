"""
MAG Rewards — движок расчёта и планирования наградных команд.

Три механизма:
- hash-lottery: детерминированная награда по последней цифре хэша транзакции
- window-lottery: окно участников, розыгрыш по сумме цифр хэша
- liquidity stake: возврат LP через фиксированное время

Движок не выполняет переводы сам — он только формирует команды (Command).
"""

__version__ = "0.1.0"
