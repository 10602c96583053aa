"""
Units — Централизованный модуль границ адресов и сумм

Единственный допустимый способ проверки:
- длины адреса (ровно ADDRESS_LENGTH байт)
- диапазона суммы (uint64, неотрицательная)
- арифметики балансов (без переполнения и ухода в минус)

ЗАПРЕЩЕНО изменять балансы в обход checked_debit/checked_credit.
"""

from typing import Final


# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Длина адреса аккаунта (байт)
ADDRESS_LENGTH: Final[int] = 20

# Максимальная сумма (uint64 на wire)
UINT64_MAX: Final[int] = 2**64 - 1


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def is_valid_address(address: bytes, length: int = ADDRESS_LENGTH) -> bool:
    """
    Проверка длины адреса.

    Args:
        address: Адрес (bytes)
        length: Ожидаемая длина (default: ADDRESS_LENGTH)

    Returns:
        True если длина адреса ровно length
    """
    return len(address) == length


# =============================================================================
# АРИФМЕТИКА БАЛАНСОВ
# =============================================================================


def checked_debit(balance: int, amount: int) -> int:
    """
    Списание с баланса.

    Args:
        balance: Текущий баланс
        amount: Сумма списания

    Returns:
        balance - amount

    Raises:
        ValueError: Если amount > balance (баланс ушёл бы в минус)
    """
    if amount > balance:
        raise ValueError(f"debit {amount} exceeds balance {balance}")
    return balance - amount


def checked_credit(balance: int, amount: int) -> int:
    """
    Зачисление на баланс.

    Raises:
        ValueError: Если результат превышает UINT64_MAX
    """
    result = balance + amount
    if result > UINT64_MAX:
        raise ValueError(f"credit {amount} overflows balance {balance}")
    return result
