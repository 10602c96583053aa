"""
Errors — Единая таксономия ошибок send-контракта

Все исходы транзакции (кроме успеха) выражаются подклассами ContractError.
Два класса ошибок:
- системные сбои (StoreError, DecodeError) — фатальны для транзакции,
  сигнализируют о проблеме backend или повреждении данных;
- отклонения (FeeTooLow, InvalidAddress, InvalidAmount, InsufficientFunds,
  InvalidMessageType) — транзакция невалидна, система исправна.

Исключения поднимаются в точке отказа и превращаются в поле error
ответа только в диспетчере (src.contract.contract).
"""

from enum import IntEnum
from typing import Final


# =============================================================================
# CONSTANTS
# =============================================================================

# Модуль, к которому относятся коды ошибок
ERROR_MODULE: Final[str] = "plugin"


# =============================================================================
# ERROR CODES
# =============================================================================


class ErrorCode(IntEnum):
    """Коды ошибок плагина"""

    STORE = 1
    DECODE = 2
    FEE_BELOW_STATE_LIMIT = 3
    INVALID_ADDRESS = 4
    INVALID_AMOUNT = 5
    INSUFFICIENT_FUNDS = 6
    INVALID_MESSAGE_CAST = 7


# =============================================================================
# BASE
# =============================================================================


class ContractError(Exception):
    """
    Базовая ошибка контракта.

    Несёт code/module/msg — форма, в которой ошибка возвращается
    окружающему pipeline через поле error ответа.
    """

    code: ErrorCode = ErrorCode.STORE
    default_msg: str = "contract error"
    is_rejection: bool = False

    def __init__(self, msg: str | None = None):
        self.msg = msg or self.default_msg
        self.module = ERROR_MODULE
        super().__init__(self.msg)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={int(self.code)}, module={self.module!r}, msg={self.msg!r})"


# =============================================================================
# SYSTEM FAULTS
# =============================================================================


class StoreError(ContractError):
    """
    Сбой хранилища при чтении/записи.

    Объединяет оба канала ошибок store: request_error (transport/backend)
    и semantic_error (отказ на уровне FSM).
    """

    code = ErrorCode.STORE
    default_msg = "state store error"


class DecodeError(ContractError):
    """Некорректные байты записи или сообщения (повреждение или version skew)."""

    code = ErrorCode.DECODE
    default_msg = "unable to decode bytes"


# =============================================================================
# REJECTIONS
# =============================================================================


class FeeTooLowError(ContractError):
    """Комиссия транзакции ниже минимума из governance параметров."""

    code = ErrorCode.FEE_BELOW_STATE_LIMIT
    default_msg = "tx fee is below state limit"
    is_rejection = True


class InvalidAddressError(ContractError):
    code = ErrorCode.INVALID_ADDRESS
    default_msg = "address is invalid"
    is_rejection = True


class InvalidAmountError(ContractError):
    code = ErrorCode.INVALID_AMOUNT
    default_msg = "amount is invalid"
    is_rejection = True


class InsufficientFundsError(ContractError):
    code = ErrorCode.INSUFFICIENT_FUNDS
    default_msg = "insufficient funds"
    is_rejection = True


class InvalidMessageTypeError(ContractError):
    """Payload не декодируется в известный вариант сообщения."""

    code = ErrorCode.INVALID_MESSAGE_CAST
    default_msg = "the message cast failed"
    is_rejection = True
