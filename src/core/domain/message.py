"""
Message / Transaction — Модели транзакции и её сообщений

Transaction — конверт {fee, msg}, где msg — opaque payload {type, value}.
Payload декодируется в закрытый набор вариантов (MessageType → модель):
добавление нового типа транзакции = новый вариант enum + новая модель
+ новая ветка match в validator/executor.

Декодирование в два шага:
1. JSON Schema контракт (jsonschema) — форма конверта и тела варианта
2. Pydantic модель — типизированное сообщение
"""

from enum import Enum
from typing import Any, Dict, Final

import jsonschema
import pydantic
from pydantic import BaseModel, Field, field_serializer, field_validator

from src.core.contracts.validators import (
    ContractValidator,
    MessageSendValidator,
    validate_message_envelope,
)
from src.core.domain.units import UINT64_MAX
from src.core.errors import InvalidMessageTypeError


# =============================================================================
# ENUMS
# =============================================================================


class MessageType(str, Enum):
    """Закрытый набор типов сообщений"""

    SEND = "send"


# =============================================================================
# MESSAGE MODELS
# =============================================================================


class MessageSend(BaseModel):
    """
    Перевод баланса с одного аккаунта на другой.

    Длина адресов и ненулевая сумма проверяются admission gate'ом
    (Gate01MessageSend), чтобы нарушения возвращались как
    InvalidAddressError / InvalidAmountError, а не как ошибка декодирования.
    """

    from_address: bytes = Field(..., description="Адрес отправителя")
    to_address: bytes = Field(..., description="Адрес получателя")
    amount: int = Field(..., ge=0, le=UINT64_MAX, description="Сумма перевода (uint64)")

    model_config = {"frozen": True}

    @field_validator("from_address", "to_address", mode="before")
    @classmethod
    def parse_hex_address(cls, v):
        if isinstance(v, str):
            return bytes.fromhex(v)
        return v

    @field_serializer("from_address", "to_address")
    def serialize_address(self, v: bytes) -> str:
        return v.hex()

    def to_payload(self) -> Dict[str, Any]:
        """Упаковка в opaque payload транзакции."""
        return {"type": MessageType.SEND.value, "value": self.model_dump(mode="json")}


# Закрытое объединение вариантов
Message = MessageSend


class Transaction(BaseModel):
    """
    Конверт транзакции.

    msg остаётся opaque до декодирования через decode_message().
    """

    fee: int = Field(..., ge=0, le=UINT64_MAX, description="Комиссия транзакции")
    msg: Any = Field(..., description="Opaque payload {type, value}")

    model_config = {"frozen": True}


# =============================================================================
# DECODE
# =============================================================================

_MESSAGE_MODELS: Final[Dict[MessageType, type[BaseModel]]] = {
    MessageType.SEND: MessageSend,
}

_MESSAGE_VALIDATORS: Final[Dict[MessageType, type[ContractValidator]]] = {
    MessageType.SEND: MessageSendValidator,
}


def decode_message(payload: Any) -> Message:
    """
    Декодирование opaque payload в типизированный вариант сообщения.

    Args:
        payload: {type, value} из Transaction.msg

    Returns:
        Экземпляр модели варианта (например, MessageSend)

    Raises:
        InvalidMessageTypeError: неизвестный тип или некорректное тело
    """
    try:
        validate_message_envelope(payload)
    except jsonschema.ValidationError as e:
        raise InvalidMessageTypeError(f"the message cast failed: {e.message}") from e

    message_type = MessageType(payload["type"])
    value = payload["value"]

    try:
        _MESSAGE_VALIDATORS[message_type]().validate(value)
        return _MESSAGE_MODELS[message_type].model_validate(value)
    except jsonschema.ValidationError as e:
        raise InvalidMessageTypeError(
            f"the message cast failed: {message_type.value}: {e.message}"
        ) from e
    except pydantic.ValidationError as e:
        raise InvalidMessageTypeError(
            f"the message cast failed: {message_type.value}: {e}"
        ) from e
