"""
Account / FeeParams — Модели записей состояния

Immutable Pydantic модели записей, которые хранятся в keyed store:
- Account: баланс аккаунта (ключ key_for_account)
- FeeParams: минимальная комиссия, управляется governance (ключ key_for_fee_params)

Формат хранения: UTF-8 JSON (model_dump_json), bytes поля — hex строки.
Отсутствующая или пустая запись декодируется в нулевую запись.
"""

from pydantic import BaseModel, Field, ValidationError, field_serializer, field_validator

from src.core.domain.units import UINT64_MAX
from src.core.errors import DecodeError


# =============================================================================
# RECORD MODELS
# =============================================================================


class Account(BaseModel):
    """
    Аккаунт: адрес и баланс.

    Аккаунт создаётся неявно при первом зачислении и удаляется из store,
    когда баланс становится нулевым. Длину адреса проверяет admission
    gate, а не модель.
    """

    address: bytes = Field(default=b"", description="Адрес аккаунта (20 байт)")
    amount: int = Field(default=0, ge=0, le=UINT64_MAX, description="Баланс (uint64)")

    model_config = {"frozen": True}  # Immutable

    @field_validator("address", mode="before")
    @classmethod
    def parse_hex_address(cls, v):
        """Адрес из JSON приходит hex строкой"""
        if isinstance(v, str):
            return bytes.fromhex(v)
        return v

    @field_serializer("address")
    def serialize_address(self, v: bytes) -> str:
        return v.hex()

    def is_empty(self) -> bool:
        """Нулевой аккаунт не хранится в store."""
        return self.amount == 0


class FeeParams(BaseModel):
    """
    Governance параметры комиссий.

    Только чтение: владелец записи — внешняя governance подсистема.
    """

    send_fee: int = Field(
        default=0, ge=0, le=UINT64_MAX, description="Минимальная комиссия для send транзакций"
    )

    model_config = {"frozen": True}


# =============================================================================
# ENCODE / DECODE
# =============================================================================


def encode_account(account: Account) -> bytes:
    """Сериализация аккаунта для записи в store."""
    return account.model_dump_json().encode("utf-8")


def decode_account(raw: bytes | None, address: bytes) -> Account:
    """
    Десериализация аккаунта из store.

    Args:
        raw: Байты записи (None или b"" — запись отсутствует)
        address: Адрес, по ключу которого прочитана запись

    Returns:
        Account; при read-miss — Account(address=address, amount=0)

    Raises:
        DecodeError: Если байты не являются валидной записью Account
            или адрес записи не совпадает с адресом ключа
    """
    if not raw:
        return Account(address=address, amount=0)
    try:
        account = Account.model_validate_json(raw)
    except ValidationError as e:
        raise DecodeError(f"malformed account record for {address.hex()}: {e}") from e
    if account.address != address:
        raise DecodeError(
            f"account record address {account.address.hex()} does not match key address {address.hex()}"
        )
    return account


def decode_fee_params(raw: bytes | None) -> FeeParams:
    """
    Десериализация fee параметров из store.

    Raises:
        DecodeError: Если байты не являются валидной записью FeeParams
    """
    if not raw:
        return FeeParams()
    try:
        return FeeParams.model_validate_json(raw)
    except ValidationError as e:
        raise DecodeError(f"malformed fee params record: {e}") from e


def encode_fee_params(params: FeeParams) -> bytes:
    """Сериализация fee параметров (используется governance и fixtures)."""
    return params.model_dump_json().encode("utf-8")
