"""GATE 1: Stateless валидация send сообщения

Проверки (в порядке, первая неудача блокирует):
- длина from_address == address_length → иначе InvalidAddressError
- длина to_address == address_length → иначе InvalidAddressError
- amount != 0 → иначе InvalidAmountError

При PASS возвращает authorized signers — адреса, чьи подписи должен
подтвердить внешний verifier. Для send это ровно [from_address].
Подписи здесь не проверяются.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from src.core.domain.message import MessageSend
from src.core.domain.units import ADDRESS_LENGTH, is_valid_address
from src.core.errors import ContractError, InvalidAddressError, InvalidAmountError


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class Gate01Result:
    """Результат GATE 1."""

    entry_allowed: bool
    block_reason: str
    error: Optional[ContractError]

    authorized_signers: Tuple[bytes, ...]

    details: str


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class Gate01Config:
    """Конфигурация GATE 1."""

    address_length: int = ADDRESS_LENGTH


# =============================================================================
# GATE 1
# =============================================================================


class Gate01MessageSend:
    """GATE 1: stateless проверки MessageSend."""

    def __init__(self, config: Gate01Config | None = None):
        self.config = config or Gate01Config()

    def evaluate(self, msg: MessageSend) -> Gate01Result:
        """Оценка GATE 1.

        Args:
            msg: декодированное send сообщение

        Returns:
            Gate01Result с решением о допуске и authorized signers
        """
        # 1. Адрес отправителя
        if not is_valid_address(msg.from_address, self.config.address_length):
            return self._block(
                "invalid_from_address",
                InvalidAddressError(
                    f"from address must be {self.config.address_length} bytes, "
                    f"got {len(msg.from_address)}"
                ),
            )

        # 2. Адрес получателя
        if not is_valid_address(msg.to_address, self.config.address_length):
            return self._block(
                "invalid_to_address",
                InvalidAddressError(
                    f"to address must be {self.config.address_length} bytes, "
                    f"got {len(msg.to_address)}"
                ),
            )

        # 3. Сумма
        if msg.amount == 0:
            return self._block("invalid_amount", InvalidAmountError("amount must be positive"))

        return Gate01Result(
            entry_allowed=True,
            block_reason="",
            error=None,
            authorized_signers=(msg.from_address,),
            details=f"PASS: send {msg.amount} from {msg.from_address.hex()}",
        )

    def _block(self, reason: str, error: ContractError) -> Gate01Result:
        return Gate01Result(
            entry_allowed=False,
            block_reason=reason,
            error=error,
            authorized_signers=(),
            details=error.msg,
        )
