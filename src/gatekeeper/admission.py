"""Admission Validator — stateless check фаза транзакции

Цепочка (фиксированный порядок, первая неудача прерывает):
1. GATE 0: fee параметры + минимальная комиссия
2. Декодирование payload в закрытый вариант сообщения
3. GATE по варианту (send → GATE 1)
4. PASS → authorized signers
"""

from typing import List

from src.core.domain.message import MessageSend, Transaction, decode_message
from src.core.errors import InvalidMessageTypeError
from src.core.state.store import StateStore
from src.gatekeeper.gates.gate_00_fee_params import Gate00FeeParams
from src.gatekeeper.gates.gate_01_message_send import Gate01Config, Gate01MessageSend


class AdmissionValidator:
    """Stateless admission: fee gate, декодирование, проверки варианта."""

    def __init__(self, store: StateStore, gate01_config: Gate01Config | None = None):
        self.gate00 = Gate00FeeParams(store)
        self.gate01 = Gate01MessageSend(gate01_config)

    def check_tx(self, tx: Transaction) -> List[bytes]:
        """Проверка транзакции.

        Returns:
            authorized signers

        Raises:
            StoreError, DecodeError: системный сбой
            FeeTooLowError, InvalidMessageTypeError, InvalidAddressError,
            InvalidAmountError: транзакция отклонена
        """
        gate00_result = self.gate00.evaluate(tx.fee)
        if not gate00_result.entry_allowed:
            raise gate00_result.error

        msg = decode_message(tx.msg)
        match msg:
            case MessageSend():
                return self.check_message_send(msg)
            case _:
                raise InvalidMessageTypeError()

    def check_message_send(self, msg: MessageSend) -> List[bytes]:
        gate01_result = self.gate01.evaluate(msg)
        if not gate01_result.entry_allowed:
            raise gate01_result.error
        return list(gate01_result.authorized_signers)
