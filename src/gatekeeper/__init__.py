"""Gatekeeper — stateless admission транзакций.

- Гейты с фиксированным порядком
- Fee gate выполняется до декодирования сообщения
- PASS возвращает authorized signers для внешней проверки подписей
"""

from .admission import AdmissionValidator
from .gates.gate_00_fee_params import Gate00FeeParams, Gate00Result
from .gates.gate_01_message_send import Gate01MessageSend, Gate01Result, Gate01Config

__all__ = [
    "AdmissionValidator",
    "Gate00FeeParams",
    "Gate00Result",
    "Gate01MessageSend",
    "Gate01Result",
    "Gate01Config",
]
