"""Gates — индивидуальные гейты admission цепочки.

- GATE 0: Fee params / minimum fee
- GATE 1: MessageSend stateless validation
"""

from .gate_00_fee_params import Gate00FeeParams, Gate00Result
from .gate_01_message_send import Gate01MessageSend, Gate01Result, Gate01Config

__all__ = [
    "Gate00FeeParams",
    "Gate00Result",
    "Gate01MessageSend",
    "Gate01Result",
    "Gate01Config",
]
