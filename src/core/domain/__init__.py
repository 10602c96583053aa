"""
Domain models and value objects.

Contains fundamental domain entities like Account, FeeParams, MessageSend, Transaction.
"""

from src.core.domain.account import (
    Account,
    FeeParams,
    decode_account,
    decode_fee_params,
    encode_account,
    encode_fee_params,
)
from src.core.domain.message import (
    Message,
    MessageSend,
    MessageType,
    Transaction,
    decode_message,
)
from src.core.domain.units import (
    ADDRESS_LENGTH,
    UINT64_MAX,
    checked_credit,
    checked_debit,
    is_valid_address,
)

__all__ = [
    # Units module
    "ADDRESS_LENGTH",
    "UINT64_MAX",
    "checked_credit",
    "checked_debit",
    "is_valid_address",
    # Records
    "Account",
    "FeeParams",
    "decode_account",
    "decode_fee_params",
    "encode_account",
    "encode_fee_params",
    # Messages
    "Message",
    "MessageSend",
    "MessageType",
    "Transaction",
    "decode_message",
]
