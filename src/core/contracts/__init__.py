"""
Contract Validation Module

Модуль для валидации JSON контрактов wire payload'ов send-контракта.
"""

from .validators import (
    ContractValidator,
    MessageEnvelopeValidator,
    MessageSendValidator,
    SchemaLoader,
    validate_message_envelope,
    validate_message_send,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "MessageEnvelopeValidator",
    "MessageSendValidator",
    # Functions
    "validate_message_envelope",
    "validate_message_send",
]
