"""Plugin configuration — метаданные регистрации контракта у хоста."""

from dataclasses import dataclass
from typing import Tuple

from src.core.domain.message import MessageType


@dataclass(frozen=True)
class PluginConfig:
    """Конфигурация плагина.

    name/id/version идентифицируют контракт у хоста;
    supported_transactions — типы сообщений, которые контракт обрабатывает.
    """

    name: str = "send"
    id: int = 1
    version: int = 1
    supported_transactions: Tuple[str, ...] = (MessageType.SEND.value,)


# Конфигурация send-контракта
CONTRACT_CONFIG = PluginConfig()
