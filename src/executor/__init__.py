"""Executor — stateful deliver фаза: применение сообщений к состоянию.

- Batched read, проверка средств, conservation
- Атомарный batched write с pruning опустошённых аккаунтов
"""

from .transfer import TransferExecutor, TransferResult

__all__ = [
    "TransferExecutor",
    "TransferResult",
]
