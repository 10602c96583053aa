"""Contract — точка входа send-контракта для хоста."""

from .config import CONTRACT_CONFIG, PluginConfig
from .contract import (
    BeginBlockRequest,
    BeginBlockResponse,
    CheckTxRequest,
    CheckTxResponse,
    Contract,
    DeliverTxRequest,
    DeliverTxResponse,
    EndBlockRequest,
    EndBlockResponse,
    GenesisRequest,
    GenesisResponse,
)

__all__ = [
    "Contract",
    "PluginConfig",
    "CONTRACT_CONFIG",
    "GenesisRequest",
    "GenesisResponse",
    "BeginBlockRequest",
    "BeginBlockResponse",
    "CheckTxRequest",
    "CheckTxResponse",
    "DeliverTxRequest",
    "DeliverTxResponse",
    "EndBlockRequest",
    "EndBlockResponse",
]
