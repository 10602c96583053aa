"""Contract — диспетчер вызовов хоста

Маршрутизация:
- genesis / begin_block / end_block → фиксированные пустые ответы (reserved no-op)
- check_tx → AdmissionValidator (stateless)
- deliver_tx → TransferExecutor (stateful)

Все исходы транзакции возвращаются только через поле error ответа:
ContractError, поднятая внутри, перехватывается здесь и не покидает контракт.
Ошибки не повторяются (retry — ответственность окружающего pipeline).
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from src.contract.config import CONTRACT_CONFIG, PluginConfig
from src.core.domain.message import Transaction
from src.core.errors import ContractError
from src.core.state.store import StateStore
from src.executor.transfer import TransferExecutor
from src.gatekeeper.admission import AdmissionValidator

logger = logging.getLogger(__name__)


# =============================================================================
# REQUESTS / RESPONSES
# =============================================================================


@dataclass(frozen=True)
class GenesisRequest:
    genesis_json: bytes = b""


@dataclass(frozen=True)
class GenesisResponse:
    error: Optional[ContractError] = None


@dataclass(frozen=True)
class BeginBlockRequest:
    height: int = 0


@dataclass(frozen=True)
class BeginBlockResponse:
    error: Optional[ContractError] = None


@dataclass(frozen=True)
class EndBlockRequest:
    height: int = 0
    proposer_address: bytes = b""


@dataclass(frozen=True)
class EndBlockResponse:
    error: Optional[ContractError] = None


@dataclass(frozen=True)
class CheckTxRequest:
    tx: Transaction


@dataclass(frozen=True)
class CheckTxResponse:
    authorized_signers: List[bytes] = field(default_factory=list)
    error: Optional[ContractError] = None


@dataclass(frozen=True)
class DeliverTxRequest:
    tx: Transaction


@dataclass(frozen=True)
class DeliverTxResponse:
    error: Optional[ContractError] = None


# =============================================================================
# CONTRACT
# =============================================================================


class Contract:
    """Send-контракт: базовая логика 'transfer' вложенной цепочки."""

    def __init__(self, store: StateStore, config: PluginConfig | None = None):
        """
        Args:
            store: keyed store хоста
            config: метаданные плагина (default: CONTRACT_CONFIG)
        """
        self.config = config or CONTRACT_CONFIG
        self.admission = AdmissionValidator(store)
        self.executor = TransferExecutor(store)

    def genesis(self, request: GenesisRequest | None = None) -> GenesisResponse:
        """Импорт/экспорт genesis состояния (reserved)."""
        return GenesisResponse()

    def begin_block(self, request: BeginBlockRequest | None = None) -> BeginBlockResponse:
        return BeginBlockResponse()

    def check_tx(self, request: CheckTxRequest) -> CheckTxResponse:
        """Stateless валидация транзакции."""
        try:
            signers = self.admission.check_tx(request.tx)
        except ContractError as err:
            logger.debug("check_tx rejected: %r", err)
            return CheckTxResponse(error=err)
        return CheckTxResponse(authorized_signers=signers)

    def deliver_tx(self, request: DeliverTxRequest) -> DeliverTxResponse:
        """Применение транзакции к состоянию."""
        try:
            result = self.executor.deliver_tx(request.tx)
        except ContractError as err:
            logger.debug("deliver_tx failed: %r", err)
            return DeliverTxResponse(error=err)
        logger.debug(
            "deliver_tx committed: %s -> %s, pruned=%s",
            result.from_key.hex(),
            result.to_key.hex(),
            result.pruned,
        )
        return DeliverTxResponse()

    def end_block(self, request: EndBlockRequest | None = None) -> EndBlockResponse:
        return EndBlockResponse()
