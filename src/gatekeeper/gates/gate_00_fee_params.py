"""GATE 0: Fee Params / Minimum Fee

- Первый gate в цепочке admission (обязательный)
- Читает governance fee параметры одним batched read
- Блокирует транзакцию при fee < send_fee
- Выполняется ДО декодирования сообщения: отказ по комиссии не зависит
  от валидности payload

Ошибки store (оба канала) и некорректные байты записи не являются
отказом gate — это системные сбои, они поднимаются как StoreError / DecodeError.
"""

from dataclasses import dataclass
from typing import Optional

from src.core.domain.account import decode_fee_params
from src.core.errors import ContractError, FeeTooLowError
from src.core.state.keys import key_for_fee_params
from src.core.state.store import KeyRead, StateStore, new_query_ids, read_keys


@dataclass(frozen=True)
class Gate00Result:
    """Результат GATE 0."""

    entry_allowed: bool
    block_reason: str
    error: Optional[ContractError]

    # Диагностика
    tx_fee: int
    min_fee: int

    details: str


class Gate00FeeParams:
    """GATE 0: минимальная комиссия из governance параметров.

    Порядок проверок:
    1. Batched read записи fee параметров (read-miss → send_fee=0)
    2. Декодирование FeeParams
    3. tx_fee < send_fee → блокировка (FeeTooLowError)
    """

    def __init__(self, store: StateStore):
        """
        Args:
            store: keyed store хоста
        """
        self.store = store

    def evaluate(self, tx_fee: int) -> Gate00Result:
        """Оценка GATE 0.

        Args:
            tx_fee: комиссия транзакции

        Returns:
            Gate00Result с решением о допуске

        Raises:
            StoreError: сбой store при чтении параметров
            DecodeError: запись параметров повреждена
        """
        (query_id,) = new_query_ids(1)
        values = read_keys(self.store, [KeyRead(query_id=query_id, key=key_for_fee_params())])
        fee_params = decode_fee_params(values[query_id])

        if tx_fee < fee_params.send_fee:
            return Gate00Result(
                entry_allowed=False,
                block_reason="fee_below_state_limit",
                error=FeeTooLowError(
                    f"tx fee {tx_fee} is below state limit {fee_params.send_fee}"
                ),
                tx_fee=tx_fee,
                min_fee=fee_params.send_fee,
                details=f"fee={tx_fee} < send_fee={fee_params.send_fee}",
            )

        return Gate00Result(
            entry_allowed=True,
            block_reason="",
            error=None,
            tx_fee=tx_fee,
            min_fee=fee_params.send_fee,
            details=f"PASS: fee={tx_fee} >= send_fee={fee_params.send_fee}",
        )
