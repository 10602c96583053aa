"""
State Access Contract — конвенция вызовов внешнего keyed store

Store предоставляет две batched операции:
- read(StateReadRequest) → StateReadResponse(results, request_error, semantic_error)
- write(StateWriteRequest) → StateWriteResponse(request_error, semantic_error)

Dual error channel:
- request_error: сбой transport/backend (например, I/O)
- semantic_error: отказ store на уровне FSM, независимо от transport
Вызывающий обязан проверять ОБА канала; любой из них фатален для транзакции
и превращается в StoreError.

Один write атомарен: все sets и deletes применяются вместе или не применяются.
Логически атомарное обновление (debit + credit) никогда не разбивается
на несколько write.
"""

import random
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Protocol, Sequence

from src.core.errors import StoreError


# =============================================================================
# REQUESTS / RESPONSES
# =============================================================================


@dataclass(frozen=True)
class KeyRead:
    """Чтение одного ключа; query_id уникален в пределах вызова."""

    query_id: int
    key: bytes


@dataclass(frozen=True)
class ReadResult:
    """Результат чтения; value=None означает read-miss."""

    query_id: int
    value: Optional[bytes]


@dataclass(frozen=True)
class StateReadRequest:
    keys: Sequence[KeyRead]


@dataclass(frozen=True)
class StateReadResponse:
    results: Sequence[ReadResult] = ()
    request_error: Optional[Exception] = None
    semantic_error: Optional[Exception] = None


@dataclass(frozen=True)
class SetOp:
    key: bytes
    value: bytes


@dataclass(frozen=True)
class DeleteOp:
    key: bytes


@dataclass(frozen=True)
class StateWriteRequest:
    sets: Sequence[SetOp] = ()
    deletes: Sequence[DeleteOp] = ()


@dataclass(frozen=True)
class StateWriteResponse:
    request_error: Optional[Exception] = None
    semantic_error: Optional[Exception] = None


# =============================================================================
# STORE PROTOCOL
# =============================================================================


class StateStore(Protocol):
    """Внешний keyed store (FSM хоста)."""

    def read(self, request: StateReadRequest) -> StateReadResponse:
        ...

    def write(self, request: StateWriteRequest) -> StateWriteResponse:
        ...


# =============================================================================
# CALLER HELPERS
# =============================================================================


def raise_for_store_errors(response, operation: str) -> None:
    """
    Проверка обоих каналов ошибок ответа store.

    Raises:
        StoreError: если установлен request_error или semantic_error
    """
    if response.request_error is not None:
        raise StoreError(
            f"{operation} request failed: {response.request_error}"
        ) from response.request_error
    if response.semantic_error is not None:
        raise StoreError(
            f"{operation} rejected by store: {response.semantic_error}"
        ) from response.semantic_error


def new_query_ids(count: int) -> List[int]:
    """Случайные 64-битные query id, различные в пределах одного вызова."""
    ids: List[int] = []
    while len(ids) < count:
        query_id = random.getrandbits(64)
        if query_id not in ids:
            ids.append(query_id)
    return ids


def read_keys(store: StateStore, keys: Sequence[KeyRead]) -> Dict[int, Optional[bytes]]:
    """
    Один batched read с проверкой обоих каналов ошибок.

    Returns:
        {query_id: value-or-None} для каждого запрошенного ключа

    Raises:
        StoreError: сбой store или ответ без результата по запрошенному query_id
    """
    response = store.read(StateReadRequest(keys=list(keys)))
    raise_for_store_errors(response, "state read")

    values = {result.query_id: result.value for result in response.results}
    missing = [k.query_id for k in keys if k.query_id not in values]
    if missing:
        raise StoreError(f"state read returned no result for query ids {missing}")
    return values


def write_batch(
    store: StateStore,
    sets: Sequence[SetOp] = (),
    deletes: Sequence[DeleteOp] = (),
) -> None:
    """
    Один атомарный batched write с проверкой обоих каналов ошибок.

    Raises:
        StoreError: сбой или отказ store; ничего не записано
    """
    response = store.write(StateWriteRequest(sets=list(sets), deletes=list(deletes)))
    raise_for_store_errors(response, "state write")


# =============================================================================
# IN-MEMORY STORE
# =============================================================================


@dataclass
class InMemoryStateStore:
    """
    Dict-backed реализация StateStore.

    Соблюдает контракт store: атомарный batch write, read-miss → None,
    дубликат query_id в одном read → semantic_error.

    Fault injection (для тестов): если установлены read_request_error /
    read_semantic_error / write_request_error / write_semantic_error,
    соответствующий вызов возвращает ошибку и не изменяет данные.
    """

    data: Dict[bytes, bytes] = field(default_factory=dict)

    read_request_error: Optional[Exception] = None
    read_semantic_error: Optional[Exception] = None
    write_request_error: Optional[Exception] = None
    write_semantic_error: Optional[Exception] = None

    read_count: int = 0
    write_count: int = 0

    def read(self, request: StateReadRequest) -> StateReadResponse:
        self.read_count += 1
        if self.read_request_error is not None:
            return StateReadResponse(request_error=self.read_request_error)
        if self.read_semantic_error is not None:
            return StateReadResponse(semantic_error=self.read_semantic_error)

        query_ids = [k.query_id for k in request.keys]
        if len(set(query_ids)) != len(query_ids):
            return StateReadResponse(
                semantic_error=ValueError("duplicate query id in read request")
            )

        results = [ReadResult(query_id=k.query_id, value=self.data.get(k.key)) for k in request.keys]
        return StateReadResponse(results=results)

    def write(self, request: StateWriteRequest) -> StateWriteResponse:
        self.write_count += 1
        if self.write_request_error is not None:
            return StateWriteResponse(request_error=self.write_request_error)
        if self.write_semantic_error is not None:
            return StateWriteResponse(semantic_error=self.write_semantic_error)

        # Batch применяется к копии и подменяет данные целиком
        staged = dict(self.data)
        for op in request.sets:
            staged[op.key] = op.value
        for op in request.deletes:
            staged.pop(op.key, None)
        self.data = staged
        return StateWriteResponse()

    def get(self, key: bytes) -> Optional[bytes]:
        return self.data.get(key)

    def set(self, key: bytes, value: bytes) -> None:
        """Прямая запись в обход batch (fixtures, genesis tooling)."""
        self.data[key] = value

    def snapshot(self) -> Dict[bytes, bytes]:
        return dict(self.data)
