"""Transfer Executor — stateful deliver фаза send транзакции

- Один batched read обоих аккаунтов (различные query id)
- Read-miss → аккаунт с нулевым балансом (первое зачисление)
- Проверка средств до любой записи
- Conservation: from + to до == from + to после
- Один атомарный batched write; опустошённый отправитель удаляется (pruning)

Любая ошибка прерывает выполнение до write: частичная мутация невозможна.
"""

from dataclasses import dataclass
from typing import List, Tuple

from src.core.domain.account import Account, decode_account, encode_account
from src.core.domain.message import MessageSend, Transaction, decode_message
from src.core.domain.units import checked_credit, checked_debit
from src.core.errors import (
    InsufficientFundsError,
    InvalidAddressError,
    InvalidAmountError,
    InvalidMessageTypeError,
)
from src.core.state.keys import key_for_account
from src.core.state.store import (
    DeleteOp,
    KeyRead,
    SetOp,
    StateStore,
    new_query_ids,
    read_keys,
    write_batch,
)


@dataclass(frozen=True)
class TransferResult:
    """Результат применённого перевода."""

    from_key: bytes
    to_key: bytes

    from_before: Account
    to_before: Account
    from_after: Account
    to_after: Account

    # True если отправитель опустошён и удалён из store
    pruned: bool


class TransferExecutor:
    """Stateful исполнение сообщений транзакции."""

    def __init__(self, store: StateStore):
        self.store = store

    def deliver_tx(self, tx: Transaction) -> TransferResult:
        """Декодирование и исполнение транзакции.

        Raises:
            InvalidMessageTypeError: неизвестный или некорректный payload
            StoreError, DecodeError, InsufficientFundsError, InvalidAmountError
        """
        msg = decode_message(tx.msg)
        match msg:
            case MessageSend():
                return self.deliver_message_send(msg)
            case _:
                raise InvalidMessageTypeError()

    def deliver_message_send(self, msg: MessageSend) -> TransferResult:
        """Исполнение send сообщения.

        Args:
            msg: send сообщение (прошедшее admission)

        Returns:
            TransferResult с состоянием аккаунтов до и после

        Raises:
            InvalidAddressError: адрес не помещается в ключ
            StoreError: сбой store при read или write
            DecodeError: запись аккаунта повреждена
            InsufficientFundsError: баланс отправителя меньше суммы
            InvalidAmountError: баланс получателя переполнил бы uint64
        """
        try:
            from_key = key_for_account(msg.from_address)
            to_key = key_for_account(msg.to_address)
        except ValueError as e:
            raise InvalidAddressError(str(e)) from e
        from_query_id, to_query_id = new_query_ids(2)

        # 1. Batched read обоих аккаунтов
        values = read_keys(
            self.store,
            [
                KeyRead(query_id=from_query_id, key=from_key),
                KeyRead(query_id=to_query_id, key=to_key),
            ],
        )
        from_before = decode_account(values[from_query_id], msg.from_address)
        to_before = decode_account(values[to_query_id], msg.to_address)

        # 2. Проверка средств
        if from_before.amount < msg.amount:
            raise InsufficientFundsError(
                f"insufficient funds: balance {from_before.amount} < amount {msg.amount}"
            )

        # 3. Перевод самому себе: балансы не меняются
        if from_key == to_key:
            self._write_accounts([(from_key, from_before)])
            return TransferResult(
                from_key=from_key,
                to_key=to_key,
                from_before=from_before,
                to_before=to_before,
                from_after=from_before,
                to_after=from_before,
                pruned=False,
            )

        # 4. Debit / credit
        try:
            to_amount = checked_credit(to_before.amount, msg.amount)
        except ValueError as e:
            raise InvalidAmountError(str(e)) from e
        from_after = from_before.model_copy(
            update={"amount": checked_debit(from_before.amount, msg.amount)}
        )
        to_after = to_before.model_copy(update={"amount": to_amount})

        # 5. Атомарный write; байты получателя — из обновлённой записи получателя
        self._write_accounts([(to_key, to_after), (from_key, from_after)])

        return TransferResult(
            from_key=from_key,
            to_key=to_key,
            from_before=from_before,
            to_before=to_before,
            from_after=from_after,
            to_after=to_after,
            pruned=from_after.is_empty(),
        )

    def _write_accounts(self, accounts: List[Tuple[bytes, Account]]) -> None:
        """Один batched write: непустые аккаунты → sets, нулевые → deletes."""
        sets: List[SetOp] = []
        deletes: List[DeleteOp] = []
        for key, account in accounts:
            if account.is_empty():
                deletes.append(DeleteOp(key=key))
            else:
                sets.append(SetOp(key=key, value=encode_account(account)))
        write_batch(self.store, sets=sets, deletes=deletes)
