"""Тесты для Transfer Executor (stateful deliver фаза).

Coverage:
- Conservation from + to
- Pruning опустошённого отправителя
- Первое зачисление новому получателю
- Отсутствие мутаций при любой ошибке
- Байты получателя берутся из записи получателя
- Один atomic write на перевод
- Перевод самому себе, переполнение uint64
"""

import pytest

from src.core.domain import UINT64_MAX, Account, MessageSend, Transaction, decode_account, encode_account
from src.core.errors import (
    DecodeError,
    InsufficientFundsError,
    InvalidAddressError,
    InvalidAmountError,
    InvalidMessageTypeError,
    StoreError,
)
from src.core.state import InMemoryStateStore, key_for_account
from src.executor import TransferExecutor


FROM = b"\xf1" * 20
TO = b"\xf2" * 20
FROM_KEY = key_for_account(FROM)
TO_KEY = key_for_account(TO)


def _store(**balances):
    """Store с аккаунтами {FROM: from_amount, TO: to_amount}; нулевые не пишутся."""
    store = InMemoryStateStore()
    for address, amount in ((FROM, balances.get("from_amount", 0)), (TO, balances.get("to_amount", 0))):
        if amount:
            store.set(key_for_account(address), encode_account(Account(address=address, amount=amount)))
    return store


def _balance(store, address):
    return decode_account(store.get(key_for_account(address)), address).amount


def _send(amount, from_address=FROM, to_address=TO):
    return MessageSend(from_address=from_address, to_address=to_address, amount=amount)


class TestTransferExecutor:
    """Тесты исполнения send сообщения."""

    def test_drain_prunes_sender(self):
        """from=100, to=0, перевод 100 → from удалён, to=100."""
        store = _store(from_amount=100)

        result = TransferExecutor(store).deliver_message_send(_send(100))

        assert store.get(FROM_KEY) is None
        assert _balance(store, TO) == 100
        assert result.pruned is True
        assert result.from_after.amount == 0
        assert result.to_after.amount == 100

    def test_partial_transfer_updates_both(self):
        store = _store(from_amount=100, to_amount=7)

        result = TransferExecutor(store).deliver_message_send(_send(30))

        assert _balance(store, FROM) == 70
        assert _balance(store, TO) == 37
        assert result.pruned is False

    def test_recipient_record_comes_from_recipient(self):
        """Запись получателя содержит адрес и баланс получателя, а не отправителя."""
        store = _store(from_amount=100, to_amount=1)

        TransferExecutor(store).deliver_message_send(_send(10))

        stored_to = decode_account(store.get(TO_KEY), TO)
        assert stored_to == Account(address=TO, amount=11)

    def test_first_time_recipient_created(self):
        store = _store(from_amount=5)

        TransferExecutor(store).deliver_message_send(_send(2))

        assert decode_account(store.get(TO_KEY), TO) == Account(address=TO, amount=2)

    @pytest.mark.parametrize(
        "from_amount,to_amount,amount",
        [(100, 0, 100), (100, 0, 1), (50, 50, 25), (1, UINT64_MAX - 1, 1), (UINT64_MAX, 0, UINT64_MAX)],
    )
    def test_conservation(self, from_amount, to_amount, amount):
        store = _store(from_amount=from_amount, to_amount=to_amount)

        result = TransferExecutor(store).deliver_message_send(_send(amount))

        assert _balance(store, FROM) + _balance(store, TO) == from_amount + to_amount
        assert result.from_after.amount + result.to_after.amount == from_amount + to_amount

    def test_single_atomic_write(self):
        store = _store(from_amount=100)

        TransferExecutor(store).deliver_message_send(_send(40))

        assert store.read_count == 1
        assert store.write_count == 1

    def test_deliver_tx_decodes_envelope(self):
        store = _store(from_amount=10)

        TransferExecutor(store).deliver_tx(Transaction(fee=0, msg=_send(10).to_payload()))

        assert _balance(store, TO) == 10


class TestTransferExecutorFailures:
    """Любая ошибка — ни одной записи."""

    def test_insufficient_funds_no_mutation(self):
        """from=50, перевод 100 → InsufficientFundsError; store не изменён."""
        store = _store(from_amount=50)
        before = store.snapshot()

        with pytest.raises(InsufficientFundsError):
            TransferExecutor(store).deliver_message_send(_send(100))

        assert store.snapshot() == before
        assert store.write_count == 0

    def test_missing_sender_is_insufficient(self):
        store = _store()

        with pytest.raises(InsufficientFundsError):
            TransferExecutor(store).deliver_message_send(_send(1))

    @pytest.mark.parametrize("channel", ["read_request_error", "read_semantic_error"])
    def test_read_fault(self, channel):
        store = _store(from_amount=100)
        setattr(store, channel, IOError("io"))

        with pytest.raises(StoreError):
            TransferExecutor(store).deliver_message_send(_send(10))

        assert store.write_count == 0

    @pytest.mark.parametrize("channel", ["write_request_error", "write_semantic_error"])
    def test_write_fault(self, channel):
        store = _store(from_amount=100, to_amount=3)
        before = store.snapshot()
        setattr(store, channel, IOError("io"))

        with pytest.raises(StoreError):
            TransferExecutor(store).deliver_message_send(_send(100))

        assert store.snapshot() == before

    @pytest.mark.parametrize("key", [FROM_KEY, TO_KEY])
    def test_corrupted_record(self, key):
        store = _store(from_amount=100, to_amount=3)
        store.set(key, b"\x00corrupt")
        before = store.snapshot()

        with pytest.raises(DecodeError):
            TransferExecutor(store).deliver_message_send(_send(10))

        assert store.snapshot() == before

    def test_recipient_overflow(self):
        store = _store(from_amount=1, to_amount=UINT64_MAX)
        before = store.snapshot()

        with pytest.raises(InvalidAmountError, match="overflows"):
            TransferExecutor(store).deliver_message_send(_send(1))

        assert store.snapshot() == before

    def test_unknown_message(self):
        store = _store(from_amount=10)

        with pytest.raises(InvalidMessageTypeError):
            TransferExecutor(store).deliver_tx(Transaction(fee=0, msg={"type": "burn", "value": {}}))

        assert store.read_count == 0

    @pytest.mark.parametrize("side", ["from_address", "to_address"])
    def test_address_too_long_for_key(self, side):
        store = _store(from_amount=10)
        addresses = {"from_address": FROM, "to_address": TO, side: b"\xaa" * 256}

        with pytest.raises(InvalidAddressError, match="exceeds 255"):
            TransferExecutor(store).deliver_message_send(_send(1, **addresses))

        assert store.read_count == 0
        assert store.write_count == 0

    def test_record_stored_under_foreign_key(self):
        """Запись с адресом, отличным от адреса ключа, не принимается."""
        store = _store(to_amount=3)
        store.set(FROM_KEY, encode_account(Account(address=TO, amount=100)))
        before = store.snapshot()

        with pytest.raises(DecodeError, match="does not match"):
            TransferExecutor(store).deliver_message_send(_send(10))

        assert store.snapshot() == before


class TestSelfTransfer:
    def test_balance_unchanged(self):
        store = _store(from_amount=100)

        result = TransferExecutor(store).deliver_message_send(_send(60, to_address=FROM))

        assert _balance(store, FROM) == 100
        assert result.from_after.amount == 100
        assert store.write_count == 1

    def test_still_requires_funds(self):
        store = _store(from_amount=10)

        with pytest.raises(InsufficientFundsError):
            TransferExecutor(store).deliver_message_send(_send(60, to_address=FROM))
