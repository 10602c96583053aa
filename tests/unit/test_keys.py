"""
Tests for Key Schema

Покрывает:
- Точная раскладка ключей (prefix + length-prefixed payload)
- Детерминизм
- Injectivity (в том числе payload разной длины под одним prefix)
- Непересекающиеся namespaces
- Framing: пропуск None, лимит длины сегмента
"""

import pytest

from src.core.state import (
    ACCOUNT_PREFIX,
    PARAMS_PREFIX,
    join_len_prefix,
    key_for_account,
    key_for_fee_params,
)


ADDR_A = bytes.fromhex("aa" * 20)
ADDR_B = bytes.fromhex("bb" * 20)


# =============================================================================
# LAYOUT
# =============================================================================


def test_account_key_layout():
    """0x01 + длина (0x14) + 20 байт адреса."""
    assert key_for_account(ADDR_A) == b"\x01\x14" + ADDR_A


def test_fee_params_key_layout():
    """0x07 + длина (0x03) + '/f/'."""
    assert key_for_fee_params() == b"\x07\x03/f/"


def test_prefix_constants():
    assert ACCOUNT_PREFIX == b"\x01"
    assert PARAMS_PREFIX == b"\x07"


# =============================================================================
# DETERMINISM / INJECTIVITY
# =============================================================================


def test_equal_inputs_give_identical_keys():
    assert key_for_account(ADDR_A) == key_for_account(bytes(ADDR_A))
    assert key_for_fee_params() == key_for_fee_params()


def test_distinct_addresses_give_distinct_keys():
    assert key_for_account(ADDR_A) != key_for_account(ADDR_B)


def test_distinct_length_payloads_never_collide():
    """1-байтный и 2-байтный payload под одним prefix не совпадают."""
    short = key_for_account(b"\x01")
    long = key_for_account(b"\x01\x01")

    assert short != long
    assert not long.startswith(short)


def test_payload_prefix_does_not_alias():
    """Payload, являющийся префиксом другого, даёт ключ, не являющийся префиксом."""
    assert not key_for_account(ADDR_A + b"\x00").startswith(key_for_account(ADDR_A))


@pytest.mark.parametrize("length", [0, 1, 19, 20, 21, 32])
def test_length_is_encoded_in_key(length):
    address = b"\x42" * length
    key = key_for_account(address)

    assert key[1] == length
    assert len(key) == 2 + length


def test_namespaces_are_disjoint():
    """Ключ аккаунта никогда не попадает в namespace параметров."""
    fee_key = key_for_fee_params()
    account_key = key_for_account(b"/f/")

    assert account_key != fee_key
    assert account_key[:1] == ACCOUNT_PREFIX
    assert fee_key[:1] == PARAMS_PREFIX


# =============================================================================
# FRAMING
# =============================================================================


def test_join_len_prefix_frames_each_part():
    assert join_len_prefix(b"ab", b"c") == b"\x02ab\x01c"


def test_join_len_prefix_skips_none():
    assert join_len_prefix(None, b"ab", None) == b"\x02ab"


def test_join_len_prefix_empty_part():
    assert join_len_prefix(b"") == b"\x00"


def test_join_len_prefix_rejects_oversized_segment():
    with pytest.raises(ValueError, match="exceeds 255"):
        join_len_prefix(b"\x00" * 256)
