"""
Key Schema — отображение логических записей в ключи keyed store

Ключ = один байт namespace prefix + length-prefixed payload.
Length framing гарантирует, что payload разной длины под одним prefix
никогда не дают одинаковый ключ.

Namespaces:
- 0x01: аккаунты
- 0x07: governance параметры
"""

from typing import Final, Optional


# =============================================================================
# PREFIXES
# =============================================================================

# Store key prefix для аккаунтов
ACCOUNT_PREFIX: Final[bytes] = b"\x01"

# Store key prefix для governance параметров
PARAMS_PREFIX: Final[bytes] = b"\x07"

# Payload ключа fee параметров
FEE_PARAMS_ID: Final[bytes] = b"/f/"

# Длина framing'а кодируется одним байтом
MAX_SEGMENT_LENGTH: Final[int] = 0xFF


# =============================================================================
# FRAMING
# =============================================================================


def join_len_prefix(*parts: Optional[bytes]) -> bytes:
    """
    Склейка сегментов с префиксом длины.

    Каждый сегмент кодируется как [len(segment)] + segment; None пропускается.

    Raises:
        ValueError: Если сегмент длиннее MAX_SEGMENT_LENGTH
    """
    out = bytearray()
    for part in parts:
        if part is None:
            continue
        if len(part) > MAX_SEGMENT_LENGTH:
            raise ValueError(
                f"key segment length {len(part)} exceeds {MAX_SEGMENT_LENGTH} bytes"
            )
        out.append(len(part))
        out.extend(part)
    return bytes(out)


# =============================================================================
# KEYS
# =============================================================================


def key_for_account(address: bytes) -> bytes:
    """Ключ записи аккаунта."""
    return ACCOUNT_PREFIX + join_len_prefix(address)


def key_for_fee_params() -> bytes:
    """Ключ governance 'fee parameters'."""
    return PARAMS_PREFIX + join_len_prefix(FEE_PARAMS_ID)
