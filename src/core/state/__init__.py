"""
State access: key schema и calling contract внешнего keyed store.
"""

from src.core.state.keys import (
    ACCOUNT_PREFIX,
    FEE_PARAMS_ID,
    PARAMS_PREFIX,
    join_len_prefix,
    key_for_account,
    key_for_fee_params,
)
from src.core.state.store import (
    DeleteOp,
    InMemoryStateStore,
    KeyRead,
    ReadResult,
    SetOp,
    StateReadRequest,
    StateReadResponse,
    StateStore,
    StateWriteRequest,
    StateWriteResponse,
    new_query_ids,
    raise_for_store_errors,
    read_keys,
    write_batch,
)

__all__ = [
    # Key schema
    "ACCOUNT_PREFIX",
    "PARAMS_PREFIX",
    "FEE_PARAMS_ID",
    "join_len_prefix",
    "key_for_account",
    "key_for_fee_params",
    # Store contract
    "KeyRead",
    "ReadResult",
    "StateReadRequest",
    "StateReadResponse",
    "SetOp",
    "DeleteOp",
    "StateWriteRequest",
    "StateWriteResponse",
    "StateStore",
    "InMemoryStateStore",
    "raise_for_store_errors",
    "new_query_ids",
    "read_keys",
    "write_batch",
]
