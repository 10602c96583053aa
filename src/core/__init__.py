"""
Core domain models, key schema, store contract, and error taxonomy.

This module contains the foundational building blocks that are independent
of the host ledger (consensus, merklized storage, signature verification).
"""
