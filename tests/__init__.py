"""
Test suite for the send contract

Contains:
- tests/unit/          : Unit tests for key schema, store contract, gates, executor, dispatcher
"""
