"""Shared request parameter constraints."""

# Identifiers are unsigned and must fit the INTEGER primary key columns
MAX_ID = 2**31 - 1
