"""A modulo hash function for integer keys."""

from __future__ import annotations

DEFAULT_TABLE_SIZE = 10


class HashFunction:
    """Maps integer keys onto slots of a table of fixed size."""

    def __init__(self, table_size: int = DEFAULT_TABLE_SIZE) -> None:
        if table_size <= 0:
            raise ValueError("table size must be positive")
        self.table_size = table_size

    def get_hash(self, key: int) -> int:
        """Return the slot for ``key``."""
        return key % self.table_size