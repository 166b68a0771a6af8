"""Identifier sources for accounts and organisations."""

from __future__ import annotations

import os
import uuid


def new_id() -> uuid.UUID:
    """Return a fresh random (version 4) UUID."""
    return uuid.uuid4()


class UUIDPool:
    """Batch-generated UUIDs using os.urandom for minimal syscall overhead.

    ``next`` is a drop-in ``id_factory`` for ``AccountBuilder`` when many
    accounts are built in a row.

    Parameters
    ----------
    batch_size : int
        Number of UUIDs to generate per batch (default 1024).
    """

    __slots__ = ("_batch_size", "_pool", "_index")

    def __init__(self, batch_size: int = 1024) -> None:
        if batch_size < 1:
            raise ValueError(f"batch_size must be positive, got {batch_size}")
        self._batch_size = batch_size
        self._pool: list[uuid.UUID] = []
        self._index = 0
        self._refill()

    def _refill(self) -> None:
        raw = os.urandom(16 * self._batch_size)
        self._pool = [
            uuid.UUID(bytes=raw[i : i + 16], version=4)
            for i in range(0, len(raw), 16)
        ]
        self._index = 0

    def next(self) -> uuid.UUID:
        """Return next UUID, refilling pool when exhausted."""
        if self._index >= len(self._pool):
            self._refill()
        val = self._pool[self._index]
        self._index += 1
        return val

    __call__ = next
