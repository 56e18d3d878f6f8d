# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Undo/redo history for a TreeStore.

The store itself keeps no history. TreeHistory sits beside it and records
an immutable snapshot of the whole collection after each successful
mutation, with a cursor pointing at the current state.

Example:
    >>> store = TreeStore([{'id': 1, 'parent': None, 'label': 'Root'}])
    >>> history = TreeHistory(store)
    >>> _ = store.add_item({'id': 2, 'parent': 1, 'label': 'Child'})
    >>> history.record()
    >>> history.undo()
    True
    >>> len(store)
    1
"""

from __future__ import annotations

import logging

from .node import TreeNode
from .store import TreeStore

logger = logging.getLogger(__name__)

Snapshot = tuple[TreeNode, ...]


class TreeHistory:
    """Append-only log of store snapshots with a cursor.

    Recording after an undo discards the undone states. When max_size is
    set, the oldest snapshots are dropped to stay within the limit.
    """

    __slots__ = ('_store', '_snapshots', '_cursor', '_max_size')

    def __init__(self, store: TreeStore, max_size: int | None = None) -> None:
        """Initialize a TreeHistory.

        Args:
            store: The TreeStore to snapshot and restore.
            max_size: Maximum number of snapshots kept, including the
                current one. None means unbounded.

        Raises:
            ValueError: If max_size is smaller than 1.
        """
        if max_size is not None and max_size < 1:
            raise ValueError(f"max_size must be at least 1, got {max_size}")
        self._store = store
        self._max_size = max_size
        self._snapshots: list[Snapshot] = []
        self._cursor = -1
        self.record()

    def __len__(self) -> int:
        """Return the number of snapshots in the log."""
        return len(self._snapshots)

    @property
    def position(self) -> int:
        """Index of the snapshot matching the current store state."""
        return self._cursor

    @property
    def can_undo(self) -> bool:
        return self._cursor > 0

    @property
    def can_redo(self) -> bool:
        return self._cursor < len(self._snapshots) - 1

    @property
    def current(self) -> Snapshot:
        """The snapshot at the cursor."""
        return self._snapshots[self._cursor]

    def record(self) -> None:
        """Snapshot the store state after a successful mutation."""
        del self._snapshots[self._cursor + 1:]
        self._snapshots.append(tuple(self._store))
        if self._max_size is not None and len(self._snapshots) > self._max_size:
            del self._snapshots[:len(self._snapshots) - self._max_size]
        self._cursor = len(self._snapshots) - 1
        logger.debug("record position=%d size=%d", self._cursor, len(self._snapshots))

    def undo(self) -> bool:
        """Restore the previous snapshot. Return False if there is none."""
        if not self.can_undo:
            return False
        self._cursor -= 1
        self._restore()
        return True

    def redo(self) -> bool:
        """Restore the next snapshot. Return False if there is none."""
        if not self.can_redo:
            return False
        self._cursor += 1
        self._restore()
        return True

    def clear(self) -> None:
        """Drop every snapshot and restart from the current store state."""
        self._snapshots.clear()
        self._cursor = -1
        self.record()

    def _restore(self) -> None:
        self._store.initialize(self._snapshots[self._cursor])
        logger.debug("restore position=%d", self._cursor)
