# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Flat-TreeStore - A parent-linked tree of labeled nodes.

A lightweight, zero-dependency library providing the in-memory store
behind a tree editor: a flat collection of nodes that reference their
parent by id, with validated mutations and caller-side undo/redo.
"""

__version__ = "0.1.0"

from .exceptions import (
    CycleError,
    DuplicateIdError,
    InvalidItemError,
    NewParentNotFoundError,
    NotFoundError,
    ParentNotFoundError,
    TreeStoreError,
)
from .history import TreeHistory
from .node import TreeNode
from .store import TreeStore

__all__ = [
    # Core classes
    "TreeStore",
    "TreeNode",
    # History
    "TreeHistory",
    # Exceptions
    "TreeStoreError",
    "InvalidItemError",
    "DuplicateIdError",
    "ParentNotFoundError",
    "NotFoundError",
    "NewParentNotFoundError",
    "CycleError",
]
