# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TreeStore package - Flat, parent-linked node container.

This package provides the TreeStore class, which keeps a forest of labeled
nodes in one insertion-ordered collection and checks the tree invariants on
every validated mutation.

The package is organized into:
- core: Main TreeStore class with queries and mutations
- loading: Functions for bulk loading raw items

Example:
    >>> from flat_treestore import TreeStore
    >>> store = TreeStore([{'id': 1, 'parent': None, 'label': 'Root'}])
    >>> store.add_item({'id': 2, 'parent': 1, 'label': 'Child'})
    TreeNode(id='2', parent='1', label='Child')
    >>> [n.id for n in store.get_children('1')]
    ['2']
"""

from ..node import TreeNode
from .core import TreeStore

__all__ = ["TreeStore", "TreeNode"]
