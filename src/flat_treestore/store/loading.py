# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Loading functions for populating a TreeStore from raw items.

Bulk loading trusts its input: ids are normalized but parents are not
checked for existence or cycles. Use TreeStore.add_item for validated
inserts.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, TYPE_CHECKING

from ..node import TreeNode, normalize_item

if TYPE_CHECKING:
    from .core import TreeStore


def load_from_items(
    store: TreeStore,
    items: Iterable[TreeNode | Mapping[str, Any]],
) -> None:
    """Load raw items into store, replacing its content.

    A repeated id keeps the position of its first occurrence and the
    content of its last one.

    Args:
        store: Target TreeStore.
        items: TreeNodes or mappings with 'id', 'parent' and 'label'.
    """
    nodes: dict[str, TreeNode] = {}
    for raw in items:
        node = normalize_item(raw)
        nodes[node.id] = node
    store._nodes = nodes


def load_from_treestore(store: TreeStore, source: TreeStore) -> None:
    """Copy all nodes of source into store, replacing its content."""
    store._nodes = dict(source._nodes)
