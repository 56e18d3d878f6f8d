# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TreeStore - A flat, parent-linked tree container.

This module provides the TreeStore class, the in-memory repository behind
a tree editor. Nodes live in a single insertion-ordered collection and
reference their parent by id; the tree shape is derived on demand.

Key Features:
    - **Flat storage**: One dict keyed by id, in insertion order
    - **Derived reads**: Children, pre-order descendants, ancestor chain
    - **Validated mutations**: add/update/remove check ids, parents and
      cycles before touching the collection
    - **Private collection**: Nodes are immutable, so callers can only
      change the store through its operations

Invariant:
    Between validated operations the nodes form a forest: ids are unique,
    every non-null parent resolves to a node in the store, and no node is
    its own ancestor. ``initialize`` loads without validation.

Example:
    Basic usage::

        store = TreeStore()
        store.initialize([
            {'id': 1, 'parent': None, 'label': 'Root'},
            {'id': 2, 'parent': 1, 'label': 'A'},
            {'id': 3, 'parent': 2, 'label': 'B'},
        ])

        store.get_all_parents('3')   # [TreeNode('2', ...), TreeNode('1', ...)]
        store.get_all_children('1')  # [TreeNode('2', ...), TreeNode('3', ...)]

        store.update_item({'id': 3, 'parent': None, 'label': 'B'})
        store.remove_item('2')
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator, Mapping

from ..exceptions import (
    CycleError,
    DuplicateIdError,
    NewParentNotFoundError,
    NotFoundError,
    ParentNotFoundError,
)
from ..node import TreeNode, normalize_id, normalize_item
from .loading import load_from_items, load_from_treestore

logger = logging.getLogger(__name__)


class TreeStore:
    """An in-memory forest of labeled nodes linked by parent id.

    TreeStore provides:
    - initialize(items): Replace the collection (no structural checks)
    - get_item_by_id / get_children / get_all_children / get_all_parents
    - add_item / update_item / remove_item: Validated mutations

    Ids given as numbers are normalized to strings everywhere, including
    query arguments.

    Example:
        >>> store = TreeStore([{'id': 1, 'parent': None, 'label': 'Root'}])
        >>> store.add_item({'id': 2, 'parent': 1, 'label': 'Child'})
        TreeNode(id='2', parent='1', label='Child')
        >>> store.get_item_by_id(2).label
        'Child'
    """

    __slots__ = ('_nodes',)

    def __init__(
        self,
        source: Iterable[TreeNode | Mapping[str, Any]] | TreeStore | None = None,
    ) -> None:
        """Initialize a TreeStore.

        Args:
            source: Optional initial data, either an iterable of raw items
                (mappings with 'id', 'parent', 'label', or TreeNodes) or
                another TreeStore to copy.
        """
        self._nodes: dict[str, TreeNode] = {}

        if source is not None:
            self.initialize(source)

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        """Return string representation showing node ids."""
        return f"TreeStore({list(self._nodes.keys())})"

    def __len__(self) -> int:
        """Return the number of nodes in the store."""
        return len(self._nodes)

    def __iter__(self) -> Iterator[TreeNode]:
        """Iterate over all nodes in collection order."""
        return iter(list(self._nodes.values()))

    def __contains__(self, item_id: Any) -> bool:
        """Check if a node with the given id exists."""
        if item_id is None:
            return False
        return normalize_id(item_id) in self._nodes

    # ==================== Loading ====================

    def initialize(self, items: Iterable[TreeNode | Mapping[str, Any]] | TreeStore) -> None:
        """Replace the whole collection with the given items.

        Ids and parents are normalized to strings. Parent existence and
        acyclicity are NOT checked: bulk loading trusts the caller.

        Args:
            items: Raw items or a TreeStore to copy from.

        Raises:
            InvalidItemError: If an item has no id or no label.
        """
        if isinstance(items, TreeStore):
            load_from_treestore(self, items)
        else:
            load_from_items(self, items)
        logger.debug("initialize count=%d", len(self._nodes))

    # ==================== Queries ====================

    def get_item_by_id(self, item_id: Any) -> TreeNode | None:
        """Return the node with the given id, or None if absent."""
        if item_id is None:
            return None
        return self._nodes.get(normalize_id(item_id))

    def get_children(self, item_id: Any) -> list[TreeNode]:
        """Return the direct children of a node in collection order."""
        if item_id is None:
            return []
        parent_id = normalize_id(item_id)
        return [node for node in self._nodes.values() if node.parent == parent_id]

    def get_all_children(self, item_id: Any) -> list[TreeNode]:
        """Return all descendants of a node in pre-order.

        Each direct child is followed by its own descendants, recursively,
        with siblings in collection order.

        Args:
            item_id: Id of the node whose subtree is collected.

        Returns:
            Descendants in pre-order, excluding the node itself. Empty if
            the node has no children or does not exist.
        """
        if item_id is None:
            return []
        root_id = normalize_id(item_id)
        return [
            node for _, node in self._iter_subtree(root_id, seen={root_id})
        ]

    def get_all_parents(self, item_id: Any) -> list[TreeNode]:
        """Return the ancestors of a node, nearest first, ending at a root.

        The chain stops early, without error, at a parent id that does not
        resolve to a node.

        Args:
            item_id: Id of the node whose ancestors are wanted.

        Returns:
            Ancestor nodes. Empty for a root or an unknown id.
        """
        node = self.get_item_by_id(item_id)
        if node is None:
            return []

        result: list[TreeNode] = []
        seen = {node.id}
        while node.parent is not None and node.parent not in seen:
            parent = self._nodes.get(node.parent)
            if parent is None:
                break
            result.append(parent)
            seen.add(parent.id)
            node = parent
        return result

    def get_all_items(self) -> list[TreeNode]:
        """Return all nodes in collection order."""
        return list(self._nodes.values())

    def get_roots(self) -> list[TreeNode]:
        """Return nodes without a parent in collection order."""
        return [node for node in self._nodes.values() if node.parent is None]

    # ==================== Mutations ====================

    def add_item(self, item: TreeNode | Mapping[str, Any]) -> TreeNode:
        """Append a new node to the collection.

        Args:
            item: Raw item with id, parent and label.

        Returns:
            The stored, normalized node.

        Raises:
            InvalidItemError: If the item has no id or no label.
            DuplicateIdError: If the id is already in the store.
            ParentNotFoundError: If the parent does not exist.
        """
        node = normalize_item(item)

        if node.id in self._nodes:
            raise DuplicateIdError(node.id)
        if node.parent is not None and node.parent not in self._nodes:
            raise ParentNotFoundError(node.id, node.parent)

        self._nodes[node.id] = node
        logger.debug("add_item id=%s parent=%s", node.id, node.parent)
        return node

    def remove_item(self, item_id: Any) -> list[TreeNode]:
        """Remove a node and all its descendants.

        Args:
            item_id: Id of the node to remove.

        Returns:
            The removed nodes: the node itself, then its descendants in
            pre-order.

        Raises:
            NotFoundError: If the node does not exist.
        """
        node = self.get_item_by_id(item_id)
        if node is None:
            raise NotFoundError(normalize_id(item_id))

        removed = [node, *self.get_all_children(node.id)]
        for child in removed[1:]:
            del self._nodes[child.id]
        del self._nodes[node.id]

        logger.debug("remove_item id=%s removed=%d", node.id, len(removed))
        return removed

    def update_item(self, updated_item: TreeNode | Mapping[str, Any]) -> TreeNode:
        """Replace the label and parent of an existing node.

        The node keeps its position in the collection. Moving a node to
        the root level (parent None) is always allowed.

        Args:
            updated_item: Raw item with the id of an existing node and its
                new parent and label.

        Returns:
            The stored, updated node.

        Raises:
            InvalidItemError: If the item has no id or no label.
            NotFoundError: If no node has this id.
            NewParentNotFoundError: If the new parent does not exist.
            CycleError: If the new parent is the node itself, one of its
                current ancestors, or one of its descendants.
        """
        node = normalize_item(updated_item)

        existing = self._nodes.get(node.id)
        if existing is None:
            raise NotFoundError(node.id)

        if node.parent != existing.parent and node.parent is not None:
            if node.parent not in self._nodes:
                raise NewParentNotFoundError(node.id, node.parent)
            if (
                node.parent == node.id
                or any(a.id == node.parent for a in self.get_all_parents(node.id))
                or any(a.id == node.id for a in self.get_all_parents(node.parent))
            ):
                raise CycleError(node.id, node.parent)

        self._nodes[node.id] = node
        logger.debug("update_item id=%s parent=%s", node.id, node.parent)
        return node

    def clear(self) -> None:
        """Remove all nodes from this store."""
        self._nodes.clear()

    # ==================== Walk ====================

    def walk(self) -> Iterator[tuple[int, TreeNode]]:
        """Yield (depth, node) pairs in pre-order, starting from every root.

        Roots have depth 0. Nodes whose parent chain does not reach a root
        (possible only after a permissive initialize) are not visited.

        Example:
            Indented outline::

                for depth, node in store.walk():
                    print('  ' * depth + node.label)
        """
        return self._iter_subtree(None, seen=set())

    # ==================== Conversion ====================

    def as_list(self) -> list[dict[str, Any]]:
        """Return the collection as plain dicts, accepted by initialize."""
        return [node.as_dict() for node in self._nodes.values()]

    def _iter_subtree(
        self, parent_id: str | None, seen: set[str]
    ) -> Iterator[tuple[int, TreeNode]]:
        """Yield (depth, node) for the subtree below parent_id in pre-order.

        Uses an explicit stack, so depth is not bounded by the recursion
        limit. Ids in seen are skipped; visited ids are added to it.
        """
        index = self._children_index()
        stack = [(node, 0) for node in reversed(index.get(parent_id, ()))]
        while stack:
            node, depth = stack.pop()
            if node.id in seen:
                continue
            seen.add(node.id)
            yield depth, node
            stack.extend(
                (child, depth + 1) for child in reversed(index.get(node.id, ()))
            )

    def _children_index(self) -> dict[str | None, list[TreeNode]]:
        """Map each parent id to its children in collection order."""
        index: dict[str | None, list[TreeNode]] = {}
        for node in self._nodes.values():
            index.setdefault(node.parent, []).append(node)
        return index
