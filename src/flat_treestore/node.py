# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TreeStore node class and raw item normalization."""

from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from typing import Any, Mapping

from .exceptions import InvalidItemError


@dataclass(frozen=True)
class TreeNode:
    """A labeled node in a flat, parent-linked collection.

    Each node has:
    - id: Unique identifier within the store (always a string)
    - parent: Id of the parent node, or None for a root
    - label: Free-form display text

    Nodes are immutable: the store replaces them on update, so a node
    handed out by a query can never change the store behind its back.

    Example:
        >>> node = TreeNode('2', '1', 'Child')
        >>> node.parent
        '1'
        >>> node.is_root
        False
    """

    id: str
    parent: str | None
    label: str

    @property
    def is_root(self) -> bool:
        """True if this node has no parent."""
        return self.parent is None

    def replace(self, **changes: Any) -> TreeNode:
        """Return a copy of this node with the given fields changed."""
        return replace(self, **changes)

    def as_dict(self) -> dict[str, Any]:
        """Return the node as a plain dict with id, parent and label."""
        return asdict(self)


def normalize_id(value: Any) -> str:
    """Convert an id given as number or string to its string form."""
    return value if isinstance(value, str) else str(value)


def normalize_parent(value: Any) -> str | None:
    """Convert a parent reference to string form; None and '' mean root."""
    if value is None or value == '':
        return None
    return normalize_id(value)


def normalize_item(raw: TreeNode | Mapping[str, Any]) -> TreeNode:
    """Build a TreeNode from a raw item.

    Args:
        raw: A TreeNode, or a mapping with 'id', 'label' and optional
            'parent' keys. Numeric ids and parents become strings.
            Other keys are ignored.

    Returns:
        The normalized TreeNode.

    Raises:
        InvalidItemError: If id or label is missing.
        TypeError: If raw is neither a TreeNode nor a mapping.
    """
    if isinstance(raw, TreeNode):
        raw = raw.as_dict()
    if not isinstance(raw, Mapping):
        raise TypeError(
            f"item must be a mapping or TreeNode, not {type(raw).__name__}"
        )

    if raw.get('id') is None:
        raise InvalidItemError(f"Item has no id: {dict(raw)!r}")
    if 'label' not in raw or raw['label'] is None:
        raise InvalidItemError(f"Item {raw['id']} has no label")

    return TreeNode(
        id=normalize_id(raw['id']),
        parent=normalize_parent(raw.get('parent')),
        label=raw['label'],
    )
