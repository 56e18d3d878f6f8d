# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TreeStore exceptions."""

from __future__ import annotations


class TreeStoreError(Exception):
    """Base exception for TreeStore errors."""

    pass


class InvalidItemError(TreeStoreError, ValueError):
    """Raised when a raw item lacks a required field."""

    pass


class DuplicateIdError(TreeStoreError):
    """Raised when adding a node whose id is already in the store."""

    def __init__(self, item_id: str) -> None:
        self.item_id = item_id
        super().__init__(f"Item with id {item_id} already exists")


class ParentNotFoundError(TreeStoreError):
    """Raised when adding a node under a parent that does not exist."""

    def __init__(self, item_id: str, parent_id: str) -> None:
        self.item_id = item_id
        self.parent_id = parent_id
        super().__init__(f"Parent with id {parent_id} not found")


class NotFoundError(TreeStoreError):
    """Raised when removing or updating an unknown node."""

    def __init__(self, item_id: str) -> None:
        self.item_id = item_id
        super().__init__(f"Item with id {item_id} not found")


class NewParentNotFoundError(TreeStoreError):
    """Raised when moving a node under a parent that does not exist."""

    def __init__(self, item_id: str, parent_id: str) -> None:
        self.item_id = item_id
        self.parent_id = parent_id
        super().__init__(f"New parent with id {parent_id} not found")


class CycleError(TreeStoreError):
    """Raised when a move would make a node its own ancestor."""

    def __init__(self, item_id: str, parent_id: str) -> None:
        self.item_id = item_id
        self.parent_id = parent_id
        super().__init__(
            f"Cannot move item {item_id} under {parent_id}: "
            f"{parent_id} is the item itself or one of its descendants"
        )
