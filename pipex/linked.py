"""A minimal singly linked list node."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional


@dataclass
class ListNode:
    """One element of a singly linked list."""

    content: Any
    next: Optional["ListNode"] = None

    def __iter__(self) -> Iterator[Any]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node.content
            node = node.next


def lstnew(content: Any) -> ListNode:
    """Create a node holding content with no successor."""
    return ListNode(content)