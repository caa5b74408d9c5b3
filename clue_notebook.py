"""
clue_notebook.py
================
The detective's notebook: an ordered, duplicate-free set of clue texts.

Clues are kept in an unbalanced binary search tree keyed by the clue text
itself (smaller strings to the left, larger to the right). A session collects
at most a handful of clues, so no rebalancing is done.

Enumeration is a lazy in-order walk, which yields clues in ascending
lexicographic order regardless of the order they were discovered in.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterator, List, Optional

logger = logging.getLogger("detective_quest.clue_notebook")


class _ClueNode:
    __slots__ = ("text", "left", "right")

    def __init__(self, text: str) -> None:
        self.text = text
        self.left: Optional[_ClueNode] = None
        self.right: Optional[_ClueNode] = None


class OrderedClueSet:
    """
    Sorted set of clue strings backed by a binary search tree.

    Example:
        >>> notebook = OrderedClueSet()
        >>> notebook.insert("Faca com manchas suspeitas")
        True
        >>> notebook.insert("Cinzas ainda quentes na lareira")
        True
        >>> list(notebook)
        ['Cinzas ainda quentes na lareira', 'Faca com manchas suspeitas']
    """

    def __init__(self) -> None:
        self._root: Optional[_ClueNode] = None
        self._size = 0

    def insert(self, text: str) -> bool:
        """
        Add `text` unless an identical clue is already recorded.

        Returns:
            True if the clue was added, False if it was a duplicate.
        """
        if self._root is None:
            self._root = _ClueNode(text)
            self._size = 1
            return True

        node = self._root
        while True:
            if text < node.text:
                if node.left is None:
                    node.left = _ClueNode(text)
                    break
                node = node.left
            elif text > node.text:
                if node.right is None:
                    node.right = _ClueNode(text)
                    break
                node = node.right
            else:
                logger.debug("Clue already in notebook: %r", text)
                return False

        self._size += 1
        return True

    def enumerate(self) -> Iterator[str]:
        """Yield every clue in ascending lexicographic order."""
        stack: List[_ClueNode] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.text
            node = node.right

    def count_matching(self, predicate: Callable[[str], bool]) -> int:
        """Count the clues for which `predicate` is true."""
        return sum(1 for text in self.enumerate() if predicate(text))

    def list_matching(self, predicate: Callable[[str], bool]) -> Iterator[str]:
        """Yield, in ascending order, the clues for which `predicate` is true."""
        return (text for text in self.enumerate() if predicate(text))

    def __iter__(self) -> Iterator[str]:
        return self.enumerate()

    def __len__(self) -> int:
        return self._size

    def __contains__(self, text: object) -> bool:
        if not isinstance(text, str):
            return False
        node = self._root
        while node is not None:
            if text < node.text:
                node = node.left
            elif text > node.text:
                node = node.right
            else:
                return True
        return False

    def __repr__(self) -> str:
        return f"OrderedClueSet({list(self.enumerate())!r})"
