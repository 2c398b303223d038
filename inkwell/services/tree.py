from __future__ import annotations

from typing import Callable

from markdown_it.tree import SyntaxTreeNode


def walk(root: SyntaxTreeNode, visit: Callable[[SyntaxTreeNode], None]) -> None:
    """Apply ``visit`` to ``root`` and every descendant in document order.

    ``visit`` may change the payload of the node it receives but must not add,
    remove or reorder children.
    """
    visit(root)
    for child in root.children:
        walk(child, visit)
