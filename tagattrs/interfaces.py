"""
Abstract base interfaces for tagattrs.

The attribute, data, class and value operations only need a handful of
traversal primitives. This module names them so that other tree backends can
provide their own implementation.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, TypeVar, Union

from tagattrs.nodes import Node

SelectionType = TypeVar("SelectionType", bound="Traversal")

Predicate = Union[str, Callable[[int, Node], Any], Node, Iterable[Node]]


class Traversal(ABC):
    """Ordered view over nodes with the traversal operations the core consumes.

    Implementations must keep selection order in every operation and must
    never copy nodes; mutations through a node reference are visible to the
    tree that owns it.
    """

    @abstractmethod
    def __len__(self) -> int:
        ...

    @abstractmethod
    def __iter__(self):
        ...

    @abstractmethod
    def wrap(self: SelectionType, nodes: Union[Node, Iterable[Node]]) -> SelectionType:
        """Create a new selection sharing this selection's options."""
        ...

    @abstractmethod
    def filter(self: SelectionType, predicate: Predicate) -> SelectionType:
        """Keep the nodes matching a selector, callable or node set."""
        ...

    @abstractmethod
    def find(self: SelectionType, query: str) -> SelectionType:
        """Descendants of the selected nodes matching ``query``."""
        ...

    @abstractmethod
    def closest(self: SelectionType, query: str) -> SelectionType:
        """For each node, itself or its nearest ancestor matching ``query``."""
        ...

    @abstractmethod
    def parents(self: SelectionType, query: Union[str, None] = None) -> SelectionType:
        """Ancestor chain of the selected nodes, outermost last."""
        ...

    @abstractmethod
    def each(self: SelectionType, fn: Callable[[int, Node], Any]) -> SelectionType:
        """Call ``fn(index, node)`` for every node in selection order."""
        ...
