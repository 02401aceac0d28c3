"""
Selection: an ordered, chainable view over nodes.

A Selection never owns its nodes. Setters mutate the nodes in place and
return the same selection; getters read from the first node.

Example:
    doc = tagattrs.load('<form><input type="radio" name="r" value="a"></form>')
    doc.find("input").attr("checked", "").add_class("picked")
    doc.find("input").val()  # "a"
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, Mapping, Optional, Union, overload

from tagattrs.api import attributes as attribute_store
from tagattrs.api import classes as class_list
from tagattrs.api import data as data_store
from tagattrs.api import value as value_accessor
from tagattrs.codec import stringify
from tagattrs.config.options import ParseOptions
from tagattrs.interfaces import Predicate, Traversal
from tagattrs.nodes import Document, Node, ParentNode, is_tag
from tagattrs.selectors import mirrors_for


class _Missing:
    """Marker for an argument that was not passed (distinct from None)."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


def _unique(nodes: Iterable[Node]) -> list[Node]:
    seen: set[Node] = set()
    result = []
    for node in nodes:
        if node not in seen:
            seen.add(node)
            result.append(node)
    return result


class Selection(Traversal):
    """Ordered view over nodes with attribute, data, class and value access.

    Args:
        nodes: Nodes to select, in order.
        options: Parse options of the owning document; decide how selectors
            treat tag name case.
    """

    def __init__(
        self,
        nodes: Union[Node, Iterable[Node], None] = None,
        options: Optional[ParseOptions] = None,
    ) -> None:
        if nodes is None:
            self._nodes: list[Node] = []
        elif isinstance(nodes, Node):
            self._nodes = [nodes]
        else:
            self._nodes = list(nodes)
        self.options = options or ParseOptions()

    # Sequence protocol

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    @overload
    def __getitem__(self, index: int) -> Node: ...

    @overload
    def __getitem__(self, index: slice) -> "Selection": ...

    def __getitem__(self, index: Union[int, slice]) -> Union[Node, "Selection"]:
        if isinstance(index, slice):
            return self.wrap(self._nodes[index])
        return self._nodes[index]

    def __repr__(self) -> str:
        return f"<Selection {self._nodes!r}>"

    @property
    def nodes(self) -> list[Node]:
        """Copy of the selected node list."""
        return list(self._nodes)

    def first(self) -> "Selection":
        return self.wrap(self._nodes[:1])

    def last(self) -> "Selection":
        return self.wrap(self._nodes[-1:])

    def _first_node(self) -> Optional[Node]:
        return self._nodes[0] if self._nodes else None

    # Traversal

    def wrap(self, nodes: Union[Node, Iterable[Node], None]) -> "Selection":
        return Selection(nodes, options=self.options)

    def each(self, fn: Callable[[int, Node], Any]) -> "Selection":
        """Call ``fn(index, node)`` per node; returning False stops early."""
        for index, node in enumerate(self._nodes):
            if fn(index, node) is False:
                break
        return self

    def filter(self, predicate: Predicate) -> "Selection":
        if isinstance(predicate, str):
            matched: set[Node] = set()
            for mirror in mirrors_for(self._nodes).values():
                matched |= mirror.matching(predicate, self.options.translator)
            return self.wrap(node for node in self._nodes if node in matched)

        if isinstance(predicate, Node):
            return self.wrap(node for node in self._nodes if node is predicate)

        if callable(predicate):
            return self.wrap(
                node for index, node in enumerate(self._nodes) if predicate(index, node)
            )

        allowed = set(predicate)
        return self.wrap(node for node in self._nodes if node in allowed)

    def find(self, query: str) -> "Selection":
        containers = [node for node in self._nodes if isinstance(node, ParentNode)]
        mirrors = mirrors_for(containers)
        found: list[Node] = []
        for node in containers:
            mirror = mirrors[node.root]
            found.extend(mirror.select(query, node, self.options.translator))
        return self.wrap(_unique(found))

    def closest(self, query: str) -> "Selection":
        mirrors = mirrors_for(self._nodes)
        found: list[Node] = []
        for node in self._nodes:
            matched = mirrors[node.root].matching(query, self.options.translator)
            current: Optional[Node] = node
            while current is not None and not isinstance(current, Document):
                if current in matched:
                    found.append(current)
                    break
                current = current.parent
        return self.wrap(_unique(found))

    def parents(self, query: Optional[str] = None) -> "Selection":
        ancestors: list[Node] = []
        for node in self._nodes:
            current = node.parent
            while current is not None and is_tag(current):
                ancestors.append(current)
                current = current.parent
        result = self.wrap(_unique(ancestors))
        if query:
            return result.filter(query)
        return result

    # Text

    def text(self, content: Any = MISSING) -> Any:
        """Get the combined text of all nodes, or replace each node's text."""
        if content is MISSING:
            return "".join(
                node.text_content for node in self._nodes if isinstance(node, ParentNode)
            )
        for node in self._nodes:
            if isinstance(node, ParentNode):
                node.replace_text(stringify(content))
        return self

    # Attributes

    def attr(
        self,
        name: Union[str, Mapping[str, Any], None] = None,
        value: Any = MISSING,
    ) -> Any:
        """Get or set attributes.

        ``attr()`` returns every attribute of the first node, ``attr(name)``
        one decoded value. ``attr(name, value)`` sets it on every node (None
        removes it, a callable computes it per node from
        ``(index, current_raw_value)``) and ``attr(mapping)`` merges a map.
        """
        if isinstance(name, Mapping) or value is not MISSING:
            assignment = attribute_store.resolve_assignment(name, value)  # type: ignore[arg-type]
            return attribute_store.apply_assignment(self, assignment)
        return attribute_store.get_attribute(self._first_node(), name)

    def remove_attr(self, name: str) -> "Selection":
        return attribute_store.remove_attr(self, name)

    def has_attr(self, name: str) -> bool:
        """True if the first node has ``name`` present and switched on."""
        return attribute_store.has_attribute(self._first_node(), name)

    # Data

    def data(
        self,
        name: Union[str, Mapping[str, Any], None] = None,
        value: Any = MISSING,
    ) -> Any:
        """Get or set data values.

        ``data()`` returns every decoded value of the first node and
        ``data(name)`` one coerced value. ``data(name, value)`` and
        ``data(mapping)`` set values on every node.
        """
        first = self._first_node()
        if not is_tag(first):
            return None
        if isinstance(name, Mapping) or (name and value is not MISSING):
            return data_store.assign_data(self, name, value)  # type: ignore[arg-type]
        return data_store.get_data(first, name)  # type: ignore[arg-type]

    def remove_data(self, name: Optional[str] = None) -> "Selection":
        for node in self._nodes:
            data_store.remove_data(node, name)
        return self

    # Classes

    def has_class(self, token: str) -> bool:
        return class_list.has_class(self, token)

    def add_class(self, value: Any) -> "Selection":
        return class_list.add_class(self, value)

    def remove_class(self, value: Any = MISSING) -> "Selection":
        if value is MISSING:
            return class_list.remove_class(self, None, remove_all=True)
        return class_list.remove_class(self, value, remove_all=False)

    def toggle_class(self, value: Any, state: Optional[bool] = None) -> "Selection":
        return class_list.toggle_class(self, value, state)

    def is_(self, selector: Any = None) -> bool:
        return class_list.is_(self, selector)

    # Form values

    def val(self, new_value: Any = MISSING) -> Any:
        """Get the current value of the first control, or set it."""
        if new_value is MISSING:
            return value_accessor.get_value(self)
        return value_accessor.set_value(self, new_value)


__all__ = ["MISSING", "Selection"]
