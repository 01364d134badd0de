"""NodeBuilder: converts a decoded JSON document into a flat node list.

Walks the document depth-first and emits one NodeViewModel per key/value
pair in pre-order, so that every container is immediately followed by the
contiguous run of its descendants. Each node records where that run ends,
which lets the store hide or reveal a whole subtree with one slice.

Keys are built during traversal:
- Top-level entries use their own name ("user")
- Each nested level appends "{separator}{name}" ("user.address.city")
- Array elements are named by index ("tags.0")
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from json_data_explorer.tree.nodes import NodeViewModel, ValueKind

# Type alias for decoded JSON documents accepted by build()
JsonDocument = Mapping[str, Any] | Sequence[Any]


@dataclass
class NodeBuilder:
    """Converts a decoded JSON document into a pre-order list of nodes.

    The walk dispatches on ``ValueKind`` computed once per value; scalars
    become leaf nodes and containers open a nested level at ``tree_depth + 1``.
    Runs in a single pass: every node is created exactly once.

    Example::
        builder = NodeBuilder()
        nodes = builder.build({"user": {"name": "John"}})
        # [user (depth 0, object), user.name (depth 1, string)]
    """

    key_separator: str = "."

    def build(
        self, document: JsonDocument, is_all_collapsed: bool = False
    ) -> list[NodeViewModel]:
        """Build the flat pre-order node list of ``document``.

        Args:
            document:         A decoded JSON object or array. Its entries
                              become the top-level (depth 0) nodes.
            is_all_collapsed: Initial ``is_collapsed`` of every node.

        Returns:
            All nodes in depth-first pre-order.

        Raises:
            TypeError:  If the document is not an object or array, or contains
                        an unsupported value type or a non-string object key.
            ValueError: If the document contains itself (a reference cycle).
        """
        kind = ValueKind.of(document)
        if not kind.is_container:
            msg = f"Document must be a JSON object or array, got {kind.value}"
            raise TypeError(msg)

        nodes: list[NodeViewModel] = []
        # Explicit stack of (pending entries, owning node, container id) so
        # nesting depth is not bounded by the interpreter's recursion limit.
        # ``active`` holds the ids of the containers on the current path.
        active = {id(document)}
        stack: list[tuple[Iterator[tuple[Any, Any]], NodeViewModel | None, int]] = [
            (self._entries(document, kind), None, id(document))
        ]
        while stack:
            entries, parent, container_id = stack[-1]
            entry = next(entries, None)
            if entry is None:
                stack.pop()
                active.discard(container_id)
                if parent is not None:
                    parent._end = len(nodes)
                continue

            name, value = entry
            if not isinstance(name, str):
                msg = f"JSON object keys must be strings, got {type(name)!r}"
                raise TypeError(msg)

            value_kind = ValueKind.of(value)
            key = name if parent is None else f"{parent.key}{self.key_separator}{name}"
            node = NodeViewModel(
                key=key,
                name=name,
                value=value,
                kind=value_kind,
                tree_depth=0 if parent is None else parent.tree_depth + 1,
                parent=parent,
                is_collapsed=is_all_collapsed,
            )
            node._index = len(nodes)
            nodes.append(node)
            if parent is not None:
                parent.children.append(node)

            if value_kind.is_container:
                if id(value) in active:
                    msg = f"Cyclic reference detected at key {key!r}"
                    raise ValueError(msg)
                active.add(id(value))
                stack.append((self._entries(value, value_kind), node, id(value)))
            else:
                node._end = len(nodes)

        return nodes

    @staticmethod
    def _entries(container: Any, kind: ValueKind) -> Iterator[tuple[Any, Any]]:
        """Yield ``(name, value)`` pairs of a container in document order."""
        if kind == ValueKind.OBJECT:
            return iter(container.items())
        return ((str(idx), item) for idx, item in enumerate(container))
