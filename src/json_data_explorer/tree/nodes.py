"""NodeViewModel and ValueKind StrEnum for the flat JSON explorer tree.

Provides the per-row data type consumed by renderers: one NodeViewModel per
key/value pair of a decoded JSON document, built by NodeBuilder and owned by
a DataExplorerStore.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum, auto
from typing import Any

from json_data_explorer.notifier import ChangeNotifier


class ValueKind(StrEnum):
    """Enumeration of the six kinds of decoded JSON values.

    StrEnum values are the lowercased member names:
    - OBJECT   -> "object"  : JSON object (any Mapping)
    - ARRAY    -> "array"   : JSON array (list or tuple)
    - STRING   -> "string"
    - NUMBER   -> "number"  : int or float, never bool
    - BOOLEAN  -> "boolean"
    - NULL     -> "null"
    """

    OBJECT = auto()
    ARRAY = auto()
    STRING = auto()
    NUMBER = auto()
    BOOLEAN = auto()
    NULL = auto()

    @classmethod
    def of(cls, value: Any) -> ValueKind:
        """Classify a decoded JSON value.

        Raises:
            TypeError: If value is not a JSON-compatible type.
        """
        # bool MUST be checked before int; bool subclasses int in Python
        if isinstance(value, bool):
            return cls.BOOLEAN
        if value is None:
            return cls.NULL
        if isinstance(value, str):
            return cls.STRING
        if isinstance(value, (int, float)):
            return cls.NUMBER
        if isinstance(value, Mapping):
            return cls.OBJECT
        if isinstance(value, (list, tuple)):
            return cls.ARRAY
        msg = f"Unsupported JSON value type: {type(value)!r}"
        raise TypeError(msg)

    @property
    def is_container(self) -> bool:
        return self in (ValueKind.OBJECT, ValueKind.ARRAY)


class NodeViewModel(ChangeNotifier):
    """One displayable row: a single key/value pair of the document.

    Identity, hierarchy and value are fixed at construction; only
    ``is_collapsed`` and ``is_highlighted`` change afterwards, and each change
    notifies this node's own listeners.  Nodes compare by identity, never by
    key, because keys may repeat.

    Attributes:
        key:        Dotted path of the node, e.g. "user.address.city".
        name:       The node's own key segment ("city"); array elements use
                    their index ("0", "1", ...).
        value:      Scalar value, or the nested mapping/sequence for containers.
        kind:       Which ValueKind ``value`` is.
        tree_depth: 0 for top-level entries, parent depth + 1 otherwise.
        parent:     Owning container node; None for top-level entries.
        children:   Direct child nodes in document order.
    """

    def __init__(
        self,
        key: str,
        name: str,
        value: Any,
        kind: ValueKind,
        tree_depth: int,
        parent: NodeViewModel | None = None,
        is_collapsed: bool = False,
    ) -> None:
        super().__init__()
        self.key = key
        self.name = name
        self.value = value
        self.kind = kind
        self.tree_depth = tree_depth
        self.parent = parent
        self.children: list[NodeViewModel] = []
        self._is_collapsed = is_collapsed
        self._is_highlighted = False
        # Position of this node in the store's pre-order list and the
        # exclusive end of its subtree there; filled in by NodeBuilder.
        self._index = 0
        self._end = 0

    __hash__ = object.__hash__

    def __eq__(self, other: object) -> bool:
        return self is other

    def __repr__(self) -> str:
        return (
            f"NodeViewModel(key={self.key!r}, kind={self.kind.value}, "
            f"depth={self.tree_depth}, collapsed={self._is_collapsed})"
        )

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------

    @property
    def is_class(self) -> bool:
        """True when the value is a JSON object."""
        return self.kind == ValueKind.OBJECT

    @property
    def is_array(self) -> bool:
        """True when the value is a JSON array."""
        return self.kind == ValueKind.ARRAY

    @property
    def is_root(self) -> bool:
        """True for container nodes, the only nodes that expand/collapse."""
        return self.kind.is_container

    @property
    def children_count(self) -> int:
        return len(self.children)

    @property
    def is_collapsed(self) -> bool:
        return self._is_collapsed

    @property
    def is_highlighted(self) -> bool:
        return self._is_highlighted

    @property
    def display_value(self) -> str:
        """JSON-style text of a scalar value; empty for containers."""
        if self.kind == ValueKind.BOOLEAN:
            return "true" if self.value else "false"
        if self.kind == ValueKind.NULL:
            return "null"
        if self.kind.is_container:
            return ""
        return str(self.value)

    def ancestors(self) -> list[NodeViewModel]:
        """Return the chain of parents, nearest first."""
        chain: list[NodeViewModel] = []
        node = self.parent
        while node is not None:
            chain.append(node)
            node = node.parent
        return chain

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def collapse(self) -> None:
        """Mark this container collapsed. No-op for leaves or if already collapsed."""
        if not self.is_root or self._is_collapsed:
            return
        self._is_collapsed = True
        self.notify_listeners()

    def expand(self) -> None:
        """Mark this container expanded. No-op for leaves or if already expanded."""
        if not self.is_root or not self._is_collapsed:
            return
        self._is_collapsed = False
        self.notify_listeners()

    def highlight(self, is_highlighted: bool = True) -> None:
        """Set the hover highlight; notifies only when the value changes."""
        if self._is_highlighted == is_highlighted:
            return
        self._is_highlighted = is_highlighted
        self.notify_listeners()
