"""DataExplorerStore: expand/collapse/search state of a JSON explorer view.

This is the state holder a renderer binds to.  It owns the full node set of
one document and the derived display list, and is the only place where
structural changes happen.

Architecture:
- ``all_nodes`` is the pre-order list produced by NodeBuilder.  It never
  changes between builds.  A container's descendants are the contiguous
  slice ``all_nodes[node._index + 1 : node._end]``.
- ``display_nodes`` is ``all_nodes`` minus every node that has a collapsed
  ancestor.  It is kept sorted by pre-order index, so a node's visible
  descendants are the contiguous run right after it.  Single toggles
  delete or insert that run; bulk operations recompute the list in one pass.
- Every store operation that changes observable state notifies the store's
  listeners exactly once, after the display list is final.  Operations that
  change nothing notify nobody.  Node-level listeners are notified by the
  nodes themselves as their flags change.
"""

from __future__ import annotations

import logging
from bisect import bisect_left
from operator import attrgetter
from typing import TYPE_CHECKING

from json_data_explorer.config import ExplorerConfig
from json_data_explorer.notifier import ChangeNotifier
from json_data_explorer.search import SearchIndex
from json_data_explorer.tree.builder import NodeBuilder

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from json_data_explorer.tree.builder import JsonDocument
    from json_data_explorer.tree.nodes import NodeViewModel

__all__ = ["DataExplorerStore"]

logger = logging.getLogger(__name__)

_node_index = attrgetter("_index")


class DataExplorerStore(ChangeNotifier):
    """Holds the nodes of one JSON document and their display state.

    Each instance is independent: two stores never share nodes, listeners or
    search caches, so several tree views can coexist.  Not thread-safe; a
    store must be driven from a single thread (typically the UI thread).

    Example::

        from json_data_explorer import DataExplorerStore

        store = DataExplorerStore()
        store.add_listener(lambda: print(len(store.display_nodes)))
        store.build_nodes({"user": {"name": "Alice", "tags": ["a", "b"]}})
        # prints 5
        store.collapse_node(store.get_node_by_key("user"))
        # prints 1
    """

    def __init__(self, config: ExplorerConfig | None = None) -> None:
        """Initialise an empty store.

        Args:
            config: Key composition and search settings.  Defaults to
                ``ExplorerConfig()``.
        """
        super().__init__()
        self._config: ExplorerConfig = config if config is not None else ExplorerConfig()
        self._builder = NodeBuilder(key_separator=self._config.key_separator)
        self._all_nodes: list[NodeViewModel] = []
        self._display_nodes: list[NodeViewModel] = []
        self._search_index = SearchIndex(self._all_nodes, self._config)
        self._search_term = ""
        self._search_results: tuple[NodeViewModel, ...] = ()
        self._search_focus_index = 0

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------

    @property
    def config(self) -> ExplorerConfig:
        return self._config

    @property
    def all_nodes(self) -> Sequence[NodeViewModel]:
        """Every node of the document in depth-first pre-order.  Read-only."""
        return self._all_nodes

    @property
    def display_nodes(self) -> Sequence[NodeViewModel]:
        """Nodes a renderer should draw, in order.  Read-only.

        The returned list is updated in place by later store operations.
        """
        return self._display_nodes

    @property
    def search_term(self) -> str:
        return self._search_term

    @property
    def search_results(self) -> tuple[NodeViewModel, ...]:
        """Nodes matching ``search_term``, in pre-order."""
        return self._search_results

    @property
    def search_node_focus_index(self) -> int:
        """Index into ``search_results`` of the focused match."""
        return self._search_focus_index

    @property
    def focused_search_result(self) -> NodeViewModel | None:
        if not self._search_results:
            return None
        return self._search_results[self._search_focus_index]

    def is_search_focused(self, node: NodeViewModel) -> bool:
        """True when ``node`` is the currently focused search match."""
        return self.focused_search_result is node

    def get_node_by_key(self, key: str, *, last: bool = False) -> NodeViewModel:
        """Return the first node (or the last, with ``last=True``) with ``key``.

        Raises:
            KeyError: If no node has this key.
        """
        nodes = reversed(self._all_nodes) if last else iter(self._all_nodes)
        for node in nodes:
            if node.key == key:
                return node
        raise KeyError(key)

    def are_all_collapsed(self) -> bool:
        """True iff there is at least one container and every container is collapsed."""
        return self._all_containers_match(collapsed=True)

    def are_all_expanded(self) -> bool:
        """True iff there is at least one container and every container is expanded."""
        return self._all_containers_match(collapsed=False)

    # ------------------------------------------------------------------
    # Building
    # ------------------------------------------------------------------

    def build_nodes(self, document: JsonDocument, is_all_collapsed: bool = False) -> None:
        """Replace the node set with the nodes of ``document``.

        Previous nodes are disposed (their listeners dropped); store
        listeners are kept and notified once.  The current search term is
        re-applied to the new nodes.  If ``document`` is rejected, the store
        is left unchanged and nobody is notified.

        Raises:
            TypeError:  If the document is not an object or array, or holds
                        an unsupported value.
            ValueError: If the document contains a reference cycle.
        """
        nodes = self._builder.build(document, is_all_collapsed=is_all_collapsed)

        for old in self._all_nodes:
            old.dispose()
        self._all_nodes = nodes
        self._search_index = SearchIndex(nodes, self._config)
        self._display_nodes[:] = self._visible_nodes(0, len(nodes))
        self._search_results = self._search_index.find(self._search_term)
        self._search_focus_index = 0

        logger.debug(
            "Built %d nodes (%d visible, all_collapsed=%s)",
            len(nodes),
            len(self._display_nodes),
            is_all_collapsed,
        )
        self.notify_listeners()

    # ------------------------------------------------------------------
    # Expand / collapse
    # ------------------------------------------------------------------

    def collapse_node(self, node: NodeViewModel) -> None:
        """Collapse a container and hide its descendants.

        Silently does nothing for leaves, already collapsed containers and
        nodes that belong to another store.  Descendants keep their own
        collapse state.
        """
        if not self._owns(node) or not node.is_root or node.is_collapsed:
            return

        node.collapse()
        position = self._display_position(node)
        if position is not None:
            stop = position + 1
            display = self._display_nodes
            while stop < len(display) and display[stop]._index < node._end:
                stop += 1
            del display[position + 1 : stop]
        self.notify_listeners()

    def expand_node(self, node: NodeViewModel) -> None:
        """Expand a container and reveal its descendants.

        Descendants that are themselves collapsed become visible, but their
        own subtrees stay hidden.  Silently does nothing for leaves, already
        expanded containers and nodes that belong to another store.
        """
        if not self._owns(node) or not node.is_root or not node.is_collapsed:
            return

        node.expand()
        position = self._display_position(node)
        if position is not None:
            revealed = self._visible_nodes(node._index + 1, node._end)
            self._display_nodes[position + 1 : position + 1] = revealed
        self.notify_listeners()

    def collapse_all(self) -> None:
        """Collapse every container; notifies once if anything changed."""
        self._set_all_collapsed(True)

    def expand_all(self) -> None:
        """Expand every container; notifies once if anything changed."""
        self._set_all_collapsed(False)

    def expand_parent_nodes(self, node: NodeViewModel) -> None:
        """Expand every collapsed ancestor of ``node`` so that it becomes visible.

        Opt-in helper for callers that want "reveal" behaviour, e.g. when
        jumping to a search match.  Notifies once if any ancestor changed.
        """
        if not self._owns(node):
            return
        self._expand_ancestors([node])

    def expand_search_results(self) -> None:
        """Make every current search match visible by expanding its ancestors."""
        self._expand_ancestors(self._search_results)

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def search(self, term: str) -> None:
        """Find every node whose name or value contains ``term``, ignoring case.

        Focus moves to the first match.  Searching for the current term again
        does nothing.  An empty term clears the results.  Collapse state is
        never changed.
        """
        if term == self._search_term:
            return

        self._search_term = term
        self._search_results = self._search_index.find(term)
        self._search_focus_index = 0
        logger.debug("Search %r matched %d nodes", term, len(self._search_results))
        self.notify_listeners()

    def focus_next_search_result(self) -> None:
        """Move focus to the next match, wrapping to the first."""
        self._move_search_focus(1)

    def focus_previous_search_result(self) -> None:
        """Move focus to the previous match, wrapping to the last."""
        self._move_search_focus(-1)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _owns(self, node: NodeViewModel) -> bool:
        index = node._index
        return index < len(self._all_nodes) and self._all_nodes[index] is node

    def _display_position(self, node: NodeViewModel) -> int | None:
        """Index of ``node`` in the display list, or None when hidden."""
        display = self._display_nodes
        position = bisect_left(display, node._index, key=_node_index)
        if position < len(display) and display[position] is node:
            return position
        return None

    def _visible_nodes(self, start: int, end: int) -> list[NodeViewModel]:
        """Nodes of ``all_nodes[start:end]`` not hidden by a collapsed container in that range."""
        nodes = self._all_nodes
        visible: list[NodeViewModel] = []
        i = start
        while i < end:
            node = nodes[i]
            visible.append(node)
            i = node._end if node.is_root and node.is_collapsed else i + 1
        return visible

    def _all_containers_match(self, collapsed: bool) -> bool:
        found = False
        for node in self._all_nodes:
            if node.is_root:
                if node.is_collapsed != collapsed:
                    return False
                found = True
        return found

    def _set_all_collapsed(self, collapsed: bool) -> None:
        changed = 0
        for node in self._all_nodes:
            if node.is_root and node.is_collapsed != collapsed:
                if collapsed:
                    node.collapse()
                else:
                    node.expand()
                changed += 1
        if not changed:
            return

        self._display_nodes[:] = self._visible_nodes(0, len(self._all_nodes))
        logger.debug(
            "%s %d containers (%d visible)",
            "Collapsed" if collapsed else "Expanded",
            changed,
            len(self._display_nodes),
        )
        self.notify_listeners()

    def _expand_ancestors(self, nodes: Iterable[NodeViewModel]) -> None:
        changed = 0
        for node in nodes:
            for ancestor in node.ancestors():
                if ancestor.is_collapsed:
                    ancestor.expand()
                    changed += 1
        if not changed:
            return

        self._display_nodes[:] = self._visible_nodes(0, len(self._all_nodes))
        logger.debug("Expanded %d ancestors to reveal nodes", changed)
        self.notify_listeners()

    def _move_search_focus(self, step: int) -> None:
        if not self._search_results:
            return
        index = (self._search_focus_index + step) % len(self._search_results)
        if index == self._search_focus_index:
            return
        self._search_focus_index = index
        self.notify_listeners()
