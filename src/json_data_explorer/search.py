"""SearchIndex: LRU-cached, case-insensitive node search.

Matches a search term against node names and scalar display values of one
node set. Results are cached per lowercased term in a ``cachetools``
``LRUCache``; a term that extends a cached term (the user typing one more
character) only rescans the cached candidates, since every match of
"abc" is also a match of "ab".

Each store owns its own SearchIndex and replaces it whenever the node set is
rebuilt, so cached results never outlive the nodes they point at.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cachetools import LRUCache

if TYPE_CHECKING:
    from collections.abc import Sequence

    from json_data_explorer.config import ExplorerConfig
    from json_data_explorer.tree.nodes import NodeViewModel

__all__ = ["SearchIndex"]


class SearchIndex:
    """Case-insensitive substring search over a fixed node set.

    Args:
        nodes:  Nodes to search, in the order results should be returned
            (the store passes its pre-order list).
        config: Selects whether names and/or values are matched, and the
            LRU capacity.
    """

    def __init__(self, nodes: Sequence[NodeViewModel], config: ExplorerConfig) -> None:
        self._nodes = nodes
        self._config = config
        self._cache: LRUCache[str, tuple[NodeViewModel, ...]] = LRUCache(
            maxsize=config.search_cache_size
        )

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def cached_terms(self) -> int:
        """Number of terms currently held in the cache."""
        return int(self._cache.currsize)

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def find(self, term: str) -> tuple[NodeViewModel, ...]:
        """Return every node matching ``term``, in node-set order.

        An empty term matches nothing.
        """
        query = term.lower()
        if not query:
            return ()

        cached = self._cache.get(query)
        if cached is not None:
            return cached

        candidates: Sequence[NodeViewModel] = self._nodes
        # Narrow from the longest cached prefix of the query, if any.
        for end in range(len(query) - 1, 0, -1):
            prefix_hits = self._cache.get(query[:end])
            if prefix_hits is not None:
                candidates = prefix_hits
                break

        results = tuple(node for node in candidates if self.matches(node, query))
        self._cache[query] = results
        return results

    def matches(self, node: NodeViewModel, query: str) -> bool:
        """Whether ``node`` matches an already lowercased ``query``."""
        if self._config.search_keys and query in node.name.lower():
            return True
        if self._config.search_values and not node.is_root:
            return query in node.display_value.lower()
        return False
