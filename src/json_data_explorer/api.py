"""Public convenience functions for json-data-explorer.

This module provides the two user-facing shortcuts: build_store and flatten.
Each call creates fresh objects, so no state is shared between calls.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from json_data_explorer.config import ExplorerConfig
from json_data_explorer.store import DataExplorerStore
from json_data_explorer.tree.builder import NodeBuilder

if TYPE_CHECKING:
    from json_data_explorer.tree.builder import JsonDocument
    from json_data_explorer.tree.nodes import NodeViewModel

__all__ = ["build_store", "flatten"]


def build_store(
    document: JsonDocument,
    *,
    is_all_collapsed: bool = False,
    config: ExplorerConfig | None = None,
) -> DataExplorerStore:
    """Return a new DataExplorerStore already populated with ``document``.

    Args:
        document:         Decoded JSON object or array (e.g. from ``json.loads``).
        is_all_collapsed: Start with every container collapsed.
        config:           Store settings. Defaults to ``ExplorerConfig()`` when None.

    Returns:
        A store whose ``display_nodes`` is ready to render. Listeners added
        afterwards are notified only of later changes.
    """
    store = DataExplorerStore(config=config)
    store.build_nodes(document, is_all_collapsed=is_all_collapsed)
    return store


def flatten(
    document: JsonDocument,
    *,
    config: ExplorerConfig | None = None,
) -> list[NodeViewModel]:
    """Return every node of ``document`` in depth-first pre-order.

    Args:
        document: Decoded JSON object or array.
        config:   Only ``key_separator`` is used. Defaults to ``ExplorerConfig()``.

    Returns:
        A list of expanded nodes not attached to any store.
    """
    config = config if config is not None else ExplorerConfig()
    return NodeBuilder(key_separator=config.key_separator).build(document)
