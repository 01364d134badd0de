"""JSON data explorer - expandable tree state and search for JSON documents."""

from __future__ import annotations

from json_data_explorer.api import build_store, flatten
from json_data_explorer.config import ExplorerConfig
from json_data_explorer.highlight import TextSpan, highlight_spans
from json_data_explorer.store import DataExplorerStore
from json_data_explorer.tree.nodes import NodeViewModel, ValueKind

__version__: str = "0.1.0"
__all__: list[str] = [
    "DataExplorerStore",
    "ExplorerConfig",
    "NodeViewModel",
    "TextSpan",
    "ValueKind",
    "build_store",
    "flatten",
    "highlight_spans",
]
