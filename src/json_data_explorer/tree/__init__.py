"""Tree subpackage: decoded JSON to flat node list.

Re-exports the public API for the tree module:
- NodeViewModel: one displayable key/value row with collapse/highlight state
- ValueKind: StrEnum of the six decoded JSON value kinds
- NodeBuilder: converts a decoded document into a pre-order node list
"""

from json_data_explorer.tree.builder import NodeBuilder
from json_data_explorer.tree.nodes import NodeViewModel, ValueKind

__all__ = ["NodeBuilder", "NodeViewModel", "ValueKind"]
