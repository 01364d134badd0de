"""pytest plugin for json-data-explorer.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Renderers and other collaborators are usually tested by counting how often
the store notifies them; the fixtures below cover that pattern.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

import pytest

from json_data_explorer import DataExplorerStore


class ListenerSpy:
    """Zero-argument listener that counts its invocations."""

    def __init__(self) -> None:
        self.call_count = 0

    def __call__(self) -> None:
        self.call_count += 1

    @property
    def called(self) -> bool:
        return self.call_count > 0

    def reset(self) -> None:
        self.call_count = 0


@pytest.fixture
def explorer_store() -> DataExplorerStore:
    """A fresh, empty DataExplorerStore with the default configuration.

    Usage in tests::

        def test_collapse(explorer_store, listener_spy):
            explorer_store.build_nodes({"a": {"b": 1}})
            explorer_store.add_listener(listener_spy)
            explorer_store.collapse_node(explorer_store.display_nodes[0])
            assert listener_spy.call_count == 1
    """
    return DataExplorerStore()


@pytest.fixture
def listener_spy() -> ListenerSpy:
    """A ListenerSpy to register on a store or node.

    Returns:
        A callable with ``call_count``, ``called`` and ``reset()``.
    """
    return ListenerSpy()
