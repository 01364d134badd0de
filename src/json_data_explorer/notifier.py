"""ChangeNotifier: a minimal per-instance observer registry.

Both ``NodeViewModel`` (node-local scope) and ``DataExplorerStore``
(store-global scope) inherit from this class. Each instance owns its own
listener list, so a node notifying its listeners never reaches the store's
listeners and vice versa.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from json_data_explorer.protocols import Listener

__all__ = ["ChangeNotifier"]


class ChangeNotifier:
    """Publish/subscribe registry with synchronous delivery.

    Listeners are called in registration order. Registering the same callable
    twice makes it fire twice; ``remove_listener`` drops one registration.
    Exceptions raised by a listener propagate to whoever triggered the
    notification.
    """

    def __init__(self) -> None:
        self._listeners: list[Listener] = []

    @property
    def has_listeners(self) -> bool:
        """True when at least one listener is registered."""
        return bool(self._listeners)

    def add_listener(self, listener: Listener) -> None:
        """Register ``listener`` to be called on every notification."""
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        """Unregister one registration of ``listener``.

        Unknown listeners are ignored.
        """
        for i, registered in enumerate(self._listeners):
            if registered == listener:
                del self._listeners[i]
                return

    def notify_listeners(self) -> None:
        """Call every listener registered at the time of this call.

        Iterates over a snapshot, so listeners may add or remove listeners
        (including themselves) while being notified.
        """
        for listener in list(self._listeners):
            listener()

    def dispose(self) -> None:
        """Drop all listeners."""
        self._listeners.clear()
