"""Listener Protocol for json-data-explorer change notification.

Store-level and node-level listeners share one structural interface: a
zero-argument callable. Any function, bound method or callable object
satisfies it without inheriting from anything.

Example::

    from json_data_explorer.protocols import Listener

    class Redraw:
        def __call__(self) -> None:
            print("display list changed")

    assert isinstance(Redraw(), Listener)  # True: structural conformance
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Listener(Protocol):
    """Structural protocol for change listeners.

    A listener is invoked with no arguments after the observable it is
    registered on has changed. It reads whatever state it needs back from
    the observable itself.
    """

    def __call__(self) -> None: ...
