"""ExplorerConfig: immutable settings for node building and search.

ExplorerConfig is a frozen (immutable) dataclass validated on construction.
It only governs how keys are composed and how search matches nodes;
presentation (colors, fonts, icons) belongs to the renderer.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["ExplorerConfig"]


@dataclass(frozen=True, slots=True)
class ExplorerConfig:
    """Immutable configuration for a DataExplorerStore.

    Attributes:
        key_separator: Joins a parent key and a child name into the child's
            dotted key, e.g. ``"user" + "." + "name"``.  Must be non-empty.
        search_keys: When True, search matches against node names.
        search_values: When True, search matches against the display value of
            scalar nodes.  At least one of ``search_keys`` / ``search_values``
            must be enabled.
        search_cache_size: Number of distinct search terms whose results are
            kept in the per-store LRU cache.  Must be >= 1.
    """

    key_separator: str = "."
    search_keys: bool = True
    search_values: bool = True
    search_cache_size: int = 128

    def __post_init__(self) -> None:
        if not self.key_separator:
            msg = "key_separator must be a non-empty string"
            raise ValueError(msg)
        if not (self.search_keys or self.search_values):
            msg = "at least one of search_keys or search_values must be enabled"
            raise ValueError(msg)
        if self.search_cache_size < 1:
            msg = f"search_cache_size must be >= 1, got {self.search_cache_size}"
            raise ValueError(msg)
