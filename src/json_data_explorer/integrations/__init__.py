"""Integrations subpackage for json-data-explorer.

Contains integration adapters for external frameworks:
- pytest plugin (auto-discovered via pytest11 entry point)
"""
