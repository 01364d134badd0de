"""Shared documents for json-data-explorer tests.

``two_class_document`` has two top-level objects with 24 nodes each:
3 scalars, two nested objects (3 scalars + 1 inner object of 3 scalars each)
and one 3-element array.  Pre-order positions within the first object:

    0  firstClass
    1-3   firstField / secondField / thirdField
    4  firstClass.firstClassField         (5-7 scalars, 8 innerClassField, 9-11)
    12 firstClass.secondClassField        (13-15 scalars, 16 innerClassField, 17-19)
    20 firstClass.array                   (21-23 elements)
    24 secondClass
"""

from __future__ import annotations

from typing import Any

import pytest


def _class_fields() -> dict[str, Any]:
    return {
        "firstField": "firstField",
        "secondField": "secondField",
        "thirdField": "thirdField",
    }


def _nested_class() -> dict[str, Any]:
    return {**_class_fields(), "innerClassField": _class_fields()}


def _top_level_class() -> dict[str, Any]:
    return {
        **_class_fields(),
        "firstClassField": _nested_class(),
        "secondClassField": _nested_class(),
        "array": [0, 1, 2],
    }


@pytest.fixture
def two_class_document() -> dict[str, Any]:
    """The 48-node, two-root document described in the module docstring."""
    return {"firstClass": _top_level_class(), "secondClass": _top_level_class()}


@pytest.fixture
def all_container_keys() -> list[str]:
    """Keys of all 12 container nodes of ``two_class_document``."""
    keys: list[str] = []
    for root in ("firstClass", "secondClass"):
        keys.append(root)
        for field in ("firstClassField", "secondClassField"):
            keys.append(f"{root}.{field}")
            keys.append(f"{root}.{field}.innerClassField")
        keys.append(f"{root}.array")
    return keys
