from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def merge_dicts(d1: dict[str, Any], d2: Mapping[str, Any]) -> None:
    for k in d2:
        if k in d1 and isinstance(d1[k], dict) and isinstance(d2[k], Mapping):
            merge_dicts(d1[k], d2[k])
        else:
            d1[k] = d2[k]


def flatten_dict(obj: Mapping[str, Any], delimiter: str = ".") -> dict[str, Any]:
    """
    Flattens nested mappings into a single level, joining keys with the
    delimiter.
    """

    def _flatten(
        obj: Mapping[str, Any], parent_key: str, result: dict[str, Any]
    ) -> None:
        for key, value in obj.items():
            full_key = f"{parent_key}{delimiter}{key}" if parent_key else key
            if isinstance(value, Mapping):
                _flatten(value, full_key, result)
            else:
                result[full_key] = value

    result: dict[str, Any] = {}
    _flatten(obj, "", result)

    return result
