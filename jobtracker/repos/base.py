from enum import Enum
from typing import Any


def plain_values(data: dict[str, Any]) -> dict[str, Any]:
    """Replace Enum members with their stored string values."""
    return {k: (v.value if isinstance(v, Enum) else v) for k, v in data.items()}


def apply_patch(obj, patch: dict[str, Any]) -> None:
    for key, value in plain_values(patch).items():
        setattr(obj, key, value)
