"""Field readers shared by the SWAPI mappers.

Each reader raises KeyError/TypeError/ValueError on bad input; the mappers
catch those and report the record as unmappable.
"""

from datetime import datetime
from typing import Any


def required_str(data: dict[str, Any], key: str) -> str:
    value = data[key]
    if not isinstance(value, str):
        raise TypeError(f"{key} must be a string, got {type(value).__name__}")
    return value


def optional_str(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"{key} must be a string, got {type(value).__name__}")
    return value


def uri_tuple(data: dict[str, Any], key: str, *, required: bool = False) -> tuple[str, ...]:
    value = data[key] if required else data.get(key)
    if value is None:
        if required:
            raise TypeError(f"{key} must be a list, got null")
        return ()
    if not isinstance(value, list):
        raise TypeError(f"{key} must be a list, got {type(value).__name__}")
    for item in value:
        if not isinstance(item, str):
            raise TypeError(f"{key} entries must be strings")
    return tuple(value)


def optional_timestamp(data: dict[str, Any], key: str) -> datetime | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise TypeError(f"{key} must be an ISO-8601 string")
    # SWAPI uses a trailing "Z" for UTC
    return datetime.fromisoformat(value.replace("Z", "+00:00"))
