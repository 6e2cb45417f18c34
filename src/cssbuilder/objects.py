"""Small object helpers: a rectangle factory and JSON round-tripping."""
from __future__ import annotations

import dataclasses
import json
from dataclasses import dataclass
from typing import Any, TypeVar

__all__ = ["Rectangle", "get_json", "from_json"]

T = TypeVar("T")


@dataclass(frozen=True)
class Rectangle:
    width: float
    height: float

    def get_area(self) -> float:
        return self.width * self.height


def _default(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def get_json(obj: Any) -> str:
    """Return the JSON representation of *obj*.

    Dataclass instances are encoded as a dict of their fields.
    """
    return json.dumps(obj, default=_default)


def from_json(cls: type[T], text: str) -> T:
    """Decode a JSON object and construct *cls* from its fields."""
    data = json.loads(text)
    if not isinstance(data, dict):
        raise TypeError(
            f"Expected a JSON object for {cls.__name__}, got {type(data).__name__}"
        )
    return cls(**data)
