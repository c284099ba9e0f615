"""Discriminated value type for single-column result rows."""

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict


class ValueKind(StrEnum):
    """JSON type of a fetched result value."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    OBJECT = "object"
    ARRAY = "array"
    NULL = "null"


class ResultValue(BaseModel):
    """A decoded JSON value tagged with its kind."""

    model_config = ConfigDict(frozen=True)

    kind: ValueKind
    value: Any = None

    @classmethod
    def from_json(cls, raw: Any) -> "ResultValue":
        """Tag a value produced by ``json.loads``."""
        # bool is a subclass of int
        if raw is None:
            kind = ValueKind.NULL
        elif isinstance(raw, bool):
            kind = ValueKind.BOOLEAN
        elif isinstance(raw, str):
            kind = ValueKind.STRING
        elif isinstance(raw, int | float):
            kind = ValueKind.NUMBER
        elif isinstance(raw, list):
            kind = ValueKind.ARRAY
        elif isinstance(raw, dict):
            kind = ValueKind.OBJECT
        else:
            raise TypeError(f"Not a JSON value: {type(raw).__name__}")
        return cls(kind=kind, value=raw)

    @property
    def is_null(self) -> bool:
        """True for JSON null."""
        return self.kind is ValueKind.NULL
