from __future__ import annotations

from typing import Any, Literal, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr, model_validator

from .errors import UnsupportedValueError

ValueKind = Literal["float", "int", "string"]

_PYTHON_TYPES: dict[str, type] = {"float": float, "int": int, "string": str}


class StoredValue(BaseModel):
    """
    A scalar tagged with its kind. The tag only exists in memory; on disk the
    value is a bare JSON number or string.
    """

    model_config = ConfigDict(frozen=True)

    kind: ValueKind
    value: Union[StrictInt, StrictFloat, StrictStr]

    @model_validator(mode="after")
    def _value_matches_kind(self) -> "StoredValue":
        expected = _PYTHON_TYPES[self.kind]
        if isinstance(self.value, bool) or type(self.value) is not expected:
            raise ValueError(f"{self.kind} value expected, got {type(self.value).__name__}")
        return self

    @classmethod
    def of_float(cls, value: float) -> "StoredValue":
        # ints widen to float; nothing else converts
        if isinstance(value, bool) or not isinstance(value, (float, int)):
            raise UnsupportedValueError(f"Expected a float, got {value!r}")
        return cls(kind="float", value=float(value))

    @classmethod
    def of_int(cls, value: int) -> "StoredValue":
        if isinstance(value, bool) or not isinstance(value, int):
            raise UnsupportedValueError(f"Expected an int, got {value!r}")
        return cls(kind="int", value=int(value))

    @classmethod
    def of_string(cls, value: str) -> "StoredValue":
        if not isinstance(value, str):
            raise UnsupportedValueError(f"Expected a string, got {value!r}")
        return cls(kind="string", value=str(value))

    @classmethod
    def from_json(cls, raw: Any) -> "StoredValue":
        # bool is a subclass of int
        if isinstance(raw, bool):
            raise UnsupportedValueError(f"Unsupported value {raw!r}: booleans are not stored")
        if isinstance(raw, float):
            return cls.of_float(raw)
        if isinstance(raw, int):
            return cls.of_int(raw)
        if isinstance(raw, str):
            return cls.of_string(raw)
        raise UnsupportedValueError(f"Unsupported value {raw!r}: expected a number or a string")

    @property
    def is_numeric(self) -> bool:
        return self.kind in ("float", "int")


class PrefsDocument(BaseModel):
    """
    In-memory form of the prefs file:
      { "<key>": <number | string>, ... }
    """

    entries: dict[str, StoredValue] = Field(default_factory=dict)

    @classmethod
    def from_disk_doc(cls, doc: Mapping[str, Any]) -> "PrefsDocument":
        entries: dict[str, StoredValue] = {}
        for key, raw in doc.items():
            try:
                entries[str(key)] = StoredValue.from_json(raw)
            except UnsupportedValueError as e:
                raise UnsupportedValueError(f"Key {key!r}: {e}") from e
        return cls(entries=entries)

    def to_disk_doc(self) -> dict[str, Any]:
        return {key: stored.value for key, stored in self.entries.items()}
