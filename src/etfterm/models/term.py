from __future__ import annotations

import json
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


def _freeze(value: Any) -> Any:
    """Make a native value usable as a dict key (lists and dicts nest as tuples)."""
    if isinstance(value, list):
        return tuple(_freeze(v) for v in value)
    if isinstance(value, dict):
        return tuple((_freeze(k), _freeze(v)) for k, v in value.items())
    return value


class _TermBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    def to_python(self) -> Any:
        return self.value  # type: ignore[attr-defined]

    def to_jsonable(self) -> Any:
        return self.value  # type: ignore[attr-defined]

    def match_key(self) -> Any:
        """Identity of this term as a map key: equal native values match."""
        return _freeze(self.to_python())


class UnsignedInt(_TermBase):
    kind: Literal["uint"] = "uint"
    value: int = Field(..., ge=0, le=0xFFFFFFFF)


class SignedInt32(_TermBase):
    kind: Literal["int32"] = "int32"
    value: int = Field(..., ge=-(2**31), le=2**31 - 1)


class Float64(_TermBase):
    kind: Literal["float64"] = "float64"
    value: float


class Text(_TermBase):
    kind: Literal["text"] = "text"
    value: str


class Sequence(_TermBase):
    """Decoded list or tuple; the wire distinction is not kept."""
    kind: Literal["sequence"] = "sequence"
    items: tuple[Term, ...] = ()

    def __len__(self) -> int:
        return len(self.items)

    def to_python(self) -> list:
        return [item.to_python() for item in self.items]

    def to_jsonable(self) -> list:
        return [item.to_jsonable() for item in self.items]


class MapEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: Term
    value: Term


class Mapping(_TermBase):
    """Decoded map, in wire insertion order with unique keys."""
    kind: Literal["mapping"] = "mapping"
    entries: tuple[MapEntry, ...] = ()

    def __len__(self) -> int:
        return len(self.entries)

    def keys(self) -> list[Term]:
        return [e.key for e in self.entries]

    def get(self, key: Term | str, default: Optional[Term] = None) -> Optional[Term]:
        """Look up by term; a plain ``str`` matches a ``Text`` key."""
        if isinstance(key, str):
            key = Text(value=key)
        wanted = key.match_key()
        for e in self.entries:
            if e.key.match_key() == wanted:
                return e.value
        return default

    def to_python(self) -> dict:
        return {_freeze(e.key.to_python()): e.value.to_python() for e in self.entries}

    def to_jsonable(self) -> dict:
        out: dict[str, Any] = {}
        for e in self.entries:
            if isinstance(e.key, Text):
                k = e.key.value
            else:
                k = json.dumps(e.key.to_jsonable(), separators=(",", ":"))
            out[k] = e.value.to_jsonable()
        return out


Term = Annotated[
    Union[UnsignedInt, SignedInt32, Float64, Text, Sequence, Mapping],
    Field(discriminator="kind"),
]

Sequence.model_rebuild()
MapEntry.model_rebuild()
Mapping.model_rebuild()
