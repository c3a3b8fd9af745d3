"""Schema capability consumed by :class:`jsonfs.store.FileStore`.

A schema is anything exposing ``validate`` and ``dump``. The store never
looks further inside it. :class:`PydanticSchema` adapts any type pydantic
understands (models, TypedDicts, dataclasses, plain generics).
"""

from __future__ import annotations

from typing import Any, Generic, Optional, Protocol, TypeVar, runtime_checkable

import pydantic
from pydantic import TypeAdapter

from .errors import ValidationError

T = TypeVar("T")


@runtime_checkable
class Schema(Protocol[T]):
    """Validate-or-fail plus conversion back to a plain JSON tree."""

    def validate(self, value: Any) -> T:
        ...

    def dump(self, value: T) -> Any:
        ...


class PydanticSchema(Generic[T]):
    """:class:`Schema` backed by a :class:`pydantic.TypeAdapter`."""

    def __init__(self, tp: Any, *, strict: Optional[bool] = None) -> None:
        self.type = tp
        self.strict = strict
        self._adapter: TypeAdapter[T] = TypeAdapter(tp)

    def __repr__(self) -> str:
        return f"PydanticSchema({self.type!r})"

    def validate(self, value: Any) -> T:
        try:
            return self._adapter.validate_python(value, strict=self.strict)
        except pydantic.ValidationError as exc:
            raise ValidationError(_describe(exc), exc.errors()) from exc

    def dump(self, value: T) -> Any:
        return self._adapter.dump_python(value, mode="json")


def _describe(exc: pydantic.ValidationError) -> str:
    """Return a one-line summary of a pydantic validation failure."""

    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ())) or "<root>"
        parts.append(f"{location}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts) or str(exc)


def as_schema(obj: Any) -> Schema[Any]:
    """Return ``obj`` if it already is a schema, otherwise wrap it."""

    if not isinstance(obj, type) and isinstance(obj, Schema):
        return obj
    return PydanticSchema(obj)
