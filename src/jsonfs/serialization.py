"""JSON text encoding and decoding for store files."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Optional, Sequence, Union

from .errors import ParseError

DEFAULT_SPACE = 2
MAX_INDENT = 10


@dataclass(frozen=True)
class JsonOptions:
    """Formatting applied when a value is written to disk.

    ``replacer`` is an allow-list of object keys kept at every nesting level.
    ``space`` is the indentation: a number of spaces or a literal string.
    ``None`` means the default of two spaces, ``0`` or ``""`` compact output.
    Neither option has any effect when reading.
    """

    replacer: Optional[Sequence[Union[str, int]]] = None
    space: Union[int, str, None] = DEFAULT_SPACE


def _filter_keys(value: Any, allowed: frozenset[str]) -> Any:
    if isinstance(value, dict):
        return {
            key: _filter_keys(item, allowed)
            for key, item in value.items()
            if str(key) in allowed
        }
    if isinstance(value, (list, tuple)):
        return [_filter_keys(item, allowed) for item in value]
    return value


def _indent(space: Union[int, str, None]) -> Union[int, str, None]:
    """Translate a ``space`` option into a :func:`json.dumps` indent."""

    if space is None:
        space = DEFAULT_SPACE
    if isinstance(space, bool):
        return None
    if isinstance(space, str):
        space = space[:MAX_INDENT]
        return space or None
    space = min(int(space), MAX_INDENT)
    return space if space > 0 else None


def to_json_text(value: Any, options: Optional[JsonOptions] = None) -> str:
    """Serialize ``value`` using ``options`` (2-space indent by default).

    Raises ``ValueError`` for ``NaN`` and infinite floats, which JSON cannot
    represent.
    """

    options = options or JsonOptions()
    if options.replacer is not None:
        value = _filter_keys(value, frozenset(str(key) for key in options.replacer))
    indent = _indent(options.space)
    separators = (",", ": ") if indent is not None else (",", ":")
    return json.dumps(value, indent=indent, separators=separators, ensure_ascii=False, allow_nan=False)


def _reject_constant(name: str) -> Any:
    raise ParseError(f"unexpected token {name}")


def from_json_text(text: str) -> Any:
    """Decode ``text`` or raise :class:`~jsonfs.errors.ParseError`.

    ``NaN`` and ``Infinity`` literals are rejected as they are not JSON.
    """

    try:
        return json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise ParseError(exc.msg, line=exc.lineno, column=exc.colno) from exc
