"""Bidirectional mapping between flat ``*_c`` table records and domain dicts.

Each entity declares a tuple of :class:`FieldMap` rows. ``domain`` may be a
dotted path (``location.city``) so flat columns can populate nested
sub-objects, and the reverse direction flattens them again.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Callable

logger = logging.getLogger(__name__)

_MISSING = object()


def _identity(value: Any) -> Any:
    return value


def foreign_key(value: Any) -> int | None:
    """Normalize a reference that arrives as ``5``, ``"5"`` or ``{"Id": 5}``."""
    if isinstance(value, dict):
        value = value.get("Id")
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        logger.debug("Unparseable foreign key: %r", value)
        return None


def json_object(value: Any) -> dict:
    """Parse a JSON object column, degrading to ``{}`` on bad input."""
    if isinstance(value, dict):
        return value
    if not value or not isinstance(value, str):
        return {}
    try:
        parsed = json.loads(value)
    except ValueError:
        logger.debug("Malformed JSON object column, using {}")
        return {}
    return parsed if isinstance(parsed, dict) else {}


def json_list(value: Any) -> list:
    """Parse a JSON array column, degrading to ``[]`` on bad input."""
    if isinstance(value, list):
        return value
    if not value or not isinstance(value, str):
        return []
    try:
        parsed = json.loads(value)
    except ValueError:
        logger.debug("Malformed JSON list column, using []")
        return []
    return parsed if isinstance(parsed, list) else []


def json_dumps(value: Any) -> str:
    return json.dumps(value)


def as_int(value: Any) -> int | None:
    return None if value is None else int(value)


def as_float(value: Any) -> float | None:
    return None if value is None else float(value)


@dataclass(frozen=True)
class FieldMap:
    wire: str
    domain: str
    decode: Callable[[Any], Any] = _identity
    encode: Callable[[Any], Any] = _identity
    fallback: str | None = None
    writable: bool = True


def projection(table: tuple[FieldMap, ...]) -> list[str]:
    """Column names to request: ``Id``, ``Name`` and every mapped column."""
    names = ["Id", "Name"]
    for row in table:
        if row.wire not in names:
            names.append(row.wire)
    return names


def _set_path(target: dict[str, Any], path: str, value: Any) -> None:
    *parents, leaf = path.split(".")
    for key in parents:
        target = target.setdefault(key, {})
    target[leaf] = value


def _get_path(source: dict[str, Any], path: str) -> Any:
    current: Any = source
    for key in path.split("."):
        if not isinstance(current, dict) or key not in current:
            return _MISSING
        current = current[key]
    return current


def record_to_domain(record: dict[str, Any], table: tuple[FieldMap, ...]) -> dict[str, Any]:
    result: dict[str, Any] = {"Id": record.get("Id")}
    for row in table:
        value = record.get(row.wire)
        if not value and row.fallback:
            value = record.get(row.fallback)
        _set_path(result, row.domain, row.decode(value))
    return result


def domain_to_record(values: dict[str, Any], table: tuple[FieldMap, ...]) -> dict[str, Any]:
    """Flatten ``values`` to table columns, skipping keys that are absent.

    ``values`` is expected to come from ``model_dump(exclude_unset=True)``, so
    an absent key means "leave unchanged" while an explicit ``None`` is sent.
    """
    record: dict[str, Any] = {}
    for row in table:
        if not row.writable:
            continue
        value = _get_path(values, row.domain)
        if value is _MISSING:
            continue
        record[row.wire] = row.encode(value)
    return record
