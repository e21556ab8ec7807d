"""Map decoded JSON payloads onto registered models and back."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from datetime import datetime
from typing import Any

from chainkit.core.errors import MappingError
from chainkit.core.types import Color, Size
from chainkit.mapping.schema import MISSING, KeyPath, ModelSchema, ResolvedField, get_schema, is_registered


def _join(path: str, name: str | int) -> str:
    if isinstance(name, int):
        return f"{path}[{name}]"
    return f"{path}.{name}" if path else name


def _lookup(payload: Mapping[str, Any], key_path: KeyPath) -> Any:
    node: Any = payload
    for part in key_path:
        if not isinstance(node, Mapping) or part not in node:
            return MISSING
        node = node[part]
    return node


def _find(payload: Mapping[str, Any], field: ResolvedField) -> Any:
    for key_path in field.key_paths:
        value = _lookup(payload, key_path)
        if value is not MISSING:
            return value
    return MISSING


def _convert_one(value: Any, field: ResolvedField, path: str) -> Any:
    if field.nested is not None:
        return _map_schema(value, field.nested, path)
    try:
        return field.convert(value)  # type: ignore[misc]
    except (TypeError, ValueError) as exc:
        raise MappingError(path, str(exc)) from exc


def _convert(value: Any, field: ResolvedField, path: str) -> Any:
    if not field.many:
        return _convert_one(value, field, path)
    if isinstance(value, (str, bytes, Mapping)) or not isinstance(value, Iterable):
        raise MappingError(path, "expected a list")
    return [_convert_one(item, field, _join(path, i)) for i, item in enumerate(value)]


def _map_schema(payload: Any, schema: ModelSchema, path: str) -> Any:
    if not isinstance(payload, Mapping):
        raise MappingError(path, f"expected an object for {schema.name}, got {type(payload).__name__}")
    kwargs: dict[str, Any] = {}
    for field in schema.fields:
        field_path = _join(path, field.name)
        raw = _find(payload, field)
        if raw is MISSING or raw is None:
            if field.required:
                raise MappingError(field_path, "required field is missing")
            if field.default is not MISSING:
                kwargs[field.name] = field.default
            continue
        kwargs[field.name] = _convert(raw, field, field_path)
    try:
        return schema.model(**kwargs)
    except (TypeError, ValueError) as exc:
        raise MappingError(path, f"cannot construct {schema.name}: {exc}") from exc


def map_model(payload: Any, model: type) -> Any:
    """Build an instance of the registered ``model`` from a decoded JSON object.

    Keys that no field declares are ignored. ``None`` counts as absent.
    """

    return _map_schema(payload, get_schema(model), "")


def map_models(payloads: Sequence[Any], model: type) -> list[Any]:
    schema = get_schema(model)
    if isinstance(payloads, (str, bytes, Mapping)):
        raise MappingError("", "expected a list of objects")
    return [_map_schema(item, schema, f"[{i}]") for i, item in enumerate(payloads)]


def _dump_value(value: Any) -> Any:
    if isinstance(value, Color):
        return value.to_hex()
    if isinstance(value, Size):
        return [value.width, value.height]
    if isinstance(value, datetime):
        return value.isoformat()
    if is_registered(type(value)):
        return dump_model(value)
    if isinstance(value, (list, tuple)):
        return [_dump_value(v) for v in value]
    if isinstance(value, Mapping):
        return {str(k): _dump_value(v) for k, v in value.items()}
    return value


def _assign(out: dict[str, Any], key_path: KeyPath, value: Any) -> None:
    node = out
    for part in key_path[:-1]:
        node = node.setdefault(part, {})
    node[key_path[-1]] = value


def dump_model(instance: Any) -> dict[str, Any]:
    """Inverse of ``map_model``: each field is written under its primary key path.

    Fields whose value is ``None`` are omitted.
    """

    schema = get_schema(type(instance))
    out: dict[str, Any] = {}
    for field in schema.fields:
        value = getattr(instance, field.name)
        if value is None:
            continue
        _assign(out, field.primary_key, _dump_value(value))
    return out
