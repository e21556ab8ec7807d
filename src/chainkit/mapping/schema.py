"""Static model schemas for dictionary-to-model mapping.

A schema lists, for every model field, where its value lives in the payload
and which registered transformer converts it. Transformer names and nested
models are resolved once, when the schema is registered, so mapping never
inspects the model class at runtime.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from chainkit.mapping.registry import Transformer, get_transformer


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()

KeyPath = tuple[str, ...]


@dataclass(frozen=True)
class FieldSpec:
    """Declaration of one mapped field.

    ``keys`` is a payload key, a dotted key path such as ``"meta.author.name"``,
    or a sequence of candidates tried in order. It defaults to ``name``.
    """

    name: str
    transformer: str = "any"
    keys: str | Sequence[str] | None = None
    required: bool = False
    default: Any = MISSING
    many: bool = False
    model: type | None = None

    def key_paths(self) -> tuple[KeyPath, ...]:
        raw = self.name if self.keys is None else self.keys
        candidates = (raw,) if isinstance(raw, str) else tuple(raw)
        if not candidates:
            raise ValueError(f"Field '{self.name}' must declare at least one key.")
        paths = []
        for candidate in candidates:
            parts = tuple(part for part in candidate.split(".") if part)
            if not parts:
                raise ValueError(f"Field '{self.name}' has an empty key path.")
            paths.append(parts)
        return tuple(paths)


@dataclass(frozen=True)
class ResolvedField:
    name: str
    key_paths: tuple[KeyPath, ...]
    convert: Transformer | None
    nested: ModelSchema | None
    required: bool
    default: Any
    many: bool

    @property
    def primary_key(self) -> KeyPath:
        return self.key_paths[0]


@dataclass(frozen=True)
class ModelSchema:
    model: type
    fields: tuple[ResolvedField, ...]

    @property
    def name(self) -> str:
        return self.model.__name__


_SCHEMAS: dict[type, ModelSchema] = {}


def _resolve_field(spec: FieldSpec) -> ResolvedField:
    if not spec.name:
        raise ValueError("Field name must be non-empty.")
    nested = None
    convert = None
    if spec.model is not None:
        nested = get_schema(spec.model)
    else:
        convert = get_transformer(spec.transformer)
    return ResolvedField(
        name=spec.name,
        key_paths=spec.key_paths(),
        convert=convert,
        nested=nested,
        required=spec.required,
        default=spec.default,
        many=spec.many,
    )


def register_model(model: type, fields: Sequence[FieldSpec]) -> ModelSchema:
    """Resolve ``fields`` and register the resulting schema for ``model``.

    Raises ``KeyError`` straight away for an unknown transformer or an
    unregistered nested model.
    """

    names = [spec.name for spec in fields]
    duplicates = sorted({n for n in names if names.count(n) > 1})
    if duplicates:
        raise ValueError(f"Duplicate field names for {model.__name__}: {', '.join(duplicates)}")
    schema = ModelSchema(model=model, fields=tuple(_resolve_field(spec) for spec in fields))
    _SCHEMAS[model] = schema
    return schema


def get_schema(model: type) -> ModelSchema:
    try:
        return _SCHEMAS[model]
    except KeyError as exc:
        available = ", ".join(sorted(m.__name__ for m in _SCHEMAS)) or "<none>"
        raise KeyError(
            f"Model '{getattr(model, '__name__', model)}' is not registered. Registered models: {available}"
        ) from exc


def is_registered(model: type) -> bool:
    return model in _SCHEMAS


def list_models() -> tuple[str, ...]:
    return tuple(sorted(m.__name__ for m in _SCHEMAS))


def mapped(*fields: FieldSpec) -> Callable[[type], type]:
    """Class decorator form of ``register_model``."""

    def decorator(model: type) -> type:
        register_model(model, fields)
        return model

    return decorator
