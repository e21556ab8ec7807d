from chainkit.mapping.mapper import dump_model, map_model, map_models
from chainkit.mapping.registry import get_transformer, list_transformers, register_transformer, transform
from chainkit.mapping.schema import MISSING, FieldSpec, ModelSchema, get_schema, is_registered, list_models, mapped, register_model
from chainkit.mapping.transformers import BUILTIN_TRANSFORMERS


for _name, _transformer in BUILTIN_TRANSFORMERS.items():
    register_transformer(_name, _transformer)

__all__ = [
    "register_transformer",
    "get_transformer",
    "list_transformers",
    "transform",
    "FieldSpec",
    "ModelSchema",
    "MISSING",
    "register_model",
    "get_schema",
    "is_registered",
    "list_models",
    "mapped",
    "map_model",
    "map_models",
    "dump_model",
]
