"""Mapping between dataclasses and decoded JSON values."""

from __future__ import annotations

import ast
import dataclasses
import enum
import functools
import inspect
import types
import typing
from typing import Any

_MISSING = dataclasses.MISSING
_NONE_TYPE = type(None)

_KNOWN_NAMES: dict[str, Any] = {
    "int": int,
    "str": str,
    "float": float,
    "bool": bool,
    "bytes": bytes,
    "list": list,
    "dict": dict,
    "tuple": tuple,
    "set": set,
    "frozenset": frozenset,
    "object": object,
    "Any": Any,
    "Optional": typing.Optional,
    "Union": typing.Union,
    "List": typing.List,
    "Dict": typing.Dict,
    "Tuple": typing.Tuple,
}


def json_field(name, *, default=_MISSING, default_factory=_MISSING, omitempty=False):
    """Declare a dataclass field stored under the JSON key ``name``.

    With ``omitempty`` the key is left out of encoded output when the value is
    empty (zero, false, an empty string or container, or None).
    """
    return dataclasses.field(
        default=default,
        default_factory=default_factory,
        metadata={"json": name, "omitempty": omitempty},
    )


def _json_key(field: dataclasses.Field) -> str:
    return field.metadata.get("json", field.name)


def _members(obj: Any) -> dict[str, Any]:
    return dict(inspect.getmembers(obj))


def _namespace_for(cls: type) -> dict[str, Any]:
    """Collect the names an annotation on ``cls`` may refer to."""
    namespace: dict[str, Any] = {}
    for klass in reversed(cls.__mro__):
        module = inspect.getmodule(klass)
        if module is not None:
            namespace.update(_members(module))
        namespace[klass.__name__] = klass
    return namespace


def _lookup(name: str, namespace: dict[str, Any]) -> Any:
    if name in namespace:
        return namespace[name]
    if name in _KNOWN_NAMES:
        return _KNOWN_NAMES[name]
    raise NameError(f"cannot resolve annotation name {name!r}")


def _resolve_node(node: ast.AST, namespace: dict[str, Any]) -> Any:
    if isinstance(node, ast.Name):
        return _lookup(node.id, namespace)
    if isinstance(node, ast.Attribute):
        members = _members(_resolve_node(node.value, namespace))
        if node.attr not in members:
            raise NameError(f"cannot resolve annotation name {node.attr!r}")
        return members[node.attr]
    if isinstance(node, ast.Constant):
        if node.value is None:
            return _NONE_TYPE
        if isinstance(node.value, str):
            return _resolve_string(node.value, namespace)
        raise TypeError(f"unsupported annotation constant {node.value!r}")
    if isinstance(node, ast.Subscript):
        base = _resolve_node(node.value, namespace)
        index = node.slice
        if isinstance(index, ast.Tuple):
            args = tuple(_resolve_node(element, namespace) for element in index.elts)
            return base[args]
        return base[_resolve_node(index, namespace)]
    if isinstance(node, ast.BinOp) and isinstance(node.op, ast.BitOr):
        left = _resolve_node(node.left, namespace)
        right = _resolve_node(node.right, namespace)
        return typing.Union[left, right]
    raise TypeError(f"unsupported annotation syntax {ast.dump(node)}")


def _resolve_string(text: str, namespace: dict[str, Any]) -> Any:
    tree = ast.parse(text.strip(), mode="eval")
    return _resolve_node(tree.body, namespace)


def _resolve(tp: Any, namespace: dict[str, Any]) -> Any:
    """Turn an annotation, possibly written as text, into a type object."""
    if isinstance(tp, str):
        return _resolve_string(tp, namespace)
    if isinstance(tp, typing.ForwardRef):
        return _resolve_string(tp.__forward_arg__, namespace)
    origin = typing.get_origin(tp)
    args = typing.get_args(tp)
    if origin is None or not args:
        return tp
    resolved = tuple(_resolve(arg, namespace) for arg in args)
    if resolved == args:
        return tp
    if origin in (typing.Union, types.UnionType):
        return typing.Union[resolved]
    if origin is list:
        return list[resolved[0]]
    if origin is dict:
        return dict[resolved[0], resolved[1]]
    return tp


@functools.cache
def _field_types(cls: type) -> dict[str, Any]:
    namespace = _namespace_for(cls)
    return {
        field.name: _resolve(field.type, namespace) for field in dataclasses.fields(cls)
    }


def _is_union(tp: Any) -> bool:
    return typing.get_origin(tp) in (typing.Union, types.UnionType)


def _zero(tp: Any) -> Any:
    """Return the value a missing or null JSON value decodes to."""
    if _is_union(tp):
        args = typing.get_args(tp)
        if _NONE_TYPE in args:
            return None
        return _zero(args[0])
    origin = typing.get_origin(tp)
    if origin is list or tp is list:
        return []
    if origin is dict or tp is dict:
        return {}
    if tp is bool:
        return False
    if tp is int:
        return 0
    if tp is float:
        return 0.0
    if tp is str:
        return ""
    if isinstance(tp, type) and dataclasses.is_dataclass(tp):
        return _decode(tp, {}, tp.__name__)
    return None


def _mismatch(tp: Any, value: Any, path: str) -> TypeError:
    expected = getattr(tp, "__name__", repr(tp))
    return TypeError(
        f"cannot decode {type(value).__name__} into {expected} at {path}"
    )


def _decode(tp: Any, value: Any, path: str) -> Any:
    if tp is Any or tp is object:
        return value

    if _is_union(tp):
        args = typing.get_args(tp)
        if value is None:
            return None if _NONE_TYPE in args else _zero(tp)
        candidates = [arg for arg in args if arg is not _NONE_TYPE]
        if len(candidates) == 1:
            return _decode(candidates[0], value, path)
        for candidate in candidates:
            try:
                return _decode(candidate, value, path)
            except (TypeError, ValueError):
                continue
        raise _mismatch(tp, value, path)

    if value is None:
        return _zero(tp)

    origin = typing.get_origin(tp)
    if origin is list or tp is list:
        if not isinstance(value, list):
            raise _mismatch(tp, value, path)
        (item_type,) = typing.get_args(tp) or (Any,)
        return [
            _decode(item_type, item, f"{path}[{position}]")
            for position, item in enumerate(value)
        ]

    if origin is dict or tp is dict:
        if not isinstance(value, dict):
            raise _mismatch(tp, value, path)
        _, value_type = typing.get_args(tp) or (str, Any)
        return {
            key: _decode(value_type, item, f"{path}.{key}")
            for key, item in value.items()
        }

    if isinstance(tp, type) and dataclasses.is_dataclass(tp):
        if not isinstance(value, dict):
            raise _mismatch(tp, value, path)
        hints = _field_types(tp)
        kwargs = {}
        for field in dataclasses.fields(tp):
            if not field.init:
                continue
            key = _json_key(field)
            if key in value:
                kwargs[field.name] = _decode(
                    hints[field.name], value[key], f"{path}.{key}"
                )
        return tp(**kwargs)

    if isinstance(tp, type) and issubclass(tp, enum.Enum):
        return tp(value)

    if tp is bool:
        if not isinstance(value, bool):
            raise _mismatch(tp, value, path)
        return value

    if tp is int:
        if isinstance(value, bool) or not isinstance(value, int):
            raise _mismatch(tp, value, path)
        return value

    if tp is float:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise _mismatch(tp, value, path)
        return float(value)

    if tp is str:
        if not isinstance(value, str):
            raise _mismatch(tp, value, path)
        return value

    raise TypeError(f"unsupported target type {tp!r} at {path}")


def decode(cls, data):
    """Build a value of type ``cls`` from parsed JSON ``data``.

    Unknown keys are ignored, missing or null values take their zero value,
    and values of the wrong JSON type raise TypeError.
    """
    return _decode(cls, data, getattr(cls, "__name__", "value"))


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (bool, int, float, str, list, tuple, dict)):
        return not value
    return False


def encode(obj):
    """Turn a dataclass instance (or nested values) into JSON-ready data."""
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        result = {}
        for field in dataclasses.fields(obj):
            value = getattr(obj, field.name)
            if field.metadata.get("omitempty") and _is_empty(value):
                continue
            result[_json_key(field)] = encode(value)
        return result
    if isinstance(obj, enum.Enum):
        return obj.value
    if isinstance(obj, (list, tuple)):
        return [encode(item) for item in obj]
    if isinstance(obj, dict):
        return {str(key): encode(value) for key, value in obj.items()}
    return obj