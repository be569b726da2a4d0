"""
JSON Decoding

Turns a parsed JSON value into whatever shape the caller asked for.
The client knows nothing about Trello's schema; the target decides.

A target can be:
- ``None``: the parsed value is returned unchanged.
- a type: ``dict``, ``list``, ``str``, ``int``, ``float``, ``bool``,
  ``Any``, a dataclass, or a ``List[...]`` / ``Dict[str, ...]`` /
  ``Optional[...]`` alias built from those. A new value is returned.
- an instance (``dict``, ``list`` or dataclass): populated in place
  and returned.

Dataclass fields map to JSON keys by name, or by ``metadata={"json": key}``
when the names differ (``field(metadata={"json": "idBoard"})``).
"""

import dataclasses
import types
from typing import Any, Dict, Union, get_args, get_origin, get_type_hints


_NONE_TYPE = type(None)
_UNION_TYPES = (Union, getattr(types, "UnionType", Union))


def decode(data: Any, target: Any = None) -> Any:
    """
    Decode a parsed JSON value into ``target``.
    
    Args:
        data: Value produced by ``json.loads``.
        target: Type, alias, or instance describing the expected shape.
    
    Returns:
        The decoded value (the target itself for the in-place forms).
    
    Raises:
        TypeError: If the value does not match the target's shape.
        ValueError: If a required dataclass field is missing.
    """
    if target is None:
        return data
    if target is Any or isinstance(target, type) or get_origin(target) is not None:
        return _convert(data, target)
    return _populate(data, target)


def _convert(value: Any, tp: Any) -> Any:
    if tp is Any or tp is object:
        return value
    
    origin = get_origin(tp)
    if origin in _UNION_TYPES:
        return _convert_union(value, get_args(tp))
    if origin is list:
        _expect(value, list, tp)
        (item_type,) = get_args(tp) or (Any,)
        return [_convert(item, item_type) for item in value]
    if origin is dict:
        _expect(value, dict, tp)
        args = get_args(tp)
        value_type = args[1] if args else Any
        return {key: _convert(item, value_type) for key, item in value.items()}
    
    if dataclasses.is_dataclass(tp):
        return _build_dataclass(value, tp)
    if tp is float:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return float(value)
        raise TypeError(f"expected float, got {type(value).__name__}")
    if tp is int:
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        raise TypeError(f"expected int, got {type(value).__name__}")
    
    _expect(value, tp, tp)
    return value


def _convert_union(value: Any, members: tuple) -> Any:
    if value is None and _NONE_TYPE in members:
        return None
    errors = []
    for member in members:
        if member is _NONE_TYPE:
            continue
        try:
            return _convert(value, member)
        except (TypeError, ValueError) as e:
            errors.append(str(e))
    raise TypeError(f"value matches no member of union: {'; '.join(errors)}")


def _expect(value: Any, kind: type, tp: Any) -> None:
    if not isinstance(value, kind):
        name = getattr(tp, "__name__", str(tp))
        raise TypeError(f"expected {name}, got {type(value).__name__}")


def _field_key(f: dataclasses.Field) -> str:
    return f.metadata.get("json", f.name)


def _build_dataclass(value: Any, cls: type) -> Any:
    _expect(value, dict, cls)
    hints = get_type_hints(cls)
    kwargs: Dict[str, Any] = {}
    
    for f in dataclasses.fields(cls):
        if not f.init:
            continue
        key = _field_key(f)
        if key in value:
            kwargs[f.name] = _convert(value[key], hints.get(f.name, Any))
        elif f.default is dataclasses.MISSING and f.default_factory is dataclasses.MISSING:
            raise ValueError(f"missing field {key!r} for {cls.__name__}")
    
    return cls(**kwargs)


def _populate(data: Any, target: Any) -> Any:
    if isinstance(target, dict):
        _expect(data, dict, dict)
        target.clear()
        target.update(data)
        return target
    
    if isinstance(target, list):
        _expect(data, list, list)
        target[:] = data
        return target
    
    if dataclasses.is_dataclass(target):
        _expect(data, dict, type(target))
        hints = get_type_hints(type(target))
        # Nothing is assigned unless every present field converts
        updates = {
            f.name: _convert(data[_field_key(f)], hints.get(f.name, Any))
            for f in dataclasses.fields(target)
            if _field_key(f) in data
        }
        for name, item in updates.items():
            setattr(target, name, item)
        return target
    
    raise TypeError(f"cannot decode into {type(target).__name__}")
