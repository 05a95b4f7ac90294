# -*- encoding: utf-8 -*-
# @File   : bridge.py
# @Time   : 2026/10/18 15:12:46

"""Put a decoded `IniDocument` into whatever the caller handed over.

Supported targets:
- any `MutableMapping`: each section lands as `target[name] = {...}`.
- a (non-frozen) dataclass instance or pydantic model instance:
  fields are matched against sections by name, exactly first,
  then case-insensitively. Each matched section goes through pydantic
  as JSON in strict mode, so a string never turns into an `int`.
"""

import dataclasses
import json
from collections.abc import Mapping, MutableMapping
from typing import Any, get_type_hints

from pydantic import BaseModel, TypeAdapter, ValidationError

from .errors import BridgeError, InvalidTarget
from .ini.model import IniDocument


def check_target(target: object) -> None:
    """Raise `InvalidTarget` unless `target` is something we can write into."""
    if target is None or isinstance(target, type):
        raise InvalidTarget(target)
    if isinstance(target, MutableMapping):
        return
    if isinstance(target, BaseModel):
        if target.model_config.get('frozen'):
            raise InvalidTarget(target)
        return
    if dataclasses.is_dataclass(target):
        if target.__dataclass_params__.frozen:
            raise InvalidTarget(target)
        return
    raise InvalidTarget(target)


def _lookup(pairs: Mapping[str, Any], name: str) -> str | None:
    """Find the key matching `name`, preferring an exact match."""
    if name in pairs:
        return name
    folded = name.lower()
    for k in pairs:
        if k.lower() == folded:
            return k
    return None


def _field_types(target: Any) -> dict[str, Any]:
    cls = type(target)
    if isinstance(target, BaseModel):
        return {
            name: info.rebuild_annotation()
            for name, info in cls.model_fields.items()
        }
    hints = get_type_hints(cls)
    return {f.name: hints.get(f.name, Any) for f in dataclasses.fields(cls)}


def project(document: IniDocument, target: Any) -> None:
    """Re-project `document` onto `target` in place."""
    check_target(target)
    doc = document.to_dict()
    if isinstance(target, MutableMapping):
        for name, pairs in doc.items():
            target[name] = pairs
        return

    cls_name = type(target).__name__
    values: dict[str, Any] = {}
    # validate everything first, so a bad section leaves target untouched.
    for name, hint in _field_types(target).items():
        section = _lookup(doc, name)
        if section is None:
            continue
        try:
            values[name] = TypeAdapter(hint).validate_json(
                json.dumps(doc[section]), strict=True)
        except ValidationError as e:
            raise BridgeError(
                f'ini: cannot put section [{section}] '
                f'into {cls_name}.{name}: {e}') from e
    for name, value in values.items():
        setattr(target, name, value)
