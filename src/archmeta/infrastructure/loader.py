"""Model loader: ingestion mapping (JSON) → Model.

Expected shape::

    {
      "name": "shop",
      "classes": [
        {
          "id": "c1", "name": "OrderService", "stereotypeName": "Service",
          "dependencies": [{"targetKind": "Object", "targetClass": "c2"}],
          "tags": [{"name": "externalAccess", "value": "false"}],
          "operations": [
            {"name": "find", "parameters": [
              {"name": "id", "type": "Integer", "isRequired": true,
               "hasMinValue": true, "minValue": 1}
            ]}
          ]
        }
      ]
    }

Unknown ``targetKind`` values load as TargetKind.UNKNOWN; classifiers
skip such edges instead of failing the whole model.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator, Mapping, Sequence
from contextlib import contextmanager
from typing import TYPE_CHECKING

from archmeta.domain.exceptions.loading import ModelLoadError
from archmeta.domain.model.class_ import Class
from archmeta.domain.model.dependency import Dependency
from archmeta.domain.model.enums import TargetKind
from archmeta.domain.model.model import Model
from archmeta.domain.model.operation import Operation
from archmeta.domain.model.parameter import Parameter
from archmeta.domain.model.tag import Tag
from archmeta.domain.model.type_ref import TypeRef

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


def load_model_file(path: Path) -> Model:
    """Load a model from a JSON file.

    Raises:
        ModelLoadError: If the file is not valid JSON or not a valid model
        OSError: If the file cannot be read
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ModelLoadError(str(path), f"invalid JSON: {e.msg} (line {e.lineno})") from e
    return load_model(data, default_name=path.stem)


def load_model(data: object, default_name: str = "model") -> Model:
    """Build a Model from an ingestion mapping.

    Raises:
        ModelLoadError: If data does not describe a valid model
    """
    root = _mapping(data, "")
    model = Model(name=_optional_str(root, "name", "") or default_name)

    for index, raw in enumerate(_sequence(root.get("classes", []), "classes")):
        path = f"classes[{index}]"
        cls = _load_class(raw, path)
        with _at(path):
            model.add_class(cls)

    logger.debug("loaded model %r with %d classes", model.name, len(model.classes))
    return model


def _load_class(raw: object, path: str) -> Class:
    data = _mapping(raw, path)
    name = _required_str(data, "name", path)
    dependencies = tuple(
        _load_dependency(item, f"{path}.dependencies[{i}]")
        for i, item in enumerate(_sequence(data.get("dependencies", []), path))
    )
    operations = tuple(
        _load_operation(item, f"{path}.operations[{i}]")
        for i, item in enumerate(_sequence(data.get("operations", []), path))
    )
    tags = tuple(
        _load_tag(item, f"{path}.tags[{i}]")
        for i, item in enumerate(_sequence(data.get("tags", []), path))
    )
    with _at(path):
        return Class(
            id=_optional_str(data, "id", path) or name,
            name=name,
            stereotype_name=_optional_str(data, "stereotypeName", path),
            dependencies=dependencies,
            operations=operations,
            tags=tags,
        )


def _load_dependency(raw: object, path: str) -> Dependency:
    return Dependency(target=_load_type_ref(_mapping(raw, path), path))


def _load_type_ref(data: Mapping[str, object], path: str) -> TypeRef:
    kind = TargetKind.from_name(_optional_str(data, "targetKind", path))
    class_id = _optional_str(data, "targetClass", path)
    name = _optional_str(data, "typeName", path) or class_id or ""

    if kind is TargetKind.OBJECT and class_id is None:
        logger.debug("%s: object end without targetClass, loading as unknown", path)
        kind = TargetKind.UNKNOWN
    if kind is not TargetKind.OBJECT:
        class_id = None
    with _at(path):
        return TypeRef(name=name, kind=kind, class_id=class_id)


def _load_operation(raw: object, path: str) -> Operation:
    data = _mapping(raw, path)
    parameters = tuple(
        _load_parameter(item, f"{path}.parameters[{i}]")
        for i, item in enumerate(_sequence(data.get("parameters", []), path))
    )
    with _at(path):
        return Operation(name=_required_str(data, "name", path), parameters=parameters)


def _load_parameter(raw: object, path: str) -> Parameter:
    data = _mapping(raw, path)
    raw_type = data.get("type")
    if isinstance(raw_type, str):
        with _at(f"{path}.type"):
            type_ref = TypeRef.primitive(raw_type)
    elif isinstance(raw_type, Mapping):
        type_ref = _load_type_ref(raw_type, f"{path}.type")
    else:
        raise ModelLoadError(f"{path}.type", "must be a type name or a type mapping")

    with _at(path):
        return Parameter(
            name=_required_str(data, "name", path),
            type=type_ref,
            is_required=_bool(data, "isRequired", path),
            has_min_value=_bool(data, "hasMinValue", path),
            min_value=_number(data, "minValue", path),
            has_max_value=_bool(data, "hasMaxValue", path),
            max_value=_number(data, "maxValue", path),
        )


def _load_tag(raw: object, path: str) -> Tag:
    data = _mapping(raw, path)
    value = data.get("value")
    if value is not None and not isinstance(value, str | bool | int):
        raise ModelLoadError(f"{path}.value", f"unsupported tag value {type(value).__name__}")
    with _at(path):
        return Tag(name=_required_str(data, "name", path), value=value)


@contextmanager
def _at(path: str) -> Iterator[None]:
    """Turn domain invariant failures into ModelLoadError at path."""
    try:
        yield
    except ModelLoadError:
        raise
    except (TypeError, ValueError) as e:
        raise ModelLoadError(path, str(e)) from e


def _mapping(raw: object, path: str) -> Mapping[str, object]:
    if not isinstance(raw, Mapping):
        raise ModelLoadError(path, f"expected an object, got {type(raw).__name__}")
    return raw


def _sequence(raw: object, path: str) -> Sequence[object]:
    if isinstance(raw, str) or not isinstance(raw, Sequence):
        raise ModelLoadError(path, f"expected a list, got {type(raw).__name__}")
    return raw


def _required_str(data: Mapping[str, object], key: str, path: str) -> str:
    value = _optional_str(data, key, path)
    if not value:
        raise ModelLoadError(f"{path}.{key}", "is required")
    return value


def _optional_str(data: Mapping[str, object], key: str, path: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ModelLoadError(f"{path}.{key}", f"expected a string, got {type(value).__name__}")
    return value


def _bool(data: Mapping[str, object], key: str, path: str) -> bool:
    value = data.get(key, False)
    if not isinstance(value, bool):
        raise ModelLoadError(f"{path}.{key}", f"expected a boolean, got {type(value).__name__}")
    return value


def _number(data: Mapping[str, object], key: str, path: str) -> int | float | None:
    value = data.get(key)
    if value is not None and (isinstance(value, bool) or not isinstance(value, int | float)):
        raise ModelLoadError(f"{path}.{key}", f"expected a number, got {type(value).__name__}")
    return value
