from __future__ import annotations

from typing import Any


class SchemaValidationError(ValueError):
    pass


def validate_params(schema: dict[str, Any], params: Any) -> dict[str, Any] | list[Any]:
    """Validate procedure params against a minimal JSON Schema subset.

    Supported:
    - type=object: properties + required, additionalProperties (default: True)
    - type=array: minItems / maxItems, items.type (positional params)
    - primitive types: string/integer/number/boolean/object/array/null

    Returns the params unchanged on success.
    """
    if not isinstance(schema, dict):
        raise SchemaValidationError("params schema must be an object")

    st = schema.get("type", "object")
    if st == "object":
        return _validate_object(schema, params)
    if st == "array":
        return _validate_array(schema, params)
    raise SchemaValidationError(f"unsupported params schema type: {st}")


def _validate_object(schema: dict[str, Any], params: Any) -> dict[str, Any]:
    if not isinstance(params, dict):
        raise SchemaValidationError("params must be an object")

    props = schema.get("properties") or {}
    if not isinstance(props, dict):
        raise SchemaValidationError("properties must be an object")

    required = schema.get("required") or []
    if not isinstance(required, list):
        raise SchemaValidationError("required must be an array")

    for k in required:
        if isinstance(k, str) and k not in params:
            raise SchemaValidationError(f"missing required field: {k}")

    if schema.get("additionalProperties", True) is False:
        for k in params:
            if k not in props:
                raise SchemaValidationError(f"unexpected field: {k}")

    for key, prop_schema in props.items():
        if key in params:
            _validate_value(key, params[key], prop_schema)
    return params


def _validate_array(schema: dict[str, Any], params: Any) -> list[Any]:
    if not isinstance(params, list):
        raise SchemaValidationError("params must be an array")

    min_items = schema.get("minItems")
    if isinstance(min_items, int) and len(params) < min_items:
        raise SchemaValidationError(f"expected at least {min_items} params, got {len(params)}")
    max_items = schema.get("maxItems")
    if isinstance(max_items, int) and len(params) > max_items:
        raise SchemaValidationError(f"expected at most {max_items} params, got {len(params)}")

    items = schema.get("items")
    if isinstance(items, dict):
        for i, value in enumerate(params):
            _validate_value(f"[{i}]", value, items)
    return params


def _validate_value(key: str, value: Any, prop_schema: Any) -> None:
    if not isinstance(prop_schema, dict):
        return
    t = prop_schema.get("type")
    if not t:
        return

    if t == "string":
        ok = isinstance(value, str)
    elif t == "integer":
        ok = isinstance(value, int) and not isinstance(value, bool)
    elif t == "number":
        ok = isinstance(value, (int, float)) and not isinstance(value, bool)
    elif t == "boolean":
        ok = isinstance(value, bool)
    elif t == "object":
        ok = isinstance(value, dict)
    elif t == "array":
        ok = isinstance(value, list)
    elif t == "null":
        ok = value is None
    else:
        # Unknown type: do not reject (forward-compatible).
        ok = True

    if not ok:
        raise SchemaValidationError(f"field {key} must be {t}")
