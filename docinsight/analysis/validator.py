"""Generic validation and coercion against a FieldSpec tree."""

import math
from typing import Any

from docinsight.analysis.schema import FieldSpec

_DROP = object()
_NUMBER_JUNK = str.maketrans("", "", ",%$€£ ")


def conform(spec: FieldSpec, value: Any) -> tuple[Any, list[str]]:
    """Coerce ``value`` to ``spec``.

    Returns the conforming value and one issue string per gap that had to
    be filled or corrected. A value that already conforms comes back equal
    to the input with no issues.
    """
    issues: list[str] = []
    result = _conform(spec, value, spec.name, issues)
    if result is _DROP:
        result = default_for(spec)
    return result, issues


def validate(spec: FieldSpec, value: Any) -> list[str]:
    """Return the issues found in ``value`` without keeping the coerced copy."""
    return conform(spec, value)[1]


def default_for(spec: FieldSpec) -> Any:
    """Narrowest valid value for a required field."""
    if spec.default is not None:
        return spec.default
    if spec.type == "string":
        return ""
    if spec.type in ("number", "integer"):
        return 0 if spec.minimum is None or spec.minimum <= 0 else spec.minimum
    if spec.type == "array":
        if spec.items is None or not spec.min_items:
            return []
        return [default_for(spec.items) for _ in range(spec.min_items)]
    return {field.name: default_for(field) for field in spec.fields if field.required}


def _conform(spec: FieldSpec, value: Any, path: str, issues: list[str]) -> Any:
    if spec.type == "object":
        return _conform_object(spec, value, path, issues)
    if spec.type == "array":
        return _conform_array(spec, value, path, issues)
    if spec.type in ("number", "integer"):
        return _conform_number(spec, value, path, issues)
    return _conform_string(spec, value, path, issues)


def _conform_object(spec: FieldSpec, value: Any, path: str, issues: list[str]) -> Any:
    if not isinstance(value, dict):
        issues.append(f"{path}: expected object, got {type(value).__name__}")
        value = {}
    out: dict[str, Any] = {}
    for field in spec.fields:
        field_path = f"{path}.{field.name}"
        key = _find_key(value, field)
        if key is None or value[key] is None:
            if field.identity:
                issues.append(f"{field_path}: missing, item dropped")
                return _DROP
            if field.required:
                issues.append(f"{field_path}: missing, defaulted")
                out[field.name] = default_for(field)
            continue
        conformed = _conform(field, value[key], field_path, issues)
        if conformed is _DROP:
            if field.identity:
                return _DROP
            if field.required:
                out[field.name] = default_for(field)
            continue
        out[field.name] = conformed
    return out


def _find_key(value: dict[str, Any], field: FieldSpec) -> str | None:
    for key in (field.name, *field.aliases):
        if key in value:
            return key
    return None


def _conform_array(spec: FieldSpec, value: Any, path: str, issues: list[str]) -> Any:
    if not isinstance(value, list):
        issues.append(f"{path}: expected array, got {type(value).__name__}")
        return default_for(spec)
    items: list[Any] = []
    for index, item in enumerate(value):
        conformed = _conform(spec.items, item, f"{path}[{index}]", issues) if spec.items else item
        if conformed is _DROP:
            continue
        if spec.unique and conformed in items:
            issues.append(f"{path}[{index}]: duplicate dropped")
            continue
        items.append(conformed)

    if spec.max_items is not None and len(items) > spec.max_items:
        issues.append(f"{path}: {len(items)} items truncated to {spec.max_items}")
        items = items[: spec.max_items]
    if spec.min_items is not None and len(items) < spec.min_items and spec.items is not None:
        issues.append(f"{path}: {len(items)} items padded to {spec.min_items}")
        items.extend(default_for(spec.items) for _ in range(spec.min_items - len(items)))
    return items


def _conform_number(spec: FieldSpec, value: Any, path: str, issues: list[str]) -> Any:
    number = _as_number(value)
    if number is None:
        issues.append(f"{path}: expected number, got {value!r}")
        return _DROP if spec.identity or not spec.required else default_for(spec)
    if number is not value:
        issues.append(f"{path}: coerced {value!r} to {number}")
    if spec.type == "integer" and not isinstance(number, int):
        if not number.is_integer():
            issues.append(f"{path}: expected integer, got {number}")
        number = int(number)
    if spec.minimum is not None and number < spec.minimum:
        issues.append(f"{path}: {number} below minimum {spec.minimum}, clamped")
        number = spec.minimum
    if spec.maximum is not None and number > spec.maximum:
        issues.append(f"{path}: {number} above maximum {spec.maximum}, clamped")
        number = spec.maximum
    return number


def _as_number(value: Any) -> int | float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            finite = math.isfinite(value)
        except OverflowError:
            return None
        return value if finite else None
    if isinstance(value, str):
        cleaned = value.translate(_NUMBER_JUNK)
        try:
            number = float(cleaned)
        except ValueError:
            return None
        if not math.isfinite(number):
            return None
        return int(number) if number.is_integer() and "." not in cleaned else number
    return None


def _conform_string(spec: FieldSpec, value: Any, path: str, issues: list[str]) -> Any:
    if isinstance(value, str):
        text = value
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        issues.append(f"{path}: coerced {value!r} to string")
        text = str(value)
    else:
        issues.append(f"{path}: expected string, got {type(value).__name__}")
        return _DROP if spec.identity or not spec.required else default_for(spec)

    if spec.identity and not text.strip():
        issues.append(f"{path}: empty, item dropped")
        return _DROP
    if spec.enum and text not in spec.enum:
        candidate = text.strip().lower()
        if candidate in spec.enum:
            issues.append(f"{path}: normalized {text!r} to {candidate!r}")
            return candidate
        issues.append(f"{path}: {text!r} not in {list(spec.enum)}, defaulted")
        return default_for(spec)
    return text
