"""
Input validation for assessment requests.

Only required fields and age are strict. Everything else is a soft UI input:
unknown enum labels fall back to defaults, scale values are clamped, and
garbage in set fields is dropped. Never mutates the submitted body.
"""
import logging
import math
from collections.abc import Mapping
from typing import Any

from core.assessment_table import (
    AGE_RANGE,
    ENUM_ALIASES,
    ENUM_VALUES,
    FIELD_ALIASES,
    FIELD_DEFAULTS,
    SCALE_FIELDS,
    SCALE_RANGE,
    SET_FIELDS,
    SET_SENTINELS,
    UNPARSEABLE_SCALE_DEFAULT,
)
from core.config import REQUIRED_FIELDS
from core.errors import InvalidField, MissingFields
from schemas.assessment import AssessmentInput

logger = logging.getLogger(__name__)

AGE_MESSAGE = f"Age must be a whole number between {AGE_RANGE[0]} and {AGE_RANGE[1]}"


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _resolve_aliases(raw: Mapping[str, Any]) -> dict[str, Any]:
    """Copy of raw with legacy field names mapped onto canonical ones."""
    resolved = dict(raw)
    for legacy, canonical in FIELD_ALIASES.items():
        if legacy in resolved:
            legacy_value = resolved.pop(legacy)
            if _is_missing(resolved.get(canonical)):
                resolved[canonical] = legacy_value
    return resolved


def _parse_age(value: Any) -> int:
    if isinstance(value, bool):
        raise InvalidField("age", AGE_MESSAGE)
    if isinstance(value, int):
        age = value
    else:
        if isinstance(value, str):
            text = value.strip()
            if "_" in text:
                raise InvalidField("age", AGE_MESSAGE)
            try:
                number = float(text)
            except ValueError:
                raise InvalidField("age", AGE_MESSAGE)
        elif isinstance(value, float):
            number = value
        else:
            raise InvalidField("age", AGE_MESSAGE)
        if not math.isfinite(number) or not number.is_integer():
            raise InvalidField("age", AGE_MESSAGE)
        age = int(number)

    low, high = AGE_RANGE
    if not low <= age <= high:
        raise InvalidField("age", AGE_MESSAGE)
    return age


def _parse_scale(value: Any) -> int:
    """0-10 scale: unparseable -> default, out of range -> clamped, fraction -> truncated."""
    if isinstance(value, bool):
        return UNPARSEABLE_SCALE_DEFAULT
    low, high = SCALE_RANGE
    if isinstance(value, int):
        return max(low, min(high, value))
    if isinstance(value, float):
        number = value
    elif isinstance(value, str):
        # float() accepts digit-group underscores; form input never should
        if "_" in value:
            return UNPARSEABLE_SCALE_DEFAULT
        try:
            number = float(value.strip())
        except ValueError:
            return UNPARSEABLE_SCALE_DEFAULT
    else:
        return UNPARSEABLE_SCALE_DEFAULT
    if math.isnan(number):
        return UNPARSEABLE_SCALE_DEFAULT

    return int(max(low, min(high, number)))


def _normalize_enum(field: str, value: Any) -> str | None:
    default = FIELD_DEFAULTS[field]
    if not isinstance(value, str):
        if value is not None:
            logger.debug("Non-string %s value %r, using default %r", field, value, default)
        return default
    text = value.strip()
    allowed = ENUM_VALUES[field]
    if text in allowed:
        return text
    lowered = text.lower()
    for option in allowed:
        if option.lower() == lowered:
            return option
    canonical = ENUM_ALIASES.get(field, {}).get(lowered)
    if canonical is None:
        logger.debug("Unknown %s value %r, using default %r", field, text, default)
        return default
    return canonical


def _normalize_set(field: str, value: Any) -> tuple[str, ...]:
    if isinstance(value, str):
        items = [value]
    elif isinstance(value, (list, tuple, set, frozenset)):
        items = list(value)
    else:
        return tuple(FIELD_DEFAULTS[field])

    sentinels = SET_SENTINELS.get(field, set())
    seen: dict[str, str] = {}
    for item in items:
        if not isinstance(item, str):
            continue
        label = item.strip()
        key = label.lower()
        if not label or key in sentinels or key in seen:
            continue
        seen[key] = label
    return tuple(seen.values())


def validate_assessment(
    raw: Any,
    required_fields: list[str] | None = None,
) -> AssessmentInput:
    """
    Validate and normalize a submitted assessment body.
    Raises MissingFields or InvalidField; otherwise returns a new AssessmentInput.
    """
    if required_fields is None:
        required_fields = REQUIRED_FIELDS
    required = list(dict.fromkeys(["age", *required_fields]))
    if not isinstance(raw, Mapping):
        raise MissingFields(required, message="Request body must be a JSON object")

    data = _resolve_aliases(raw)

    missing = [f for f in required if _is_missing(data.get(f))]
    if missing:
        raise MissingFields(missing)

    values: dict[str, Any] = {"age": _parse_age(data["age"])}

    for field in ENUM_VALUES:
        values[field] = _normalize_enum(field, data.get(field))

    for field in SCALE_FIELDS:
        value = data.get(field)
        if value is None:
            values[field] = FIELD_DEFAULTS[field]
        else:
            values[field] = _parse_scale(value)

    for field in SET_FIELDS:
        values[field] = _normalize_set(field, data.get(field))

    return AssessmentInput(**values)
