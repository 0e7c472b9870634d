"""
Payload decoding utilities shared by the list handlers and the service router.
"""

from __future__ import annotations

import json
from numbers import Number
from typing import Any, Dict, List, Mapping, Union

FILE_SCHEME = "file://"

PayloadSource = Union[str, bytes, bytearray, Mapping[str, Any]]


class PayloadValidationError(ValueError):
    """Raised when a bus payload cannot be parsed or lacks a required field."""


def load_payload(source: PayloadSource) -> Dict[str, Any]:
    """
    Return the payload as a plain dictionary.

    Mappings are accepted as already parsed; strings and bytes are decoded
    as JSON. The root must be a JSON object.
    """
    if isinstance(source, Mapping):
        return dict(source)

    if isinstance(source, (bytes, bytearray)):
        try:
            source = source.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise PayloadValidationError(f"Payload is not valid UTF-8: {exc}") from exc

    if not isinstance(source, str):
        raise PayloadValidationError(
            f"Payload must be a JSON string or object, got {type(source).__name__}."
        )

    try:
        parsed = json.loads(source)
    except json.JSONDecodeError as exc:
        raise PayloadValidationError(f"Payload is not valid JSON: {exc}") from exc

    if not isinstance(parsed, dict):
        raise PayloadValidationError("Payload root must be a JSON object.")

    return parsed


def file_url(path: Any) -> str:
    """Prefix a filesystem path with the file scheme."""
    return FILE_SCHEME + ("" if path is None else str(path))


def same_identifier(left: Any, right: Any) -> bool:
    """
    Compare two entry identifiers.

    The shell publishes timestamps as numbers in some payloads and as
    strings in others. A number matches any string that parses to the same
    number ("5", "5.0", "05", "5e0"); two strings must be identical.
    """
    if left is None or right is None:
        return False
    if isinstance(left, bool) or isinstance(right, bool):
        return left is right
    if left == right:
        return True
    if isinstance(left, Number) and isinstance(right, str):
        return _numeric_match(left, right)
    if isinstance(left, str) and isinstance(right, Number):
        return _numeric_match(right, left)
    return False


def require_collection(payload: Mapping[str, Any], field: str) -> List[Dict[str, Any]]:
    """
    Return the descriptors of a snapshot collection in input order.

    Objects yield their values in key order, arrays their items.
    """
    if field not in payload:
        raise PayloadValidationError(f"{field} is required.")

    raw = payload[field]
    if isinstance(raw, Mapping):
        descriptors = list(raw.values())
    elif isinstance(raw, list):
        descriptors = list(raw)
    else:
        raise PayloadValidationError(f"{field} must be a JSON object or array.")

    for descriptor in descriptors:
        if not isinstance(descriptor, Mapping):
            raise PayloadValidationError(f"Every entry in {field} must be a JSON object.")

    return [dict(descriptor) for descriptor in descriptors]


def _numeric_match(number: Number, text: str) -> bool:
    try:
        return float(number) == float(text.strip())
    except (TypeError, ValueError, OverflowError):
        return False
