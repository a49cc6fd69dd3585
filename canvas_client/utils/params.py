"""
Request parameter utilities.

The Canvas API documentation lists parameters in form-encoded style
(``assignment[name]``, ``include[]``) while JSON bodies are preferred. These
helpers convert the documented bracket notation into nested JSON objects so
parameters can be copied verbatim from the docs.
"""

from typing import Any, Dict, Mapping, Optional

from ..errors import ValidationError

ARRAY_SUFFIX = "[]"


def _split_bracket_key(key: str) -> tuple[str, str]:
    """Split ``object[property]`` into its object and property names.

    Raises:
        ValidationError: If the brackets are unbalanced or out of order
    """
    open_pos = key.index("[")
    close_pos = key.find("]")
    if close_pos < open_pos:
        raise ValidationError(f"Malformed bracket notation in parameter key: {key!r}")
    return key[:open_pos], key[open_pos + 1 : close_pos]


def normalize_params(params: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Convert form-encoded bracket keys into nested JSON-ready structures.

    Keys are processed in input order. The input mapping (and any nested
    mapping inside it) is never modified.

    Args:
        params: Flat mapping, possibly using bracket notation in its keys

    Returns:
        New dictionary suitable for JSON encoding

    Raises:
        ValidationError: If a key has malformed bracket notation, or a bracket
            key targets an object name already holding a non-mapping value

    Examples:
        >>> normalize_params({"foo[]": [1, 2]})
        {'foo': [1, 2]}
        >>> normalize_params({"assignment[name]": "myname", "assignment[points]": 10})
        {'assignment': {'name': 'myname', 'points': 10}}
        >>> normalize_params({"force_new": True})
        {'force_new': True}
    """
    result: Dict[str, Any] = {}
    if not params:
        return result

    for key, value in params.items():
        if isinstance(value, list) and key.endswith(ARRAY_SUFFIX):
            result[key[: -len(ARRAY_SUFFIX)]] = value
        elif "[" in key:
            obj_name, obj_prop = _split_bracket_key(key)
            existing = result.get(obj_name, {})
            if not isinstance(existing, Mapping):
                raise ValidationError(
                    f"Parameter {key!r} conflicts with non-object value for {obj_name!r}"
                )
            result[obj_name] = {**existing, obj_prop: value}
        else:
            result[key] = value

    return result
