"""Attribute serialization - mappings to markup attribute strings.

Values are interpolated as-is: no escaping is performed, callers are
responsible for handing in markup-safe values.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping

# Reserved key whose mapping value is flattened to CSS declarations
STYLE_KEY = "style"


def stringify(value: Any) -> str:
    """Render a single attribute value as text.

    Integral floats drop their fractional part and booleans are written
    lowercase, so geometry computed in floating point still reads like
    hand-written markup.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def flatten_style(style: Mapping[str, Any]) -> str:
    """Flatten a style mapping into a declaration string.

    Example:
        >>> flatten_style({"a": "1", "b": "2"})
        ' a: 1; b: 2;'
    """
    return "".join(f" {key}: {stringify(value)};" for key, value in style.items())


def serialize_attributes(attributes: Mapping[str, Any] | None) -> str:
    """Serialize an attribute mapping to ``' key="value"'`` pairs.

    A ``style`` entry holding a mapping is flattened first. The caller's
    mapping is never modified.

    Args:
        attributes: Attribute names to values, in output order

    Returns:
        Attribute string with a leading space per attribute, or "" when
        there is nothing to serialize
    """
    if not attributes:
        return ""

    parts = []
    for key, value in attributes.items():
        if key == STYLE_KEY and isinstance(value, Mapping):
            value = flatten_style(value)
        parts.append(f' {key}="{stringify(value)}"')

    return "".join(parts)


def format_points(points: str | Iterable[Iterable[Any]]) -> str:
    """Format a point list for polyline/polygon ``points``.

    Pre-formatted strings pass through unchanged; sequences of pairs
    become ``"x1,y1 x2,y2 ..."``.
    """
    if isinstance(points, str):
        return points
    return " ".join(",".join(stringify(c) for c in point) for point in points)


def with_geometry(
    geometry: Mapping[str, Any], attributes: Mapping[str, Any] | None
) -> dict[str, Any]:
    """Merge geometric attributes with caller attributes.

    Geometry comes first in the output and wins over caller attributes of
    the same name; the remaining caller attributes follow in their order.
    """
    merged = dict(geometry)
    for key, value in (attributes or {}).items():
        if key not in merged:
            merged[key] = value
    return merged
