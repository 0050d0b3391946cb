"""Shape primitives - geometric arguments to single tag calls.

Mixed into Document. Every primitive appends to the body and returns the
document so calls chain:

    doc.circle(50, 50, 10, {"fill": "red"}).square(0, 0, 20)
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any, Iterable, Mapping

from qwsvg.engine.attributes import format_points, stringify, with_geometry

if TYPE_CHECKING:
    from qwsvg.document import Document

Attrs = Mapping[str, Any] | None


def triangle_points(size: float) -> list[tuple[float, float]]:
    """Vertices of an equilateral triangle centered at the origin.

    The base is ``size`` wide and the height is ``size * sqrt(3) / 2``.
    The first vertex is repeated at the end to close the outline.
    """
    height = size * (math.sqrt(3) / 2)
    apex = (0, -height / 2)
    return [
        apex,
        (-size / 2, height / 2),
        (size / 2, height / 2),
        apex,
    ]


class ShapesMixin:
    """Primitive constructors built on ``tag()``.

    Hosts must provide ``tag(name, attributes, content, location)`` and a
    ``template`` mode.
    """

    template: str

    def circle(self, x: Any, y: Any, radius: Any, attributes: Attrs = None) -> Document:
        """Circle centered at (x, y)."""
        return self.tag("circle", with_geometry({"cx": x, "cy": y, "r": radius}, attributes))

    def ellipse(self, x: Any, y: Any, rx: Any, ry: Any, attributes: Attrs = None) -> Document:
        """Ellipse centered at (x, y) with radii rx and ry."""
        return self.tag(
            "ellipse", with_geometry({"cx": x, "cy": y, "rx": rx, "ry": ry}, attributes)
        )

    def rect(self, x: Any, y: Any, width: Any, height: Any, attributes: Attrs = None) -> Document:
        """Rectangle with its top-left corner at (x, y)."""
        return self.tag(
            "rect",
            with_geometry({"x": x, "y": y, "width": width, "height": height}, attributes),
        )

    def square(self, x: Any, y: Any, size: Any, attributes: Attrs = None) -> Document:
        """Rect with equal width and height."""
        return self.rect(x, y, size, size, attributes)

    def line(self, x1: Any, y1: Any, x2: Any, y2: Any, attributes: Attrs = None) -> Document:
        """Straight line from (x1, y1) to (x2, y2)."""
        return self.tag(
            "line", with_geometry({"x1": x1, "y1": y1, "x2": x2, "y2": y2}, attributes)
        )

    def path(self, d: str, attributes: Attrs = None) -> Document:
        """Path from SVG path data, e.g. "M 10 10 L 20 20"."""
        return self.tag("path", with_geometry({"d": d}, attributes))

    def polyline(self, points: str | Iterable[Iterable[Any]], attributes: Attrs = None) -> Document:
        """Open outline through points (pairs or a preformatted string)."""
        return self.tag("polyline", with_geometry({"points": format_points(points)}, attributes))

    def polygon(self, points: str | Iterable[Iterable[Any]], attributes: Attrs = None) -> Document:
        """Closed shape through points (pairs or a preformatted string)."""
        return self.tag("polygon", with_geometry({"points": format_points(points)}, attributes))

    def triangle(self, x: Any, y: Any, size: float, attributes: Attrs = None) -> Document:
        """Equilateral triangle of base ``size`` centered at (x, y).

        Drawn as a closed polyline. A caller ``transform`` is kept and
        ``translate(x y)`` is appended after it.
        """
        attrs = dict(attributes or {})
        attrs["transform"] = (
            f"{attrs.get('transform', '')} translate({stringify(x)} {stringify(y)})"
        )
        return self.polyline(triangle_points(size), attrs)

    def group(self, content: Any = None, attributes: Attrs = None) -> Document:
        """Group element: ``g`` in svg mode, ``div`` otherwise.

        Args:
            content: Callback (taking the document or no arguments),
                text, or an attribute mapping
            attributes: Group attributes
        """
        name = "g" if self.template == "svg" else "div"
        return self.tag(name, dict(attributes or {}), content)
