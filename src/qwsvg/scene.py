"""Scene rendering - YAML element lists to populated Documents."""

from __future__ import annotations

import inspect
import logging
from pathlib import Path
from typing import Callable

from qwsvg.config import ElementConfig, SceneConfig, load_scene
from qwsvg.document import Document
from qwsvg.exceptions import SceneError

log = logging.getLogger(__name__)

# Shapes callable from scenes with positional args
SHAPES = (
    "circle",
    "ellipse",
    "line",
    "path",
    "polygon",
    "polyline",
    "rect",
    "square",
    "triangle",
)


def build_document(scene: SceneConfig) -> Document:
    """Create a Document and draw every scene element into it.

    Raises:
        SceneError: On unknown shapes or bad shape arguments
    """
    doc = Document(scene)
    for fragment in scene.head:
        doc.head(fragment)
    for element in scene.elements:
        _draw(doc, element)
    log.debug(
        "Built scene: %d head, %d body fragments",
        len(doc.content.head),
        len(doc.content.body),
    )
    return doc


def render_scene(path: Path) -> str:
    """Load a scene file and return its markup."""
    return build_document(load_scene(path)).markup()


def _draw(doc: Document, element: ElementConfig) -> None:
    if element.raw is not None:
        doc.body(element.raw)
    elif element.tag is not None:
        doc.tag(
            element.tag,
            element.attributes,
            _content(element),
            location=element.location,
        )
    elif element.shape == "group":
        if element.args:
            raise SceneError("group takes 'children', not 'args'")
        doc.group(_content(element), element.attributes)
    else:
        _draw_shape(doc, element)


def _draw_shape(doc: Document, element: ElementConfig) -> None:
    name = element.shape
    if name not in SHAPES:
        raise SceneError(f"Unknown shape: {name!r}")
    if element.text is not None or element.children:
        raise SceneError(f"Shape {name!r} does not take 'text' or 'children'")

    method: Callable = getattr(doc, name)
    params = list(inspect.signature(method).parameters)[:-1]  # drop attributes
    if len(element.args) != len(params):
        raise SceneError(
            f"Shape {name!r} expects {len(params)} args ({', '.join(params)}), "
            f"got {len(element.args)}"
        )
    method(*element.args, element.attributes)


def _content(element: ElementConfig):
    """Content for a tag/group element: children callback, text, or nothing."""
    if element.children:
        children = element.children

        def build(doc: Document) -> None:
            for child in children:
                _draw(doc, child)

        return build
    return element.text
