"""qwsvg - chainable SVG/HTML markup builder.

Shapes and tags append fragments to ordered buffers; markup() wraps them
into a complete document.
"""

from qwsvg._version import __version__
from qwsvg.config import DocumentConfig, ElementConfig, SceneConfig, load_scene
from qwsvg.document import Document
from qwsvg.engine import Attributes, ContentStore, Nested, TagBuilder, TemplateAssembler, Text
from qwsvg.exceptions import (
    DeferredContentError,
    ExportError,
    LocationError,
    QwsvgError,
    SceneError,
    UnbalancedContentError,
)
from qwsvg.scene import build_document, render_scene

__all__ = [
    "__version__",
    # Document
    "Document",
    "DocumentConfig",
    # Engine
    "Attributes",
    "ContentStore",
    "Nested",
    "TagBuilder",
    "TemplateAssembler",
    "Text",
    # Scenes
    "ElementConfig",
    "SceneConfig",
    "build_document",
    "load_scene",
    "render_scene",
    # Errors
    "DeferredContentError",
    "ExportError",
    "LocationError",
    "QwsvgError",
    "SceneError",
    "UnbalancedContentError",
]
