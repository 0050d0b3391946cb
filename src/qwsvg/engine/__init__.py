"""qwsvg.engine - the markup construction engine.

Serializer, buffers, tag builder and template assembler. Shapes and the
Document API are built on top of these.
"""

from qwsvg.engine.attributes import flatten_style, format_points, serialize_attributes
from qwsvg.engine.content import Attributes, Nested, Text, coerce_content
from qwsvg.engine.store import ContentStore
from qwsvg.engine.tag import TagBuilder
from qwsvg.engine.template import CLASS_NAME, TemplateAssembler

__all__ = [
    "Attributes",
    "CLASS_NAME",
    "ContentStore",
    "Nested",
    "TagBuilder",
    "TemplateAssembler",
    "Text",
    "coerce_content",
    "flatten_style",
    "format_points",
    "serialize_attributes",
]
