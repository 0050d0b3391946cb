"""Document - the chainable markup builder.

A Document owns one ContentStore. Every call appends to it synchronously
and markup() renders the full text from the current buffers:

    doc = Document(width=100, height=100)
    doc.circle(50, 50, 10, {"fill": "red"})
    doc.group(lambda d: d.square(0, 0, 10).square(20, 0, 10), {"id": "row"})
    print(doc.markup())
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from qwsvg.config import DocumentConfig
from qwsvg.engine.attributes import stringify
from qwsvg.engine.store import ContentStore
from qwsvg.engine.tag import TagBuilder
from qwsvg.engine.template import TemplateAssembler, is_known_mode
from qwsvg.shapes import ShapesMixin

log = logging.getLogger(__name__)


class Document(ShapesMixin):
    """An SVG or HTML document under construction.

    Args:
        config: DocumentConfig or a mapping of options
        **options: Options overriding those in config (width, height,
            view_box/viewBox, template, attributes, container)
    """

    def __init__(
        self,
        config: DocumentConfig | Mapping[str, Any] | None = None,
        **options: Any,
    ) -> None:
        if isinstance(config, DocumentConfig):
            data = config.model_dump(exclude_unset=True)
        else:
            data = dict(config or {})
        data.update(options)
        cfg = DocumentConfig.model_validate(data)

        self.container = cfg.container
        self.width = cfg.width
        self.height = cfg.height
        self.template = cfg.template
        self.attributes: dict[str, Any] = dict(cfg.attributes)
        self._view_box = cfg.view_box

        self.content = ContentStore()
        self._builder = TagBuilder(self.content, owner=self)
        self._assembler = TemplateAssembler()

        if not is_known_mode(self.template):
            log.warning(
                "Unrecognized template mode %r: markup will not be wrapped in a root element",
                self.template,
            )

    @property
    def view_box(self) -> str:
        """viewBox attribute, derived from width/height unless overridden."""
        if self._view_box:
            return self._view_box
        return f"0 0 {stringify(self.width)} {stringify(self.height)}"

    @view_box.setter
    def view_box(self, value: str | None) -> None:
        self._view_box = value

    # -------------------------------------------------------------------------
    # Content
    # -------------------------------------------------------------------------

    def head(self, fragment: str) -> "Document":
        """Append a raw fragment to the head (defs, styles, ...)."""
        self.content.append("head", fragment)
        return self

    def body(self, fragment: str) -> "Document":
        """Append a raw fragment to the body."""
        self.content.append("body", fragment)
        return self

    def tag(
        self,
        name: str,
        attributes: Mapping[str, Any] | None = None,
        content: Any = None,
        location: str = "body",
    ) -> "Document":
        """Append an arbitrary tag.

        Args:
            name: Tag name
            attributes: Tag attributes
            content: None, text, an attribute mapping, a callback taking
                this document or no arguments, or an explicit content variant
            location: "head" or "body"
        """
        self._builder.build(name, attributes, content, location)
        return self

    def reset(self) -> "Document":
        """Clear all content, keeping size, template and attributes."""
        self.content.reset()
        return self

    def set_attributes(self, attributes: Mapping[str, Any] | None = None) -> "Document":
        """Merge attributes into the root element attributes."""
        self.attributes = {**self.attributes, **(attributes or {})}
        return self

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def markup(self) -> str:
        """Render the complete document markup."""
        if not self.content.balanced:
            log.warning(
                "Rendering with unclosed tags %s; reset() the document after a failed build",
                self.content.open_tags,
            )
        return self._assembler.assemble(
            self.template,
            self.content,
            attributes=self.attributes,
            width=self.width,
            height=self.height,
            view_box=self.view_box,
        )

    def __str__(self) -> str:
        return self.markup()
