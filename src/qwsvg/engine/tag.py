"""TagBuilder - appends well-formed tag fragments to a ContentStore.

Nesting is expressed by call order alone: a nested callback runs between
the opening and closing fragments, so whatever it appends ends up inside
the tag. No tree is ever built.
"""

from __future__ import annotations

import inspect
import logging
from typing import Any, Mapping

from qwsvg.engine.attributes import serialize_attributes
from qwsvg.engine.content import Attributes, Nested, Text, coerce_content
from qwsvg.engine.store import ContentStore
from qwsvg.exceptions import DeferredContentError, UnbalancedContentError

log = logging.getLogger(__name__)


class TagBuilder:
    """Builds tags into a ContentStore.

    Args:
        store: Buffers receiving the fragments
        owner: Object handed to nested callbacks; defaults to the builder
    """

    def __init__(self, store: ContentStore, owner: Any = None) -> None:
        self.store = store
        self.owner = owner if owner is not None else self

    def build(
        self,
        tag: str,
        attributes: Mapping[str, Any] | None = None,
        content: Any = None,
        location: str = "body",
    ) -> None:
        """Append the fragment(s) for one tag.

        Args:
            tag: Tag name
            attributes: Attribute mapping for the tag
            content: None, Attributes, Text, Nested, or a raw value that
                is coerced (mapping, callable, text)
            location: "head" or "body"

        Raises:
            LocationError: If location is unknown
            DeferredContentError: If a nested callback returns an awaitable
            UnbalancedContentError: If a nested callback resets the store
        """
        resolved = coerce_content(content)

        if isinstance(resolved, Attributes):
            # Attributes in the content slot replace the attributes argument
            attributes = resolved.attributes
            resolved = None

        attrs = serialize_attributes(attributes)
        target = self.store.fragments(location)

        if resolved is None:
            target.append(f"<{tag}{attrs} />")
        elif isinstance(resolved, Nested):
            self._build_nested(tag, attrs, resolved, location)
        elif isinstance(resolved, Text):
            target.append(f"<{tag}{attrs}>{resolved.text}</{tag}>")

    def _build_nested(
        self, tag: str, attrs: str, content: Nested, location: str
    ) -> None:
        target = self.store.fragments(location)
        target.append(f"<{tag}{attrs}>")
        self.store.open_tags.append(tag)
        depth = len(self.store.open_tags)
        log.debug("Opened <%s> in %s (depth %d)", tag, location, depth)

        result = content.invoke(self.owner)
        if inspect.isawaitable(result):
            if inspect.iscoroutine(result):
                result.close()
            raise DeferredContentError(tag)

        open_tags = self.store.open_tags
        if len(open_tags) != depth or open_tags[-1] != tag:
            # Store was reset under us; a closing fragment would dangle
            raise UnbalancedContentError(tag)

        open_tags.pop()
        target.append(f"</{tag}>")
