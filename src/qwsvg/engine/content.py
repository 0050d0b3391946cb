"""Tag content variants.

Content handed to a tag is one of:
- None: no content, the tag self-closes
- Attributes: the historical "attributes in the content slot" convention
- Text: literal text wrapped by the tag
- Nested: a callback that builds child fragments synchronously, called
  with the owner or with no arguments
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Union


@dataclass(frozen=True)
class Attributes:
    """Attribute mapping passed where content was expected."""

    attributes: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Text:
    """Literal text placed between opening and closing tags."""

    text: str


@dataclass(frozen=True)
class Nested:
    """Callback that appends child fragments.

    The callback either takes no arguments or takes the builder's owner
    (usually the Document). It must finish all of its appends before
    returning.
    """

    build: Callable[..., Any]
    takes_owner: bool = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "takes_owner", _accepts_positional(self.build))

    def invoke(self, owner: Any) -> Any:
        """Run the callback, passing owner only if it accepts an argument."""
        if self.takes_owner:
            return self.build(owner)
        return self.build()


def _accepts_positional(fn: Callable[..., Any]) -> bool:
    """True when fn has a required positional parameter or *args."""
    try:
        params = inspect.signature(fn).parameters.values()
    except (TypeError, ValueError):
        # No introspectable signature; assume the documented form
        return True

    for param in params:
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            return True
        if (
            param.kind
            in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
            and param.default is inspect.Parameter.empty
        ):
            return True
    return False


Content = Union[Attributes, Text, Nested, None]


def coerce_content(value: Any) -> Content:
    """Resolve a raw content argument into a content variant.

    Mappings (even empty ones) become Attributes and callables become
    Nested. Any other falsy value (None, "", 0, False) means no content;
    the rest becomes Text.
    """
    if value is None or isinstance(value, (Attributes, Text, Nested)):
        return value
    if isinstance(value, Mapping):
        return Attributes(value)
    if callable(value):
        return Nested(value)
    if not value:
        return None
    return Text(str(value))
