"""ContentStore - ordered head/body fragment buffers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from qwsvg.exceptions import LocationError

Location = Literal["head", "body"]

LOCATIONS: tuple[str, ...] = ("head", "body")


@dataclass
class ContentStore:
    """Two ordered sequences of markup fragments.

    Fragment order is the element order of the final markup. Nested tags
    are tracked while open so a faulted nested build can be detected.
    """

    head: list[str] = field(default_factory=list)
    body: list[str] = field(default_factory=list)
    open_tags: list[str] = field(default_factory=list, repr=False)

    def fragments(self, location: str) -> list[str]:
        """Return the live fragment list for a location."""
        if location not in LOCATIONS:
            raise LocationError(location)
        return self.head if location == "head" else self.body

    def append(self, location: str, fragment: str) -> None:
        self.fragments(location).append(fragment)

    def reset(self) -> None:
        """Clear both sequences in place."""
        self.head.clear()
        self.body.clear()
        self.open_tags.clear()

    @property
    def balanced(self) -> bool:
        """False while a nested tag has been opened but not closed."""
        return not self.open_tags

    @property
    def is_empty(self) -> bool:
        return not self.head and not self.body
