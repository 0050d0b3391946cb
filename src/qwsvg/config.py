"""Configuration models for documents and YAML scene files."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from qwsvg.engine.attributes import stringify
from qwsvg.exceptions import SceneError

DEFAULT_SIZE = 1200


class DocumentConfig(BaseModel):
    """Document construction options.

    Missing (or null) width/height fall back to DEFAULT_SIZE; view_box is
    derived from them unless given.
    """

    model_config = {"populate_by_name": True}

    container: str = Field(
        default="body", description="Selector used by mounting collaborators"
    )
    width: int | float = Field(default=DEFAULT_SIZE, gt=0)
    height: int | float = Field(default=DEFAULT_SIZE, gt=0)
    view_box: str | None = Field(default=None, alias="viewBox")
    template: str = Field(default="svg", description="'svg', 'html' or fallback")
    attributes: dict[str, Any] = Field(default_factory=dict)

    @field_validator("width", "height", mode="before")
    @classmethod
    def default_missing_size(cls, value: Any) -> Any:
        return DEFAULT_SIZE if value is None else value

    @field_validator("container", mode="before")
    @classmethod
    def default_missing_container(cls, value: Any) -> Any:
        return "body" if value is None or value == "" else value

    @field_validator("template", mode="before")
    @classmethod
    def default_missing_template(cls, value: Any) -> Any:
        return "svg" if value is None or value == "" else value

    @field_validator("attributes", mode="before")
    @classmethod
    def default_missing_attributes(cls, value: Any) -> Any:
        return {} if value is None else value


class ElementConfig(BaseModel):
    """A single scene element.

    Exactly one of:
    - shape: a primitive name ("circle", "group", ...) called with args
    - tag: a generic tag built with attributes and text/children
    - raw: a literal fragment appended to the body
    """

    shape: str | None = None
    tag: str | None = None
    raw: str | None = None

    args: list[Any] = Field(default_factory=list)
    attributes: dict[str, Any] = Field(default_factory=dict)
    text: str | None = None
    children: list["ElementConfig"] = Field(default_factory=list)
    location: str = "body"

    @field_validator("text", mode="before")
    @classmethod
    def stringify_scalar_text(cls, value: Any) -> Any:
        """YAML labels like `text: 42` arrive as numbers."""
        if isinstance(value, (bool, int, float)):
            return stringify(value)
        return value

    @model_validator(mode="after")
    def check_kind(self) -> "ElementConfig":
        kinds = [k for k in ("shape", "tag", "raw") if getattr(self, k) is not None]
        if len(kinds) != 1:
            raise ValueError("Element must set exactly one of 'shape', 'tag' or 'raw'")
        if self.text is not None and self.children:
            raise ValueError("Element cannot have both 'text' and 'children'")
        return self


class SceneConfig(DocumentConfig):
    """Document options plus the content to draw."""

    head: list[str] = Field(default_factory=list, description="Raw head fragments")
    elements: list[ElementConfig] = Field(default_factory=list)


def load_scene(path: Path) -> SceneConfig:
    """Load a scene from a YAML file.

    Raises:
        SceneError: If the file is missing, not YAML, or not a valid scene
    """
    if not path.exists():
        raise SceneError(f"Scene file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise SceneError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise SceneError(f"Scene root must be a mapping: {path}")

    try:
        return SceneConfig.model_validate(data)
    except ValidationError as e:
        raise SceneError(f"Invalid scene {path}:\n{e}") from e
