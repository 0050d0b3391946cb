"""TemplateAssembler - wraps a ContentStore into a complete document.

Root elements are rendered from Jinja2 templates shipped in
qwsvg/templates/. Autoescaping is off: fragments are already markup.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from jinja2 import Environment, FileSystemLoader

from qwsvg.engine.attributes import serialize_attributes, stringify
from qwsvg.engine.store import ContentStore

# Marker class set on every root element
CLASS_NAME = "qwsvg"

# Template mode -> template file
TEMPLATES: dict[str, str] = {
    "svg": "svg.xml.j2",
    "html": "html.html.j2",
}


def is_known_mode(mode: str) -> bool:
    return mode in TEMPLATES


class TemplateAssembler:
    """Renders document markup for a template mode.

    Usage:
        assembler = TemplateAssembler()
        text = assembler.assemble("svg", store, width=100, height=100)
    """

    def __init__(self, env: Environment | None = None) -> None:
        self._env = env

    def assemble(
        self,
        mode: str,
        store: ContentStore,
        attributes: Mapping[str, Any] | None = None,
        width: Any = None,
        height: Any = None,
        view_box: str | None = None,
    ) -> str:
        """Render the current store contents.

        Args:
            mode: "svg", "html", or anything else for unwrapped output
            store: Head/body fragments
            attributes: Extra root element attributes
            width: Root width (svg only)
            height: Root height (svg only)
            view_box: Root viewBox (svg only)

        Returns:
            Complete markup string
        """
        if not is_known_mode(mode):
            # Unrecognized modes concatenate the raw fragments
            return "".join(store.head) + "".join(store.body)

        tmpl = self._get_env().get_template(TEMPLATES[mode])
        return tmpl.render(
            class_name=CLASS_NAME,
            attributes=serialize_attributes(attributes),
            width=stringify(width),
            height=stringify(height),
            view_box=view_box or "",
            head="\n".join(store.head),
            body="\n".join(store.body),
        )

    def _get_env(self) -> Environment:
        """Get or create the Jinja2 environment."""
        if self._env is None:
            templates_dir = Path(__file__).parent.parent / "templates"
            self._env = Environment(
                loader=FileSystemLoader(str(templates_dir)),
                autoescape=False,
                trim_blocks=True,
                lstrip_blocks=True,
            )
        return self._env
