"""Export helpers - markup to data URIs and files.

Only the document's markup is used; mounting and rasterization are left
to callers.
"""

from __future__ import annotations

import logging
from pathlib import Path
from urllib.parse import quote

from qwsvg.document import Document
from qwsvg.exceptions import ExportError

log = logging.getLogger(__name__)

SVG_DATA_PREFIX = "data:image/svg+xml;utf8,"


def to_data_uri(document: Document) -> str:
    """Percent-encoded ``data:image/svg+xml`` URI for the document."""
    return SVG_DATA_PREFIX + quote(document.markup(), safe="")


def save(document: Document, path: str | Path) -> Path:
    """Write the document markup to a file.

    A path without suffix gets ".html" in html mode and ".svg" otherwise.

    Returns:
        The path written

    Raises:
        ExportError: If the file cannot be written
    """
    p = Path(path)
    if not p.suffix:
        p = p.with_suffix(".html" if document.template == "html" else ".svg")

    try:
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(document.markup(), encoding="utf-8")
    except OSError as e:
        raise ExportError(f"Could not write {p}: {e}") from e

    log.info("Saved %s", p)
    return p
