"""Filesystem access for the entry document and the assets it references."""

from __future__ import annotations

import logging
import posixpath
from pathlib import Path
from urllib.parse import unquote, urlsplit

from bs4 import UnicodeDammit

from .config import INDEX_FILE
from .errors import ReadError

logger = logging.getLogger(__name__)


def load_index(root: str | Path) -> bytes:
    """Read the raw bytes of index.html under root."""
    html_path = Path(root) / INDEX_FILE
    try:
        return html_path.read_bytes()
    except OSError as e:
        raise ReadError(f"cannot read HTML file {html_path}: {e}") from e


def resolve_asset_path(root: str | Path, ref: str) -> Path:
    """
    Map a script src / stylesheet href onto a file under root.

    "/assets/app.js", "assets/app.js" and "./x/../assets/app.js?v=2" all land
    on <root>/assets/app.js. Leading ".." segments are clamped at root.
    """
    parts = urlsplit(ref)
    if parts.scheme or parts.netloc:
        raise ReadError(f"not a local asset: {ref}")

    # Rooted normpath swallows any ".." that would climb above "/"
    cleaned = posixpath.normpath("/" + unquote(parts.path)).lstrip("/")
    if not cleaned or cleaned == ".":
        raise ReadError(f"empty asset path: {ref!r}")

    return Path(root).joinpath(*cleaned.split("/"))


def read_asset(root: str | Path, ref: str) -> str:
    """Read a referenced asset as text.

    UTF-8 is tried first; anything else is decoded with the encoding
    UnicodeDammit guesses. Newlines are left as they are in the file.
    """
    asset_path = resolve_asset_path(root, ref)
    try:
        data = asset_path.read_bytes()
    except OSError as e:
        raise ReadError(f"cannot read asset {asset_path}: {e}") from e

    dammit = UnicodeDammit(data, known_definite_encodings=["utf-8"])
    content = dammit.unicode_markup
    if content is None:
        raise ReadError(f"cannot decode asset {asset_path}")
    if dammit.original_encoding != "utf-8":
        logger.info("Decoded %s as %s", asset_path, dammit.original_encoding)

    logger.debug("Read %d characters from %s", len(content), asset_path)
    return content
