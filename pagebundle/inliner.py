"""Inline head scripts and stylesheets into the served document."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Tuple

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.builder import ParserRejectedMarkup

from .errors import MissingSectionWarning, ParseError, ReadError
from .loader import load_index, read_asset

logger = logging.getLogger(__name__)


def parse_document(content: bytes) -> BeautifulSoup:
    """Parse raw HTML bytes into a document tree.

    html5lib builds the tree the way a browser does, so <head> and <body>
    exist even when the markup leaves them implied.
    """
    try:
        return BeautifulSoup(content, "html5lib")
    except ParserRejectedMarkup as e:
        raise ParseError(f"failed to parse HTML: {e}") from e


def find_sections(soup: BeautifulSoup) -> Tuple[Tag, Tag]:
    """Return the first <head> and first <body> in document order."""
    head = soup.find("head")
    if head is None:
        raise MissingSectionWarning("no <head> element found")

    body = soup.find("body")
    if body is None:
        raise MissingSectionWarning("no <body> element found")

    return head, body


def _script_tags(head: Tag) -> List[Tag]:
    return [tag for tag in head.find_all("script") if tag.get("src")]


def _is_stylesheet(tag: Tag) -> bool:
    # bs4 splits rel into tokens. Only a plain "stylesheet" applies by default,
    # "alternate stylesheet" does not.
    rel = tag.get("rel") or []
    if isinstance(rel, str):
        rel = rel.split()
    return [r.lower() for r in rel] == ["stylesheet"]


def _stylesheet_tags(head: Tag) -> List[Tag]:
    return [
        tag for tag in head.find_all("link")
        if _is_stylesheet(tag) and tag.get("href")
    ]


def collect_scripts(head: Tag) -> List[str]:
    """src of every <script src=...> under head, in document order."""
    return [tag["src"] for tag in _script_tags(head)]


def collect_stylesheets(head: Tag) -> List[str]:
    """href of every <link rel="stylesheet" href=...> under head, in document order."""
    return [tag["href"] for tag in _stylesheet_tags(head)]


def embed_script(
    soup: BeautifulSoup,
    body: Tag,
    src: str,
    root: str | Path,
    log: Optional[logging.Logger] = None,
) -> bool:
    """Append the contents of src to body as an inline <script>.

    Returns False (after logging) when the file cannot be read.
    """
    log = log or logger
    try:
        content = read_asset(root, src)
    except ReadError as e:
        log.warning("[Inline] Error processing script %s: %s", src, e)
        return False

    script = soup.new_tag("script")
    script.string = content
    body.append(script)

    log.info("[Inline] Loaded script: %s", src)
    return True


def embed_stylesheet(
    soup: BeautifulSoup,
    head: Tag,
    href: str,
    root: str | Path,
    log: Optional[logging.Logger] = None,
) -> bool:
    """Append the contents of href to head as an inline <style>.

    Returns False (after logging) when the file cannot be read.
    """
    log = log or logger
    try:
        content = read_asset(root, href)
    except ReadError as e:
        log.warning("[Inline] Error processing CSS %s: %s", href, e)
        return False

    style = soup.new_tag("style")
    style.string = content
    head.append(style)

    log.info("[Inline] Loaded CSS: %s", href)
    return True


def inline_document(
    content: bytes,
    root: str | Path,
    log: Optional[logging.Logger] = None,
) -> str:
    """
    Turn an HTML document into a self-contained one.

    Scripts referenced from <head> are appended to <body> as inline
    <script> elements, stylesheets are appended to <head> as <style>
    elements. The original reference element is dropped once its asset is
    inlined, so feeding the output back in changes nothing.

    Args:
        content: Raw bytes of the entry document.
        root: Directory that asset references are resolved against.
        log: Diagnostics sink; defaults to this module's logger.

    Returns:
        The serialized document. If <head> or <body> is missing, the
        original document text unchanged.

    Raises:
        ParseError: The document could not be parsed.
    """
    log = log or logger
    soup = parse_document(content)

    try:
        head, body = find_sections(soup)
    except MissingSectionWarning as w:
        log.warning("[Inline] %s, serving document unmodified", w)
        return content.decode(soup.original_encoding or "utf-8", errors="replace")

    # Discovery runs to completion before the tree is touched
    scripts = collect_scripts(head)
    stylesheets = collect_stylesheets(head)
    log.info("[Inline] Scripts in head: %s", scripts)
    log.info("[Inline] Stylesheets in head: %s", stylesheets)

    inlined_scripts = {src for src in scripts if embed_script(soup, body, src, root, log=log)}
    inlined_stylesheets = {
        href for href in stylesheets if embed_stylesheet(soup, head, href, root, log=log)
    }

    for tag in _script_tags(head):
        if tag["src"] in inlined_scripts:
            _remove_reference(tag)
    for tag in _stylesheet_tags(head):
        if tag["href"] in inlined_stylesheets:
            _remove_reference(tag)

    return str(soup)


def _remove_reference(tag: Tag) -> None:
    """Drop an inlined reference together with the whitespace leading up to it."""
    previous = tag.previous_sibling
    if type(previous) is NavigableString and not previous.strip():
        previous.extract()
    tag.decompose()


def get_processed_html(
    root: str | Path,
    log: Optional[logging.Logger] = None,
) -> str:
    """Load index.html from root and return it with assets inlined."""
    return inline_document(load_index(root), root, log=log)
