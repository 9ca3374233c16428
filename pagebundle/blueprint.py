"""Flask Blueprint serving the inlined page."""

import logging

from flask import Blueprint, Response

from .config import DIST_ROOT
from .errors import ParseError, ReadError
from .inliner import get_processed_html

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    "dist_root": str(DIST_ROOT),
}


def create_blueprint(name="page", config=None):
    """Create and return the page Blueprint.

    Args:
        name: Blueprint name (used for url_for namespacing).
        config: Optional dict overriding DEFAULT_CONFIG keys.
            - dist_root (Path|str): Directory holding index.html and its assets.

    Returns:
        A Flask Blueprint with a single "/" route. Every request re-reads and
        re-inlines the page; nothing is cached.
    """
    cfg = {**DEFAULT_CONFIG, **(config or {})}
    bp = Blueprint(name, __name__)

    @bp.route("/")
    def index():
        try:
            html = get_processed_html(cfg["dist_root"])
        except (ReadError, ParseError) as e:
            logger.error("[Server] Error processing HTML: %s", e)
            return Response(
                f"Error processing HTML: {e}",
                status=500,
                mimetype="text/plain",
            )
        return Response(html, mimetype="text/html")

    return bp
