"""Error types raised while building the inlined page."""


class PageBundleError(Exception):
    """Base class for everything this package raises."""


class ReadError(PageBundleError):
    """The entry document or an asset could not be read."""


class ParseError(PageBundleError):
    """The entry document could not be parsed."""


class MissingSectionWarning(PageBundleError, UserWarning):
    """The document has no <head> or no <body>.

    Soft condition: the caller logs it and serves the document unmodified.
    """
