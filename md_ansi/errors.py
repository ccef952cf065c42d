"""Exceptions raised by the stream renderer.

Malformed Markdown never raises: unterminated blocks and ragged tables are
resolved when the stream is flushed. Only misuse of the renderer does.
"""


class MarkdownStreamError(Exception):
    """Base class for md_ansi errors."""


class StreamClosedError(MarkdownStreamError, RuntimeError):
    """Raised when writing to a renderer that was already flushed."""
