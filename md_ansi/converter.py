"""Convenience wrappers around the stream renderer.

``render_markdown`` handles a complete document at once, ``render_chunks``
adapts an iterable of text chunks (for example a token stream) into an
iterator of rendered output.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from md_ansi.config import MarkdownConfig
from md_ansi.renderer import MarkdownStreamRenderer


def render_markdown(text: str, config: MarkdownConfig | None = None) -> str:
    """Render a complete Markdown document to ANSI-styled text.

    Args:
        text: Markdown source
        config: Rendering configuration (uses default if None)

    Returns:
        Rendered text; every line ends with a newline

    Example:
        >>> render_markdown('# Title')
        '\\x1b[1m\\x1b[36mTitle\\x1b[22m\\x1b[39m\\n'
    """
    output: list[str] = []
    renderer = MarkdownStreamRenderer(output.append, config)
    renderer.write(text)
    renderer.flush()
    return ''.join(output)


def render_chunks(
    chunks: Iterable[str], config: MarkdownConfig | None = None
) -> Iterator[str]:
    """Render a stream of Markdown chunks lazily.

    Output produced while feeding a chunk is yielded before the next chunk
    is pulled from ``chunks``; whatever remains is yielded once it is
    exhausted.

    Args:
        chunks: Markdown text pieces, split at arbitrary positions
        config: Rendering configuration (uses default if None)

    Yields:
        Rendered output strings, each ending with a newline
    """
    pending: list[str] = []
    renderer = MarkdownStreamRenderer(pending.append, config)

    for chunk in chunks:
        renderer.write(chunk)
        yield from pending
        pending.clear()

    renderer.flush()
    yield from pending
