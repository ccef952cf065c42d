"""Streaming Markdown to ANSI terminal renderer.

This package renders Markdown as it arrives, chunk by chunk, into text
styled with ANSI escape sequences, suitable for printing a model's token
stream to a terminal.

Example:
    >>> import sys
    >>> from md_ansi import MarkdownStreamRenderer
    >>> renderer = MarkdownStreamRenderer(sys.stdout.write)
    >>> renderer.write('**Bold** and *ital')
    >>> renderer.write('ic* text\\n')
    >>> renderer.flush()
"""

from md_ansi.config import DEFAULT_CONFIG, DEFAULT_STYLES, PLAIN_STYLES, AnsiStyles, MarkdownConfig
from md_ansi.converter import render_chunks, render_markdown
from md_ansi.errors import MarkdownStreamError, StreamClosedError
from md_ansi.renderer import MarkdownStreamRenderer, Mode
from md_ansi.settings import Settings, load_config

__version__ = '0.1.0'

__all__ = [
    'MarkdownStreamRenderer',
    'Mode',
    'render_markdown',
    'render_chunks',
    'MarkdownConfig',
    'AnsiStyles',
    'DEFAULT_CONFIG',
    'DEFAULT_STYLES',
    'PLAIN_STYLES',
    'Settings',
    'load_config',
    'MarkdownStreamError',
    'StreamClosedError',
]
