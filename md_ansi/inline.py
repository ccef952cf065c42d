"""Inline Markdown styling (code spans, emphasis, links) for a single line."""

from __future__ import annotations

from itertools import chain
import re

from md_ansi.config import DEFAULT_STYLES, AnsiStyles

_CODE_SPAN_RE = re.compile(r'`([^`]+)`')
_STRIKE_RE = re.compile(r'~~([^~]+)~~')
_BOLD_RE = re.compile(r'(\*\*|__)(.+?)\1')
# Single marker only: an adjacent second marker belongs to bold
_ITALIC_STAR_RE = re.compile(r'(^|[^*])\*([^*]+)\*(?!\*)')
_ITALIC_UNDERSCORE_RE = re.compile(r'(^|[^_])_([^_]+)_(?!_)')
_LINK_RE = re.compile(r'\[([^\]]+)\]\(([^)]+)\)')

# Private use code points; a placeholder is built from one the line does not contain
_PLACEHOLDER_RANGES = (range(0xE000, 0xF900), range(0xF0000, 0xFFFFE))


def _pick_marker(text: str) -> str:
    """Return a private use character that does not occur in text."""
    present = set(text)
    return next(chr(c) for c in chain(*_PLACEHOLDER_RANGES) if chr(c) not in present)


def render_inline(text: str, styles: AnsiStyles = DEFAULT_STYLES) -> str:
    """Apply inline Markdown styles to one line of text.

    Substitutions run in a fixed order: code spans, strikethrough, bold,
    italic, links. Code spans are set aside first so markers inside them
    stay literal.

    Note: ``_x_`` matches inside identifiers such as ``snake_case_name``.
    This is a known limitation of the heuristic and is kept as is.

    Args:
        text: Raw line content (no newlines)
        styles: Escape sequence table

    Returns:
        Text with Markdown markers replaced by escape sequences
    """
    s = styles
    spans: list[str] = []
    marker = _pick_marker(text)

    def stash_code(match: re.Match[str]) -> str:
        spans.append(f'{s.code_on}{match.group(1)}{s.code_off}')
        return f'{marker}{len(spans) - 1}{marker}'

    def restore_code(match: re.Match[str]) -> str:
        return spans[int(match.group(1))]

    text = _CODE_SPAN_RE.sub(stash_code, text)
    text = _STRIKE_RE.sub(lambda m: f'{s.strike_on}{m.group(1)}{s.strike_off}', text)
    text = _BOLD_RE.sub(lambda m: f'{s.bold_on}{m.group(2)}{s.bold_off}', text)
    text = _ITALIC_STAR_RE.sub(
        lambda m: f'{m.group(1)}{s.italic_on}{m.group(2)}{s.italic_off}', text
    )
    text = _ITALIC_UNDERSCORE_RE.sub(
        lambda m: f'{m.group(1)}{s.italic_on}{m.group(2)}{s.italic_off}', text
    )
    text = _LINK_RE.sub(
        lambda m: (
            f'{s.underline_on}{s.accent_on}{m.group(1)}'
            f'{s.underline_off}{s.accent_off} ({m.group(2)})'
        ),
        text,
    )

    if spans:
        text = re.sub(f'{marker}(\\d+){marker}', restore_code, text)
    return text
