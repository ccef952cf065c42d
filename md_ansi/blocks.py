"""Block-level line classification and rendering.

Everything here is stateless: the stream renderer decides which block a
line belongs to, these helpers turn lines and finished tables into text.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
import re

from md_ansi.config import DEFAULT_CONFIG, MarkdownConfig
from md_ansi.inline import render_inline
from md_ansi.utils import pad_visual, visual_len

FENCE = '```'

# At least two dash groups: `|---|` alone is not a separator, `|---|---|` is
_TABLE_SEPARATOR_RE = re.compile(r'^\s*\|?(\s*:?-+:?\s*\|)+\s*:?-+:?\s*\|?\s*$')

_HEADING_RE = re.compile(r'^\s*(#{1,6})\s+(.*)$')
_RULE_RE = re.compile(r'^\s*(-{3,}|\*{3,}|_{3,})\s*$')
_BLOCKQUOTE_RE = re.compile(r'^(\s*)>\s?(.*)$')
_ORDERED_ITEM_RE = re.compile(r'^(\s*)(\d+)\.\s+(.*)$')
_UNORDERED_ITEM_RE = re.compile(r'^(\s*)[-*+]\s+(.*)$')


@dataclass
class TableState:
    """Table collected so far: header cells and data rows."""

    header: list[str]
    rows: list[list[str]] = field(default_factory=list)


def is_fence(line: str) -> bool:
    """Check if line opens or closes a fenced code block."""
    return line.strip().startswith(FENCE)


def is_table_row(line: str) -> bool:
    """Check if line is a table candidate (contains a pipe)."""
    return '|' in line


def is_table_separator(line: str) -> bool:
    """Check if line is a header separator such as ``| --- | :-: |``."""
    return _TABLE_SEPARATOR_RE.match(line) is not None


def parse_table_row(line: str) -> list[str]:
    """Split a table row into trimmed cell texts.

    One leading and one trailing pipe are removed before splitting.

    Examples:
        >>> parse_table_row('| a | b |')
        ['a', 'b']
        >>> parse_table_row('a|b')
        ['a', 'b']
    """
    trimmed = line.strip()
    if trimmed.startswith('|'):
        trimmed = trimmed[1:]
    if trimmed.endswith('|'):
        trimmed = trimmed[:-1]
    return [cell.strip() for cell in trimmed.split('|')]


def _column_widths(table: TableState, config: MarkdownConfig) -> list[int]:
    """Calculate column widths from header and rows.

    The header defines the column count; extra cells in a row are ignored.
    """
    widths = [config.min_column_width] * len(table.header)
    for row in (table.header, *table.rows):
        for i, cell in enumerate(row[: len(widths)]):
            widths[i] = max(widths[i], visual_len(render_inline(cell, config.styles)))
    return widths


def _render_row(
    row: Sequence[str], widths: Sequence[int], config: MarkdownConfig, is_header: bool
) -> str:
    styles = config.styles
    cells = []
    for i, width in enumerate(widths):
        value = row[i] if i < len(row) else ''
        padded = pad_visual(render_inline(value, styles), width)
        if is_header:
            padded = (
                f'{styles.bold_on}{styles.accent_on}{padded}'
                f'{styles.bold_off}{styles.accent_off}'
            )
        cells.append(padded)
    return '| ' + ' | '.join(cells) + ' |'


def render_table(table: TableState, config: MarkdownConfig = DEFAULT_CONFIG) -> str:
    """Render a finished table.

    Layout:
        | Name | Age |
        | ---- | --- |
        | Bob  | 25  |

    Widths are measured on visible characters, so styled cells stay aligned.
    Rows shorter than the header get empty padded cells.

    Args:
        table: Collected header and rows
        config: Rendering configuration

    Returns:
        Table lines joined by newlines (no trailing newline)
    """
    widths = _column_widths(table, config)

    lines = [_render_row(table.header, widths, config, is_header=True)]
    lines.append('| ' + ' | '.join('-' * w for w in widths) + ' |')
    for row in table.rows:
        lines.append(_render_row(row, widths, config, is_header=False))

    return '\n'.join(lines)


def render_line(line: str, config: MarkdownConfig = DEFAULT_CONFIG) -> str:
    """Render one line outside of code blocks and tables.

    Checked in order, first match wins: heading, horizontal rule,
    blockquote, ordered item, unordered item, plain text.

    Args:
        line: Raw Markdown line (no newline)
        config: Rendering configuration

    Returns:
        Styled line (no newline); empty string for blank lines
    """
    if not line.strip():
        return ''

    styles = config.styles

    if match := _HEADING_RE.match(line):
        text = render_inline(match.group(2).strip(), styles)
        return f'{styles.heading_on}{text}{styles.heading_off}'

    if _RULE_RE.match(line):
        return f'{styles.dim_on}{config.rule_char * config.rule_width}{styles.dim_off}'

    if match := _BLOCKQUOTE_RE.match(line):
        indent, content = match.groups()
        text = render_inline(content.strip(), styles)
        return f'{indent}{styles.dim_on}{config.quote_bar}{styles.dim_off} {text}'

    if match := _ORDERED_ITEM_RE.match(line):
        indent, number, content = match.groups()
        return f'{indent}{number}. {render_inline(content, styles)}'

    if match := _UNORDERED_ITEM_RE.match(line):
        indent, content = match.groups()
        return f'{indent}{config.bullet} {render_inline(content, styles)}'

    return render_inline(line, styles)
