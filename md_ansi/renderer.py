"""Streaming Markdown renderer: line assembly and block routing.

Text arrives in arbitrary chunks. Complete lines are appended to a line
buffer and a cursor walks over them, one state machine step per line.
A line is resolved as soon as the renderer can tell which block it
belongs to; the only construct that needs to see ahead is a table header,
which is known only once the separator line below it has arrived.
"""

from __future__ import annotations

from collections.abc import Callable
import enum
import logging

from md_ansi.blocks import (
    TableState,
    is_fence,
    is_table_row,
    is_table_separator,
    parse_table_row,
    render_line,
    render_table,
)
from md_ansi.config import DEFAULT_CONFIG, MarkdownConfig
from md_ansi.errors import StreamClosedError

LOGGER = logging.getLogger(__name__)

Sink = Callable[[str], None]

# Lines that must be buffered after a table candidate before it can be resolved
TABLE_LOOKAHEAD = 1


class Mode(enum.Enum):
    """Block context the next line is interpreted in."""

    NORMAL = 'normal'
    CODE = 'code'
    TABLE = 'table'


class MarkdownStreamRenderer:
    """Incremental Markdown to ANSI renderer.

    Feed text with ``write()`` as it arrives and call ``flush()`` once the
    stream ends. Rendered output goes to ``sink`` synchronously; each call
    receives complete line(s) terminated by a single newline.

    One renderer handles one stream. It is not thread-safe and cannot be
    reused after ``flush()``.

    Example:
        >>> import sys
        >>> renderer = MarkdownStreamRenderer(sys.stdout.write)
        >>> for token in ('# Ti', 'tle\\n', 'some **bold**'):
        ...     renderer.write(token)
        >>> renderer.flush()

    Attributes:
        config: Rendering configuration
    """

    def __init__(self, sink: Sink, config: MarkdownConfig | None = None) -> None:
        """Initialize renderer.

        Args:
            sink: Callable receiving rendered output strings
            config: Configuration for rendering (uses default if None)
        """
        self.config = config or DEFAULT_CONFIG
        self._sink = sink
        # Unterminated tail of the stream, never contains a newline
        self._buffer: str = ''
        # Complete lines; everything before the cursor is resolved
        self._lines: list[str] = []
        self._cursor: int = 0
        self._in_code_block: bool = False
        self._table: TableState | None = None
        self._closed: bool = False

    @property
    def mode(self) -> Mode:
        """Current block context."""
        if self._table is not None:
            return Mode.TABLE
        if self._in_code_block:
            return Mode.CODE
        return Mode.NORMAL

    @property
    def closed(self) -> bool:
        """Whether ``flush()`` was called."""
        return self._closed

    def write(self, chunk: str) -> None:
        """Feed more Markdown text.

        Emits every line that can be resolved with the text seen so far;
        may emit nothing.

        Args:
            chunk: Next piece of the stream, of any length

        Raises:
            StreamClosedError: If the renderer was already flushed
        """
        if self._closed:
            raise StreamClosedError('Cannot write to a flushed renderer')

        *lines, self._buffer = (self._buffer + chunk).split('\n')
        self._lines.extend(lines)
        self._drain(final=False)

    def flush(self) -> None:
        """Signal end of stream and emit everything still buffered.

        A pending table candidate without a separator becomes a plain line,
        an open table is rendered with the rows collected, and an open code
        block is closed without printing a closing fence.
        """
        if self._closed:
            LOGGER.warning('flush() called on an already flushed renderer, ignoring')
            return
        self._closed = True

        if self._buffer:
            self._lines.append(self._buffer)
            self._buffer = ''
        self._drain(final=True)

        if self._table is not None:
            LOGGER.debug('Closing table at end of stream (%d rows)', len(self._table.rows))
            self._close_table()
        if self._in_code_block:
            LOGGER.debug('Closing unterminated code block at end of stream')
            self._in_code_block = False
            self._emit(self.config.styles.code_off)

    # State machine

    def _drain(self, final: bool) -> None:
        """Resolve buffered lines until done or until look-ahead is missing.

        Args:
            final: End of stream; missing look-ahead no longer blocks
        """
        steps = {
            Mode.TABLE: self._step_table,
            Mode.CODE: self._step_code,
            Mode.NORMAL: self._step_normal,
        }
        while self._cursor < len(self._lines):
            if not steps[self.mode](self._lines[self._cursor], final):
                break

        # Drop resolved lines so the buffer only holds what is still pending
        del self._lines[: self._cursor]
        self._cursor = 0

    def _step_table(self, line: str, final: bool) -> bool:
        """Add a row to the open table, or close it without consuming the line."""
        assert self._table is not None
        if is_table_row(line) and not is_table_separator(line):
            self._table.rows.append(parse_table_row(line))
            self._cursor += 1
        else:
            LOGGER.debug('Table ended after %d rows', len(self._table.rows))
            self._close_table()
        return True

    def _step_code(self, line: str, final: bool) -> bool:
        """Pass code verbatim until the closing fence."""
        self._cursor += 1
        if is_fence(line):
            LOGGER.debug('Code block closed')
            self._in_code_block = False
            self._emit(self.config.styles.code_off)
        else:
            self._emit(line)
        return True

    def _step_normal(self, line: str, final: bool) -> bool:
        """Open a code block or table, or render a generic line.

        Returns:
            False when the line needs look-ahead that has not arrived yet
        """
        if is_fence(line):
            LOGGER.debug('Code block opened')
            self._in_code_block = True
            self._cursor += 1
            self._emit(self.config.styles.code_on)
            return True

        if is_table_row(line):
            lookahead = self._cursor + TABLE_LOOKAHEAD
            if lookahead < len(self._lines):
                if is_table_separator(self._lines[lookahead]):
                    LOGGER.debug('Table opened')
                    self._table = TableState(header=parse_table_row(line))
                    self._cursor = lookahead + 1
                    return True
            elif not final:
                LOGGER.debug('Waiting for the line after a table candidate')
                return False

        self._cursor += 1
        self._emit(render_line(line, self.config))
        return True

    def _close_table(self) -> None:
        assert self._table is not None
        table, self._table = self._table, None
        self._emit(render_table(table, self.config))

    def _emit(self, text: str) -> None:
        self._sink(text + '\n')
