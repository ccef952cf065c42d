"""Configuration and data models for Markdown to ANSI rendering."""

from dataclasses import dataclass, field, fields


@dataclass(frozen=True)
class AnsiStyles:
    """Escape sequence pairs used by the renderer.

    This is an immutable lookup table: every styled fragment is wrapped
    in an ``*_on`` / ``*_off`` pair taken from here.

    Attributes:
        reset: Full SGR reset
        bold_on/bold_off: Strong emphasis
        italic_on/italic_off: Emphasis
        strike_on/strike_off: Strikethrough (~~text~~)
        underline_on/underline_off: Link text underline
        dim_on/dim_off: Rules and blockquote bars
        accent_on/accent_off: Accent colour (cyan) for links and table headers
        code_on/code_off: Inline code spans and fenced code blocks
        heading_on/heading_off: Headings (bold + accent)
    """

    reset: str = '\x1b[0m'
    bold_on: str = '\x1b[1m'
    bold_off: str = '\x1b[22m'
    italic_on: str = '\x1b[3m'
    italic_off: str = '\x1b[23m'
    strike_on: str = '\x1b[9m'
    strike_off: str = '\x1b[29m'
    underline_on: str = '\x1b[4m'
    underline_off: str = '\x1b[24m'
    dim_on: str = '\x1b[2m'
    dim_off: str = '\x1b[22m'
    accent_on: str = '\x1b[36m'
    accent_off: str = '\x1b[39m'
    code_on: str = '\x1b[36m'
    code_off: str = '\x1b[39m'
    heading_on: str = '\x1b[1m\x1b[36m'
    heading_off: str = '\x1b[22m\x1b[39m'


DEFAULT_STYLES = AnsiStyles()

# No escape sequences at all (NO_COLOR-style output)
PLAIN_STYLES = AnsiStyles(
    **{f.name: '' for f in fields(AnsiStyles)},
)


@dataclass(frozen=True)
class MarkdownConfig:
    """Configuration for Markdown rendering.

    Attributes:
        styles: Escape sequence table (default: ANSI SGR colours)
        rule_char: Glyph repeated for horizontal rules (default: ─)
        rule_width: Fixed width of a rendered horizontal rule (default: 40)
        bullet: Glyph replacing unordered list markers (default: •)
        quote_bar: Glyph prefixed to blockquote lines (default: │)
        min_column_width: Lower bound for table column width (default: 3)
    """

    styles: AnsiStyles = field(default_factory=AnsiStyles)

    # Horizontal rule (---, ***, ___) is normalised to a fixed-width line
    rule_char: str = '\N{BOX DRAWINGS LIGHT HORIZONTAL}'  # ─
    rule_width: int = 40

    bullet: str = '\N{BULLET}'  # •
    quote_bar: str = '\N{BOX DRAWINGS LIGHT VERTICAL}'  # │

    min_column_width: int = 3


# Default configuration instance
DEFAULT_CONFIG = MarkdownConfig()
