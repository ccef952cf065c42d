"""Utility functions for Markdown to ANSI conversion."""

import re

# SGR sequences only; that is all the renderer ever produces
_ANSI_SGR_RE = re.compile(r'\x1b\[[0-9;]*m')


def strip_ansi(text: str) -> str:
    """Remove SGR escape sequences from text.

    Examples:
        >>> strip_ansi('\\x1b[1mbold\\x1b[22m')
        'bold'
    """
    return _ANSI_SGR_RE.sub('', text)


def visual_len(text: str) -> int:
    """Calculate the on-screen length of styled text.

    Escape sequences take no columns, so they are stripped before
    measuring. Table alignment depends on every width being computed
    through this function.

    Args:
        text: Text possibly containing escape sequences

    Returns:
        Number of characters left once escape sequences are removed

    Examples:
        >>> visual_len('plain')
        5
        >>> visual_len('\\x1b[36mcode\\x1b[39m')
        4
    """
    return len(strip_ansi(text))


def pad_visual(text: str, width: int) -> str:
    """Pad styled text with trailing spaces up to a visual width."""
    return text + ' ' * max(0, width - visual_len(text))
