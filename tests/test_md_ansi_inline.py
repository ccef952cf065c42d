"""Tests for md_ansi inline styler."""

import pytest

from md_ansi.config import DEFAULT_STYLES, PLAIN_STYLES
from md_ansi.inline import render_inline

S = DEFAULT_STYLES

# ============================================================================
# Single substitutions
# ============================================================================


@pytest.mark.parametrize(
    ('markdown', 'expected'),
    [
        ('`code`', f'{S.code_on}code{S.code_off}'),
        ('~~gone~~', f'{S.strike_on}gone{S.strike_off}'),
        ('**bold**', f'{S.bold_on}bold{S.bold_off}'),
        ('__bold__', f'{S.bold_on}bold{S.bold_off}'),
        ('*italic*', f'{S.italic_on}italic{S.italic_off}'),
        ('_italic_', f'{S.italic_on}italic{S.italic_off}'),
        (
            '[docs](https://example.com)',
            f'{S.underline_on}{S.accent_on}docs{S.underline_off}{S.accent_off}'
            ' (https://example.com)',
        ),
    ],
)
def test_inline_styles(markdown: str, expected: str) -> None:
    """Each inline marker is replaced by its escape sequence pair."""
    assert render_inline(markdown) == expected


@pytest.mark.parametrize('text', ['plain text', '2 * 3', '**open', 'a ~ b', '[not a link]'])
def test_text_without_markers_is_unchanged(text: str) -> None:
    """Unmatched or absent markers leave the text as is."""
    assert render_inline(text) == text


# ============================================================================
# Ordering and interaction
# ============================================================================


def test_code_span_content_is_inert() -> None:
    """Markers inside a code span stay literal."""
    assert render_inline('`**x** _y_`') == f'{S.code_on}**x** _y_{S.code_off}'


def test_multiple_code_spans() -> None:
    assert render_inline('`a` and `b`') == (
        f'{S.code_on}a{S.code_off} and {S.code_on}b{S.code_off}'
    )


@pytest.mark.parametrize('literal', ['\x000\x00', '\ue0000\ue000', '\x00'])
def test_control_and_private_use_text_survives_code_spans(literal: str) -> None:
    """Literal text next to a code span is kept, never replaced by the span."""
    assert render_inline(f'a{literal} `b`') == f'a{literal} {S.code_on}b{S.code_off}'


def test_bold_and_italic_on_same_line() -> None:
    assert render_inline('**b** and *i*') == (
        f'{S.bold_on}b{S.bold_off} and {S.italic_on}i{S.italic_off}'
    )


def test_link_with_code_text() -> None:
    assert render_inline('[`api`](https://x.io)') == (
        f'{S.underline_on}{S.accent_on}{S.code_on}api{S.code_off}'
        f'{S.underline_off}{S.accent_off} (https://x.io)'
    )


def test_intraword_underscores_are_italicised() -> None:
    """Known heuristic limitation, kept for compatibility."""
    assert render_inline('snake_case_name') == f'snake{S.italic_on}case{S.italic_off}name'


def test_plain_styles_strip_markers() -> None:
    """Without colours, markers are removed and only text remains."""
    text = '**b** *i* ~~s~~ `c` [l](u)'
    assert render_inline(text, PLAIN_STYLES) == 'b i s c l (u)'


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
