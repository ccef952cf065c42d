"""Tests for md_ansi converter helpers."""

from collections.abc import Iterator

import pytest

from md_ansi import DEFAULT_STYLES, PLAIN_STYLES, MarkdownConfig, render_chunks, render_markdown

PLAIN = MarkdownConfig(styles=PLAIN_STYLES)
S = DEFAULT_STYLES


def test_render_markdown_heading() -> None:
    assert render_markdown('# Title') == f'{S.heading_on}Title{S.heading_off}\n'


def test_render_markdown_empty() -> None:
    assert render_markdown('') == ''


def test_render_markdown_document() -> None:
    markdown = '## Plan\n\n- one\n- two\n\n| k | v |\n|---|---|\n| a | 1 |\n'
    assert render_markdown(markdown, PLAIN) == (
        'Plan\n\n• one\n• two\n\n| k   | v   |\n| --- | --- |\n| a   | 1   |\n'
    )


def test_render_chunks_matches_render_markdown() -> None:
    """Chunked input must render the same as the whole document."""
    markdown = 'Intro\n```\ncode | not table\n```\n| h | i |\n| - | - |\n| 1 | 2 |\ndone'
    chunks = [markdown[i : i + 4] for i in range(0, len(markdown), 4)]
    assert ''.join(render_chunks(chunks)) == render_markdown(markdown)


def test_render_chunks_is_lazy() -> None:
    """Output is yielded before the next chunk is pulled."""
    pulled: list[str] = []

    def source() -> Iterator[str]:
        for chunk in ('first line\n', 'second ', 'line'):
            pulled.append(chunk)
            yield chunk

    rendered = render_chunks(source(), PLAIN)
    assert next(rendered) == 'first line\n'
    assert pulled == ['first line\n'], 'Output must be yielded before pulling more input'
    assert list(rendered) == ['second line\n']


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
