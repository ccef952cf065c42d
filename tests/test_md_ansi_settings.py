"""Tests for environment-driven configuration."""

from pydantic import ValidationError
import pytest

from md_ansi.config import DEFAULT_CONFIG, DEFAULT_STYLES, PLAIN_STYLES
from md_ansi.settings import Settings, load_config


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ('COLOR', 'RULE_WIDTH', 'RULE_CHAR', 'BULLET', 'QUOTE_BAR', 'MIN_COLUMN_WIDTH'):
        monkeypatch.delenv(f'MD_ANSI_{name}', raising=False)


def test_defaults_match_default_config() -> None:
    """Without environment variables the default configuration is used."""
    assert load_config() == DEFAULT_CONFIG


def test_color_can_be_disabled(monkeypatch: pytest.MonkeyPatch) -> None:
    """MD_ANSI_COLOR=false switches to escape-free styles."""
    monkeypatch.setenv('MD_ANSI_COLOR', 'false')
    assert load_config().styles == PLAIN_STYLES


def test_layout_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv('MD_ANSI_RULE_WIDTH', '12')
    monkeypatch.setenv('MD_ANSI_RULE_CHAR', '=')
    monkeypatch.setenv('MD_ANSI_BULLET', '-')
    monkeypatch.setenv('MD_ANSI_MIN_COLUMN_WIDTH', '1')

    config = Settings().to_config()

    assert config.rule_width == 12
    assert config.rule_char == '='
    assert config.bullet == '-'
    assert config.min_column_width == 1
    assert config.styles == DEFAULT_STYLES


@pytest.mark.parametrize(
    ('name', 'value'),
    [
        ('MD_ANSI_RULE_WIDTH', '0'),
        ('MD_ANSI_MIN_COLUMN_WIDTH', '-1'),
        ('MD_ANSI_RULE_CHAR', '=='),
        ('MD_ANSI_RULE_WIDTH', 'wide'),
    ],
)
def test_invalid_values_are_rejected(
    monkeypatch: pytest.MonkeyPatch, name: str, value: str
) -> None:
    monkeypatch.setenv(name, value)
    with pytest.raises(ValidationError):
        Settings()
