from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from md_ansi.config import DEFAULT_STYLES, PLAIN_STYLES, MarkdownConfig


class Settings(BaseSettings):
    """Rendering options read from ``MD_ANSI_*`` environment variables."""

    if Path('.env').exists():
        model_config = SettingsConfigDict(
            env_prefix='MD_ANSI_', env_file='.env', env_file_encoding='utf-8', extra='ignore'
        )
    else:
        model_config = SettingsConfigDict(env_prefix='MD_ANSI_')

    # Disable to emit no escape sequences at all
    color: bool = True

    rule_width: int = 40
    rule_char: str = '\N{BOX DRAWINGS LIGHT HORIZONTAL}'

    bullet: str = '\N{BULLET}'
    quote_bar: str = '\N{BOX DRAWINGS LIGHT VERTICAL}'

    min_column_width: int = 3

    @field_validator('rule_width', 'min_column_width')
    def positive(cls, value: int) -> int:
        if value < 1:
            raise ValueError('must be at least 1')
        return value

    @field_validator('rule_char')
    def single_char(cls, value: str) -> str:
        if len(value) != 1:
            raise ValueError('rule_char must be exactly one character')
        return value

    def to_config(self) -> MarkdownConfig:
        return MarkdownConfig(
            styles=DEFAULT_STYLES if self.color else PLAIN_STYLES,
            rule_char=self.rule_char,
            rule_width=self.rule_width,
            bullet=self.bullet,
            quote_bar=self.quote_bar,
            min_column_width=self.min_column_width,
        )


def load_config() -> MarkdownConfig:
    """Build rendering configuration from the environment."""
    return Settings().to_config()
