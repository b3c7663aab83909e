"""Loader settings: enabled formats and validation mode."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .codecs import CODECS, available_formats
from .formats import ConfigFormat


class LoaderSettings(BaseModel):
    """Settings for a :class:`~config_file.loader.ConfigLoader`.

    ``formats`` defaults to every format whose decoder library is installed.
    TOML is always enabled, whether listed or not.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    formats: frozenset[ConfigFormat] = Field(
        default_factory=available_formats,
        description="Formats the loader accepts",
    )
    strict: bool = Field(
        default=False,
        description="Validate in pydantic strict mode (no type coercion)",
    )

    @field_validator("formats")
    @classmethod
    def validate_formats(cls, v: frozenset[ConfigFormat]) -> frozenset[ConfigFormat]:
        """Reject formats whose decoder is missing and add TOML."""
        for fmt in v:
            codec = CODECS[fmt]
            if not codec.available:
                raise ValueError(
                    f"{fmt.label} support requires '{codec.requires}'. "
                    f"Install it with: pip install 'config-file[{codec.extra}]'"
                )
        return v | {ConfigFormat.TOML}
