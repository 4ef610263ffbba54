"""Configuration settings for recipe example generation.

Settings are loaded from environment variables with .env file support via
pydantic-settings.

Environment variables:
    RECIPE_EXAMPLES_EXAMPLE_TYPE: Type tag written at the top of every document
    RECIPE_EXAMPLES_OUTPUT_DIR: Root directory for generated YAML files
    RECIPE_EXAMPLES_OVERWRITE: Replace YAML files that already exist

Example:
    >>> from recipe_examples.settings import settings
    >>> print(settings.output_dir)
    build/rewrite/examples

Note:
    Settings are loaded once at module import and frozen.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

EXAMPLE_TYPE = "specs.openrewrite.org/v1beta/example"


class Settings(BaseSettings):
    """Configuration for example extraction and the batch generator.

    Attributes:
        example_type: Value of the ``type`` key of every rendered document.
        output_dir: Directory under which one folder per source set is
                    created for the generated ``.yml`` files.
        overwrite: When false, existing output files are left untouched.
    """

    model_config = SettingsConfigDict(
        env_prefix="RECIPE_EXAMPLES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    example_type: str = EXAMPLE_TYPE
    output_dir: Path = Field(default=Path("build/rewrite/examples"))
    overwrite: bool = False


settings = Settings()
"""Global settings instance."""
