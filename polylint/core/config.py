"""
Configuration module - centralized settings for the lint core.
Uses pydantic-settings to load values from environment variables and .env file.
"""

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class LintSettings(BaseSettings):
    """
    Lint settings loaded from environment variables.

    Pydantic-settings automatically:
    1. Reads from environment variables prefixed with POLYLINT_ (highest priority)
    2. Falls back to .env file values
    3. Uses default values if neither exists

    List values are read from the environment as JSON:
        export POLYLINT_EXTERNAL_DIRS='["bower_components", "vendor"]'
    """

    model_config = SettingsConfigDict(
        env_prefix="POLYLINT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ---------------------------------------------------------------------------
    # PACKAGE LAYOUT
    # ---------------------------------------------------------------------------
    # ROOT_DIR: Directory that file identifiers are resolved against
    ROOT_DIR: str = "."

    # INCLUDE_EXTENSIONS: Files that belong to a package when linting it whole
    INCLUDE_EXTENSIONS: List[str] = [".html", ".htm", ".css", ".js"]

    # EXTERNAL_DIRS: Path segments that mark third-party dependencies.
    # Documents under them get analyzer warnings only, never rule warnings.
    EXTERNAL_DIRS: List[str] = ["bower_components", "node_modules"]

    # ---------------------------------------------------------------------------
    # DIRECTIVES AND FIXES
    # ---------------------------------------------------------------------------
    # DIRECTIVE_PREFIX: Keyword that starts an inline directive comment,
    # e.g. <!-- polylint disable undefined-elements -->
    DIRECTIVE_PREFIX: str = "polylint"

    # WRITE_FIXES: Persist edited files after applying fixes
    WRITE_FIXES: bool = True

    # ---------------------------------------------------------------------------
    # LOGGING
    # ---------------------------------------------------------------------------
    LOG_LEVEL: str = "INFO"


settings = LintSettings()
