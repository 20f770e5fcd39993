"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use the WP_README_ prefix (e.g., WP_README_ENV=production).

Settings can also be loaded from a .env file in the working directory.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use WP_README_ prefix.

    Examples:
        WP_README_DIR=wp-content/plugins/my-plugin
        WP_README_ENV=production
    """

    model_config = SettingsConfigDict(
        env_prefix="WP_README_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_ignore_empty=True,
        extra="ignore",
    )

    dir: str = Field(
        default=".",
        description="Directory searched for README.md when run from the command line",
    )

    env: Optional[str] = Field(
        default=None,
        description="Environment Name selecting only:<env> / not:<env> sections; unset disables them",
    )

    def environment_get(self) -> Optional[str]:
        """
        Return the Environment Name, treating an empty value as unset.

        Example:
            >>> AppSettings(env="").environment_get() is None
            True
            >>> AppSettings(env="production").environment_get()
            'production'
        """
        return self.env or None
