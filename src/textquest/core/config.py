"""Configuration management for textquest.

Configuration is handled with pydantic-settings, so every value can be
overridden through environment variables or a ``.env`` file.

Example:
    >>> from textquest.core.config import get_settings
    >>> settings = get_settings()
    >>> settings.game.default_max_hp
    1

Environment Variables:
    TEXTQUEST_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    TEXTQUEST_GAME_DEFAULT_MAX_HP: Max hp given to entities built without one
    TEXTQUEST_GAME_REPORT_REWARDS: Whether ``add_rewards`` reports rewards
    TEXTQUEST_GAME_RANDOM_SEED: Seed for the default combat selector
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from textquest.core import constants
from textquest.core.exceptions import ConfigurationError


class GameSettings(BaseSettings):
    """Default entity stats and engine behaviour.

    Attributes:
        default_name: Name given to entities built without one.
        default_max_hp: Starting max hp (hp defaults to it).
        default_attack: Starting base attack.
        default_defense: Starting base defense.
        default_agility: Starting base agility.
        default_gold: Starting gold.
        report_rewards: Whether granted rewards are reported to the hook.
        random_seed: Seed for the default combat selector, None for entropy.
    """

    model_config = SettingsConfigDict(
        env_prefix="TEXTQUEST_GAME_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    default_name: str = Field(
        default=constants.DEFAULT_ENTITY_NAME,
        min_length=1,
        description="Name given to unnamed entities",
    )
    default_max_hp: int = Field(
        default=constants.DEFAULT_MAX_HP,
        description="Starting maximum hit points",
    )
    default_attack: int = Field(
        default=constants.DEFAULT_ATTACK,
        ge=0,
        description="Starting base attack",
    )
    default_defense: int = Field(
        default=constants.DEFAULT_DEFENSE,
        ge=0,
        description="Starting base defense",
    )
    default_agility: int = Field(
        default=constants.DEFAULT_AGILITY,
        ge=0,
        description="Starting base agility",
    )
    default_gold: int = Field(
        default=constants.DEFAULT_GOLD,
        ge=0,
        description="Starting gold",
    )
    report_rewards: bool = Field(
        default=True,
        description="Report granted rewards to the reward hook",
    )
    random_seed: int | None = Field(
        default=None,
        description="Seed for the default combat selector",
    )

    @model_validator(mode="after")
    def validate_default_max_hp(self) -> "GameSettings":
        """Ensure default entities can be alive.

        Returns:
            Self if validation passes.

        Raises:
            ConfigurationError: If default_max_hp is below 1.
        """
        if self.default_max_hp < 1:
            raise ConfigurationError(
                f"default_max_hp ({self.default_max_hp}) must be at least 1",
                config_key="default_max_hp",
            )
        return self


class Settings(BaseSettings):
    """Top-level textquest settings.

    Attributes:
        app_name: Library name.
        app_version: Library version string.
        debug: Enable debug mode.
        log_level: Logging level.
        game: Entity defaults and engine behaviour.
    """

    model_config = SettingsConfigDict(
        env_prefix="TEXTQUEST_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    app_name: str = Field(
        default="textquest",
        description="Library name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Library version",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )

    game: GameSettings = Field(default_factory=GameSettings)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the settings singleton.

    Returns:
        The cached Settings instance.

    Raises:
        ConfigurationError: If configuration is missing or invalid.
    """
    try:
        return Settings()
    except ConfigurationError:
        raise
    except Exception as exc:
        raise ConfigurationError(
            f"Failed to load textquest settings: {exc}",
            details={"original_error": str(exc)},
        ) from exc


def clear_settings_cache() -> None:
    """Clear the settings cache, forcing a reload on next access.

    Mostly useful in tests, after environment variables change.
    """
    get_settings.cache_clear()


__all__ = [
    "GameSettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
