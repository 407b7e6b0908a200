import tomllib
from pathlib import Path
from typing import Annotated, Literal

import tomlkit
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

CONFIG_DIR = Path.home() / ".config" / "lendmath"
CONFIG_FILE = CONFIG_DIR / "config.toml"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingSettings(BaseModel):
    level: LogLevel = "INFO"

    @field_validator("level", mode="before")
    def normalize_level(cls, level: str) -> str:  # noqa: N805
        return level.upper() if isinstance(level, str) else level


class DisplaySettings(BaseModel):
    # Decimal places used when presenting a rate as a percentage
    apy_decimals: Annotated[int, Field(ge=0, le=27)] = 4


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="LENDMATH_",
        env_nested_delimiter="__",
    )

    logging: LoggingSettings = LoggingSettings()
    display: DisplaySettings = DisplaySettings()


def load_config_from_file(config_path: Path) -> Settings:
    """
    Load settings from a TOML file. Values missing from the file are taken from `LENDMATH_`
    environment variables, then from the defaults.
    """

    return Settings(
        **tomllib.loads(
            config_path.read_text(),
        ),
    )


def save_config_to_file(config: Settings, config_path: Path = CONFIG_FILE) -> None:
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(
        tomlkit.dumps(
            config.model_dump(),
        ),
    )


settings = load_config_from_file(CONFIG_FILE) if CONFIG_FILE.exists() else Settings()
