"""Suite settings loaded from env/.env and the process environment."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigError

logger = logging.getLogger(__name__)

# Relative to the directory the suite is run from
DEFAULT_ENV_FILE = Path("env") / ".env"

DEFAULT_BASE_URL = "https://www.webdriveruniversity.com/"


class Settings(BaseSettings):
    """Values the suite reads from its environment.

    Field names match the keys in env/.env (case-insensitive). The viewport
    pair is only used when a new browser tab is opened and maximised; the
    retry count only by the launcher.
    """

    model_config = SettingsConfigDict(
        env_file=None,
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
    )

    base_url: str = DEFAULT_BASE_URL
    browser_engine: Literal["chromium", "firefox", "webkit"] = "chromium"
    headless: bool = True
    browser_width: int = Field(default=1920, ge=1)
    browser_height: int = Field(default=1080, ge=1)
    retry: int = Field(default=0, ge=0)
    # Milliseconds
    action_timeout: int = Field(default=30_000, ge=1)
    navigation_timeout: int = Field(default=60_000, ge=1)
    faker_seed: Optional[int] = None

    @property
    def viewport(self) -> dict[str, int]:
        return {"width": self.browser_width, "height": self.browser_height}

    @property
    def login_portal_url(self) -> str:
        return self.base_url.rstrip("/") + "/Login-Portal/index.html"


def _describe(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc']).upper()}: {err['msg']} (got {err['input']!r})"
        for err in error.errors()
    )


def load_settings(env_file: Optional[Path | str] = DEFAULT_ENV_FILE) -> Settings:
    """Build :class:`Settings` from ``env_file`` and the process environment.

    Values already present in the environment take precedence over the file,
    so ``RETRY=2 wdu-bdd smoke`` works without editing env/.env. Empty
    variables are ignored. A missing file is not an error; every key has a
    default.

    Raises:
        ConfigError: If a value cannot be converted or is out of range
    """
    if env_file is not None and not Path(env_file).is_file():
        logger.debug("Settings file %s not found, using defaults", env_file)
    try:
        settings = Settings(_env_file=env_file)
    except ValidationError as e:
        raise ConfigError(_describe(e)) from None
    logger.debug("Loaded settings: %r", settings)
    return settings
