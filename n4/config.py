# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

import json
import logging
import posixpath
from pathlib import Path
from typing import Optional

from platformdirs import user_config_dir
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigurationError

APP_NAME = "n4"
CONFIG_FILENAME = "default.json"
DEFAULT_CONFIG_DIR = Path(user_config_dir(APP_NAME, appauthor=False))


def configure_logging(level: str | int) -> None:
    numeric = (
        level
        if isinstance(level, int)
        else getattr(logging, str(level).upper(), logging.INFO)
    )
    logging.getLogger("n4").setLevel(numeric)


class SiteConfig(BaseSettings):
    """
    Site configuration.

    - prod_host: production protocol + FQDN used for sitemap locations.
    - xml_priority: sitemap priority string, normally "0.64".
    - base_dir: content root name relative to local_content_dir, with a
      trailing "/" (e.g. "/content/").
    - local_content_dir: absolute directory holding base_dir.

    Values come from explicit arguments, then N4_* env vars, then `.env`.
    """

    prod_host: str = "https://localhost:8000"
    xml_priority: str = "0.64"
    base_dir: str = "/"
    local_content_dir: str = "/"

    # Logging
    log_level: str = "INFO"

    # Recursion guards
    max_scan_depth: int = Field(default=64, ge=1)
    max_content_depth: int = Field(default=16, ge=1)

    model_config = SettingsConfigDict(
        env_prefix="N4_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def local_path(self) -> str:
        return f"{self.local_content_dir}{self.base_dir}"

    def base_prefix(self) -> str:
        """
        Last segment of base_dir ("/content/" -> "content", "/" -> "").
        Also validates the trailing "/" that menu and sitemap building need.
        """
        if not self.base_dir.endswith("/"):
            raise ConfigurationError(
                f"Base dir is missing the trailing directory delimiter: {self.base_dir!r}"
            )
        return posixpath.basename(self.base_dir.rstrip("/"))


def default_config_path() -> Path:
    return DEFAULT_CONFIG_DIR / CONFIG_FILENAME


def load_config(path: Optional[Path | str] = None) -> SiteConfig:
    """
    Read the JSON config file (default: <user config dir>/n4/default.json).
    """
    config_path = Path(path) if path is not None else default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ConfigurationError(f"Couldn't open config file: {config_path}") from e
    except (OSError, ValueError) as e:
        raise ConfigurationError(f"Config couldn't be read: {config_path}: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigurationError(f"Config must be a JSON object: {config_path}")
    try:
        cfg = SiteConfig(**raw)
    except ValidationError as e:
        raise ConfigurationError(f"Config couldn't be deserialized: {e}") from e
    configure_logging(cfg.log_level)
    return cfg


def setup_config(config_dir: Optional[Path | str] = None) -> Path:
    """
    Create the config directory and a default config file. Never overwrites.
    Returns the path of the written file.
    """
    target_dir = Path(config_dir) if config_dir is not None else DEFAULT_CONFIG_DIR
    target_dir.mkdir(parents=True, exist_ok=True)
    config_path = target_dir / CONFIG_FILENAME
    if config_path.exists():
        raise ConfigurationError(f"Default config already exists: {config_path}")
    defaults = {
        "prod_host": "https://localhost:8000",
        "xml_priority": "0.64",
        "base_dir": "/",
        "local_content_dir": "/",
    }
    config_path.write_text(json.dumps(defaults, indent=2) + "\n", encoding="utf-8")
    return config_path
