"""
Configuration management for metascraper using Pydantic.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

import yaml
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# --- Setup Logging ---
log = logging.getLogger(__name__)

# --- Nested Configuration Models ---


class ParserSettings(BaseModel):
    """Configuration for HTML parsing and text extraction."""

    features: str = Field(
        default="html.parser",
        description="BeautifulSoup tree builder (html.parser, lxml, html5lib).",
    )
    skip_text_tags: List[str] = Field(
        default_factory=lambda: ["meta", "script", "style"],
        description="Elements whose contents never count as visible text.",
    )

    @field_validator("skip_text_tags")
    @classmethod
    def normalize_skip_tags(cls, v: List[str]) -> List[str]:
        """Lower-case tag names and ensure at least one remains."""
        tags = [tag.strip().lower() for tag in v if tag and tag.strip()]
        if not tags:
            raise ValueError("skip_text_tags must contain at least one tag")
        return tags


class FetchConfig(BaseModel):
    """Configuration for retrieving pages over HTTP."""

    timeout: float = Field(default=30.0, gt=0, description="HTTP request timeout in seconds.")
    user_agent: str = Field(
        default="metascraper/0.1.0",
        description="User-Agent string for HTTP requests.",
    )
    follow_redirects: bool = Field(default=True, description="Whether to follow HTTP redirects.")


class MonitoringConfig(BaseModel):
    """Configuration for logging."""

    log_level: str = Field(default="INFO", description="Logging level (e.g., DEBUG, INFO, WARNING).")
    log_file: str | None = Field(
        default=None,
        description="Path to log file. If None, logs to console.",
    )
    json_logs: bool = Field(default=False, description="Render console logs as JSON lines.")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("log_file", mode="before")
    @classmethod
    def create_parent_dir(cls, v: str | Path | None) -> str | None:
        if v is None:
            return None
        path = Path(v)
        path.parent.mkdir(parents=True, exist_ok=True)
        return str(path)


# --- Main Configuration Class ---


class Config(BaseSettings):
    parser: ParserSettings = Field(default_factory=ParserSettings)
    fetch: FetchConfig = Field(default_factory=FetchConfig)
    monitoring: MonitoringConfig = Field(default_factory=MonitoringConfig)

    model_config = SettingsConfigDict(env_prefix="METASCRAPER_", env_nested_delimiter="__", case_sensitive=False)

    @classmethod
    def from_yaml(cls, path: Path) -> Config:
        log.debug("Loading configuration from YAML file: %s", path)
        if not path.is_file():
            raise FileNotFoundError(f"Configuration file not found or is not a file: {path}")
        with open(path, "r", encoding="utf-8") as f:
            yaml_data = yaml.safe_load(f)
        if not yaml_data:
            log.warning("Configuration file is empty: %s. Using default settings.", path)
            return cls()
        return cls(**yaml_data)


def find_config_file() -> Path | None:
    current_dir = Path.cwd()
    paths_to_check = [
        current_dir / "metascraper.yaml",
        current_dir / "metascraper.yml",
    ]
    for path in paths_to_check:
        if path.exists():
            return path
    return None


def load_config(path: Path | None = None) -> Config:
    """Load configuration from `path`, a discovered file, or defaults."""
    config_path = path or find_config_file()
    if config_path is None:
        log.debug("No config file found. Using default settings.")
        return Config()
    return Config.from_yaml(config_path)
