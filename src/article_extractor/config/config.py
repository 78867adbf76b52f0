"""
Configuration management for article extraction using Pydantic.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Literal

import yaml
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

if TYPE_CHECKING:
    from article_extractor.extractor.manager import ArticleExtractor

log = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; ArticleExtractor/1.0)"
MAX_REDIRECTS = 10

# --- Nested Configuration Models ---


class ExtractionSettings(BaseModel):
    """Tunables of the extraction pipeline."""

    min_content_length: int = Field(default=100, ge=0, description="Minimum length of the final text.")
    min_paragraph_length: int = Field(default=25, ge=0, description="Minimum paragraph length to be scored.")
    excerpt_length: int = Field(default=200, ge=4, description="Target length of the excerpt.")
    parser: Literal["lxml", "html.parser"] = Field(default="lxml", description="BeautifulSoup tree builder.")
    debug: bool = Field(default=False, description="Log per-stage diagnostics at info level.")


class FetchSettings(BaseModel):
    """Settings of the HTTP fetch collaborator."""

    timeout: float = Field(default=30.0, gt=0, description="Total HTTP request timeout in seconds.")
    user_agent: str = Field(default=DEFAULT_USER_AGENT, description="User-Agent string for HTTP requests.")
    max_content_length: int = Field(
        default=10 * 1024 * 1024, gt=0, description="Maximum number of body bytes accepted."
    )
    max_redirects: int = Field(default=MAX_REDIRECTS, ge=0, description="Maximum redirect hops to follow.")

    @field_validator("max_redirects")
    @classmethod
    def validate_max_redirects(cls, v: int) -> int:
        """Redirect chains are capped at ten hops."""
        if v > MAX_REDIRECTS:
            raise ValueError(f"max_redirects must be at most {MAX_REDIRECTS}")
        return v


class MonitoringConfig(BaseModel):
    """Configuration for logging output."""

    log_level: str = Field(default="WARNING", description="Logging level (e.g., DEBUG, INFO, WARNING).")
    log_file: str | None = Field(default=None, description="Path to log file. If None, logs to console.")

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
    extraction: ExtractionSettings = Field(default_factory=ExtractionSettings)
    fetch: FetchSettings = Field(default_factory=FetchSettings)
    monitoring: MonitoringConfig = Field(default_factory=MonitoringConfig)

    model_config = SettingsConfigDict(
        env_prefix="ARTICLE_EXTRACTOR_", env_nested_delimiter="__", case_sensitive=False
    )

    @classmethod
    def from_yaml(cls, path: Path) -> Config:
        log.debug("Loading configuration from YAML file: %s", path)
        if not path.is_file():
            raise FileNotFoundError(f"Configuration file not found or is not a file: {path}")
        with open(path, "r", encoding="utf-8") as f:
            yaml_data = yaml.safe_load(f)
        if not yaml_data:
            log.warning("Configuration file is empty: %s. Using default settings.", path)
            return cls.model_validate({})
        return cls.model_validate(yaml_data)

    def extractor(self) -> ArticleExtractor:
        """Build an extractor wired with these settings."""
        from article_extractor.extractor.manager import ArticleExtractor

        return ArticleExtractor(settings=self.extraction, fetch_settings=self.fetch)
