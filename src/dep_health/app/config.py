from __future__ import annotations

from pathlib import Path

from platformdirs import PlatformDirs
from pydantic import BaseModel, Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


APP_NAME = "dep_health"


def _default_home() -> Path:
    """Get default home directory using platformdirs."""
    return Path(PlatformDirs(appname=APP_NAME, appauthor=False).user_cache_dir)


class DirectoryConfig(BaseModel):
    """Directory configuration with computed paths."""

    home: Path = Field(
        default_factory=_default_home,
        description="Base directory for dep_health data",
    )

    @computed_field
    @property
    def logs_dir(self) -> Path:
        """Logs directory for JSON-lines audit logs."""
        path = self.home / "logs"
        path.mkdir(parents=True, exist_ok=True)
        return path


class RegistryConfig(BaseModel):
    """npm registry configuration."""

    url: str = Field(
        default="https://registry.npmjs.org",
        description="Registry base URL; package documents are fetched from <url>/<name>",
    )

    downloads_url: str | None = Field(
        default=None,
        description=(
            "Optional weekly downloads endpoint, e.g. https://api.npmjs.org/downloads/point/last-week. "
            "Queried only when the registry document carries no 'downloads' field."
        ),
    )

    timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Timeout for each registry request",
    )


class GitHubConfig(BaseModel):
    """GitHub manifest fetching configuration."""

    raw_base_url: str = Field(
        default="https://raw.githubusercontent.com",
        description="Base URL serving raw repository files",
    )

    branches: list[str] = Field(
        default_factory=lambda: ["master", "main"],
        description="Branches tried in order when looking for package.json",
    )

    token: str | None = Field(
        default=None,
        description="GitHub personal access token (private repositories)",
    )

    timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Timeout for each GitHub request",
    )


class AnalysisConfig(BaseModel):
    """Analysis-specific settings."""

    max_workers: int = Field(
        default=1,
        ge=1,
        description="Concurrent registry lookups per audit; 1 keeps lookups sequential",
    )

    preview_limit: int = Field(
        default=10,
        ge=1,
        description="Number of top results included in an analysis response",
    )


class ServerConfig(BaseModel):
    """HTTP server settings."""

    host: str = Field(default="127.0.0.1")
    port: int = Field(default=3001, ge=1, le=65535)
    debug: bool = Field(
        default=False,
        description="Include exception messages in 500 responses",
    )


class LoggingConfig(BaseModel):
    """Logging settings."""

    logger_name: str = Field(default=APP_NAME)
    level: str = Field(default="INFO")
    console_output: bool = Field(default=True)
    json_file: bool = Field(
        default=False,
        description="Append JSON-lines logs to <logs_dir>/audit.jsonl",
    )


class AppConfig(BaseSettings):
    """Root application configuration.

    All configuration is loaded from environment variables with DEP_HEALTH_ prefix.
    Use double underscore for nested config: DEP_HEALTH_REGISTRY__TIMEOUT_SECONDS

    Example env vars:
        export DEP_HEALTH_REGISTRY__URL=https://registry.npmjs.org
        export DEP_HEALTH_REGISTRY__DOWNLOADS_URL=https://api.npmjs.org/downloads/point/last-week
        export DEP_HEALTH_GITHUB__TOKEN=ghp_xxxxxxxxxxxxx
        export DEP_HEALTH_GITHUB__BRANCHES='["main", "master"]'
        export DEP_HEALTH_ANALYSIS__MAX_WORKERS=4
        export DEP_HEALTH_SERVER__PORT=3001
        export DEP_HEALTH_LOGGING__LEVEL=DEBUG
        export DEP_HEALTH_DIRECTORIES__HOME=/custom/path
    """

    model_config = SettingsConfigDict(
        env_prefix="DEP_HEALTH_",
        env_nested_delimiter="__",
        frozen=True,
        extra="forbid",
    )

    directories: DirectoryConfig = Field(default_factory=DirectoryConfig)
    registry: RegistryConfig = Field(default_factory=RegistryConfig)
    github: GitHubConfig = Field(default_factory=GitHubConfig)
    analysis: AnalysisConfig = Field(default_factory=AnalysisConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
