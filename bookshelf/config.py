"""Configuration loader for the bookshelf service."""

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field


class AppInfo(BaseModel):
    """Application metadata."""

    name: str = "Bookshelf API"
    version: str = "1.0.0"
    description: str = "In-memory bookshelf catalog with CRUD endpoints."


class ServerConfig(BaseModel):
    """Uvicorn server configuration."""

    host: str = "127.0.0.1"
    port: int = 9000
    reload: bool = False


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Settings(BaseModel):
    """Root application configuration."""

    app: AppInfo = Field(default_factory=AppInfo)
    server: ServerConfig = Field(default_factory=ServerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_settings(config_path: str | Path = "config.yaml") -> Settings:
    """Load configuration from a YAML file and environment variables.

    Args:
        config_path: Path to the YAML configuration file. A missing file
            leaves every section at its defaults.

    Returns:
        Fully populated Settings instance.
    """
    load_dotenv()

    yaml_data: dict = {}
    config_file = Path(config_path)
    if config_file.exists():
        with open(config_file) as f:
            yaml_data = yaml.safe_load(f) or {}

    settings = Settings(**yaml_data)

    # Environment overrides
    if host := os.getenv("BOOKSHELF_HOST"):
        settings.server.host = host
    if port := os.getenv("BOOKSHELF_PORT"):
        settings.server.port = int(port)
    if level := os.getenv("BOOKSHELF_LOG_LEVEL"):
        settings.logging.level = level.upper()

    return settings
