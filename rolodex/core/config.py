"""Configuration management for the Rolodex."""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field
from rich.logging import RichHandler

# Load environment variables from .env file
load_dotenv()


class GlobalConfig(BaseModel):
    """Global runtime configuration."""

    # Paths
    workspace: Path = Field(
        default_factory=lambda: Path(os.getenv("ROLODEX_WORKSPACE", "rolodex.yaml"))
    )

    # Search
    search_max_results: int = Field(
        default_factory=lambda: int(os.getenv("ROLODEX_SEARCH_MAX_RESULTS", "10"))
    )
    search_min_query_length: int = Field(
        default_factory=lambda: int(
            os.getenv("ROLODEX_SEARCH_MIN_QUERY_LENGTH", "2")
        )
    )

    # Logging
    log_level: str = Field(
        default_factory=lambda: os.getenv("ROLODEX_LOG_LEVEL", "WARNING")
    )
    log_format: str = Field(
        default_factory=lambda: os.getenv("ROLODEX_LOG_FORMAT", "%(name)s - %(message)s")
    )


# Global configuration instance
config = GlobalConfig()


def get_config() -> GlobalConfig:
    """Get global configuration instance."""
    return config


def reload_config() -> GlobalConfig:
    """Reload configuration from environment."""
    load_dotenv(override=True)
    global config
    config = GlobalConfig()
    return config


def setup_logging(cfg: GlobalConfig) -> None:
    """Route log records through rich at the configured level."""
    logging.basicConfig(
        level=cfg.log_level.upper(),
        format=cfg.log_format,
        handlers=[RichHandler(show_path=False)],
        force=True,
    )
