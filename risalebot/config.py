"""Configuration loader for the Risale reading bot."""

import os
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field


class AppInfo(BaseModel):
    """Application metadata."""

    name: str = "Risale Bot"
    version: str = "1.0.0"
    language: str = "tr"
    log_level: str = "INFO"


class StorageConfig(BaseModel):
    """Locations of the Sözler data files."""

    data_dir: str = "./data/risale"
    sozler_dir: str = "./data/risale/sozler"
    index_dir: str = "./data/risale/index"
    toc_file: str = "toc.json"
    page_map_file: str = "page-map.json"
    dictionary_file: str = "dictionary.json"

    @property
    def toc_path(self) -> Path:
        return Path(self.index_dir) / self.toc_file

    @property
    def page_map_path(self) -> Path:
        return Path(self.index_dir) / self.page_map_file

    @property
    def dictionary_path(self) -> Path:
        return Path(self.index_dir) / self.dictionary_file

    def with_data_dir(self, data_dir: str | Path) -> "StorageConfig":
        """Return a copy whose chapter and index directories live under data_dir."""
        root = Path(data_dir)
        return self.model_copy(
            update={
                "data_dir": str(root),
                "sozler_dir": str(root / "sozler"),
                "index_dir": str(root / "index"),
            }
        )


class ReadingConfig(BaseModel):
    """Reading and navigation settings."""

    max_soz_count: int = 33
    fallback_page_count: int = 1041  # last known total when the page map is unavailable
    default_words_count: int = 15
    footnote_text_limit: int = 2500


class AppConfig(BaseModel):
    """Root application configuration."""

    app: AppInfo = Field(default_factory=AppInfo)
    storage: StorageConfig = Field(default_factory=StorageConfig)
    reading: ReadingConfig = Field(default_factory=ReadingConfig)


def load_config(config_path: str | Path = "config.yaml") -> AppConfig:
    """Load configuration from YAML file and environment variables.

    Args:
        config_path: Path to the YAML configuration file.

    Returns:
        Fully populated AppConfig instance.
    """
    load_dotenv()

    yaml_data: dict = {}
    config_file = Path(config_path)
    if config_file.exists():
        with open(config_file, encoding="utf-8") as f:
            yaml_data = yaml.safe_load(f) or {}

    config = AppConfig(**yaml_data)

    # Override from environment
    data_dir = os.getenv("RISALE_DATA_DIR")
    if data_dir:
        config.storage = config.storage.with_data_dir(data_dir)

    log_level = os.getenv("RISALE_LOG_LEVEL")
    if log_level:
        config.app.log_level = log_level.upper()

    return config
