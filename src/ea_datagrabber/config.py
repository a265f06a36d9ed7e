"""Configuration loading and validation for the EA data grabber."""

from pathlib import Path
from typing import Optional
import yaml
from pydantic import BaseModel, Field
from dotenv import load_dotenv
import os


class ListingConfig(BaseModel):
    """Blob container endpoint and HTTP settings."""
    listing_url: str = "https://emidatasets.blob.core.windows.net/publicdata"
    datasets_url: str = "https://emidatasets.blob.core.windows.net/publicdata/Datasets"
    request_timeout: float = Field(default=30.0, gt=0)
    binary_timeout: float = Field(default=60.0, gt=0)
    max_pages: Optional[int] = Field(default=None, ge=1)
    user_agent: str = "ea-datagrabber"


class PathsConfig(BaseModel):
    """Local paths configuration."""
    output_dir: Path = Field(default_factory=lambda: Path.home() / "Downloads")


class Config(BaseModel):
    """Main application configuration."""
    listing: ListingConfig = Field(default_factory=ListingConfig)
    paths: PathsConfig = Field(default_factory=PathsConfig)

    @classmethod
    def load(cls, config_path: str = "config.yaml") -> "Config":
        """Load configuration from YAML file and environment variables.

        A missing config file is not an error; defaults are used instead.
        """
        load_dotenv()

        config_dict = {}
        if Path(config_path).exists():
            with open(config_path) as f:
                config_dict = yaml.safe_load(f) or {}

        # Override with environment variables if present
        if os.getenv("EA_LISTING_URL"):
            config_dict.setdefault("listing", {})["listing_url"] = os.getenv("EA_LISTING_URL")
        if os.getenv("EA_OUTPUT_DIR"):
            config_dict.setdefault("paths", {})["output_dir"] = os.getenv("EA_OUTPUT_DIR")

        return cls(**config_dict)

    def ensure_directories(self) -> None:
        """Create the output directory if it doesn't exist."""
        self.paths.output_dir.mkdir(parents=True, exist_ok=True)
