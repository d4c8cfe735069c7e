"""Runtime configuration, read from STOREFRONT_* environment variables
or a local ``.env`` file."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


class StorefrontSettings(BaseSettings):

    data_dir: Path = Field(default=_DEFAULT_DATA_DIR)
    catalogue_file: str = "catalogue.csv"
    customer_file: str = "customer_info.txt"

    # Catalogue and customer variants
    require_descriptions: bool = False
    require_payment_details: bool = False

    log_level: str = "WARNING"
    log_format: str = "console"

    model_config = SettingsConfigDict(
        env_prefix="STOREFRONT_", env_file=".env", extra="ignore"
    )

    @property
    def catalogue_path(self) -> Path:
        return self.data_dir / self.catalogue_file

    @property
    def customer_path(self) -> Path:
        return self.data_dir / self.customer_file
