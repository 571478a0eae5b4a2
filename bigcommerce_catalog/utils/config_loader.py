"""
Configuration loader for the BigCommerce catalogue client
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "catalog_config.yml"


class RateLimitConfig(BaseModel):
    """Client-side request throttling"""

    enabled: bool = True
    requests_per_minute: int = Field(default=150, ge=1, le=10000)


class CatalogClientConfig(BaseModel):
    """BigCommerce categories client configuration"""

    api_base_url: str = "https://api.bigcommerce.com"
    # Failed attempts tolerated on a single page before giving up
    max_retries: int = Field(default=3, ge=0, le=10)
    retry_backoff_seconds: float = Field(default=1.0, ge=0.0)
    timeout_seconds: float = Field(default=30.0, gt=0.0)
    # BigCommerce caps ``limit`` at 250; None keeps the API default
    page_limit: Optional[int] = Field(default=None, ge=1, le=250)
    # Connection-level retries handled by the requests adapter
    transport_retries: int = Field(default=2, ge=0, le=10)
    rate_limit: RateLimitConfig = Field(default_factory=RateLimitConfig)


def load_catalog_config(config_path: Optional[Path] = None) -> CatalogClientConfig:
    """
    Load and validate the catalogue client configuration from a YAML file

    Args:
        config_path: Path to config file. Defaults to config/catalog_config.yml

    Returns:
        Validated CatalogClientConfig object

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValidationError: If config doesn't match schema
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    # Accept either a bare mapping or one nested under "bigcommerce"
    if isinstance(data.get("bigcommerce"), dict):
        data = data["bigcommerce"]

    try:
        config = CatalogClientConfig(**data)
        logger.info(f"Successfully loaded config from {config_path}")
        return config
    except ValidationError as e:
        logger.error(f"Config validation failed: {e}")
        raise
