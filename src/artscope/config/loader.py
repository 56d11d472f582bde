from pathlib import Path
from typing import Any, Dict

import yaml
from pydantic import BaseModel, Field, ValidationError

from artscope.errors import ConfigError
from artscope.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_CONFIG_PATH = Path("config/artscope.yaml")

API_BASE_URL = "https://api.artic.edu/api/v1"
DEFAULT_IMAGE_URL = (
    "https://www.artic.edu/iiif/2/82a87cf0-6082-a7f7-c2cf-0fc9283ed966/full/843,/0/default.jpg"
)


class ApiSettings(BaseModel):
    base_url: str = API_BASE_URL
    timeout_seconds: float = Field(default=20, gt=0)
    user_agent: str = "artscope/0.1"
    min_interval_seconds: float = Field(default=0, ge=0)


class ImageSettings(BaseModel):
    width: int = Field(default=843, gt=0)
    placeholder_url: str = DEFAULT_IMAGE_URL


class HydrationSettings(BaseModel):
    max_concurrency: int = Field(default=4, ge=1)


class BrowseSettings(BaseModel):
    featured_limit: int = Field(default=10, ge=1)
    random_artist_max_page: int = Field(default=1700, ge=1)


class Settings(BaseModel):
    """Typed view of config/artscope.yaml."""

    api: ApiSettings = Field(default_factory=ApiSettings)
    images: ImageSettings = Field(default_factory=ImageSettings)
    hydration: HydrationSettings = Field(default_factory=HydrationSettings)
    browse: BrowseSettings = Field(default_factory=BrowseSettings)


def load_config(path: Path | None = None) -> Dict[str, Any]:
    """
    Load artscope configuration from YAML file.

    Args:
        path: Optional path to the config file. Defaults to config/artscope.yaml

    Returns:
        Dictionary with configuration sections

    Raises:
        FileNotFoundError: If the config file doesn't exist
        ConfigError: If the file is not valid YAML or its structure is invalid
    """
    cfg_path = path or DEFAULT_CONFIG_PATH
    if not cfg_path.exists():
        raise FileNotFoundError(f"Config file not found: {cfg_path}")
    with cfg_path.open("r", encoding="utf-8") as f:
        try:
            config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Config file {cfg_path} is not valid YAML: {e}") from e

    # Validate structure
    if not isinstance(config, dict):
        raise ConfigError("Config must be a dictionary")
    if "version" not in config:
        raise ConfigError("Config must have 'version' field")

    for section in ["api", "images", "hydration", "browse"]:
        if section not in config or config[section] is None:
            config[section] = {}
        elif not isinstance(config[section], dict):
            raise ConfigError(f"Config section '{section}' must be a dictionary")

    return config


def load_settings(path: Path | None = None) -> Settings:
    """
    Load configuration and return it as a Settings model.

    An explicit path must exist. Without one, a missing default file
    yields the built-in defaults.

    Raises:
        FileNotFoundError: If an explicit path doesn't exist
        ConfigError: If the file or any setting is invalid
    """
    if path is None and not DEFAULT_CONFIG_PATH.exists():
        logger.debug(f"No config at {DEFAULT_CONFIG_PATH}, using defaults")
        return Settings()

    config = load_config(path)
    try:
        return Settings(
            api=ApiSettings(**config["api"]),
            images=ImageSettings(**config["images"]),
            hydration=HydrationSettings(**config["hydration"]),
            browse=BrowseSettings(**config["browse"]),
        )
    except ValidationError as e:
        raise ConfigError(f"Invalid config values: {e}") from e
