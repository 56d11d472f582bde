from .loader import DEFAULT_IMAGE_URL, Settings, load_config, load_settings

__all__ = ["DEFAULT_IMAGE_URL", "Settings", "load_config", "load_settings"]
