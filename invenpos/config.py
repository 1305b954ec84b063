import logging
import os
from typing import Any, Dict, Optional

import yaml

from .errors import ConfigError
from .models import BusinessInfo

logger = logging.getLogger("invenpos.config")

DEFAULTS: Dict[str, Any] = {
    "business": {
        "name": "InvenPOS Restaurant",
        "address": "123 Main Street, New York, NY 10001",
        "phone": "+1 (555) 123-4567",
        "email": "contact@invenpos.com",
    },
    "receipt": {
        "base_url": "https://invenpos.com/receipt",
    },
}

DEFAULT_BUSINESS = BusinessInfo(**DEFAULTS["business"])
DEFAULT_RECEIPT_BASE_URL: str = DEFAULTS["receipt"]["base_url"]


def _read_yaml(path: str) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"cannot load {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: top level must be a mapping")
    logger.info("loaded config %s", path)
    return data


class StoreConfig:
    """Store settings for a given environment.

    ``<config_dir>/<environment>.yaml`` wins; ``common.yaml`` only fills keys
    the environment file leaves out; built-in defaults fill the rest.
    """

    def __init__(self, environment: str = "development", config_dir: str = "configs"):
        self.environment = environment
        self.config_dir = config_dir
        self.config_cache: Dict[str, Any] = {}
        self._load()

    def _load(self) -> None:
        env_file = os.path.join(self.config_dir, f"{self.environment}.yaml")
        if os.path.exists(env_file):
            self.config_cache.update(_read_yaml(env_file))

        common_file = os.path.join(self.config_dir, "common.yaml")
        if os.path.exists(common_file):
            for key, value in _read_yaml(common_file).items():
                if key not in self.config_cache:
                    self.config_cache[key] = value

        for key, value in DEFAULTS.items():
            if key not in self.config_cache:
                self.config_cache[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        # dotted access, e.g. "business.name"
        value = self.config_cache
        for k in key.split("."):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    def get_section(self, section: str) -> Dict[str, Any]:
        return self.config_cache.get(section, {})

    def business_info(self) -> BusinessInfo:
        defaults = DEFAULTS["business"]
        return BusinessInfo(
            name=self.get("business.name", defaults["name"]),
            address=self.get("business.address", defaults["address"]),
            phone=self.get("business.phone", defaults["phone"]),
            email=self.get("business.email", defaults["email"]),
        )

    def receipt_base_url(self) -> str:
        url = self.get("receipt.base_url", DEFAULTS["receipt"]["base_url"])
        return url.rstrip("/")


def load_config(environment: Optional[str] = None, config_dir: Optional[str] = None) -> StoreConfig:
    environment = environment or os.environ.get("INVENPOS_ENV", "development")
    config_dir = config_dir or os.environ.get("INVENPOS_CONFIG_DIR", "configs")
    return StoreConfig(environment, config_dir)
