"""Configuration file location, loading and writing for kok."""

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir
from pydantic import TypeAdapter, ValidationError

from kok_setup.constants import APP_NAME, CONFIG_FILENAME
from kok_setup.models import KokConfig

log = logging.getLogger(__name__)

CONFIG_DIR = Path(user_config_dir(APP_NAME, appauthor=False))
CONFIG_FILE = CONFIG_DIR / CONFIG_FILENAME

_CONFIG_ADAPTER: TypeAdapter[KokConfig] = TypeAdapter(KokConfig)


def serialize_config(config: KokConfig) -> str:
    """Return the config as 2-space indented JSON using kok-cli's key names."""
    return json.dumps(config.model_dump(by_alias=True), indent=2, ensure_ascii=False)


def parse_config(data: dict) -> KokConfig:
    """Validate a decoded JSON object into the matching provider record."""
    return _CONFIG_ADAPTER.validate_python(data)


def write_config(config: KokConfig, path: Path) -> None:
    """Replace the config file at path, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(serialize_config(config), encoding="utf-8")
    log.debug("wrote %s config to %s", config.type, path)


def load_config(path: Path) -> KokConfig | None:
    """Return the config stored at path, or None if it is missing or invalid."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        return None
    except (OSError, json.JSONDecodeError) as e:
        log.debug("could not read %s: %s", path, e)
        return None

    try:
        return parse_config(data)
    except ValidationError as e:
        log.debug("invalid config in %s: %s", path, e)
        return None
