# src/imgarchive/config.py

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from .errors import ConfigUnavailable

DEFAULT_RUNTIME = "docker"
CONFIG_ENV_VAR = "IMGARCHIVE_CONFIG"
DEFAULT_CONFIG_PATH = Path("~/.config/imgarchive/config.yaml")


def _env_path(name: str) -> Path | None:
    value = os.environ.get(name)
    return Path(value).expanduser().absolute() if value else None


@dataclass
class Config:
    """Archive directory and image settings.

    Values come from the environment when set:
        IMAGE_FOLDER       - directory holding the <name>.tar archives
        API_IMAGE_NAME     - image saved by ``archive save``
        CONTAINER_RUNTIME  - runtime executable (docker, podman)

    ``Config.load()`` fills anything the environment leaves unset from the
    YAML config file.
    """

    image_folder: Path | None = field(default_factory=lambda: _env_path("IMAGE_FOLDER"))
    api_image_name: str | None = field(
        default_factory=lambda: os.environ.get("API_IMAGE_NAME") or None
    )
    runtime: str = field(
        default_factory=lambda: os.environ.get("CONTAINER_RUNTIME", DEFAULT_RUNTIME)
    )

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """Build a validated config from the environment and the YAML file.

        The file is looked up at *path*, then $IMGARCHIVE_CONFIG, then
        ~/.config/imgarchive/config.yaml. A missing file is fine as long as
        the environment supplies the required values.

        Raises:
            ConfigUnavailable: If the file is unreadable or invalid, or a
                required value is missing.
        """
        cfg = cls()
        config_path = (path or _env_path(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH).expanduser()

        if config_path.exists():
            data = _read_yaml(config_path)
            if cfg.image_folder is None and data.get("image_folder"):
                cfg.image_folder = Path(str(data["image_folder"])).expanduser().absolute()
            if cfg.api_image_name is None and data.get("api_image_name"):
                cfg.api_image_name = str(data["api_image_name"])
            if "CONTAINER_RUNTIME" not in os.environ and data.get("runtime"):
                cfg.runtime = str(data["runtime"])
        elif path is not None:
            raise ConfigUnavailable(f"Config file not found: {config_path}")

        cfg.validate()
        return cfg

    def validate(self) -> None:
        missing = [
            name
            for name in ("image_folder", "api_image_name")
            if not getattr(self, name)
        ]
        if missing:
            raise ConfigUnavailable(f"Missing required settings: {', '.join(missing)}")


def _read_yaml(path: Path) -> dict:
    try:
        data = yaml.safe_load(path.read_text())
    except OSError as e:
        raise ConfigUnavailable(f"Could not read config {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigUnavailable(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigUnavailable(f"Config root must be a mapping: {path}")
    return data
