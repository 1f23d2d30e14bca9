"""Build configuration management."""

from functools import lru_cache
from pathlib import Path

from .constants import CONFIG_PATH, PROJECT_DIR
from .schemas import BuildConfig
from .utils import load_json


@lru_cache(maxsize=4)
def get_config(config_path: str | Path | None = None) -> BuildConfig:
    """
    Load build configuration from build_config.json.

    When no path is given and the project has no build_config.json, the
    defaults (assets/resultados csv -> assets/data/resultados.json) are used.
    Configuration is cached after first load.

    Raises:
        FileNotFoundError: If an explicit config_path doesn't exist
        ValueError: If the config file has invalid structure

    Example:
        from oplbuild.config import get_config
        config = get_config()
        print(f"Reading exports from: {config.csv_dir}")
    """
    if config_path is None:
        if not CONFIG_PATH.exists():
            return BuildConfig()
        config_path = CONFIG_PATH
    return load_json(config_path, schema=BuildConfig)


def resolve_path(value: str | Path) -> Path:
    """Resolve a configured path; relative paths are relative to the project root."""
    path = Path(value)
    if path.is_absolute():
        return path
    return PROJECT_DIR / path


def get_csv_dir(config: BuildConfig | None = None) -> Path:
    """Get the input directory of OPL exports."""
    return resolve_path((config or get_config()).csv_dir)


def get_output_path(config: BuildConfig | None = None) -> Path:
    """Get the path of the results document."""
    return resolve_path((config or get_config()).output_path)
