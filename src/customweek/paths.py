"""Common filesystem paths for the project"""

import os
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]

CONFIG_DIR_ENV = "CUSTOMWEEK_CONFIG_DIR"


def config_dir() -> Path:
    """Return the path to the configuration directory.

    ``$CUSTOMWEEK_CONFIG_DIR`` takes precedence over ``<repo>/config``.
    """
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        return Path(override)
    return ROOT / "config"
