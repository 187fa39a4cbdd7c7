"""Config file discovery.

Walk-up finder locates articlectl.toml, similar to how git finds .git/.
The ARTICLECTL_CONFIG env var short-circuits the walk; the --config CLI
flag bypasses discovery entirely (see :mod:`articlectl.config.settings`).
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "articlectl.toml"
CONFIG_ENV_VAR = "ARTICLECTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest articlectl.toml at or above *start* (default: cwd).

    An ARTICLECTL_CONFIG pointing at a missing file disables discovery.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    origin = (start or Path.cwd()).resolve()
    for directory in (origin, *origin.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
