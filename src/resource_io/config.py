"""Configuration constants and .env parsing."""

from __future__ import annotations

import os
from pathlib import Path


def read_env_file(keys: list[str]) -> dict[str, str]:
    """Parse .env file and return values for requested keys.

    Does NOT load into os.environ; callers decide what to do with values.
    """
    env_file = Path.cwd() / ".env"
    try:
        content = env_file.read_text()
    except OSError:
        return {}

    result: dict[str, str] = {}
    wanted = set(keys)

    for line in content.splitlines():
        trimmed = line.strip()
        if not trimmed or trimmed.startswith("#"):
            continue
        eq_idx = trimmed.find("=")
        if eq_idx == -1:
            continue
        key = trimmed[:eq_idx].strip()
        if key not in wanted:
            continue
        value = trimmed[eq_idx + 1 :].strip()
        if (value.startswith('"') and value.endswith('"')) or (value.startswith("'") and value.endswith("'")):
            value = value[1:-1]
        if value:
            result[key] = value

    return result


def parse_package_list(value: str) -> tuple[str, ...]:
    """Split a comma-separated list of package names, dropping blanks."""
    return tuple(name.strip() for name in value.split(",") if name.strip())


# Read config values from .env (falls back to os.environ).
_env_config = read_env_file(["RESOURCE_IO_PACKAGES", "RESOURCE_IO_LOG_LEVEL"])

RESOURCE_PACKAGES: tuple[str, ...] = parse_package_list(
    os.environ.get("RESOURCE_IO_PACKAGES") or _env_config.get("RESOURCE_IO_PACKAGES", "")
)
LOG_LEVEL: str = (os.environ.get("RESOURCE_IO_LOG_LEVEL") or _env_config.get("RESOURCE_IO_LOG_LEVEL", "WARNING")).upper()
