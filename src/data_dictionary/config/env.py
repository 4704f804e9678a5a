"""Environment variable readers for data dictionary settings."""

import os
from typing import List, Optional


def _read(name: str, required: bool) -> Optional[str]:
    value = os.getenv(name)
    if value is None and required:
        raise KeyError(f"Data dictionary setting '{name}' must be set in the environment.")
    return value


def get_env_str(name: str, default: Optional[str] = None, required: bool = False) -> Optional[str]:
    """Read a setting as a string, or ``default`` when unset."""
    value = _read(name, required)
    return default if value is None else value


def get_env_list(
    name: str, default: Optional[List[str]] = None, required: bool = False, separator: str = ","
) -> Optional[List[str]]:
    """Read a separated setting (e.g. table names) as a list, dropping blank items."""
    value = _read(name, required)
    if value is None:
        return default
    return [item.strip() for item in value.split(separator) if item.strip()]
