"""Configuration schema for data dictionary generation."""

import logging
from enum import Enum
from typing import Any, List

from pydantic import BaseModel, Field, field_validator

from data_dictionary.config.env import get_env_list, get_env_str

logger = logging.getLogger(__name__)

FORMAT_ENV_VAR = "DATA_DICTIONARY_FORMAT"
EXCLUDE_TABLES_ENV_VAR = "DATA_DICTIONARY_EXCLUDE_TABLES"


class OutputFormat(str, Enum):
    """Supported output representations.

    ``RAW`` is the fallback for any unrecognized format value: the collected
    dictionary is returned without serialization.
    """

    JSON = "json"
    YAML = "yaml"
    MARKDOWN = "markdown"
    RAW = "raw"


class GeneratorConfig(BaseModel):
    """Options for a single data dictionary generation run."""

    format: OutputFormat = Field(
        default=OutputFormat.JSON,
        description="Output representation (json, yaml, markdown; anything else is raw)",
    )
    exclude_tables: List[str] = Field(
        default_factory=list,
        description="Table names skipped during collection (case-insensitive)",
    )

    @field_validator("format", mode="before")
    @classmethod
    def coerce_format(cls, v: Any) -> OutputFormat:
        """Map unrecognized format values onto the raw fallback."""
        if isinstance(v, OutputFormat):
            return v
        if isinstance(v, str):
            try:
                return OutputFormat(v.strip().lower())
            except ValueError:
                pass
        logger.debug("Unrecognized output format %r, falling back to raw output", v)
        return OutputFormat.RAW

    @classmethod
    def from_env(cls) -> "GeneratorConfig":
        """Build a configuration from environment variables.

        Reads ``DATA_DICTIONARY_FORMAT`` (default ``json``) and
        ``DATA_DICTIONARY_EXCLUDE_TABLES`` (comma-separated).
        """
        return cls(
            format=get_env_str(FORMAT_ENV_VAR, OutputFormat.JSON.value),
            exclude_tables=get_env_list(EXCLUDE_TABLES_ENV_VAR, []),
        )
