"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
service starts with no environment at all and serves the Tyranids
roster from ``data/tyranids/tyranids.json``.
"""

import os
from dataclasses import dataclass
from typing import Optional


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Army Roster API")
    api_version: str = os.getenv("API_VERSION", "0.1.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Path to the JSON roster file.  Relative paths are resolved against
    # the working directory of the server process.
    dataset_path: str = os.getenv("DATASET_PATH", "data/tyranids/tyranids.json")

    # Bind address used by ``run.py``.
    host: str = os.getenv("HOST", "127.0.0.1")
    port: int = int(os.getenv("PORT", "8080"))

    # When false (the default) a dataset that cannot be read is reported
    # by ``GET /unit`` as a plain 404, the same as an unknown name.  Set
    # SPLIT_LOOKUP_ERRORS=true to answer such requests with a 500 instead.
    split_lookup_errors: bool = _env_flag("SPLIT_LOOKUP_ERRORS")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must be set before importing this module.
settings = Settings()
