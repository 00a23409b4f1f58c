"""
Utility modules for the page mirror.

Contains logging, URL/path handling utilities, and constants.
"""

from .log import setup_logger, get_logger
from .paths import (
    resolve_url,
    classify_url,
    reference_filename,
    get_asset_path,
    create_project_structure,
    ensure_dir,
)
from .constants import (
    DEFAULT_USER_AGENT,
    DEFAULT_TIMEOUT,
    INDEX_FILENAME,
    PROJECT_SUBDIRS,
)

__all__ = [
    "setup_logger",
    "get_logger",
    "resolve_url",
    "classify_url",
    "reference_filename",
    "get_asset_path",
    "create_project_structure",
    "ensure_dir",
    "DEFAULT_USER_AGENT",
    "DEFAULT_TIMEOUT",
    "INDEX_FILENAME",
    "PROJECT_SUBDIRS",
]
