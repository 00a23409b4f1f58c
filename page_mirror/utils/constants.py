"""
Shared constants for the page mirror.

Contains common configuration values used across multiple modules.
"""

# User agent sent with every request (page and assets)
DEFAULT_USER_AGENT = "PageMirror/1.0 (Website Downloader)"

# Default request timeout in seconds
DEFAULT_TIMEOUT = 30

# Name of the rewritten page inside the project directory
INDEX_FILENAME = "index.html"

# Subdirectories created for every project
PROJECT_SUBDIRS = ("assets", "css", "js", "images")

# Category used when the extension is unknown or missing
DEFAULT_CATEGORY = "assets"

# Extension to category lookup (case-sensitive)
EXTENSION_CATEGORIES = {
    "css": "css",
    "js": "js",
    "png": "images",
    "jpg": "images",
    "jpeg": "images",
    "gif": "images",
    "svg": "images",
    "webp": "images",
}

# Prefix for generated names when a reference has no usable filename
FALLBACK_ASSET_PREFIX = "asset_"
