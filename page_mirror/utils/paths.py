"""
Path and URL utilities for the page mirror.

Provides URL resolution, asset classification, filename derivation,
and project directory management.
"""

import os
import re
from typing import Dict, Optional
from urllib.parse import urljoin, urlsplit, urlunsplit, unquote

from ..errors import InvalidURL
from .constants import (
    DEFAULT_CATEGORY,
    EXTENSION_CATEGORIES,
    PROJECT_SUBDIRS,
)

_CONTROL_CHARS = re.compile(r'[\x00-\x1f\x7f]')


def resolve_url(base_url: str, reference: str) -> str:
    """
    Resolve a possibly-relative reference against a base URL.

    Scheme-relative ('//host/x'), path-relative ('img/a.png') and
    root-relative ('/s/a.css') references are all supported; the query
    and fragment of the reference are kept. The result is normalized
    (lower-case scheme and host, '/' for an empty path) so resolving it
    against itself returns it unchanged.

    Args:
        base_url: Absolute URL of the page
        reference: Raw attribute value taken from the markup

    Returns:
        Absolute URL string

    Raises:
        InvalidURL: If the joined URL cannot be parsed or has no scheme/host
    """
    reference = (reference or "").strip()

    try:
        joined = urljoin(base_url, reference)
        parsed = urlsplit(joined)
        # Accessing the port validates it
        parsed.port
    except ValueError as e:
        raise InvalidURL(reference or base_url, str(e)) from e

    if not parsed.scheme or not parsed.netloc:
        raise InvalidURL(reference or base_url)

    return urlunsplit((
        parsed.scheme.lower(),
        parsed.netloc.lower(),
        parsed.path or '/',
        parsed.query,
        parsed.fragment
    ))


def get_file_extension(url: str) -> str:
    """
    Get the extension of the last path segment of a URL.

    A segment without a dot is treated as an HTML document.

    Args:
        url: Absolute URL

    Returns:
        Extension without the leading dot, e.g. 'css'
    """
    path = urlsplit(url).path
    segment = path.replace('\\', '/').rsplit('/', 1)[-1]

    if '.' not in segment:
        return 'html'

    return segment.rsplit('.', 1)[1]


def classify_url(url: str) -> str:
    """
    Determine the asset category of a URL from its file extension.

    Only the extension of the final path segment matters; host, query
    string and fragment never change the result.

    Args:
        url: Absolute URL

    Returns:
        Category string ('css', 'js', 'images' or 'assets')
    """
    return EXTENSION_CATEGORIES.get(get_file_extension(url), DEFAULT_CATEGORY)


def reference_filename(reference: str) -> Optional[str]:
    """
    Get the final path segment of a reference, without query or fragment.

    Args:
        reference: Raw or absolute URL

    Returns:
        Filename string, or None if the path is empty or ends with '/'.
        A backslash counts as a path separator, as it does in browsers.
    """
    try:
        path = urlsplit((reference or "").strip()).path
    except ValueError:
        return None

    segment = path.replace('\\', '/').rsplit('/', 1)[-1]

    if segment in ('', '.', '..'):
        return None

    return segment


def local_filename(filename: str) -> str:
    """
    Convert a URL filename to the name used on disk.

    Percent-escapes are decoded so the file matches what a browser looks
    up for the rewritten reference.

    Args:
        filename: Filename as it appears in the URL

    Returns:
        Safe filename string
    """
    name = unquote(filename).replace('/', '_').replace('\\', '_')
    # NUL and other control characters are not valid in filenames
    name = _CONTROL_CHARS.sub('_', name)

    if name in ('', '.', '..'):
        return filename.replace('.', '_') or '_'

    return name


def get_asset_path(project_dir: str, category: str, filename: str) -> str:
    """
    Generate the local path for an asset.

    Args:
        project_dir: Project root directory
        category: Asset category ('css', 'js', 'images', 'assets')
        filename: Name of the file on disk

    Returns:
        Local file path for the asset
    """
    return os.path.join(project_dir, category, filename)


def ensure_dir(path: str) -> None:
    """
    Ensure a directory exists, creating it if necessary.

    Args:
        path: Directory path to ensure exists
    """
    os.makedirs(path, exist_ok=True)


def ensure_parent_dir(file_path: str) -> None:
    """
    Ensure the parent directory of a file exists.

    Args:
        file_path: File path whose parent directory should exist
    """
    parent = os.path.dirname(file_path)
    if parent:
        ensure_dir(parent)


def create_project_structure(project_dir: str) -> Dict[str, str]:
    """
    Create the project directory and its fixed subdirectories.

    Safe to call when some or all of them already exist.

    Args:
        project_dir: Project root directory

    Returns:
        Dictionary of created directory paths
    """
    dirs = {'root': project_dir}
    for name in PROJECT_SUBDIRS:
        dirs[name] = os.path.join(project_dir, name)

    for dir_path in dirs.values():
        ensure_dir(dir_path)

    return dirs
