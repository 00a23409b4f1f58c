"""
Asset downloader for fetching and saving page resources.

Downloads one asset at a time into the project's category directories.
"""

import time
from typing import Dict, Optional, Set

from ..errors import AssetFetchError, NetworkError
from ..utils.log import get_logger
from ..utils.constants import FALLBACK_ASSET_PREFIX
from ..utils.paths import (
    resolve_url,
    classify_url,
    reference_filename,
    local_filename,
    get_asset_path,
    ensure_parent_dir,
)


class AssetDownloader:
    """
    Downloads page assets and writes them under the project directory.

    The set of already fetched URLs is owned by the caller and shared with
    the page fetch, so every absolute URL is requested at most once per run.
    """

    def __init__(
        self,
        project_dir: str,
        base_url: str,
        client,
        fetched_urls: Set[str]
    ):
        """
        Initialize the asset downloader.

        Args:
            project_dir: Project root directory
            base_url: Absolute URL of the mirrored page
            client: Object with an async get(url) returning a FetchedResponse
            fetched_urls: Absolute URLs already fetched in this run
        """
        self.project_dir = project_dir
        self.base_url = base_url
        self.client = client
        self.fetched_urls = fetched_urls
        self.logger = get_logger("downloader")

        # Track downloaded assets
        self._downloaded: Dict[str, str] = {}  # URL -> local path

    @property
    def downloaded_assets(self) -> Dict[str, str]:
        """Get mapping of URL to local path for downloaded assets."""
        return self._downloaded.copy()

    async def fetch_asset(self, reference: str) -> Optional[str]:
        """
        Download a single asset reference.

        Args:
            reference: Raw href/src value from the page

        Returns:
            Local file path if the asset was written, None if its URL
            had already been fetched

        Raises:
            InvalidURL: If the reference cannot be resolved
            AssetFetchError: If the download or the file write fails
        """
        url = resolve_url(self.base_url, reference)

        if url in self.fetched_urls:
            self.logger.debug(f"Already fetched, skipping: {url}")
            return None

        try:
            response = await self.client.get(url)
        except NetworkError as e:
            raise AssetFetchError(reference, e) from e

        self.fetched_urls.add(url)

        category = classify_url(url)
        local_path = get_asset_path(self.project_dir, category, self.asset_filename(reference))

        try:
            ensure_parent_dir(local_path)
            with open(local_path, 'wb') as f:
                f.write(response.content)
        except (OSError, ValueError) as e:
            raise AssetFetchError(reference, e) from e

        self._downloaded[url] = local_path
        self.logger.debug(f"Downloaded: {url} -> {local_path}")

        return local_path

    @staticmethod
    def asset_filename(reference: str) -> str:
        """
        Get the on-disk filename for a reference.

        Uses the same final path segment the rewriter puts in the page.
        When there is none (e.g. the path ends with '/'), a name is made
        from the current time; two such assets saved within the same
        second overwrite each other.

        Args:
            reference: Raw href/src value

        Returns:
            Filename string
        """
        filename = reference_filename(reference)
        if not filename:
            return f"{FALLBACK_ASSET_PREFIX}{int(time.time())}"
        return local_filename(filename)
