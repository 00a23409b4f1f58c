"""
Page mirroring pipeline.

Orchestrates the mirroring process: directory setup, page fetch, asset
extraction, downloading, and link rewriting.
"""

import os
import time
from dataclasses import dataclass, field
from typing import Dict, List, Set

from rich.markup import escape

from .client import HttpClient
from .extractor import AssetExtractor
from .downloader import AssetDownloader
from .rewrite import LinkRewriter
from ..errors import FatalFetchError, MirrorError, NetworkError
from ..utils.log import get_logger, create_progress
from ..utils.constants import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT, INDEX_FILENAME
from ..utils.paths import resolve_url, create_project_structure


@dataclass
class MirrorResult:
    """Results of mirroring one page."""

    base_url: str
    project_dir: str
    index_path: str = ""
    references_found: int = 0
    saved_assets: List[str] = field(default_factory=list)
    skipped: int = 0
    failed: List[Dict[str, str]] = field(default_factory=list)
    duration_seconds: float = 0.0

    @property
    def assets_downloaded(self) -> int:
        return len(self.saved_assets)


class MirrorPipeline:
    """
    Mirrors a single page and its stylesheets, scripts and images.

    Runs strictly in sequence. Only a failure to set up the project
    directory or to fetch the page itself ends the run early; failed
    assets are recorded in the result and skipped.
    """

    def __init__(
        self,
        url: str,
        project_dir: str,
        client=None,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        show_progress: bool = True
    ):
        """
        Initialize the pipeline.

        Args:
            url: Absolute URL of the page to mirror
            project_dir: Directory that receives index.html and the assets
            client: Optional HTTP client; an HttpClient is created per run if omitted
            timeout: Request timeout in seconds for the default client
            user_agent: User agent for the default client
            show_progress: Display a progress bar while downloading assets

        Raises:
            InvalidURL: If url is not an absolute URL
        """
        self.base_url = resolve_url(url, "")
        self.project_dir = project_dir
        self.timeout = timeout
        self.user_agent = user_agent
        self.show_progress = show_progress
        self.logger = get_logger("pipeline")

        self._client = client

        # Absolute URLs requested during this run, page included
        self._fetched_urls: Set[str] = set()

        self.extractor = AssetExtractor()
        self.rewriter = LinkRewriter()

    async def run(self) -> MirrorResult:
        """
        Mirror the page.

        Returns:
            MirrorResult with the saved files and per-asset failures

        Raises:
            OSError: If the project directories cannot be created
            FatalFetchError: If the page cannot be fetched
        """
        if self._client is not None:
            return await self._run(self._client)

        async with HttpClient(timeout=self.timeout, user_agent=self.user_agent) as client:
            return await self._run(client)

    async def _run(self, client) -> MirrorResult:
        start_time = time.time()
        result = MirrorResult(base_url=self.base_url, project_dir=self.project_dir)

        create_project_structure(self.project_dir)

        self.logger.info(f"Downloading page: {self.base_url}")
        html = await self.fetch_page(client, self.base_url)

        references = self.extractor.extract(html)
        result.references_found = len(references)
        self.logger.info(f"{len(references)} assets found")

        downloader = AssetDownloader(
            self.project_dir,
            self.base_url,
            client,
            self._fetched_urls
        )
        await self._download_assets(downloader, references, result)

        rewritten = self.rewriter.rewrite(html)
        result.index_path = self._save_index(rewritten)

        result.duration_seconds = time.time() - start_time
        self.logger.info(
            f"Saved {result.assets_downloaded} assets, "
            f"{len(result.failed)} failed"
        )
        return result

    async def fetch_page(self, client, url: str) -> str:
        """
        Fetch the page text.

        A URL that was already fetched in this run is not requested again
        and yields an empty string.

        Args:
            client: HTTP client
            url: Absolute page URL

        Returns:
            Decoded page text

        Raises:
            FatalFetchError: If the request fails
        """
        if url in self._fetched_urls:
            return ""

        try:
            response = await client.get(url)
        except NetworkError as e:
            raise FatalFetchError(url, e) from e

        self._fetched_urls.add(url)
        return response.text

    async def _download_assets(
        self,
        downloader: AssetDownloader,
        references: List[str],
        result: MirrorResult
    ) -> None:
        """Download every reference in order, recording failures."""
        if not references:
            return

        progress = create_progress() if self.show_progress else None
        task_id = None
        if progress:
            progress.start()
            task_id = progress.add_task("Downloading assets", total=len(references))

        try:
            for reference in references:
                if progress:
                    progress.update(task_id, description=f"Downloading: {escape(reference)}")

                try:
                    local_path = await downloader.fetch_asset(reference)
                except MirrorError as e:
                    self.logger.warning(str(e))
                    result.failed.append({'reference': reference, 'error': str(e)})
                else:
                    if local_path:
                        result.saved_assets.append(local_path)
                    else:
                        result.skipped += 1

                if progress:
                    progress.advance(task_id)
        finally:
            if progress:
                progress.stop()

    def _save_index(self, html: str) -> str:
        """Write the rewritten page to the project directory."""
        index_path = os.path.join(self.project_dir, INDEX_FILENAME)
        with open(index_path, 'w', encoding='utf-8') as f:
            f.write(html)
        return index_path
