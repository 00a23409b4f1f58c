"""
Mirror module for saving a single page.

Contains components for fetching, extracting, downloading, and rewriting.
"""

from .client import HttpClient, FetchedResponse
from .extractor import AssetExtractor
from .downloader import AssetDownloader
from .rewrite import LinkRewriter
from .pipeline import MirrorPipeline, MirrorResult

__all__ = [
    "HttpClient",
    "FetchedResponse",
    "AssetExtractor",
    "AssetDownloader",
    "LinkRewriter",
    "MirrorPipeline",
    "MirrorResult",
]
