"""
Asset extractor for parsing HTML and listing asset references.

Uses BeautifulSoup for HTML parsing to find linked stylesheets,
scripts and images.
"""

from typing import List

from bs4 import BeautifulSoup

from ..utils.log import get_logger


class AssetExtractor:
    """
    Extracts raw asset references from HTML content.

    References are returned exactly as written in the markup. Resolving
    and deduplicating them is left to the downloader.
    """

    def __init__(self):
        self.logger = get_logger("extractor")

    def extract(self, html: str) -> List[str]:
        """
        Extract asset references from HTML content.

        Stylesheet links come first, then script sources, then image
        sources, each group in document order.

        Args:
            html: HTML content to parse

        Returns:
            List of raw href/src values (may contain duplicates)
        """
        try:
            soup = self._parse(html)
            references = (
                self._extract_stylesheets(soup) +
                self._extract_scripts(soup) +
                self._extract_images(soup)
            )
        except Exception as e:
            self.logger.warning(f"Could not parse page markup: {e}")
            return []

        self.logger.debug(f"Extracted {len(references)} asset references")
        return references

    def _parse(self, html: str) -> BeautifulSoup:
        try:
            return BeautifulSoup(html or "", 'lxml')
        except Exception:
            # Fallback to html.parser if lxml fails
            return BeautifulSoup(html or "", 'html.parser')

    def _extract_stylesheets(self, soup: BeautifulSoup) -> List[str]:
        """Extract stylesheet link hrefs."""
        references = []
        for link in soup.find_all('link', rel=True):
            rel_value = link.get('rel', [])
            # rel is multi-valued: "stylesheet preload" -> ['stylesheet', 'preload']
            if isinstance(rel_value, list):
                rel_values = [v.lower() for v in rel_value]
            else:
                rel_values = rel_value.lower().split()

            if 'stylesheet' in rel_values and link.has_attr('href'):
                references.append(link['href'])
        return references

    def _extract_scripts(self, soup: BeautifulSoup) -> List[str]:
        """Extract script sources."""
        return [script['src'] for script in soup.find_all('script', src=True)]

    def _extract_images(self, soup: BeautifulSoup) -> List[str]:
        """Extract image sources."""
        return [img['src'] for img in soup.find_all('img', src=True)]
