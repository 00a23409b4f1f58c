"""
Link rewriter for converting asset references to local paths.

Rewrites stylesheet, script and image references in HTML so they point
into the project's category directories.
"""

import re
from typing import List, Tuple

from ..errors import RewriteError
from ..utils.log import get_logger
from ..utils.paths import reference_filename


# Attribute value with the extension at the end of its path, optionally
# followed by a query string or fragment. The lookbehind keeps 'data-src'
# and similar names from matching 'src'.
def _attribute_pattern(attribute: str, extensions: str) -> re.Pattern:
    return re.compile(
        r'(?<![\w-])' + attribute +
        r'\s*=\s*(["\'])\s*([^"\'?#]*\.(?:' + extensions + r')(?:[?#][^"\']*)?)\s*\1'
    )


class LinkRewriter:
    """
    Rewrites asset references in HTML text to local relative paths.

    Works on the raw text rather than a parsed tree so everything outside
    the rewritten attributes stays byte-for-byte identical.
    """

    # (pattern, attribute, category); each pass only sees its own extensions
    PASSES: List[Tuple[re.Pattern, str, str]] = [
        (_attribute_pattern('href', 'css'), 'href', 'css'),
        (_attribute_pattern('src', 'js'), 'src', 'js'),
        (_attribute_pattern('src', 'png|jpg|jpeg|gif|svg|webp'), 'src', 'images'),
    ]

    def __init__(self):
        self.logger = get_logger("rewriter")

    def rewrite(self, html: str) -> str:
        """
        Rewrite all recognized asset references in HTML content.

        Every pass matches against the original text, and the
        replacements are spliced in afterwards, so one pass never sees
        another pass's output.

        Args:
            html: Original HTML content

        Returns:
            Rewritten HTML content
        """
        replacements: List[Tuple[int, int, str]] = []

        for pattern, attribute, category in self.PASSES:
            for match in pattern.finditer(html):
                try:
                    new_value = self._local_reference(match.group(2), category)
                except RewriteError as e:
                    self.logger.debug(f"Leaving reference unchanged: {e}")
                    continue
                replacements.append(
                    (match.start(), match.end(), f'{attribute}="{new_value}"')
                )

        replacements.sort()

        parts = []
        position = 0
        for start, end, text in replacements:
            parts.append(html[position:start])
            parts.append(text)
            position = end
        parts.append(html[position:])

        self.logger.debug(f"Rewrote {len(replacements)} asset references")
        return ''.join(parts)

    def _local_reference(self, reference: str, category: str) -> str:
        """
        Build the local reference for a matched attribute value.

        Raises:
            RewriteError: If the reference has no filename
        """
        filename = reference_filename(reference)
        if not filename:
            raise RewriteError(reference)
        return f"{category}/{filename}"
