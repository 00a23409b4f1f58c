"""
Page Mirror - save a web page and its assets for offline viewing.

This package fetches one page, downloads the stylesheets, scripts and
images it references, and rewrites the page to use the local copies.
"""

__version__ = "1.0.0"
__author__ = "Page Mirror Team"
