"""
Tests for URL resolution, classification and project layout helpers.
"""

import os

import pytest

from page_mirror.errors import InvalidURL
from page_mirror.utils.paths import (
    resolve_url,
    classify_url,
    get_file_extension,
    reference_filename,
    local_filename,
    get_asset_path,
    create_project_structure,
)


BASE = "https://example.com/blog/post.html"


@pytest.mark.parametrize("reference, expected", [
    ("/s/a.css", "https://example.com/s/a.css"),
    ("img/c.png", "https://example.com/blog/img/c.png"),
    ("../top.js", "https://example.com/top.js"),
    ("//cdn.x/b.js", "https://cdn.x/b.js"),
    ("https://cdn.x/b.js", "https://cdn.x/b.js"),
    ("app.css?v=2#main", "https://example.com/blog/app.css?v=2#main"),
    ("  spaced.png  ", "https://example.com/blog/spaced.png"),
])
def test_resolve_url(reference, expected):
    assert resolve_url(BASE, reference) == expected


def test_resolve_url_normalizes_host_and_empty_path():
    assert resolve_url("HTTPS://Example.COM", "") == "https://example.com/"


@pytest.mark.parametrize("reference", [
    "/s/a.css",
    "img/c.png",
    "//cdn.x/b.js?x=1",
    "https://Example.com",
    "page#frag",
])
def test_resolve_url_is_fixed_point(reference):
    resolved = resolve_url(BASE, reference)
    assert resolve_url(resolved, resolved) == resolved


@pytest.mark.parametrize("reference", [
    "data:image/png;base64,AAAA",
    "http://[::1",
    "http://example.com:notaport/a.css",
])
def test_resolve_url_rejects_unparseable(reference):
    with pytest.raises(InvalidURL):
        resolve_url(BASE, reference)


def test_resolve_url_rejects_relative_base():
    with pytest.raises(InvalidURL):
        resolve_url("not-a-url", "a.css")


@pytest.mark.parametrize("url, category", [
    ("https://example.com/a.css", "css"),
    ("https://example.com/a.js", "js"),
    ("https://example.com/a.png", "images"),
    ("https://example.com/a.jpg", "images"),
    ("https://example.com/a.jpeg", "images"),
    ("https://example.com/a.gif", "images"),
    ("https://example.com/a.svg", "images"),
    ("https://example.com/a.webp", "images"),
    ("https://example.com/font.woff2", "assets"),
    ("https://example.com/page", "assets"),
    ("https://example.com/", "assets"),
    ("https://example.com/A.CSS", "assets"),
    ("https://example.com/dir.css/file", "assets"),
])
def test_classify_url(url, category):
    assert classify_url(url) == category


def test_classify_url_ignores_host_and_query():
    urls = [
        "https://example.com/x/app.js",
        "http://cdn.other.org/app.js?v=3",
        "https://example.com/deep/path/app.js#frag",
        "https://example.com/app.js?file=style.css",
    ]
    assert {classify_url(url) for url in urls} == {"js"}


def test_missing_extension_reads_as_html():
    assert get_file_extension("https://example.com/about") == "html"
    assert get_file_extension("https://example.com/archive.tar.gz") == "gz"


@pytest.mark.parametrize("reference, expected", [
    ("/static/app.css?v=2", "app.css"),
    ("https://cdn.x/b.js#top", "b.js"),
    ("img/c.png", "c.png"),
    ("c.png", "c.png"),
    ("/dir/", None),
    ("/", None),
    ("", None),
    ("https://cdn.x", None),
    ("//host.css", None),
    ("img\\c.png", "c.png"),
    (" /s/a.css ", "a.css"),
])
def test_reference_filename(reference, expected):
    assert reference_filename(reference) == expected


def test_local_filename_decodes_escapes():
    assert local_filename("my%20logo.png") == "my logo.png"
    assert local_filename("a%2Fb.png") == "a_b.png"
    assert local_filename("plain.css") == "plain.css"
    assert local_filename("a%00.png") == "a_.png"
    assert local_filename("tab%09name.js") == "tab_name.js"


def test_get_asset_path():
    assert get_asset_path("demo", "css", "a.css") == os.path.join("demo", "css", "a.css")


def test_create_project_structure_is_idempotent(tmp_path):
    project = tmp_path / "demo"

    first = create_project_structure(str(project))
    second = create_project_structure(str(project))

    assert first == second
    for name in ("assets", "css", "js", "images"):
        assert (project / name).is_dir()
