# File: tests/test_discovery.py
import pytest

from icon_scout.parser.html_parser import parse_metadata
from icon_scout.parser.icon_links import discover_candidates, is_icon_relation
from icon_scout.utils import normalize_target_url, remove_duplicates, resolve_url

BASE = "https://example.com/blog/post.html?x=1"


@pytest.mark.parametrize(
    "candidate,expected",
    [
        ("", None),
        ("https://cdn.example.net/icon.png", "https://cdn.example.net/icon.png"),
        ("data:image/png;base64,AAAA", "data:image/png;base64,AAAA"),
        ("/favicon.ico", "https://example.com/favicon.ico"),
        ("icon.png", "https://example.com/blog/icon.png"),
        ("../static/./icon.png", "https://example.com/static/icon.png"),
        ("//cdn.example.net/i.ico", "https://cdn.example.net/i.ico"),
        ("?v=2", "https://example.com/blog/post.html?v=2"),
        ("#frag", "https://example.com/blog/post.html?x=1#frag"),
        ("http://[::1", None),
    ],
)
def test_resolve_url(candidate, expected):
    assert resolve_url(candidate, BASE) == expected


def test_remove_duplicates_keeps_first_seen_order():
    assert remove_duplicates(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("example.com", "https://example.com"),
        ("http://example.com", "http://example.com"),
        ("  https://example.com/a ", "https://example.com/a"),
    ],
)
def test_normalize_target_url(raw, expected):
    assert normalize_target_url(raw) == expected


@pytest.mark.parametrize(
    "rel,expected",
    [
        ("icon", True),
        ("SHORTCUT ICON", True),
        (["shortcut", "icon"], True),
        ("apple-touch-icon", True),
        ("apple-touch-icon-precomposed", True),
        ("mask-icon", True),
        ("stylesheet", False),
        ("", False),
        (None, False),
    ],
)
def test_is_icon_relation(rel, expected):
    assert is_icon_relation(rel) is expected


def test_declared_links_come_before_conventional_path():
    markup = b"""
    <html><head>
      <link rel="stylesheet" href="/style.css">
      <link rel="icon" href="/img/one.png">
      <link rel="apple-touch-icon" href="https://cdn.example.net/two.png">
    </head></html>
    """
    assert discover_candidates(markup, "https://example.com/") == [
        "https://example.com/img/one.png",
        "https://cdn.example.net/two.png",
        "https://example.com/favicon.ico",
    ]


def test_duplicates_and_empty_hrefs_are_dropped():
    markup = """
    <link rel="shortcut icon" href="/favicon.ico">
    <link rel="icon" href="">
    <link rel="icon">
    <link rel="icon" href="http://[::1">
    <link rel="Icon" href="/favicon.ico">
    <link rel="icon" href="/alt.png">
    """
    assert discover_candidates(markup, "https://example.com/page") == [
        "https://example.com/favicon.ico",
        "https://example.com/alt.png",
    ]


def test_no_hints_still_yields_conventional_path():
    assert discover_candidates(b"<html><body>hi</body></html>", "http://site.test:8080/a/b") == [
        "http://site.test:8080/favicon.ico"
    ]


def test_inline_data_candidates_are_kept_verbatim():
    data_url = "data:image/png;base64,iVBORw0KGgo="
    markup = f'<link rel="icon" href="{data_url}">'
    assert discover_candidates(markup, "https://example.com/")[0] == data_url


def test_custom_fallback_paths():
    result = discover_candidates("", "https://example.com/", ["/favicon.ico", "/apple-touch-icon.png"])
    assert result == ["https://example.com/favicon.ico", "https://example.com/apple-touch-icon.png"]


def test_parse_metadata():
    markup = b"""
    <html><head><title> Example Site </title>
    <meta name="description" content="first">
    <meta name="Description" content="second">
    </head></html>
    """
    meta = parse_metadata(markup, "example.com")
    assert meta.title == "Example Site"
    assert meta.description == "second"


def test_parse_metadata_title_falls_back_to_hostname():
    meta = parse_metadata("<html><head></head></html>", "example.com")
    assert meta.title == "example.com"
    assert meta.description == ""
