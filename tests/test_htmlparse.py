import pytest

from crawlkit.htmlparse import extract, parse_html, split_words

PAGE = b"""<!DOCTYPE html>
<html><head><title> My Page </title><style>.x{color:red}</style></head>
<body>
<nav><a href="/nav">Navigation words</a></nav>
<header>Header words</header>
<script>var hidden = "script words";</script>
<main><p>Hello world</p></main>
<p>Second paragraph here</p>
<ul><li>item one</li></ul>
<a href="/about#team">About</a>
<a href="mailto:someone@example.com">Mail</a>
<a href="#top">Top</a>
<a href="https://example.org">Other</a>
<footer>Footer words</footer>
</body></html>"""

BASE = "https://example.com/index.html"


def test_split_words_on_punctuation():
    assert split_words("hello, world! 42") == ["hello", "world", "42"]


def test_split_words_unicode():
    assert split_words("café—naïve  ") == ["café", "naïve"]


def test_split_words_empty():
    assert split_words(" ,.;- ") == []


def test_extract_title_and_filters_noise():
    title, content, count = extract(PAGE, 5000)
    assert title == "My Page"
    for noisy in ["Navigation", "Header", "script", "Footer", "color"]:
        assert noisy not in content
    for kept in ["Hello", "world", "Second", "paragraph", "item"]:
        assert kept in content.split()
    assert count == len(content.split())


def test_extract_truncates_words():
    _, full, full_count = extract(PAGE, 5000)
    _, content, count = extract(PAGE, 3)
    assert count == 3
    assert content.split() == full.split()[:3]
    assert full_count > 3


def test_extract_negative_limit_raises():
    with pytest.raises(ValueError):
        extract(PAGE, -1)


def test_extract_without_title():
    title, content, count = extract(b"<p>just text</p>", 10)
    assert title == ""
    assert content == "just text"
    assert count == 2


def test_parse_html_links_resolved_and_filtered():
    page, links = parse_html(BASE, PAGE, 5000)
    assert "https://example.com/about" in links
    assert "https://example.com/nav" in links
    assert "https://example.org/" in links
    assert all("#" not in link and "mailto" not in link for link in links)
    assert len(links) == 3


def test_parse_html_page_fields():
    page, _ = parse_html(BASE, PAGE, 5000)
    assert page.url == BASE
    assert page.title == " My Page "
    assert "Hello world" in page.content
    assert "script words" not in page.content
    assert ".x{color:red}" not in page.content
    assert page.word_count == 0


def test_parse_html_body_text_concatenated():
    page, _ = parse_html(BASE, b"<body><p>Hello</p> <p>World</p></body>", 100)
    assert page.content == "HelloWorld"


def test_parse_html_token_limit_stops_early():
    html = b"".join(b'<a href="/p%d">x</a>' % i for i in range(20))
    _, all_links = parse_html(BASE, html, 5000)
    _, few_links = parse_html(BASE, html, 3)
    assert len(all_links) == 20
    assert few_links == all_links[: len(few_links)]
    assert len(few_links) < len(all_links)


def test_parse_html_accepts_str():
    page_b, links_b = parse_html(BASE, PAGE, 5000)
    page_s, links_s = parse_html(BASE, PAGE.decode(), 5000)
    assert links_b == links_s
    assert page_b == page_s