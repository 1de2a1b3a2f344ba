"""Text extraction and link discovery from HTML pages."""

from __future__ import annotations

import unicodedata
from html.parser import HTMLParser
from itertools import groupby

from bs4 import BeautifulSoup

from .links import resolve_link
from .storage import Webpage

_NOISY_TAGS = ["script", "style", "nav", "header", "footer", "aside"]
_SEMANTIC_TAGS = ["main", "article", "p", "h1", "h2", "h3", "h4", "h5", "h6", "li"]


def split_words(text: str) -> list[str]:
    """Split ``text`` into runs of Unicode letters and numbers."""
    runs = groupby(text, key=lambda ch: unicodedata.category(ch)[0] in "LN")
    return ["".join(run) for is_word, run in runs if is_word]


def extract(html_body: bytes | str, max_words: int) -> tuple[str, str, int]:
    """Return ``(title, content, word_count)``, keeping at most ``max_words`` words."""
    if max_words < 0:
        raise ValueError("max_words must not be negative")
    soup = BeautifulSoup(html_body, "html.parser")
    title_tag = soup.find("title")
    title = title_tag.get_text().strip() if title_tag else ""

    for tag in soup.find_all(_NOISY_TAGS):
        tag.extract()

    text = "".join(" " + tag.get_text().strip() for tag in soup.find_all(_SEMANTIC_TAGS))
    words = split_words(text)[:max_words]
    return title, " ".join(words), len(words)


class _Tokenizer(HTMLParser):
    """Collects ``(kind, data, attrs)`` tuples, merging adjacent text."""

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.tokens: list[tuple[str, str, list]] = []

    def handle_starttag(self, tag, attrs):
        self.tokens.append(("start", tag, attrs))

    def handle_startendtag(self, tag, attrs):
        self.tokens.append(("selfclosing", tag, attrs))

    def handle_endtag(self, tag):
        self.tokens.append(("end", tag, []))

    def handle_data(self, data):
        if self.tokens and self.tokens[-1][0] == "text":
            data = self.tokens.pop()[1] + data
        self.tokens.append(("text", data, []))

    def handle_comment(self, data):
        self.tokens.append(("comment", data, []))

    handle_pi = unknown_decl = handle_comment

    def handle_decl(self, decl):
        self.tokens.append(("doctype", decl, []))


def parse_html(url: str, content: bytes | str, token_limit: int) -> tuple[Webpage, list[str]]:
    """Scan up to ``token_limit`` tokens, returning the page and its absolute links."""
    if isinstance(content, bytes):
        content = content.decode("utf-8", errors="replace")
    tokenizer = _Tokenizer()
    tokenizer.feed(content)
    tokenizer.close()

    title = ""
    parts: list[str] = []
    links: list[str] = []
    body_started = False
    text_len = 0

    tokens = iter(tokenizer.tokens)
    for count, (kind, data, attrs) in enumerate(tokens):
        if count > token_limit:
            break
        if kind == "start":
            if data == "title":
                following = next(tokens, None)
                title = following[1] if following else ""
            elif data == "body":
                body_started = True
            elif data in ("script", "style"):
                next(tokens, None)
            elif data == "a":
                href = next((value or "" for key, value in attrs if key == "href"), None)
                if href is not None:
                    resolved = resolve_link(url, href)
                    if resolved:
                        links.append(resolved)

        if body_started and kind == "text" and text_len < token_limit:
            text = data.strip()
            parts.append(text)
            text_len += len(text.encode("utf-8"))

    return Webpage(url=url, title=title, content="".join(parts)), links