# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from __future__ import annotations

from selectolax.parser import HTMLParser, Node
import html as _html
import re


def node_text(node: Node | None) -> str:
    """Visible text with whitespace collapsed, so inline tags keep their surrounding spaces."""
    if not node:
        return ""
    return _html.unescape(" ".join(node.text().split()))


class NodeHelper:
    """
    Element-level wrapper around a selectolax Node, mirroring HTMLHelper's selectors.

    Usage:
        for item in secici.select("article[itemscope=itemscope]"):
            title  = item.select_text("h2[itemprop=headline]")
            href   = item.select_attr("a.tip", "href")
            poster = item.select_poster("img")
    """

    __slots__ = ("_node",)

    def __init__(self, node: Node):
        self._node = node

    def text(self) -> str:
        return node_text(self._node)

    def select_text(self, selector: str | None = None) -> str:
        return node_text(self._node.css_first(selector) if selector else self._node)

    def select_attr(self, selector: str | None, attr: str) -> str | None:
        el = self._node.css_first(selector) if selector else self._node
        return el.attrs.get(attr) if el else None

    def select_attrs(self, selector: str, attr: str) -> list[str]:
        return [v for el in self._node.css(selector) if (v := el.attrs.get(attr))]

    def select_poster(self, selector: str = "img") -> str | None:
        """Lazy-loaded images keep the real URL in data-src, so it wins over src."""
        el = self._node.css_first(selector) if selector else self._node
        if not el:
            return None
        return el.attrs.get("data-src") or el.attrs.get("src")

    def select_direct_text(self, selector: str | None = None) -> str | None:
        """Only the element's own text nodes, children excluded (jsoup's ownText)."""
        el = self._node.css_first(selector) if selector else self._node
        if not el:
            return None
        val = " ".join(el.text(deep=False).split())
        return _html.unescape(val) if val else None


class HTMLHelper:
    """
    Thin selectolax facade used by plugins and extractors.

    Every selector method is forgiving: a missing element yields "", None or [],
    so callers decide what is required and what is optional.
    """

    def __init__(self, html: str):
        self.html   = html
        self.parser = HTMLParser(html)

    # ========================
    # CSS SELECTORS
    # ========================

    def select(self, selector: str) -> list[NodeHelper]:
        return [NodeHelper(n) for n in self.parser.css(selector)]

    def select_first(self, selector: str | None) -> NodeHelper | None:
        if not selector:
            return None
        result = self.parser.css_first(selector)
        return NodeHelper(result) if result else None

    def select_text(self, selector: str | None = None) -> str:
        el = self.select_first(selector)
        return el.text() if el else ""

    def select_texts(self, selector: str) -> list[str]:
        return [t for el in self.select(selector) if (t := el.text())]

    def joined_text(self, selector: str, sep: str = " ") -> str:
        """Texts of every match joined together, like jsoup's Elements.text()."""
        return sep.join(self.select_texts(selector)).strip()

    def select_attr(self, selector: str | None, attr: str) -> str | None:
        el = self.select_first(selector)
        return el.select_attr(None, attr) if el else None

    def select_attrs(self, selector: str, attr: str) -> list[str]:
        return [v for n in self.parser.css(selector) if (v := n.attrs.get(attr))]

    # ========================
    # REGEX
    # ========================

    def regex_first(self, pattern: str, target: str | None = None) -> str | None:
        """First capture group of `pattern` in `target` (the whole page when omitted), the whole match without groups."""
        source = target if isinstance(target, str) else self.html
        match  = re.search(pattern, source)
        if not match:
            return None

        return match.group(1) if match.lastindex else match.group(0)

    # ========================
    # EXTRACTORS
    # ========================

    def extract_year(self, selector: str, pattern: str = r"\b(19\d{2}|20\d{2})\b") -> int | None:
        """
        Year from the text of `selector`, e.g. "Oct 2, 2022" with pattern r"\\d, (\\d+)".
        Missing element or no match yields None.
        """
        text = self.select_text(selector)
        if not text:
            return None

        val = self.regex_first(pattern, text)
        return int(val) if val and str(val).isdigit() else None
