"""Helpers shared by the HTML parsers."""

import re

from bs4 import BeautifulSoup, Tag

LABEL_COLONS = ":："
LEADING_INT_PATTERN = re.compile(r"\s*[+-]?(\d+)")


def make_soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html or "", "lxml")


def text_of(tag: Tag | None) -> str:
    return tag.get_text().strip() if tag else ""


def to_int(text: str | None) -> int | None:
    """Parse a leading integer the way the page renders counts, or None."""
    if not text:
        return None
    match = LEADING_INT_PATTERN.match(text)
    return int(match.group(1)) if match else None


def normalize_label(text: str) -> str:
    return text.strip().rstrip(LABEL_COLONS).strip()


def first_value(mapping: dict[str, str], *keys: str, default: str | None = None) -> str | None:
    """
    Look a field up under several labels.

    The first label with a non-empty value wins; labels are passed localized
    first, then English.
    """
    for key in keys:
        value = mapping.get(key)
        if value:
            return value
    return default


def _definition_of(dt: Tag) -> Tag | None:
    sibling = dt.find_next_sibling()
    if sibling is not None and sibling.name == "dd":
        return sibling
    return None


def collect_definitions(soup: BeautifulSoup, selector: str, *, markup: bool = False) -> dict[str, str]:
    """
    Build a label -> value map from ``<dt>``/``<dd>`` pairs.

    Args:
        soup: Parsed document
        selector: CSS selector of the ``<dl>`` element(s)
        markup: Keep the inner HTML of the value. When the ``<dd>`` contains a
            ``<pre>`` block its inner HTML is used instead, so whitespace in
            samples survives.

    Returns:
        Mapping of normalized labels to values; later duplicates overwrite
        earlier ones
    """
    values: dict[str, str] = {}

    for dt in soup.select(f"{selector} dt"):
        key = normalize_label(dt.get_text())
        if not key:
            continue

        dd = _definition_of(dt)
        if dd is None:
            values[key] = ""
            continue

        if not markup:
            values[key] = dd.get_text().strip()
            continue

        pre = dd.find("pre")
        source = pre if pre is not None else dd
        values[key] = source.decode_contents() or source.get_text()

    return values
