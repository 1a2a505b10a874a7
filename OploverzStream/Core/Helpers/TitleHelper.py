# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

"""Title cleanup: collapses whitespace and drops the site's subtitle suffixes."""

from __future__ import annotations
import re

_TITLE_SUFFIXES = [
    " subtitle indonesia",
    " sub indo",
    " sub indonesia",
]


def clean_title(title: str | None) -> str | None:
    if not title or not isinstance(title, str):
        return title

    cleaned = " ".join(title.split())
    if not cleaned:
        return None

    for suffix in _TITLE_SUFFIXES:
        cleaned = re.sub(f"{re.escape(suffix)}$", "", cleaned, flags=re.IGNORECASE).strip()

    return cleaned or None
