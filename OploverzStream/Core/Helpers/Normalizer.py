# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

"""Value normalization: blank strings become None."""

from __future__ import annotations


def normalize_empty(value: str | None) -> str | None:
    """Blank, 'N/A' or '-' placeholders become None."""
    if not isinstance(value, str):
        return value
    stripped = value.strip()
    if not stripped or stripped.lower() in ("n/a", "na", "-"):
        return None
    return stripped
