# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

"""Video quality labels ("720p", "4K", "HD 1080P") to a numeric height."""

from __future__ import annotations
from enum import IntEnum
import re


class Qualities(IntEnum):
    Unknown = -1
    P144    = 144
    P240    = 240
    P360    = 360
    P480    = 480
    P720    = 720
    P1080   = 1080
    P1440   = 1440
    P2160   = 2160


_NAMED = {
    "4k" : Qualities.P2160,
    "2k" : Qualities.P1440,
}


def get_quality_from_name(name: str | None) -> int:
    if not name:
        return Qualities.Unknown.value

    lowered = name.strip().lower()

    for label, quality in _NAMED.items():
        if re.search(rf"\b{label}\b", lowered):
            return quality.value

    if m := re.search(r"(\d{3,4})p\b", lowered):
        return int(m.group(1))

    if lowered.isdigit() and int(lowered) in {q.value for q in Qualities}:
        return int(lowered)

    return Qualities.Unknown.value
