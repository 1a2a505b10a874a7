# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from __future__ import annotations
from pydantic   import BaseModel, Field, model_validator
from ..Helpers  import Qualities


class Subtitle(BaseModel):
    """Subtitle track offered next to a video link."""
    name : str
    url  : str


class ExtractResult(BaseModel):
    """A playable link produced by an extractor or a plugin."""
    name       : str
    url        : str
    referer    : str | None     = None
    user_agent : str | None     = None
    quality    : int            = Qualities.Unknown.value
    is_m3u8    : bool | None    = None
    headers    : dict[str, str] = Field(default_factory=dict)
    subtitles  : list[Subtitle] = Field(default_factory=list)

    @model_validator(mode="after")
    def detect_hls(self) -> ExtractResult:
        if self.is_m3u8 is None:
            self.is_m3u8 = ".m3u8" in self.url.split("?")[0]
        return self
