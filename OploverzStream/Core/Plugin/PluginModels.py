# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from __future__ import annotations
from enum       import Enum
from pydantic   import BaseModel, Field, model_validator
from ..Helpers  import clean_title, normalize_empty


class TvType(str, Enum):
    ANIME       = "Anime"
    ANIME_MOVIE = "AnimeMovie"
    OVA         = "OVA"


class ShowStatus(str, Enum):
    ONGOING   = "Ongoing"
    COMPLETED = "Completed"


class DubStatus(str, Enum):
    SUBBED = "Subbed"
    DUBBED = "Dubbed"


# ========================
# DATA MODELS
# ========================

class MainPageResult(BaseModel):
    """A catalog entry on one of the main page rows."""
    category : str
    title    : str
    url      : str
    poster   : str | None = None
    type     : TvType     = TvType.ANIME

    @model_validator(mode="after")
    def auto_normalize(self) -> MainPageResult:
        self.title  = clean_title(self.title) or self.title
        self.poster = normalize_empty(self.poster)
        return self

class SearchResult(BaseModel):
    """A catalog entry from search or recommendations."""
    title      : str
    url        : str
    poster     : str | None      = None
    type       : TvType          = TvType.ANIME
    dub_status : list[DubStatus] = Field(default_factory=list)

    @model_validator(mode="after")
    def auto_normalize(self) -> SearchResult:
        self.title  = clean_title(self.title) or self.title
        self.poster = normalize_empty(self.poster)
        return self


class Episode(BaseModel):
    url     : str
    title   : str | None = None
    episode : int | None = None
    season  : int | None = None

    @model_validator(mode="after")
    def auto_normalize(self) -> Episode:
        self.title = " ".join(self.title.split()) if self.title else ""
        return self

class AnimeInfo(BaseModel):
    url             : str
    title           : str
    eng_title       : str | None         = None
    poster          : str | None         = None
    tags            : list[str]          = Field(default_factory=list)
    year            : int | None         = None
    status          : ShowStatus         = ShowStatus.COMPLETED
    type            : TvType             = TvType.ANIME
    description     : str | None         = None
    trailer         : str | None         = None
    episodes        : list[Episode]      = Field(default_factory=list)
    recommendations : list[SearchResult] = Field(default_factory=list)
    dub_status      : list[DubStatus]    = Field(default_factory=list)

    @model_validator(mode="after")
    def auto_normalize(self) -> AnimeInfo:
        self.title = clean_title(self.title) or self.title

        for field in ("poster", "description", "trailer", "eng_title"):
            setattr(self, field, normalize_empty(getattr(self, field)))
        return self
