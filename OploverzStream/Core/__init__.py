# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from .Helpers import HTMLHelper, NodeHelper, Qualities, get_quality_from_name

from .Extractor.ExtractorModels  import ExtractResult, Subtitle
from .Extractor.ExtractorBase    import ExtractorBase
from .Extractor.ExtractorLoader  import ExtractorLoader
from .Extractor.ExtractorManager import ExtractorManager
from .Extractor.ExtractorMixins  import (
    PackedJSExtractor,
    PACKED_REGEX,
    SOURCES_REGEX,
    M3U8_FILE_REGEX,
)

from .Plugin.PluginModels  import MainPageResult, SearchResult, Episode, AnimeInfo, TvType, ShowStatus, DubStatus
from .Plugin.PluginBase    import PluginBase, SubtitleCallback, LinkCallback
from .Plugin.PluginLoader  import PluginLoader
from .Plugin.PluginManager import PluginManager
