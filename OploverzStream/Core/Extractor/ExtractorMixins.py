# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

"""
Shared extractor base classes.

  - PackedJSExtractor : eval(function(p,a,c,k,e,d)) unpack (Streamhide and other Filesim-style hosts)
"""

from .ExtractorBase   import ExtractorBase
from .ExtractorModels import ExtractResult
from ..Helpers        import HTMLHelper
from Kekik.Sifreleme  import Packer
import contextlib


PACKED_REGEX    = r'(eval\s*\(\s*function[\s\S]+?)<\/script>'
SOURCES_REGEX   = r'sources\s*:\s*\[\s*\{\s*file\s*:\s*["\']([^"\']+)["\']'
M3U8_FILE_REGEX = r'file\s*:\s*["\']([^"\']+\.m3u8[^"\']*)["\']'


class PackedJSExtractor(ExtractorBase):
    """
    Player pages that hide their jwplayer setup inside packed JS.

    Subclasses only need name and main_url; url_pattern may be overridden
    when the unpacked script uses a different source layout.
    """

    url_pattern = SOURCES_REGEX

    def unpack_and_find(self, html_text: str, pattern: str | None = None) -> str | None:
        sel    = HTMLHelper(html_text)
        target = pattern or self.url_pattern

        packed = sel.regex_first(PACKED_REGEX)
        if packed:
            with contextlib.suppress(Exception):
                unpacked = Packer.unpack(packed)
                if url := HTMLHelper(unpacked).regex_first(target):
                    return url

        # Unpacked pages
        return sel.regex_first(target) or sel.regex_first(M3U8_FILE_REGEX)

    async def extract(self, url: str, referer: str = None) -> ExtractResult:
        istek = await self.httpx.get(url, headers={"Referer": referer or f"{self.main_url}/"})

        video_url = self.unpack_and_find(istek.text)
        if not video_url:
            raise ValueError(f"{self.name}: Video URL not found. {url}")

        return ExtractResult(
            name       = self.name,
            url        = self.fix_url(video_url),
            referer    = f"{self.main_url}/",
            user_agent = self.httpx.headers.get("User-Agent", ""),
        )
