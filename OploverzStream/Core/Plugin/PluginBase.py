# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from Kekik.cli                    import konsol
from abc                          import ABC, abstractmethod
from cloudscraper                 import CloudScraper
from httpx                        import AsyncClient
from typing                       import Callable
from .PluginModels                import MainPageResult, SearchResult, AnimeInfo
from ..Extractor.ExtractorManager import ExtractorManager
from ..Extractor.ExtractorModels  import ExtractResult, Subtitle
from urllib.parse                 import urljoin
import asyncio

SubtitleCallback = Callable[[Subtitle], None]
LinkCallback     = Callable[[ExtractResult], None]

class PluginBase(ABC):
    name        = "Plugin"
    language    = "id"
    main_url    = "https://example.com"
    favicon     = f"https://www.google.com/s2/favicons?domain={main_url}&sz=64"
    description = "No description provided."

    main_page   = {}

    async def url_update(self, new_url: str):
        self.favicon   = self.favicon.replace(self.main_url, new_url)
        self.main_page = {url.replace(self.main_url, new_url): category for url, category in self.main_page.items()}
        self.main_url  = new_url

    def __init__(self, proxy: str | dict | None = None, ex_manager: str | ExtractorManager = "Extractors", shared_scraper=None):
        # cloudscraper - Cloudflare fallback; a proxied plugin gets its own session
        if proxy or not shared_scraper:
            self.cloudscraper = CloudScraper()
            if proxy:
                self.cloudscraper.proxies = proxy if isinstance(proxy, dict) else {"http": proxy, "https": proxy}
        else:
            self.cloudscraper = shared_scraper

        httpx_proxy = proxy
        if isinstance(proxy, dict):
            httpx_proxy = proxy.get("https") or proxy.get("http")

        self.httpx = AsyncClient(
            timeout          = 10,
            follow_redirects = True,
            proxy            = httpx_proxy
        )
        self.httpx.headers.update(self.cloudscraper.headers)
        self.httpx.cookies.update(self.cloudscraper.cookies)
        self.httpx.headers.update({
            "User-Agent" : "Mozilla/5.0 (Macintosh; Intel Mac OS X 15.7; rv:135.0) Gecko/20100101 Firefox/135.0",
            "Accept"     : "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"
        })

        if isinstance(ex_manager, ExtractorManager):
            self.ex_manager = ex_manager
        else:
            self.ex_manager = ExtractorManager(extractor_dir=ex_manager)

    @abstractmethod
    async def get_main_page(self, page: int, url: str, category: str) -> list[MainPageResult]:
        """One page of a main page row; `url` and `category` come from `main_page`."""
        pass

    @abstractmethod
    async def search(self, query: str) -> list[SearchResult]:
        pass

    @abstractmethod
    async def load_item(self, url: str) -> AnimeInfo:
        """Detail record of a title page."""
        pass

    @abstractmethod
    async def load_links(
        self,
        url: str,
        is_casting: bool = False,
        subtitle_callback: SubtitleCallback | None = None,
        callback: LinkCallback | None = None
    ) -> bool:
        """
        Discover playable links of an episode page.

        Args:
            url: Episode page URL
            is_casting: Whether the links are meant for a cast device
            subtitle_callback: Called once per discovered Subtitle
            callback: Called once per discovered ExtractResult, in no particular order

        Returns:
            True when the page was processed, whether or not any link was found.
        """
        pass

    # ========================
    # HELPERS
    # ========================

    async def collect_links(self, url: str) -> list[ExtractResult]:
        """
        load_links() with list sinks; subtitles are attached to every result.

        Usage:
            links = await plugin.collect_links(episode_url)
        """
        links: list[ExtractResult] = []
        subs : list[Subtitle]      = []

        await self.load_links(url, subtitle_callback=subs.append, callback=links.append)

        for link in links:
            for sub in subs:
                if sub.url not in {s.url for s in link.subtitles}:
                    link.subtitles.append(sub)

        return links

    async def async_cf_get(self, url: str, **kwargs):
        """Async wrapper around cloudscraper.get() for Cloudflare-protected pages."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, lambda: self.cloudscraper.get(url, **kwargs))

    async def close(self):
        """Close HTTP client."""
        await self.httpx.aclose()

    def fix_url(self, url: str) -> str:
        if not url:
            return ""

        if url.startswith("http"):
            return url.replace("\\", "")

        url = f"https:{url}" if url.startswith("//") else urljoin(self.main_url, url)
        return url.replace("\\", "")

    async def extract(self, url: str, referer: str = None) -> ExtractResult | list[ExtractResult] | None:
        """
        Run the extractor that accepts `url`.

        Args:
            url: Iframe or video host URL
            referer: Referer header (default: plugin main_url); dropped for extractors with requires_referer = False

        Returns:
            Extractor output, or None when no extractor matches or it fails.
        """
        if referer is None:
            referer = f"{self.main_url}/"

        extractor = self.ex_manager.find_extractor(url)
        if not extractor:
            konsol.log(f"[magenta][?] {self.name} » Extractor not found: {url}")
            return None

        if not extractor.requires_referer:
            referer = None

        try:
            data = await extractor.extract(url, referer=referer)
        except Exception as hata:
            konsol.log(f"[red][!] {self.name} » Extractor error ({extractor.name}): {hata}")
            return None

        return data or None

    async def load_extractor(
        self,
        url: str,
        referer: str | None = None,
        subtitle_callback: SubtitleCallback | None = None,
        callback: LinkCallback | None = None
    ) -> bool:
        """extract() for callback-style callers; True when at least one link was emitted."""
        data = await self.extract(url, referer=referer)
        if not data:
            return False

        results = data if isinstance(data, list) else [data]
        for result in results:
            if subtitle_callback:
                for sub in result.subtitles:
                    subtitle_callback(sub)
            if callback:
                callback(result)

        return True
