# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from abc              import ABC, abstractmethod
from httpx            import AsyncClient
from urllib.parse     import urljoin, urlparse
from .ExtractorModels import ExtractResult

class ExtractorBase(ABC):
    name              = "Extractor"
    main_url          = "https://example.com"
    supported_domains : list[str] = []
    requires_referer  = True

    def __init__(self, proxy: str | None = None):
        self.httpx = AsyncClient(
            timeout          = 10,
            follow_redirects = True,
            proxy            = proxy
        )
        self.httpx.headers.update({
            "User-Agent" : "Mozilla/5.0 (Macintosh; Intel Mac OS X 15.7; rv:135.0) Gecko/20100101 Firefox/135.0",
        })

    def can_handle_url(self, url: str) -> bool:
        """Host match against supported_domains (main_url's host when empty), subdomains included."""
        host = (urlparse(url).hostname or "").lower()
        if not host:
            return False

        domains = self.supported_domains or [urlparse(self.main_url).hostname or ""]
        for domain in domains:
            domain = domain.lower().removeprefix("www.")
            if host == domain or host.endswith(f".{domain}"):
                return True

        return False

    @abstractmethod
    async def extract(self, url: str, referer: str = None) -> ExtractResult | list[ExtractResult] | None:
        """
        Resolve a hosting page into playable link(s).

        Returns None (or []) when the URL has no usable shape; raises when the
        host answered but no video could be found.
        """
        pass

    async def close(self):
        await self.httpx.aclose()

    def fix_url(self, url: str) -> str:
        if not url:
            return ""

        if url.startswith("http"):
            return url.replace("\\", "")

        url = f"https:{url}" if url.startswith("//") else urljoin(self.main_url, url)
        return url.replace("\\", "")
