# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from OploverzStream.Core import ExtractorBase, ExtractResult, Qualities
import re

class Pixeldrain(ExtractorBase):
    name             = "Pixeldrain"
    main_url         = "https://pixeldrain.com"
    requires_referer = False

    async def extract(self, url: str, referer: str = None) -> ExtractResult | None:
        # /u/<id> (file) or /l/<id> (list); the id is the last path part
        match = re.search(r"/([ul]/[\da-zA-Z\-]+)", url)
        if not match:
            return None

        file_id = match.group(1).split("/")[-1]

        return ExtractResult(
            name    = self.name,
            url     = f"{self.main_url}/api/file/{file_id}?download",
            referer = url,
            quality = Qualities.Unknown.value,
        )
