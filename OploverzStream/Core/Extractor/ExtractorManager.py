# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from .ExtractorBase   import ExtractorBase
from .ExtractorLoader import ExtractorLoader

class ExtractorManager:
    def __init__(self, extractor_dir: str = "Extractors", extractors: list[ExtractorBase] | None = None):
        if extractors is not None:
            self.extractors = list(extractors)
        else:
            self.extractors = [cls() for cls in ExtractorLoader(extractor_dir).load_all()]

    def find_extractor(self, url: str) -> ExtractorBase | None:
        for extractor in self.extractors:
            if extractor.can_handle_url(url):
                return extractor

        return None

    async def close_all(self):
        for extractor in self.extractors:
            await extractor.close()
