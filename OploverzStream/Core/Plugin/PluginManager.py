# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from cloudscraper                 import CloudScraper
from .PluginBase                  import PluginBase
from .PluginLoader                import PluginLoader
from ..Extractor.ExtractorManager import ExtractorManager

class PluginManager:
    def __init__(self, plugin_dir: str = "Plugins", ex_manager: str | ExtractorManager = "Extractors", proxy: str | dict | None = None):
        if not isinstance(ex_manager, ExtractorManager):
            ex_manager = ExtractorManager(extractor_dir=ex_manager)

        self.ex_manager = ex_manager
        shared_scraper  = None if proxy else CloudScraper()

        self.plugins: dict[str, PluginBase] = {
            name: cls(proxy=proxy, ex_manager=self.ex_manager, shared_scraper=shared_scraper)
                for name, cls in PluginLoader(plugin_dir).load_all().items()
        }

    def get_plugin_names(self) -> list[str]:
        return sorted(self.plugins)

    def select_plugin(self, name: str) -> PluginBase | None:
        return self.plugins.get(name)

    async def close_all(self):
        for plugin in self.plugins.values():
            await plugin.close()

        await self.ex_manager.close_all()
