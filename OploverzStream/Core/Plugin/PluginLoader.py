# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from Kekik.cli   import konsol
from pathlib     import Path
from .PluginBase import PluginBase
import importlib.util, inspect, sys

class PluginLoader:
    def __init__(self, plugins_dir: str):
        path = Path(plugins_dir)
        if not path.is_absolute():
            path = Path(__file__).resolve().parents[2] / plugins_dir

        self.plugins_dir = path

    def load_all(self) -> dict[str, type[PluginBase]]:
        """Class name -> plugin class for every concrete PluginBase subclass in the directory."""
        if not self.plugins_dir.is_dir():
            konsol.log(f"[red][!] Plugin directory not found: {self.plugins_dir}")
            return {}

        plugins = {}
        for file in sorted(self.plugins_dir.glob("*.py")):
            if file.name.startswith("__"):
                continue

            for cls in self._load_plugin(file):
                plugins[cls.__name__] = cls

        return plugins

    def _load_plugin(self, file: Path) -> list[type[PluginBase]]:
        module_name = f"{self.plugins_dir.parent.name}.{self.plugins_dir.name}.{file.stem}"
        try:
            module = sys.modules.get(module_name)
            if module is None:
                spec   = importlib.util.spec_from_file_location(module_name, file)
                module = importlib.util.module_from_spec(spec)
                sys.modules[module_name] = module
                spec.loader.exec_module(module)
        except Exception as hata:
            sys.modules.pop(module_name, None)
            konsol.log(f"[red][!] Plugin could not be loaded ({file.name}): {hata}")
            return []

        return [
            obj
                for _, obj in inspect.getmembers(module, inspect.isclass)
                    if issubclass(obj, PluginBase)
                    and not inspect.isabstract(obj)
                    and obj.__module__ == module.__name__
        ]
