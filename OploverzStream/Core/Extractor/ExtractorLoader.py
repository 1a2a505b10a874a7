# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from Kekik.cli        import konsol
from pathlib          import Path
from .ExtractorBase   import ExtractorBase
import importlib.util, inspect, sys

class ExtractorLoader:
    def __init__(self, extractors_dir: str):
        path = Path(extractors_dir)
        if not path.is_absolute():
            # "Extractors" means the package's own directory
            path = Path(__file__).resolve().parents[2] / extractors_dir

        self.extractors_dir = path

    def load_all(self) -> list[type[ExtractorBase]]:
        """Every concrete ExtractorBase subclass defined in the directory, sorted by module name."""
        if not self.extractors_dir.is_dir():
            konsol.log(f"[red][!] Extractor directory not found: {self.extractors_dir}")
            return []

        extractors = []
        for file in sorted(self.extractors_dir.glob("*.py")):
            if file.name.startswith("__"):
                continue

            extractors.extend(self._load_extractor(file))

        return extractors

    def _load_extractor(self, file: Path) -> list[type[ExtractorBase]]:
        module_name = f"{self.extractors_dir.parent.name}.{self.extractors_dir.name}.{file.stem}"
        try:
            module = sys.modules.get(module_name)
            if module is None:
                spec   = importlib.util.spec_from_file_location(module_name, file)
                module = importlib.util.module_from_spec(spec)
                sys.modules[module_name] = module
                spec.loader.exec_module(module)
        except Exception as hata:
            sys.modules.pop(module_name, None)
            konsol.log(f"[red][!] Extractor could not be loaded ({file.name}): {hata}")
            return []

        return [
            obj
                for _, obj in inspect.getmembers(module, inspect.isclass)
                    if issubclass(obj, ExtractorBase)
                    and not inspect.isabstract(obj)
                    and obj.__module__ == module.__name__
        ]
