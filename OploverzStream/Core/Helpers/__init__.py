# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

"""
Core/Helpers: shared by every model, plugin and extractor.
"""

from .TitleHelper   import clean_title
from .Normalizer    import normalize_empty
from .QualityHelper import Qualities, get_quality_from_name
from .HTMLHelper    import HTMLHelper, NodeHelper
