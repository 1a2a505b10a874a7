# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from OploverzStream.Core import PackedJSExtractor

class Streamhide(PackedJSExtractor):
    name     = "Streamhide"
    main_url = "https://streamhide.to"
