# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

__version__ = "1.0.0"
