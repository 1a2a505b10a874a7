# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

from OploverzStream.Core import PluginBase, MainPageResult, SearchResult, AnimeInfo, Episode, ExtractResult, HTMLHelper, NodeHelper
from OploverzStream.Core import TvType, ShowStatus, DubStatus, SubtitleCallback, LinkCallback, get_quality_from_name
from Kekik.cli           import konsol
from pydantic            import BaseModel, Field, ValidationError
import asyncio, base64, binascii, re


# Episode/movie page slug -> title slug, first applicable rule wins
SLUG_RULES = [
    (lambda t: "-episode" in t and "-ova" not in t, r"(.+)-episode", False),
    (lambda t: "-ova" in t,                         r"(.+)-ova",     False),
    (lambda t: "-movie" in t,                       r"(.+)-subtitle", False),
    (lambda t: True,                                r"(.+)-subtitle", True),
]

# Titles whose detail slug differs from the episode slug
SLUG_FIXUPS = [
    ("overlord",    "s",  "season-"),
    ("kaguya-sama", "s3", "ultra-romantic"),
]


def derive_slug(title: str) -> str:
    for applies, pattern, strip_numbers in SLUG_RULES:
        if not applies(title):
            continue

        match = re.search(pattern, title)
        if not match:
            return title

        slug = match.group(1)
        return re.sub(r"-\d+", "", slug) if strip_numbers else slug

    return title


def fix_irregular_slug(slug: str) -> str:
    for marker, old, new in SLUG_FIXUPS:
        if marker in slug:
            return slug.replace(old, new)

    return slug


def episode_number(name: str | None) -> int | None:
    """Number after "Episode" in an episode name; decimal captures such as "3.5" give None."""
    if not name:
        return None

    match = re.search(r"Episode\s?(\d+[.,]?\d*)", name)
    if not match:
        return None

    value = match.group(1)
    return int(value) if value.isdigit() else None


def get_type(text: str | None) -> TvType:
    text = text or ""
    if "TV" in text:
        return TvType.ANIME
    if "Movie" in text:
        return TvType.ANIME_MOVIE
    return TvType.OVA


def get_status(text: str | None) -> ShowStatus:
    return {
        "Completed" : ShowStatus.COMPLETED,
        "Ongoing"   : ShowStatus.ONGOING,
    }.get(text, ShowStatus.COMPLETED)


class LinkboxItem(BaseModel):
    url        : str
    resolution : str | None = None

class LinkboxData(BaseModel):
    r_list  : list[LinkboxItem] | None = Field(default_factory=list, alias="rList")
    item_id : str | None               = Field(default=None, alias="itemId")

class LinkboxResponse(BaseModel):
    data : LinkboxData | None = None


class Oploverz(PluginBase):
    name        = "Oploverz"
    language    = "id"
    main_url    = "https://oploverz.care"
    favicon     = f"https://www.google.com/s2/favicons?domain={main_url}&sz=64"
    description = "Oploverz - Nonton anime subtitle Indonesia."

    main_page   = {
        f"{main_url}/anime/?status=&type=&order=update" : "Episode Terbaru",
        f"{main_url}/anime/?status=&type=&order=latest" : "Anime Terbaru",
        f"{main_url}/anime/?sub=&order=popular"         : "Popular Anime",
    }

    ACEFILE = "https://acefile.co"
    LBX     = "https://lbx.to"
    LINKBOX = "https://www.linkbox.to"

    async def _get_html(self, url: str, params: dict | None = None) -> str:
        istek = await self.httpx.get(url, params=params)
        if istek.status_code in (403, 503):
            konsol.log(f"[yellow][~] {self.name} » Cloudflare fallback: {istek.url}")
            cf_istek = await self.async_cf_get(str(istek.url))
            cf_istek.raise_for_status()
            return cf_istek.text

        istek.raise_for_status()
        return istek.text

    def proper_anime_link(self, uri: str) -> str:
        """Detail page URL of an episode/movie page; a best-effort guess for unusual slugs."""
        if "/anime/" in uri:
            return uri

        title = uri.split(f"{self.main_url}/", 1)[-1].rstrip("/")
        slug  = fix_irregular_slug(derive_slug(title))

        return f"{self.main_url}/anime/{slug}"

    def _search_result(self, veri: NodeHelper) -> SearchResult | None:
        title = (veri.select_direct_text(".tt") or "").strip()
        href  = veri.select_attr("a.tip", "href")
        if not title or not href:
            return None

        return SearchResult(
            title      = title,
            url        = self.fix_url(href),
            poster     = self.fix_url(veri.select_poster("img")) or None,
            type       = get_type(veri.select_text(".typez")),
            dub_status = [DubStatus.SUBBED],
        )

    async def get_main_page(self, page: int, url: str, category: str) -> list[MainPageResult]:
        secici = HTMLHelper(await self._get_html(f"{url}&page={page}"))

        results = []
        for veri in secici.select("article[itemscope=itemscope]"):
            title = veri.select_text("h2[itemprop=headline]")
            href  = veri.select_attr("a.tip", "href")
            if not title or not href:
                continue

            results.append(MainPageResult(
                category = category,
                title    = title,
                url      = self.proper_anime_link(self.fix_url(href)),
                poster   = self.fix_url(veri.select_poster("img")) or None,
                type     = get_type(veri.select_text(".eggtype, .typez")),
            ))

        return results

    async def search(self, query: str) -> list[SearchResult]:
        secici = HTMLHelper(await self._get_html(f"{self.main_url}/", params={"s": query}))

        return [
            result
                for veri in secici.select("article[itemscope=itemscope]")
                    if (result := self._search_result(veri))
        ]

    async def load_item(self, url: str) -> AnimeInfo:
        secici = HTMLHelper(await self._get_html(url))

        title = secici.select_text("h1.entry-title")
        if not title:
            raise ValueError(f"{self.name}: Title not found. {url}")

        status    = secici.joined_text(".info-content > .spe > span:nth-child(1)").replace("Status:", "").strip()
        type_text = secici.select_text(".info-content > .spe > span:nth-child(5)")
        type_text = re.sub(r"^(?:Type|Tipe)\s*:\s*", "", type_text)

        episodes = []
        for veri in secici.select(".eplister > ul > li"):
            href = veri.select_attr("a", "href")
            if not href:
                continue

            ep_name = veri.select_text(".epl-title")
            episodes.append(Episode(
                url     = self.fix_url(href),
                title   = ep_name,
                episode = episode_number(ep_name),
            ))

        recommendations = [
            result
                for veri in secici.select(".listupd > article[itemscope=itemscope]")
                    if (result := self._search_result(veri))
        ]

        return AnimeInfo(
            url             = url,
            title           = title,
            eng_title       = title,
            poster          = self.fix_url(secici.select_attr(".thumb > img", "src")),
            tags            = secici.select_texts(".genxed > a"),
            year            = secici.extract_year(".info-content > .spe > span > time", pattern=r"\d, (\d+)"),
            status          = get_status(status),
            type            = {"OVA": TvType.OVA, "Movie": TvType.ANIME_MOVIE}.get(type_text, TvType.ANIME),
            description     = secici.joined_text(".entry-content > p"),
            trailer         = secici.select_attr("a.trailerbutton", "href"),
            episodes        = episodes[::-1],  # site lists newest first
            recommendations = recommendations,
            dub_status      = [DubStatus.SUBBED],
        )

    def _mirror_sources(self, secici: HTMLHelper) -> list[tuple[str, str]]:
        sources = []
        for value in secici.select_attrs(".mobius > .mirror > option", "value"):
            try:
                fragment = base64.b64decode(value).decode("utf-8", errors="ignore")
            except (binascii.Error, ValueError):
                continue

            if iframe := HTMLHelper(fragment).select_attr("iframe", "src"):
                sources.append(("", self.fix_url(iframe)))

        return sources

    def _download_sources(self, secici: HTMLHelper) -> list[tuple[str, str]]:
        return [
            (item.select_text("strong"), href)
                for item in secici.select("div.mctnx div.soraurlx")
                    for href in item.select_attrs("a", "href")
        ]

    async def fixed_iframe(self, url: str) -> str | None:
        """Rewrites file-host share links to their player pages; None when a share token resolves to nothing."""
        match   = re.search(r"(?:/f/|/file/)(\w+)", url)
        file_id = match.group(1) if match else None

        if url.startswith(self.ACEFILE):
            return f"{self.ACEFILE}/player/{file_id}" if file_id else url

        if url.startswith(self.LBX):
            istek = await self.httpx.get(
                url    = f"{self.LINKBOX}/api/file/share_out_list/",
                params = {
                    "sortField"  : "utime",
                    "sortAsc"    : 0,
                    "pageNo"     : 1,
                    "pageSize"   : 50,
                    "shareToken" : file_id,
                    "scene"      : "singleItem",
                    "needTpInfo" : 1,
                    "lan"        : "en",
                }
            )
            try:
                veri = LinkboxResponse.model_validate_json(istek.text)
            except ValidationError:
                veri = None

            item_id = veri.data.item_id if veri and veri.data else None
            if not item_id:
                konsol.log(f"[yellow][~] {self.name} » Linkbox share not resolved: {url}")
                return None

            return f"{self.LINKBOX}/a/f/{item_id}"

        return url

    async def _process_source(self, page_url: str, label: str, source: str, subtitle_callback: SubtitleCallback, callback: LinkCallback):
        video = await self.fixed_iframe(source)
        if not video:
            return

        quality = get_quality_from_name(label)

        if video.endswith(".mp4") or video.endswith(".mkv"):
            callback(ExtractResult(
                name    = "Direct",
                url     = video,
                referer = "",
                quality = quality,
            ))
            return

        await self.load_extractor(
            url               = video,
            referer           = page_url,
            subtitle_callback = subtitle_callback,
            callback          = lambda link: callback(link.model_copy(update={"quality": quality})),
        )

    async def load_links(
        self,
        url: str,
        is_casting: bool = False,
        subtitle_callback: SubtitleCallback | None = None,
        callback: LinkCallback | None = None
    ) -> bool:
        secici = HTMLHelper(await self._get_html(url))

        subtitle_callback = subtitle_callback or (lambda _: None)
        callback          = callback or (lambda _: None)

        sources = self._mirror_sources(secici) + self._download_sources(secici)
        sources = [(label, source) for label, source in sources if source.startswith("https")]

        sonuclar = await asyncio.gather(
            *(self._process_source(url, label, source, subtitle_callback, callback) for label, source in sources),
            return_exceptions = True
        )
        for (_, source), sonuc in zip(sources, sonuclar):
            if isinstance(sonuc, Exception):
                konsol.log(f"[red][!] {self.name} » Source failed ({source}): {sonuc}")

        return True
