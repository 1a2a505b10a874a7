# Bu araç @keyiflerolsun tarafından | @KekikAkademi için yazılmıştır.

import pytest

from OploverzStream.Core import HTMLHelper, Qualities, get_quality_from_name, Episode, SearchResult, AnimeInfo, ShowStatus, TvType
from OploverzStream.Core.Helpers import clean_title, normalize_empty
from OploverzStream.Plugins.Oploverz import episode_number, get_status, get_type


@pytest.mark.parametrize("name, expected", [
    ("Episode 12",              12),
    ("Episode12",               12),
    ("One Piece Episode 1080",  1080),
    ("Episode 3.5",             None),  # decimal captures are not integers
    ("Episode 7,5",             None),
    ("Special",                 None),
    ("",                        None),
    (None,                      None),
])
def test_episode_number(name, expected):
    assert episode_number(name) == expected


@pytest.mark.parametrize("text, expected", [
    ("Completed", ShowStatus.COMPLETED),
    ("Ongoing",   ShowStatus.ONGOING),
    ("ongoing",   ShowStatus.COMPLETED),
    ("Hiatus",    ShowStatus.COMPLETED),
    ("",          ShowStatus.COMPLETED),
])
def test_get_status(text, expected):
    assert get_status(text) == expected


@pytest.mark.parametrize("text, expected", [
    ("TV",      TvType.ANIME),
    ("TV Show", TvType.ANIME),
    ("Movie",   TvType.ANIME_MOVIE),
    ("OVA",     TvType.OVA),
    ("Special", TvType.OVA),
    (None,      TvType.OVA),
])
def test_get_type(text, expected):
    assert get_type(text) == expected


@pytest.mark.parametrize("label, expected", [
    ("720p",       720),
    ("HD 1080P",   1080),
    ("MP4 480p",   480),
    ("4K",         2160),
    ("360",        360),
    ("Mirror",     Qualities.Unknown.value),
    ("",           Qualities.Unknown.value),
    (None,         Qualities.Unknown.value),
])
def test_get_quality_from_name(label, expected):
    assert get_quality_from_name(label) == expected


def test_clean_title():
    assert clean_title("  Sousou no   Frieren Subtitle Indonesia ") == "Sousou no Frieren"
    assert clean_title("Bleach Sub Indo") == "Bleach"
    assert clean_title("   ") is None
    assert clean_title(None) is None


def test_normalize_empty():
    assert normalize_empty(" N/A ") is None
    assert normalize_empty("") is None
    assert normalize_empty(" text ") == "text"
    assert normalize_empty(None) is None


def test_models_normalize():
    episode = Episode(url="https://x/1", title="  Episode\n 1 ")
    assert episode.title == "Episode 1"

    result = SearchResult(title="Bleach Subtitle Indonesia", url="https://x", poster="")
    assert result.title == "Bleach"
    assert result.poster is None

    info = AnimeInfo(url="https://x", title="Bleach", description="  ", trailer="")
    assert info.tags == []
    assert info.description is None
    assert info.trailer is None
    assert info.status == ShowStatus.COMPLETED


def test_html_helper_selectors():
    secici = HTMLHelper("""
        <article><div class="tt">Own text <h2>child</h2></div><img data-src="https://cdn/lazy.jpg" src="data:placeholder"></article>
        <ul><li>a</li><li>b</li><li> </li></ul>
        <span><time>September 29, 2023</time></span>
    """)

    item = secici.select("article")[0]
    assert item.select_direct_text(".tt") == "Own text"
    assert item.select_poster("img") == "https://cdn/lazy.jpg"
    assert secici.select_texts("li") == ["a", "b"]
    assert secici.joined_text("li") == "a b"
    assert secici.select_attr(".missing", "href") is None
    assert secici.select_text(".missing") == ""
    assert secici.extract_year("span > time", pattern=r"\d, (\d+)") == 2023
    assert secici.extract_year(".missing > time", pattern=r"\d, (\d+)") is None


def test_text_keeps_spaces_around_inline_tags():
    secici = HTMLHelper("""
        <div class="entry-content">
            <p>Elf mage <b>Frieren</b> outlives her <a href="#">party</a>.</p>
            <p>  Second
               paragraph &amp; more </p>
        </div>
        <h1 class="entry-title">Sousou no <i>Frieren</i></h1>
    """)

    assert secici.select_texts(".entry-content > p") == ["Elf mage Frieren outlives her party.", "Second paragraph & more"]
    assert secici.select_text("h1.entry-title") == "Sousou no Frieren"
