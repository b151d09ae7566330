"""
Public URLs for skins, built from the configured base URLs.
"""

from typing import Optional
from urllib.parse import quote, urlencode

from skin_museum.config import Settings, get_settings


def _settings(settings: Optional[Settings]) -> Settings:
    return settings or get_settings()


def museum_url(md5: str, filename: Optional[str], settings: Optional[Settings] = None) -> str:
    base = _settings(settings).museum_base_url.rstrip("/")
    if not filename:
        return f"{base}/skin/{md5}/"
    return f"{base}/skin/{md5}/{quote(filename)}/"


def screenshot_url(md5: str, settings: Optional[Settings] = None) -> str:
    return f"{_settings(settings).cdn_base_url.rstrip('/')}/screenshots/{md5}.png"


def download_url(md5: str, settings: Optional[Settings] = None) -> str:
    return f"{_settings(settings).cdn_base_url.rstrip('/')}/skins/{md5}.wsz"


def webamp_url(md5: str, settings: Optional[Settings] = None) -> str:
    """webamp.org with the skin preloaded."""
    settings = _settings(settings)
    query = urlencode({"skinUrl": download_url(md5, settings)})
    return f"{settings.webamp_base_url.rstrip('/')}/?{query}"


def tweet_url(tweet_id: str) -> str:
    return f"https://twitter.com/winampskins/status/{tweet_id}"


def internet_archive_url(identifier: str) -> str:
    return f"https://archive.org/details/{identifier}"
