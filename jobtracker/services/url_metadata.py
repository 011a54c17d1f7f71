import logging
import re
from urllib.parse import urlparse

import requests
from bs4 import BeautifulSoup

from jobtracker.config import settings

logger = logging.getLogger(__name__)

FAVICON_SERVICE = "https://www.google.com/s2/favicons?domain={host}"
_SEPARATORS_RE = re.compile(r"[-–|•]")


def hostname_of(url: str) -> str:
    """Host of url without a leading www. Empty string when url has no host."""
    host = urlparse(url).hostname or ""
    return re.sub(r"^www\.", "", host)


def _company_from_host(host: str) -> str:
    return host.split(".")[0] if host else ""


def _title_guess(html: str) -> str:
    soup = BeautifulSoup(html, "html.parser")
    for attrs in ({"property": "og:title"}, {"name": "twitter:title"}):
        tag = soup.find("meta", attrs=attrs)
        content = (tag.get("content") or "").strip() if tag else ""
        if content:
            return content
    if soup.title and soup.title.string:
        return soup.title.string.strip()
    return ""


def guess_title_and_company(title_guess: str, host: str) -> tuple[str, str]:
    """
    Split a page title like "Senior Engineer - Acme | LinkedIn" into
    (title, company). Falls back to the hostname's first label for company.
    """
    parts = [p.strip() for p in _SEPARATORS_RE.split(title_guess)] if title_guess else []
    title = (parts[0] if parts else "") or title_guess or host
    company = (parts[1] if len(parts) > 1 else "") or _company_from_host(host)
    return title, company


def fetch_url_metadata(url: str) -> dict:
    """
    Fetch url and guess {title, company, source, favicon_url} from its
    Open Graph / Twitter / <title> tags. Never raises for network or parse
    failures; returns a domain-only guess instead.
    """
    host = hostname_of(url)
    try:
        resp = requests.get(
            url,
            headers={"User-Agent": settings.parse_url_user_agent},
            timeout=settings.parse_url_timeout_seconds,
        )
        html = resp.text
        title, company = guess_title_and_company(_title_guess(html), host)
        return {
            "title": title,
            "company": company,
            "source": host,
            "favicon_url": FAVICON_SERVICE.format(host=host),
        }
    except Exception as e:
        logger.warning("URL metadata fetch failed for host=%s: %s", host, e)
        return {
            "title": "",
            "company": _company_from_host(host),
            "source": host,
            "favicon_url": None,
        }
