import requests

import jobtracker.services.url_metadata as url_metadata


class _Resp:
    def __init__(self, text):
        self.text = text


def test_hostname_of():
    assert url_metadata.hostname_of("https://www.acme.com/jobs/1") == "acme.com"
    assert url_metadata.hostname_of("https://boards.greenhouse.io/acme") == "boards.greenhouse.io"
    assert url_metadata.hostname_of("not a url") == ""


def test_guess_title_and_company():
    assert url_metadata.guess_title_and_company("Senior Engineer - Acme | LinkedIn", "linkedin.com") == (
        "Senior Engineer",
        "Acme",
    )
    assert url_metadata.guess_title_and_company("Careers", "acme.com") == ("Careers", "acme")
    assert url_metadata.guess_title_and_company("", "acme.com") == ("acme.com", "acme")


def test_fetch_prefers_open_graph_title(monkeypatch):
    html = (
        "<html><head><title>Ignored</title>"
        '<meta property="og:title" content="Staff Engineer – Globex">'
        "</head></html>"
    )
    seen = {}

    def _get(url, headers=None, timeout=None):
        seen.update(url=url, headers=headers, timeout=timeout)
        return _Resp(html)

    monkeypatch.setattr(url_metadata.requests, "get", _get)
    meta = url_metadata.fetch_url_metadata("https://www.globex.com/careers/42")
    assert meta == {
        "title": "Staff Engineer",
        "company": "Globex",
        "source": "globex.com",
        "favicon_url": "https://www.google.com/s2/favicons?domain=globex.com",
    }
    assert seen["headers"]["User-Agent"]
    assert seen["timeout"] > 0


def test_fetch_falls_back_to_title_tag(monkeypatch):
    monkeypatch.setattr(
        url_metadata.requests,
        "get",
        lambda url, headers=None, timeout=None: _Resp("<html><head><title>Data Analyst | Initech</title></head></html>"),
    )
    meta = url_metadata.fetch_url_metadata("https://initech.com/jobs/7")
    assert meta["title"] == "Data Analyst"
    assert meta["company"] == "Initech"


def test_fetch_failure_returns_domain_guess(monkeypatch):
    def _boom(url, headers=None, timeout=None):
        raise requests.Timeout("slow")

    monkeypatch.setattr(url_metadata.requests, "get", _boom)
    meta = url_metadata.fetch_url_metadata("https://www.acme.com/jobs/1")
    assert meta == {"title": "", "company": "acme", "source": "acme.com", "favicon_url": None}
