"""
Tests for external lookup tools
외부 조회 도구 테스트 (가짜 HTTP 응답 사용)
"""

from conftest import FakeResponse

from rock_identifier.tools import (
    ask_geologist,
    fetch_geological_features,
    fetch_page_summary,
    fetch_rock_images,
    fetch_scientific_data,
)
from rock_identifier.tools.base import LookupResult


SUMMARY_PAYLOAD = {
    "title": "Basalt",
    "extract": "Basalt is an aphanitic extrusive igneous rock.",
    "extract_html": "<p>Basalt is ...</p>",
    "thumbnail": {"source": "https://upload.example.org/basalt.jpg"},
    "timestamp": "2024-01-01T00:00:00Z",
    "content_urls": {"desktop": {"page": "https://en.wikipedia.org/wiki/Basalt"}},
}


def test_lookup_result_helpers():
    assert LookupResult.success(3).value_or(0) == 3
    failed = LookupResult.failure("boom", fallback=[])
    assert not failed.ok
    assert failed.value == []
    assert failed.value_or("x") == "x"


def test_page_summary_success(fake_http):
    calls = fake_http(lambda url, params: FakeResponse(SUMMARY_PAYLOAD))

    result = fetch_page_summary("Basalt")

    assert result.ok
    assert result.value["extract"].startswith("Basalt is")
    assert result.value["thumbnail"] == "https://upload.example.org/basalt.jpg"
    assert result.value["page_url"] == "https://en.wikipedia.org/wiki/Basalt"
    assert calls[0][0].endswith("/page/summary/Basalt")


def test_page_summary_title_is_url_encoded(fake_http):
    calls = fake_http(lambda url, params: FakeResponse(SUMMARY_PAYLOAD))
    fetch_page_summary("what is gneiss geology")
    assert calls[0][0].endswith("/page/summary/what%20is%20gneiss%20geology")


def test_page_summary_http_error_is_failure(fake_http):
    fake_http(lambda url, params: FakeResponse({}, status_code=404))
    result = fetch_page_summary("Nonexistent rock")
    assert not result.ok
    assert result.value is None


def test_page_summary_bad_json_is_failure(fake_http):
    fake_http(lambda url, params: FakeResponse(ValueError("not json")))
    assert not fetch_page_summary("Basalt").ok


def test_network_error_is_failure():
    """conftest가 네트워크를 차단하므로 연결 실패"""
    result = fetch_page_summary("Basalt")
    assert not result.ok
    assert "network disabled" in result.error


def test_scientific_data_success(fake_http):
    def handler(url, params):
        if "/page/related/" in url:
            return FakeResponse({"pages": [
                {"title": "Gabbro", "description": "Intrusive rock",
                 "content_urls": {"desktop": {"page": "https://en.wikipedia.org/wiki/Gabbro"}}},
            ]})
        return FakeResponse(SUMMARY_PAYLOAD)

    fake_http(handler)
    result = fetch_scientific_data("Basalt", "igneous")

    assert result.ok
    data = result.value
    assert data["summary"] == SUMMARY_PAYLOAD["extract"]
    assert data["pageUrl"] == "https://en.wikipedia.org/wiki/Basalt"
    assert data["image"] == "https://upload.example.org/basalt.jpg"
    assert data["relatedTopics"][0]["title"] == "Gabbro"


def test_scientific_data_related_failure_is_partial(fake_http):
    def handler(url, params):
        if "/page/related/" in url:
            return FakeResponse({}, status_code=500)
        return FakeResponse(SUMMARY_PAYLOAD)

    fake_http(handler)
    result = fetch_scientific_data("Basalt", "igneous")
    assert result.ok
    assert result.value["relatedTopics"] == []


def test_scientific_data_failure_carries_fallback():
    result = fetch_scientific_data("Basalt", "igneous")
    assert not result.ok
    assert result.value == {"summary": "Basalt is a igneous rock.", "relatedTopics": []}


def test_rock_images_filters_non_image_titles(fake_http):
    def handler(url, params):
        if params.get("list") == "search":
            return FakeResponse({"query": {"search": [
                {"title": "File:Basalt columns.jpg", "snippet": "Columnar basalt"},
                {"title": "Basalt (article)", "snippet": "not a file"},
                {"title": "File:Basalt diagram.svg", "snippet": "vector"},
            ]}})
        return FakeResponse({"query": {"pages": {"1": {
            "imageinfo": [{"url": "https://upload.example.org/Basalt_columns.jpg"}],
        }}}})

    calls = fake_http(handler)
    result = fetch_rock_images("Basalt")

    assert result.ok
    assert result.value["images"] == [{
        "url": "https://upload.example.org/Basalt_columns.jpg",
        "title": "Basalt columns.jpg",
        "description": "Columnar basalt",
    }]
    assert len(calls) == 2


def test_rock_images_failure_returns_empty_list():
    result = fetch_rock_images("Basalt")
    assert not result.ok
    assert result.value == {"images": []}


def test_geonames_requires_username():
    result = fetch_geological_features("Granite")
    assert not result.ok
    assert result.value == {"features": [], "locations": []}


def test_geonames_features(fake_http):
    calls = fake_http(lambda url, params: FakeResponse({"geonames": [
        {"name": "Half Dome", "countryName": "United States", "lat": "37.74", "lng": "-119.53",
         "fclName": "mountain,hill,rock,... "},
    ]}))

    result = fetch_geological_features("Granite", username="tester")

    assert result.ok
    assert result.value["locations"] == [{
        "name": "Half Dome",
        "country": "United States",
        "coordinates": ["37.74", "-119.53"],
        "type": "mountain,hill,rock,... ",
    }]
    assert calls[0][1]["featureClass"] == "T"
    assert calls[0][1]["username"] == "tester"


def test_ask_geologist_without_api_key():
    result = ask_geologist("What is basalt?", "context")
    assert not result.ok
    assert "not configured" in result.error


def test_geonames_fallbacks_do_not_share_lists():
    first = fetch_geological_features("Granite")
    first.value["locations"].append({"name": "leaked"})
    second = fetch_geological_features("Granite")
    assert second.value == {"features": [], "locations": []}
