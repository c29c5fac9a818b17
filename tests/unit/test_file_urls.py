import pytest

from app.services import file_urls

BASE = "https://complaints.example.org"


def test_classify_json_text():
    parsed = file_urls.classify('["/uploads/a.jpg", "/uploads/b.png"]')
    assert parsed.kind == "json_text"
    assert parsed.paths == ("/uploads/a.jpg", "/uploads/b.png")


def test_classify_native_array():
    parsed = file_urls.classify(["/uploads/a.jpg"])
    assert parsed.kind == "array"
    assert parsed.paths == ("/uploads/a.jpg",)


@pytest.mark.parametrize("raw", [None, "", "   "])
def test_classify_empty(raw):
    assert file_urls.classify(raw).kind == "empty"


@pytest.mark.parametrize("raw", ["not json", "{\"a\": 1}", "42", 17, {"x": "/uploads/a"}])
def test_classify_invalid(raw):
    assert file_urls.classify(raw).kind == "invalid"


@pytest.mark.parametrize("raw", [None, "", "[", "null", "{}", 3.5, object(), b"\xff\xfe"])
def test_parse_stored_never_raises(raw):
    assert file_urls.parse_stored(raw) == []


def test_parse_stored_drops_non_string_entries():
    assert file_urls.parse_stored('["/uploads/a.jpg", 5, null, ""]') == ["/uploads/a.jpg"]


def test_parse_stored_accepts_bytes():
    assert file_urls.parse_stored(b'["/uploads/a.jpg"]') == ["/uploads/a.jpg"]


def test_project_prefixes_base_url():
    raw = '["/uploads/1-ab-photo.jpg", "/uploads/2-cd-video.mp4"]'
    assert file_urls.project(BASE, raw) == [
        f"{BASE}/uploads/1-ab-photo.jpg",
        f"{BASE}/uploads/2-cd-video.mp4",
    ]


def test_project_handles_trailing_slash_and_missing_leading_slash():
    assert file_urls.project(BASE + "/", ["uploads/a.jpg"]) == [f"{BASE}/uploads/a.jpg"]


def test_project_keeps_already_absolute_urls():
    legacy = "http://localhost:3000/uploads/a.jpg"
    assert file_urls.project(BASE, [legacy]) == [legacy]


def test_project_preserves_order():
    paths = [f"/uploads/{i}.jpg" for i in range(5)]
    assert file_urls.project(BASE, paths) == [BASE + p for p in paths]


def test_project_invalid_is_empty():
    assert file_urls.project(BASE, "garbage") == []
