import pytest

from app import main


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("https://jlpt.example.com/", "https://jlpt.example.com"),
        ("jlpt.example.com", "https://jlpt.example.com"),
        ("*", "*"),
        ("   ", None),
        (None, None),
    ],
)
def test_sanitize_origin(raw, expected):
    assert main._sanitize_origin(raw) == expected


def test_api_routes_are_mounted():
    paths = {route.path for route in main.app.routes}
    assert "/api/v2/generation/grammar" in paths
    assert "/api/v2/generation/questions" in paths
    assert "/api/v2/exam/today" in paths
    assert "/api/v2/kanji/{kanji_id}" in paths


def test_read_root():
    assert "N4" in main.read_root()["message"]
