from fastapi.responses import Response
from starlette.requests import Request

from blog import theme as theme_module
from blog.theme import ThemeMode, apply_theme, default_theme, get_theme


def make_request(cookie: str = "") -> Request:
    headers = [(b"cookie", cookie.encode())] if cookie else []
    return Request({"type": "http", "method": "GET", "path": "/", "headers": headers})


def test_toggled_flips_mode():
    assert ThemeMode.LIGHT.toggled() is ThemeMode.DARK
    assert ThemeMode.DARK.toggled() is ThemeMode.LIGHT


def test_get_theme_reads_cookie():
    assert get_theme(make_request("theme=dark")) is ThemeMode.DARK
    assert get_theme(make_request("theme=light")) is ThemeMode.LIGHT


def test_get_theme_falls_back_to_default():
    assert get_theme(make_request()) is ThemeMode.LIGHT
    assert get_theme(make_request("theme=sepia")) is ThemeMode.LIGHT


def test_default_theme_follows_settings(monkeypatch):
    monkeypatch.setattr(theme_module.settings, "DEFAULT_THEME", "dark")
    assert default_theme() is ThemeMode.DARK
    assert get_theme(make_request()) is ThemeMode.DARK


def test_default_theme_ignores_unknown_setting(monkeypatch, caplog):
    monkeypatch.setattr(theme_module.settings, "DEFAULT_THEME", "neon")

    assert default_theme() is ThemeMode.LIGHT
    assert any("Unknown DEFAULT_THEME" in r.message for r in caplog.records)


def test_apply_theme_writes_cookie():
    response = apply_theme(Response(), ThemeMode.DARK)

    cookie = response.headers["set-cookie"]
    assert cookie.startswith("theme=dark")
    assert "Max-Age=31536000" in cookie
    assert "SameSite=lax" in cookie
