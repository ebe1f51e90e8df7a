import logging
from enum import Enum

from fastapi import Request
from fastapi.responses import Response

from blog.settings import settings

logger = logging.getLogger(__name__)

THEME_COOKIE_MAX_AGE = 60 * 60 * 24 * 365


class ThemeMode(str, Enum):
    LIGHT = "light"
    DARK = "dark"

    def toggled(self) -> "ThemeMode":
        return ThemeMode.LIGHT if self is ThemeMode.DARK else ThemeMode.DARK


def default_theme() -> ThemeMode:
    try:
        return ThemeMode(settings.DEFAULT_THEME)
    except ValueError:
        logger.warning(f"Unknown DEFAULT_THEME {settings.DEFAULT_THEME!r}, using light")
        return ThemeMode.LIGHT


def get_theme(request: Request) -> ThemeMode:
    """Theme preference for the current request, read from its cookie."""
    value = request.cookies.get(settings.THEME_COOKIE_NAME)
    try:
        return ThemeMode(value) if value else default_theme()
    except ValueError:
        return default_theme()


def apply_theme(response: Response, mode: ThemeMode) -> Response:
    response.set_cookie(
        settings.THEME_COOKIE_NAME,
        mode.value,
        max_age=THEME_COOKIE_MAX_AGE,
        samesite="lax",
        httponly=True,
    )
    return response
