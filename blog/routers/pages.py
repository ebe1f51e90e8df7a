import logging
import urllib.parse
from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from blog import dependencies as deps
from blog.exceptions import NotFoundError, ParseError
from blog.schemas.blog import parse_post_date
from blog.services.posts_service import PostsService
from blog.settings import settings
from blog.theme import ThemeMode, apply_theme, get_theme
from blog.utils import format_reading_time

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter()


def format_post_date(value: str) -> str:
    try:
        return parse_post_date(value).strftime("%d %B %Y")
    except ValueError:
        return value


templates.env.filters["post_date"] = format_post_date
templates.env.filters["reading_time"] = format_reading_time


def _page_context(theme: ThemeMode, **extra) -> dict:
    return {
        "theme": theme,
        "site_title": settings.SITE_TITLE,
        "site_description": settings.SITE_DESCRIPTION,
        "site_url": settings.site_url,
        "asset_prefix": settings.ASSET_PREFIX,
        **extra,
    }


def _render_error(request: Request, theme: ThemeMode, status_code: int) -> HTMLResponse:
    template = "not_found.html" if status_code == 404 else "error.html"
    return templates.TemplateResponse(
        request,
        template,
        _page_context(theme, title=f"{status_code} | {settings.SITE_TITLE}"),
        status_code=status_code,
    )


@router.get("/", response_class=HTMLResponse)
def index(
    request: Request,
    service: PostsService = Depends(deps.get_posts_service),
    theme: ThemeMode = Depends(get_theme),
):
    try:
        posts = service.list_posts()
    except Exception as e:
        logger.error(f"Failed to render index: {e}")
        return _render_error(request, theme, 500)

    return templates.TemplateResponse(
        request,
        "index.html",
        _page_context(theme, title=settings.SITE_TITLE, posts=posts),
    )


@router.post("/theme/{mode}")
def set_theme(mode: ThemeMode, request: Request):
    """Persist the chosen theme and send the reader back where they were."""
    referer = request.headers.get("referer", "")
    target = urllib.parse.urlsplit(referer).path or "/"
    response = RedirectResponse(url=target, status_code=303)
    return apply_theme(response, mode)


@router.get("/{slug}", response_class=HTMLResponse)
def post_detail(
    slug: str,
    request: Request,
    service: PostsService = Depends(deps.get_posts_service),
    theme: ThemeMode = Depends(get_theme),
):
    try:
        post = service.get_post(slug)
    except (NotFoundError, ParseError) as e:
        logger.warning(f"Post {slug} not found: {e}")
        return _render_error(request, theme, 404)
    except Exception as e:
        logger.error(f"Unexpected error rendering post {slug}: {e}")
        return _render_error(request, theme, 500)

    image = f"{settings.ASSET_PREFIX}{post.featuredImage}" if post.featuredImage else None
    return templates.TemplateResponse(
        request,
        "post.html",
        _page_context(
            theme,
            title=f"{post.title} | {settings.SITE_TITLE}",
            description=post.description,
            image=image,
            canonical=settings.canonical_url(slug),
            post=post,
        ),
    )
