import logging

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from blog.routers import pages, posts
from blog.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Blog", description="Markdown posts rendered on the server")


def mount_assets(app: FastAPI, directory: str, prefix: str) -> None:
    """Serve static files under ``prefix``, where rewritten image sources point."""
    app.mount(prefix, StaticFiles(directory=directory, check_dir=False), name="assets")


mount_assets(app, settings.ASSETS_DIR, settings.ASSET_PREFIX)


@app.get("/health")
async def health():
    return {"message": "Blog API is running"}


app.include_router(posts.router)
# pages last, /{slug} matches any single path segment
app.include_router(pages.router)

logger.info(f"Serving posts from {settings.POSTS_DIR}")
