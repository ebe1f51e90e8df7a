import logging
from pathlib import Path
from typing import List

from blog.exceptions import DirectoryReadError, NotFoundError
from blog.settings import settings

logger = logging.getLogger(__name__)

POST_EXTENSION = ".md"


class FilesystemPostsRepo:
    def __init__(self, posts_dir=None):
        self.posts_dir = Path(posts_dir or settings.POSTS_DIR)

    def list_post_files(self) -> List[Path]:
        if not self.posts_dir.is_dir():
            raise DirectoryReadError(self.posts_dir)
        try:
            entries = list(self.posts_dir.iterdir())
        except OSError as e:
            raise DirectoryReadError(self.posts_dir, str(e)) from e

        return sorted(
            (p for p in entries if p.suffix == POST_EXTENSION and p.is_file()),
            key=lambda p: p.name,
        )

    def read_file(self, path: Path) -> str:
        # utf-8-sig drops a leading byte-order mark
        return path.read_text(encoding="utf-8-sig")

    def read_post(self, slug: str) -> str:
        if not self._is_valid_slug(slug):
            raise NotFoundError(slug, f"Invalid slug: {slug!r}")

        path = self.posts_dir / f"{slug}{POST_EXTENSION}"
        try:
            return self.read_file(path)
        except (OSError, UnicodeDecodeError) as e:
            logger.debug(f"Failed to read {path}: {e}")
            raise NotFoundError(slug) from e

    @staticmethod
    def slug_for(path: Path) -> str:
        return path.name.removesuffix(POST_EXTENSION)

    @staticmethod
    def _is_valid_slug(slug: str) -> bool:
        if not slug or slug.startswith("."):
            return False
        return "/" not in slug and "\\" not in slug and "\x00" not in slug
