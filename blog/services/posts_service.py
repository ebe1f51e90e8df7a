import logging
from typing import List, Optional

from blog.exceptions import DirectoryReadError, NotFoundError, ParseError
from blog.schemas.blog import (
    ParsedDocument,
    PostDetail,
    PostSummary,
    parse_post_date,
)
from blog.services.frontmatter_parser import parse_front_matter
from blog.services.markdown_renderer import MarkdownRenderer
from blog.settings import settings
from blog.utils import calculate_reading_time

logger = logging.getLogger(__name__)


class PostsService:
    def __init__(
        self,
        repo,
        renderer: Optional[MarkdownRenderer] = None,
        *,
        skip_malformed: Optional[bool] = None,
        words_per_minute: Optional[int] = None,
    ):
        self.repo = repo
        self.renderer = renderer or MarkdownRenderer(asset_prefix=settings.ASSET_PREFIX)
        self.skip_malformed = (
            settings.SKIP_MALFORMED_POSTS if skip_malformed is None else skip_malformed
        )
        self.words_per_minute = words_per_minute or settings.WORDS_PER_MINUTE

    def list_posts(self) -> List[PostSummary]:
        """Summaries of every post, newest first.

        DirectoryReadError from the repo always propagates. A file that fails
        to read or parse is skipped with a warning, or re-raised when
        ``skip_malformed`` is off.
        """
        posts = []
        for path in self.repo.list_post_files():
            slug = self.repo.slug_for(path)
            try:
                parsed = parse_front_matter(self.repo.read_file(path))
            except ParseError as e:
                if not self.skip_malformed:
                    raise
                logger.warning(f"Skipping malformed post {slug}: {e}")
                continue
            except (OSError, UnicodeDecodeError) as e:
                if not self.skip_malformed:
                    raise DirectoryReadError(path, str(e)) from e
                logger.warning(f"Skipping unreadable post {slug}: {e}")
                continue

            logger.debug(f"Parsed post {slug}")
            posts.append(
                _build_summary(
                    slug,
                    parsed,
                    calculate_reading_time(parsed.body, self.words_per_minute),
                )
            )

        return sort_posts(posts)

    def get_post(self, slug: str) -> PostDetail:
        """Full post with rendered HTML body.

        Raises NotFoundError for a missing, unreadable or unparsable post.
        """
        raw = self.repo.read_post(slug)
        try:
            parsed = parse_front_matter(raw)
        except ParseError as e:
            logger.warning(f"Failed to parse post {slug}: {e}")
            raise NotFoundError(slug) from e

        html = self.renderer.render(parsed.body)
        summary = _build_summary(
            slug, parsed, calculate_reading_time(html, self.words_per_minute)
        )
        return PostDetail(**summary.model_dump(), body=html)


def sort_posts(posts: List[PostSummary]) -> List[PostSummary]:
    """Newest first; equal dates fall back to slug order."""
    by_slug = sorted(posts, key=lambda p: p.slug)
    # sort is stable, so the slug order survives among equal dates
    return sorted(by_slug, key=lambda p: parse_post_date(p.date), reverse=True)


def _build_summary(slug: str, parsed: ParsedDocument, reading_time: float) -> PostSummary:
    attributes = parsed.attributes
    return PostSummary(
        slug=slug,
        title=attributes.title,
        date=attributes.date,
        readingTime=reading_time,
        description=attributes.shortDesc,
        featuredImage=attributes.featuredImage,
    )
