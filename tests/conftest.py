import textwrap
from pathlib import Path

import pytest

from blog.exceptions import NotFoundError


def make_post(
    title="Hello",
    date="2024-01-01",
    short_desc="desc",
    body="# Hi\n\nworld",
    featured_image=None,
) -> str:
    lines = [
        "---",
        f"title: {title}",
        f"date: {date}",
        f"shortDesc: {short_desc}",
    ]
    if featured_image:
        lines.append(f"featuredImage: {featured_image}")
    lines.append("---")
    return "\n".join(lines) + "\n" + body + "\n"


@pytest.fixture
def posts_dir(tmp_path):
    path = tmp_path / "posts"
    path.mkdir()
    return path


def write_post(directory: Path, slug: str, text: str) -> Path:
    path = directory / f"{slug}.md"
    path.write_text(textwrap.dedent(text).lstrip(), encoding="utf-8")
    return path


class FakeRepo:
    """
    Minimal in-memory repo stand-in used in service tests.
    """

    def __init__(self, posts: dict[str, str]):
        self.posts = posts
        self.reads = []

    def list_post_files(self):
        return [Path(f"{slug}.md") for slug in sorted(self.posts)]

    def read_file(self, path: Path) -> str:
        self.reads.append(path.name)
        return self.posts[path.stem]

    def read_post(self, slug: str) -> str:
        if slug not in self.posts:
            raise NotFoundError(slug)
        return self.posts[slug]

    @staticmethod
    def slug_for(path: Path) -> str:
        return path.stem


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(self, list_posts_return=None, get_post_return=None):
        self._list_posts_return = list_posts_return or []
        self._get_post_return = get_post_return
        self.requested = []

    def list_posts(self):
        return self._list_posts_return

    def get_post(self, slug: str):
        self.requested.append(slug)
        if self._get_post_return is None:
            raise NotFoundError(slug)
        return self._get_post_return
