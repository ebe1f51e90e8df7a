from fastapi import Depends

from blog.repos.posts_repo import FilesystemPostsRepo
from blog.services.markdown_renderer import MarkdownRenderer
from blog.services.posts_service import PostsService
from blog.settings import settings


def get_posts_repo():
    return FilesystemPostsRepo(settings.POSTS_DIR)


def get_markdown_renderer():
    return MarkdownRenderer(asset_prefix=settings.ASSET_PREFIX)


def get_posts_service(
    repo=Depends(get_posts_repo),
    renderer=Depends(get_markdown_renderer),
):
    return PostsService(repo=repo, renderer=renderer)
