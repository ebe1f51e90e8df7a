import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from blog import dependencies as deps
from blog.exceptions import DirectoryReadError, NotFoundError, ParseError
from blog.schemas.blog import PostDetail, PostSummary
from blog.services.posts_service import PostsService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


@router.get("/posts", response_model=List[PostSummary])
def list_posts(service: PostsService = Depends(deps.get_posts_service)):
    """Get all posts metadata, newest first."""
    try:
        return service.list_posts()
    except HTTPException:
        raise
    except DirectoryReadError as e:
        logger.error(f"Posts directory unreadable: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/posts/{slug}", response_model=PostDetail)
def get_post(
    slug: str,
    service: PostsService = Depends(deps.get_posts_service),
):
    """Get a single post by slug."""
    try:
        return service.get_post(slug)
    except HTTPException:
        raise
    except (NotFoundError, ParseError) as e:
        logger.warning(f"Post {slug} not found: {e}")
        raise HTTPException(status_code=404, detail="Post not found")
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")
