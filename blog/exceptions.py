class BlogError(Exception):
    """Base class for failures raised while reading or rendering posts."""


class ParseError(BlogError):
    """Front-matter is missing, malformed or lacks required keys."""


class NotFoundError(BlogError):
    """A single post could not be located, read or parsed."""

    def __init__(self, slug: str, message: str = ""):
        self.slug = slug
        super().__init__(message or f"Post not found: {slug}")


class DirectoryReadError(BlogError):
    """The content directory is missing or unreadable."""

    def __init__(self, path, message: str = ""):
        self.path = path
        super().__init__(message or f"Cannot read posts directory: {path}")
