
import frontmatter
import yaml
from pydantic import ValidationError

from blog.exceptions import ParseError
from blog.schemas.blog import ParsedDocument, PostMetadata


def parse_front_matter(text: str) -> ParsedDocument:
    """Split a raw post into validated metadata and the Markdown body.

    Raises ParseError when there is no front-matter block, when the block is
    not well-formed, or when required keys are missing.
    """
    text = (text or "").lstrip("\ufeff").strip()
    if not frontmatter.checks(text):
        raise ParseError("Document has no front-matter block")

    try:
        metadata, body = frontmatter.parse(text)
    except (yaml.YAMLError, ValueError) as e:
        raise ParseError(f"Malformed front-matter: {e}") from e

    if not metadata:
        raise ParseError("Front-matter block is empty or not a mapping")

    try:
        attributes = PostMetadata.model_validate(metadata)
    except ValidationError as e:
        fields = ", ".join(str(err["loc"][0]) for err in e.errors() if err["loc"])
        raise ParseError(f"Invalid front-matter fields: {fields}") from e

    return ParsedDocument(attributes=attributes, body=body)


def dump_front_matter(document: ParsedDocument) -> str:
    """Serialize a parsed document back into front-matter + body text."""
    post = frontmatter.Post(
        document.body, **document.attributes.model_dump(exclude_none=True)
    )
    return frontmatter.dumps(post)
