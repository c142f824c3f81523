"""Post Transformer for turning CMS blog posts into _posts documents."""

import logging

from schemas.document import Document
from schemas.entries import Entry, Post

from .filters import EXCERPT_STRATEGIES, make_excerpt
from .resolver import ReferenceResolver
from .transformer import EntryTransformer

logger = logging.getLogger(__name__)

POSTS_COLLECTION = "_posts"
POST_LAYOUT = "article"
POST_SEARCH_TYPE = "blog_post"


class PostTransformer(EntryTransformer):
    """Transform blog post entries into Jekyll post documents.

    The PostTransformer:
    1. Validates the entry and derives "<date>-<slug>.md"
    2. Pulls the HTML body out of the front matter
    3. Resolves category, author and featured image references
    4. Sets layout, permalink and search type
    5. Synthesizes an excerpt from the body when none is set

    Attributes:
        resolver: ReferenceResolver, or None to leave references as uids
        excerpt_strategy: "chars" or "words"
        excerpt_length: Character or word limit for synthesized excerpts
        layout: Layout assigned to every post
        set_permalink: Whether to copy the url into permalink
    """

    collection = POSTS_COLLECTION

    def __init__(
        self,
        resolver: ReferenceResolver | None = None,
        excerpt_strategy: str = "chars",
        excerpt_length: int = 240,
        layout: str = POST_LAYOUT,
        set_permalink: bool = True,
    ):
        if excerpt_strategy not in EXCERPT_STRATEGIES:
            raise ValueError(f"Unknown excerpt strategy: {excerpt_strategy!r}")

        self.resolver = resolver
        self.excerpt_strategy = excerpt_strategy
        self.excerpt_length = excerpt_length
        self.layout = layout
        self.set_permalink = set_permalink

    def transform(self, entry: Entry) -> Document:
        post = self._validate(Post, entry)
        filename = self._filename(post, post.date, post.url)
        content = post.full_description

        if self.resolver is not None:
            post = self.resolver.resolve(post)

        front_matter = self._ordered(
            entry, post.model_dump(mode="json", by_alias=True, exclude_unset=True)
        )
        front_matter.pop("full_description", None)

        front_matter["layout"] = self.layout
        if self.set_permalink:
            front_matter["permalink"] = post.url
        front_matter["search_type"] = POST_SEARCH_TYPE

        if not post.excerpt or not post.excerpt.strip():
            front_matter["excerpt"] = make_excerpt(
                content, self.excerpt_strategy, self.excerpt_length
            )

        logger.debug(f"Transformed post {post.uid} to {filename}")
        return Document(
            uid=post.uid,
            collection=self.collection,
            filename=filename,
            front_matter=front_matter,
            body=content or "",
        )
