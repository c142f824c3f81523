"""Blog Home Transformer for the blog listing landing page."""

import copy
import logging

from schemas.document import Document
from schemas.entries import BlogHome, Entry

from .filenames import parse_iso_datetime
from .transformer import EntryTransformer

logger = logging.getLogger(__name__)

BLOG_HOME_COLLECTION = "_pages/blog"
BLOG_HOME_FILENAME = "index.md"
BLOG_HOME_LAYOUT = "blog-listing"


class BlogHomeTransformer(EntryTransformer):
    """Transform the blog home singleton into the blog listing page.

    The page features one post: the post named by the entry's
    ``featured_post`` reference, or else the most recent post generated in
    the same run.
    """

    collection = BLOG_HOME_COLLECTION

    def __init__(self, layout: str = BLOG_HOME_LAYOUT):
        self.layout = layout

    def transform(self, entry: Entry, posts: list[Document] | None = None) -> Document:
        """Build the blog listing page.

        Args:
            entry: The blog home entry
            posts: Post documents generated earlier in the same run

        Returns:
            Front-matter-only document for _pages/blog/index.md
        """
        home = self._validate(BlogHome, entry)
        featured = self.select_featured_post(home, posts or [])

        front_matter = {
            "layout": self.layout,
            "permalink": home.url,
            "title": home.seo.meta_title,
            "pagination": {"enabled": True},
            "seo": {"meta_description": home.seo.meta_description},
            "featured_post": copy.deepcopy(featured.front_matter) if featured else None,
        }

        return Document(
            uid=home.uid,
            collection=self.collection,
            filename=BLOG_HOME_FILENAME,
            front_matter=front_matter,
            body=None,
        )

    def select_featured_post(
        self, home: BlogHome, posts: list[Document]
    ) -> Document | None:
        """Pick the post to feature on the blog home."""
        if len(home.featured_post) == 1:
            uid = home.featured_post[0]
            for post in posts:
                if post.uid == uid:
                    return post
            logger.warning(
                f"Featured post {uid} was not generated in this run, "
                f"featuring the most recent post instead"
            )
        return self.most_recent_post(posts)

    @staticmethod
    def most_recent_post(posts: list[Document]) -> Document | None:
        """Return the latest post; the earliest in feed order wins ties."""
        return max(
            posts,
            key=lambda post: parse_iso_datetime(post.front_matter["date"]),
            default=None,
        )
