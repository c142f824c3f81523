"""Reference resolution for blog posts.

Posts reference categories, authors and their featured image by uid. The
resolver swaps those uids for the data the site templates need: category
titles, the author title plus the full author record, and a local image path.
"""

import logging

from pydantic import ValidationError

from schemas.entries import Asset, Author, Category, ContentEntry, Entry, Post

logger = logging.getLogger(__name__)

NULL_MARKERS = (None, "", "null")
UNRESOLVED_POLICIES = ("warn", "ignore")


class ReferenceResolver:
    """Resolve uid references in posts against lookup feeds.

    Lookup records are validated against their schema when indexed; a record
    without a title (or, for assets, a usable filename) never matches.
    References that match nothing are left as they are. With the "warn"
    policy each one is logged and recorded in ``unresolved``; with "ignore"
    they pass silently. Already-resolved values never match a uid, so
    resolving a post twice leaves it unchanged.

    Attributes:
        categories: Category records by uid
        authors: Author records by uid
        assets: Asset records by uid
        policy: "warn" or "ignore"
        unresolved: Descriptions of references left unresolved
    """

    def __init__(
        self,
        categories: dict[str, Entry] | None = None,
        authors: dict[str, Entry] | None = None,
        assets: dict[str, Entry] | None = None,
        policy: str = "warn",
    ):
        """Initialize the resolver.

        Args:
            categories: Categories feed as loaded by the ContentStore
            authors: Authors feed as loaded by the ContentStore
            assets: Assets feed as loaded by the ContentStore
            policy: What to do about unresolved references ("warn" or "ignore")
        """
        if policy not in UNRESOLVED_POLICIES:
            raise ValueError(f"Unknown unresolved reference policy: {policy!r}")

        self.categories = self._index(categories, Category)
        self.authors = self._index(authors, Author)
        self.assets = self._index(assets, Asset)
        self.policy = policy
        self.unresolved: list[str] = []

    @staticmethod
    def _index(
        feed: dict[str, Entry] | None, model: type[ContentEntry]
    ) -> dict[str, ContentEntry] | None:
        """Index valid feed entries by their uid field."""
        if feed is None:
            return None

        index = {}
        for entry in feed.values():
            try:
                record = model.model_validate(entry)
            except ValidationError as e:
                uid = entry.get("uid") if isinstance(entry, dict) else None
                logger.debug(
                    f"Ignoring invalid {model.__name__.lower()} {uid}: "
                    f"{e.error_count()} errors"
                )
                continue
            index[record.uid] = record
        return index

    def resolve(self, post: Post) -> Post:
        """Resolve the featured image, categories and author of a post."""
        post = self.resolve_featured_image(post)
        post = self.resolve_categories(post)
        return self.resolve_author(post)

    def resolve_categories(self, post: Post) -> Post:
        """Replace category uids with category titles."""
        if self.categories is None or not post.category:
            return post

        resolved = []
        for value in post.category:
            category = self.categories.get(value) if isinstance(value, str) else None
            if category is None:
                self._unresolved("category", value, post)
                resolved.append(value)
            else:
                resolved.append(category.title)

        return post.model_copy(update={"category": resolved})

    def resolve_author(self, post: Post) -> Post:
        """Replace the author uid list with the first author's title.

        The matching author record is attached as ``authorData``.
        """
        if self.authors is None:
            return post
        if not isinstance(post.author, list) or not post.author:
            return post

        uid = post.author[0]
        author = self.authors.get(uid) if isinstance(uid, str) else None
        if author is None:
            self._unresolved("author", uid, post)
            return post

        return post.model_copy(
            update={"author": author.title, "author_data": author.model_dump(mode="json")}
        )

    def resolve_featured_image(self, post: Post) -> Post:
        """Replace the featured image reference with its local asset path."""
        if self.assets is None:
            return post

        image = post.featured_image
        if image in NULL_MARKERS:
            return post

        uid = image.get("uid") if isinstance(image, dict) else image
        asset = self.assets.get(uid) if isinstance(uid, str) else None
        if asset is None or asset.basename is None:
            self._unresolved("featured image", uid, post)
            return post

        path = f"assets/images/{uid}/{asset.basename}"
        return post.model_copy(update={"featured_image": path})

    def _unresolved(self, kind: str, value, post: Post) -> None:
        if self.policy == "ignore":
            return
        message = f"{kind} {value} in post {post.uid}"
        logger.warning(f"Unresolved {message}")
        self.unresolved.append(message)
