"""CMS content entry schemas.

Entries arrive as one JSON object per record in a content-type feed. Only the
fields the generator reads are declared; everything else is carried through
as extra fields so it lands in the emitted front matter untouched.
"""

from pydantic import BaseModel, Field, JsonValue

# A raw feed record: string keys, JSON values.
Entry = dict[str, JsonValue]


class ContentEntry(BaseModel):
    """Base for all CMS entries, identified by a feed-unique uid."""

    uid: str

    model_config = {"extra": "allow", "populate_by_name": True}


class Category(ContentEntry):
    """A blog category."""

    title: str


class Author(ContentEntry):
    """A blog author. Profile fields beyond the title are kept as extras."""

    title: str


class Asset(ContentEntry):
    """An entry in the asset catalog.

    The filename is either a plain name or a file reference mapping whose
    uid key holds the name.
    """

    filename: str | dict[str, JsonValue]

    @property
    def basename(self) -> str | None:
        name = self.filename.get("uid") if isinstance(self.filename, dict) else self.filename
        return name if isinstance(name, str) and name else None


class Post(ContentEntry):
    """A blog post.

    Attributes:
        url: Site-relative URL, also the source of the filename slug
        date: ISO-8601 publish date
        full_description: HTML body
        category: Category uids (category titles once resolved); values that
            are not uids are carried through unresolved
        author: Author uids (the author title once resolved)
        featured_image: Asset uid, or a file reference mapping with a uid key
        excerpt: Summary text; synthesized from the body when blank
        author_data: Full author record, attached on resolution
    """

    url: str
    date: str
    full_description: str | None = None
    category: list[JsonValue] = []
    author: list[JsonValue] | str = []
    featured_image: str | dict[str, JsonValue] | None = None
    excerpt: str | None = None
    author_data: dict[str, JsonValue] | None = Field(default=None, alias="authorData")


class PressRelease(ContentEntry):
    """A press release."""

    url: str
    date: str
    body: str | None = None


class Seo(BaseModel):
    """SEO block of the blog home entry."""

    meta_title: str | None = None
    meta_description: str | None = None

    model_config = {"extra": "allow"}


class BlogHome(ContentEntry):
    """The blog home singleton.

    Attributes:
        url: Permalink of the blog listing page
        seo: Title and description for the listing page
        featured_post: At most one post uid to feature
    """

    url: str
    seo: Seo = Seo()
    featured_post: list[str] = []
