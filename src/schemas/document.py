"""Output document schema."""

from typing import Any

from pydantic import BaseModel


class Document(BaseModel):
    """A single Markdown file ready to be written into the site source.

    Attributes:
        uid: uid of the entry the document was generated from
        collection: Directory relative to the site source (e.g. "_posts")
        filename: File name within the collection directory
        front_matter: Ordered metadata serialized above the delimiter line
        body: Raw content below the delimiter, or None for front matter only
    """

    uid: str
    collection: str
    filename: str
    front_matter: dict[str, Any] = {}
    body: str | None = None

    @property
    def relative_path(self) -> str:
        return f"{self.collection}/{self.filename}"
