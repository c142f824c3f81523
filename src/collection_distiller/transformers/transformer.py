"""Base class for entry transformers.

Transformers turn one CMS feed entry into one output Document: they validate
the entry against its schema, derive the output filename, and assemble the
front matter and body.
"""

from abc import ABC, abstractmethod

from pydantic import ValidationError

from collection_distiller.exceptions import EntryValidationError, InvalidDateError
from schemas.document import Document
from schemas.entries import ContentEntry, Entry

from .filenames import build_filename


class EntryTransformer(ABC):
    """Abstract base class for entry-to-document transformers.

    Attributes:
        collection: Output directory relative to the site source
    """

    collection: str = ""

    @abstractmethod
    def transform(self, entry: Entry) -> Document:
        """Transform a feed entry into a document.

        Args:
            entry: Raw entry from a content feed

        Returns:
            Document to be written into the collection directory

        Raises:
            EntryValidationError: If the entry is missing required fields
            InvalidDateError: If the entry date cannot be parsed
        """
        pass

    def _validate(self, model: type[ContentEntry], entry: Entry):
        """Validate a raw entry against its schema."""
        try:
            return model.model_validate(entry)
        except ValidationError as e:
            uid = entry.get("uid") if isinstance(entry, dict) else None
            fields = ", ".join(
                ".".join(str(part) for part in error["loc"]) for error in e.errors()
            )
            raise EntryValidationError(
                f"Invalid {model.__name__.lower()} {uid}: {fields}",
                uid=uid,
                errors=e.errors(),
            ) from e

    def _filename(self, entry: ContentEntry, date: str, url: str) -> str:
        """Build the output filename, tagging date errors with the entry uid."""
        try:
            return build_filename(date, url)
        except InvalidDateError as e:
            e.uid = entry.uid
            raise

    @staticmethod
    def _ordered(entry: Entry, data: dict) -> dict:
        """Order fields as they appear in the feed, followed by any new fields."""
        ordered = {key: data[key] for key in entry if key in data}
        for key, value in data.items():
            ordered.setdefault(key, value)
        return ordered
