"""Press Release Transformer for the _press_releases collection."""

import logging

from schemas.document import Document
from schemas.entries import Entry, PressRelease

from .transformer import EntryTransformer

logger = logging.getLogger(__name__)

PRESS_RELEASES_COLLECTION = "_press_releases"
PRESS_RELEASE_SEARCH_TYPE = "press_release"


class PressReleaseTransformer(EntryTransformer):
    """Transform press release entries into collection documents.

    The body moves below the front matter, and the url becomes a permalink
    with a trailing slash.
    """

    collection = PRESS_RELEASES_COLLECTION

    def transform(self, entry: Entry) -> Document:
        release = self._validate(PressRelease, entry)
        filename = self._filename(release, release.date, release.url)

        front_matter = self._ordered(
            entry, release.model_dump(mode="json", by_alias=True, exclude_unset=True)
        )
        content = front_matter.pop("body", None)

        front_matter["permalink"] = release.url + "/"
        front_matter.pop("url", None)
        front_matter["search_type"] = PRESS_RELEASE_SEARCH_TYPE

        logger.debug(f"Transformed press release {release.uid} to {filename}")
        return Document(
            uid=release.uid,
            collection=self.collection,
            filename=filename,
            front_matter=front_matter,
            body=content or "",
        )
