"""Content store for reading CMS JSON exports from the site data directory.

Directory structure:
    {source}/{data_dir}/
    ├── assets/
    │   └── assets.json
    └── entries/
        ├── authors/en-us.json
        ├── blog_home/en-us.json
        ├── categories/en-us.json
        ├── posts/en-us.json
        └── press_releases/en-us.json
"""

import json
import logging
from pathlib import Path

from schemas.entries import Entry

logger = logging.getLogger(__name__)

FEED_LOCALE = "en-us"


class ContentStore:
    """Loads content-type feeds exported from the CMS.

    A feed that is missing, unreadable, not JSON, or empty is reported as
    absent (None) rather than raising, so callers can skip the dependent
    stage.

    Example:
        store = ContentStore(Path("site"), "_data")
        posts = store.load("posts")
        if posts is None:
            ...
    """

    def __init__(self, source: Path, data_dir: str = "_data"):
        """Initialize the content store.

        Args:
            source: Site source root
            data_dir: Data directory under the source root
        """
        self.source = source
        self.data_dir = data_dir

    @property
    def data_path(self) -> Path:
        return self.source / self.data_dir

    def path_for(self, content_type: str) -> Path:
        """Return the feed path for a content type.

        The asset catalog lives outside the per-locale entries tree.
        """
        if content_type == "assets":
            return self.data_path / "assets" / "assets.json"
        return self.data_path / "entries" / content_type / f"{FEED_LOCALE}.json"

    def load(self, content_type: str) -> dict[str, Entry] | None:
        """Load a feed as an ordered mapping of entry key to entry.

        Args:
            content_type: Feed name (e.g. "posts", "categories", "assets")

        Returns:
            Entries in feed order, or None if the feed is absent
        """
        file_path = self.path_for(content_type)
        logger.debug(f"Reading {content_type} from {file_path}")

        if not file_path.exists():
            return None

        try:
            data = json.loads(file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read {content_type} feed {file_path}: {e}")
            return None

        if not data:
            return None

        entries = self._to_mapping(data)
        return entries or None

    def load_first(self, content_type: str) -> Entry | None:
        """Load a singleton feed and return its first entry."""
        entries = self.load(content_type)
        if not entries:
            return None
        return next(iter(entries.values()))

    def _to_mapping(self, data) -> dict[str, Entry]:
        """Normalize a feed document to a mapping of key to entry.

        Object feeds keep their own keys. List feeds are keyed by uid, or by
        position for entries without one. Non-object values are dropped.
        """
        if isinstance(data, dict):
            return {str(k): v for k, v in data.items() if isinstance(v, dict)}

        if isinstance(data, list):
            entries: dict[str, Entry] = {}
            for index, item in enumerate(data):
                if isinstance(item, dict):
                    entries[str(item.get("uid", index))] = item
            return entries

        logger.warning(f"Unexpected feed document type: {type(data).__name__}")
        return {}
