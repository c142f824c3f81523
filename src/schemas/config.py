"""Generator configuration schema."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel

DEFAULT_EXCERPT_LENGTHS = {
    "chars": 240,
    "words": 35,
}


class GeneratorConfig(BaseModel):
    """Settings for a generator run.

    Attributes:
        source: Site source root; output collections are written beneath it
        data_dir: Directory under source holding the CMS export
        excerpt_strategy: Truncate synthesized excerpts by characters or words
        excerpt_length: Truncation limit (default depends on the strategy)
        unresolved_references: "warn" logs references left unresolved,
            "ignore" leaves them silently
        entry_errors: "skip" reports and skips entries with invalid dates or
            fields, "abort" stops the run on the first one
    """

    source: Path = Path(".")
    data_dir: str = "_data"
    excerpt_strategy: Literal["chars", "words"] = "chars"
    excerpt_length: int | None = None
    unresolved_references: Literal["warn", "ignore"] = "warn"
    entry_errors: Literal["skip", "abort"] = "skip"

    @property
    def effective_excerpt_length(self) -> int:
        if self.excerpt_length is not None:
            return self.excerpt_length
        return DEFAULT_EXCERPT_LENGTHS[self.excerpt_strategy]
