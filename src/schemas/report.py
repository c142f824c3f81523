"""Generation run report schema."""

from typing import Literal

from pydantic import BaseModel


class GenerationReport(BaseModel):
    """Summary of one generator run.

    Attributes:
        written: Paths of files written, relative to the site source
        skipped: uids of entries that could not be generated
        validation_errors: Messages explaining each skipped entry
        unresolved_references: References left unresolved in the output
        status: "running" during the run, then "complete" or "failed"
    """

    written: list[str] = []
    skipped: list[str] = []
    validation_errors: list[str] = []
    unresolved_references: list[str] = []
    status: Literal["running", "complete", "failed"] = "running"
