"""Schema definitions for Collection Distiller."""

from .config import GeneratorConfig
from .document import Document
from .entries import (
    Asset,
    Author,
    BlogHome,
    Category,
    ContentEntry,
    Entry,
    Post,
    PressRelease,
    Seo,
)
from .report import GenerationReport

__all__ = [
    "Asset",
    "Author",
    "BlogHome",
    "Category",
    "ContentEntry",
    "Document",
    "Entry",
    "GenerationReport",
    "GeneratorConfig",
    "Post",
    "PressRelease",
    "Seo",
]
