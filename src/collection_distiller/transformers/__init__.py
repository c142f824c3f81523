"""Transformers for turning CMS entries into collection documents."""

from .blog_home_transformer import BlogHomeTransformer
from .post_transformer import PostTransformer
from .press_release_transformer import PressReleaseTransformer
from .resolver import ReferenceResolver
from .transformer import EntryTransformer

__all__ = [
    "EntryTransformer",
    "PostTransformer",
    "PressReleaseTransformer",
    "BlogHomeTransformer",
    "ReferenceResolver",
]
