"""Emitters for writing generated documents."""

from .file_emitter import FileEmitter, dump_front_matter

__all__ = ["FileEmitter", "dump_front_matter"]
