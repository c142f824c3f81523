"""Pipeline for generating site collections."""

from .orchestrator import Orchestrator

__all__ = ["Orchestrator"]
