"""Interfaces shared by the DAL and the table-schema pipeline."""

from .metadata_source import MetadataSource

__all__ = ["MetadataSource"]
