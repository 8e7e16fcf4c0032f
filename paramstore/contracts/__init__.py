from .metadata import Metadata, MetadataDict

__all__ = ["Metadata", "MetadataDict"]
