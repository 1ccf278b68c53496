"""Resource loading: protocol and in-memory implementation."""

from scenecache.resources.local import MappingResourceLoader
from scenecache.resources.protocol import ResourceLoader

__all__ = [
    "MappingResourceLoader",
    "ResourceLoader",
]
