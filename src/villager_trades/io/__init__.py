"""Document source: discover catalog files and parse them into data trees."""

from .directory_source import CatalogDirectorySource
from .file_loader import CatalogFileLoader

__all__ = ["CatalogDirectorySource", "CatalogFileLoader"]
