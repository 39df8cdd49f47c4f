"""Discover catalog files below a directory."""

import logging
from pathlib import Path

from villager_trades.core.catalog_loader import CatalogDocument
from villager_trades.core.exceptions import CatalogReadError
from villager_trades.core.settings import LoaderSettings

from .file_loader import CatalogFileLoader

logger = logging.getLogger(__name__)


class CatalogDirectorySource:
    """
    Document source backed by a directory tree.

    Files are laid out as ``<root>/<namespace>/<path>.<ext>``; files directly
    under ``<root>`` use the default namespace. Each file's source name is
    ``namespace:path`` without the extension, which is what diagnostics show.
    """

    def __init__(self, root: Path, settings: LoaderSettings | None = None):
        self.root = root
        self.settings = settings or LoaderSettings()
        self._loader = CatalogFileLoader(self.settings.encoding)
        self._paths: dict[str, Path] = {}
        self._logger = logger.getChild(self.__class__.__name__)

    def discover(self) -> list[str]:
        """
        Find every catalog file below the root.

        Returns:
            Source names sorted by path, so reloads are deterministic

        Raises:
            ValueError: If the root does not exist or is not a directory
        """
        if not self.root.is_dir():
            raise ValueError(f"Catalog directory does not exist: {self.root}")

        extensions = {ext.lower() for ext in self.settings.extensions}
        self._paths = {}
        for path in sorted(self.root.rglob("*")):
            if path.is_file() and path.suffix.lower() in extensions:
                self._paths[self.source_name(path)] = path

        self._logger.info(f"Found {len(self._paths)} catalog file(s) in {self.root}")
        return list(self._paths)

    def read(self, source: str) -> CatalogDocument:
        """
        Read one discovered catalog.

        Raises:
            CatalogReadError: If the source is unknown or cannot be parsed
        """
        path = self._paths.get(source)
        if path is None:
            raise CatalogReadError(f"Unknown catalog source '{source}'", source)

        data = self._loader.load(path, source)
        return CatalogDocument(source=source, data=data)

    def source_name(self, path: Path) -> str:
        relative = path.relative_to(self.root).with_suffix("")
        parts = relative.parts
        if len(parts) > 1:
            namespace, rest = parts[0], parts[1:]
        else:
            namespace, rest = self.settings.default_namespace, parts
        return f"{namespace}:{'/'.join(rest)}"
