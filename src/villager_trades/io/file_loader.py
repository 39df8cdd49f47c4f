"""Concrete loader that reads catalog documents from local YAML / JSON files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Final

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from villager_trades.core.exceptions import CatalogReadError

logger = logging.getLogger(__name__)

_YAML_EXTS: Final[set[str]] = {".yaml", ".yml"}
_JSON_EXTS: Final[set[str]] = {".json"}

_yaml_parser = YAML(typ="safe")  # safe loader, YAML 1.2


class CatalogFileLoader:
    """Read a catalog file from disk and return its generic data tree."""

    supported_exts: set[str] = _YAML_EXTS | _JSON_EXTS

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def load(self, path: str | Path, source: str | None = None) -> Any:
        """
        Parse one catalog file.

        Args:
            path: File to read
            source: Name reported in errors; defaults to the file path

        Returns:
            The parsed document (usually a dict)

        Raises:
            CatalogReadError: If the file is missing, unsupported or unparsable
        """
        file_path = Path(path)
        source = source or str(file_path)

        # validation
        if not file_path.is_file():
            logger.error("File not found: %s", file_path)
            raise CatalogReadError(f"File not found: {file_path}", source)

        suffix = file_path.suffix.lower()
        if suffix not in self.supported_exts:
            raise CatalogReadError(
                f"Unsupported extension '{file_path.suffix}'. "
                f"Supported: {', '.join(sorted(self.supported_exts))}",
                source,
            )

        try:
            raw_text = file_path.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as exc:
            raise CatalogReadError(f"Cannot read {file_path.name}: {exc}", source) from exc

        # parse
        try:
            if suffix in _YAML_EXTS:
                data = _yaml_parser.load(raw_text)
            else:  # .json
                data = json.loads(raw_text)
        except (YAMLError, json.JSONDecodeError) as exc:
            raise CatalogReadError(f"Cannot parse {file_path.name}: {exc}", source) from exc

        logger.debug("Catalog file loaded: %s", file_path)
        return data
