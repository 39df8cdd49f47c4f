"""Namespaced identifiers (``namespace:path``) used for kinds, professions and items."""

import re
from dataclasses import dataclass
from typing import Final

DEFAULT_NAMESPACE: Final[str] = "minecraft"

_NAMESPACE_RE = re.compile(r"^[a-z0-9_.\-]+$")
_PATH_RE = re.compile(r"^[a-z0-9_.\-/]+$")


@dataclass(frozen=True, order=True)
class Identifier:
    """
    A resource location of the form ``namespace:path``.

    The namespace falls back to ``minecraft`` when the raw string has no
    separator, so ``librarian`` and ``minecraft:librarian`` are equal.
    """

    namespace: str
    path: str

    @classmethod
    def parse(cls, raw: str, default_namespace: str = DEFAULT_NAMESPACE) -> "Identifier":
        """
        Parse a raw identifier string.

        Args:
            raw: The identifier text, with or without a namespace
            default_namespace: Namespace used when ``raw`` has none

        Returns:
            The parsed identifier

        Raises:
            ValueError: If ``raw`` is not a string or contains invalid characters
        """
        if not isinstance(raw, str):
            raise ValueError(f"Identifier must be a string, got {type(raw).__name__}")

        if ":" in raw:
            namespace, path = raw.split(":", 1)
        else:
            namespace, path = default_namespace, raw

        if not namespace or not _NAMESPACE_RE.match(namespace):
            raise ValueError(f"Invalid namespace in identifier '{raw}'")
        if not path or not _PATH_RE.match(path):
            raise ValueError(f"Invalid path in identifier '{raw}'")

        return cls(namespace, path)

    @classmethod
    def try_parse(
        cls, raw: object, default_namespace: str = DEFAULT_NAMESPACE
    ) -> "Identifier | None":
        """Parse ``raw`` or return ``None`` when it is not a valid identifier."""
        if not isinstance(raw, str):
            return None
        try:
            return cls.parse(raw, default_namespace)
        except ValueError:
            return None

    def __str__(self) -> str:
        return f"{self.namespace}:{self.path}"


def normalize_identifier(value: str) -> str:
    """Pydantic helper: validate ``value`` and return its canonical string form."""
    return str(Identifier.parse(value))
